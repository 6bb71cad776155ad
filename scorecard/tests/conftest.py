"""Shared pytest fixtures for scorecard tests."""

from __future__ import annotations

import random

import pytest
from fastapi.testclient import TestClient

from scorecard.app import app
from scorecard.config import reset_settings_cache
from scorecard.courses.catalog import LocalCourseCatalog, get_course_catalog
from scorecard.courses.models import GolfCourse
from scorecard.courses.store import get_stored_course, list_courses
from scorecard.rounds.models import HoleRecord

FRONT_NINE_PARS = [4, 4, 3, 5, 4, 4, 4, 3, 5]
FRONT_NINE_SCORES = [5, 4, 3, 6, 4, 5, 4, 4, 6]
FRONT_NINE_PUTTS = [2, 2, 1, 2, 2, 2, 2, 1, 3]


@pytest.fixture(autouse=True)
def _fresh_settings():
    reset_settings_cache()
    get_course_catalog.cache_clear()
    yield
    reset_settings_cache()
    get_course_catalog.cache_clear()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def pebble() -> GolfCourse:
    course = get_stored_course("pebble-beach")
    assert course is not None
    return course


@pytest.fixture
def augusta() -> GolfCourse:
    course = get_stored_course("augusta-national")
    assert course is not None
    return course


@pytest.fixture
def front_nine() -> list[HoleRecord]:
    return [
        HoleRecord(hole_number=number, par=par, score=score, putts=putts)
        for number, (par, score, putts) in enumerate(
            zip(FRONT_NINE_PARS, FRONT_NINE_SCORES, FRONT_NINE_PUTTS), start=1
        )
    ]


@pytest.fixture
def golf_client():
    catalog = LocalCourseCatalog(list_courses())
    app.dependency_overrides[get_course_catalog] = lambda: catalog
    client = TestClient(app)
    yield client
    app.dependency_overrides.pop(get_course_catalog, None)
