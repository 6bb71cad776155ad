import pytest

from scorecard.courses.models import CourseHole, GolfCourse
from scorecard.rounds.models import RoundConfiguration, StartSegment, TeeColor
from scorecard.rounds.scorecard import HoleNotFoundError, ScorecardSession


@pytest.fixture
def session(rng) -> ScorecardSession:
    return ScorecardSession(rng=rng, jitter=0)


def test_new_session_has_synthetic_card(session) -> None:
    assert len(session.holes) == 18
    assert session.sourced is False
    assert session.course is None
    assert session.stats is None
    assert session.course_par() == 72


def test_update_hole_recomputes_stats(session) -> None:
    assert session.stats is None

    updated = session.update_hole(1, score=4, putts=2)

    assert updated.green_in_regulation is True
    stats = session.stats
    assert stats.total_score == 4
    assert stats.greens_in_regulation == 1
    assert session.stats is stats

    session.update_hole(2, score=6)
    assert session.stats is not stats
    assert session.stats.total_score == 10


def test_update_unknown_hole(session) -> None:
    with pytest.raises(HoleNotFoundError):
        session.update_hole(42, score=4)
    with pytest.raises(KeyError):
        session.update_hole(0, score=4)


def test_update_cannot_change_hole_number(session) -> None:
    with pytest.raises(ValueError, match="hole numbers cannot be changed"):
        session.update_hole(1, hole_number=5)

    assert session.holes[0].hole_number == 1


def test_layout_change_regenerates_card(session) -> None:
    session.update_hole(12, score=5)

    config = session.configure(unit_count=9, start_segment=StartSegment.BACK)

    assert config.start_hole == 10
    assert [hole.hole_number for hole in session.holes] == list(range(10, 19))
    assert all(hole.score is None for hole in session.holes)
    assert session.stats is None


def test_select_course_preserves_entered_scores(session, pebble) -> None:
    session.update_hole(5, score=3, putts=2)

    sourced = session.select_course(pebble)

    assert sourced is True
    assert session.sourced is True
    assert session.config.course_name == "Pebble Beach Golf Links"
    assert session.config.course_location == "Pebble Beach, California"
    assert session.course_rating == 71.4
    assert session.course_slope == 133

    fifth = session.holes[4]
    assert fifth.par == 3
    assert fifth.yardage == 166
    assert fifth.score == 3
    assert session.stats.total_par == 3
    assert session.stats.to_par == 0


def test_tee_change_rederives_yardage(session, pebble) -> None:
    session.select_course(pebble)
    session.update_hole(1, score=4)

    session.set_tee("blue")

    assert session.config.tee_color is TeeColor.BLUE
    assert session.holes[0].yardage == 377
    assert session.holes[0].score == 4
    assert session.course_rating == 74.0
    assert session.course_slope == 142


def test_tee_change_without_course_keeps_synthetic_yardage(session) -> None:
    before = [hole.yardage for hole in session.holes]

    session.set_tee(TeeColor.RED)

    assert [hole.yardage for hole in session.holes] == before


def test_layout_change_forgets_course(session, pebble) -> None:
    session.select_course(pebble)

    session.configure(unit_count=9)

    assert session.course is None
    assert session.course_rating is None
    assert session.sourced is False


def test_course_without_matching_holes(session) -> None:
    short = GolfCourse(
        id="front-only",
        name="Front Only",
        holes=[CourseHole(number=n, par=4) for n in range(1, 10)],
    )
    session.configure(unit_count=9, start_segment="back")
    before = session.holes

    assert session.select_course(short) is False
    assert session.holes == before
    assert session.course is None
    assert session.config.course_name == ""


def test_unmatched_course_keeps_previous_selection(session, pebble) -> None:
    session.configure(unit_count=9, start_segment="back")
    session.select_course(pebble)
    short = GolfCourse(
        id="front-only",
        name="Front Only",
        holes=[CourseHole(number=n, par=4) for n in range(1, 10)],
    )

    assert session.select_course(short) is False
    assert session.course is pebble
    assert session.config.course_name == "Pebble Beach Golf Links"
    assert session.course_rating == 71.4


def test_course_shorter_than_card_keeps_entered_scores(rng, pebble) -> None:
    session = ScorecardSession(RoundConfiguration(unit_count=27), rng=rng, jitter=0)
    session.update_hole(20, score=5, putts=2)

    assert session.select_course(pebble) is False

    assert [hole.hole_number for hole in session.holes] == list(range(1, 28))
    assert session.holes[19].score == 5
    assert session.holes[0].sourced is True
    assert session.course is pebble
    assert session.stats.total_score == 5
    # Pebble's 72 plus the synthetic pars of holes 19-27
    assert session.course_par() == 108


def test_nine_hole_submission_uses_card_par(rng, pebble) -> None:
    session = ScorecardSession(RoundConfiguration(unit_count=9), rng=rng, jitter=0)
    session.select_course(pebble)

    payload = session.build_submission().to_payload()

    assert payload["holes"] == 9
    assert payload["coursePar"] == 36
    assert payload["coursePar"] == sum(hole.par for hole in session.holes)


def test_handicap_change_updates_net_score(session) -> None:
    session.update_hole(1, score=5)
    assert session.stats.net_score is None

    session.configure(player_handicap=2)

    assert session.stats.net_score == 3


def test_build_submission(session, pebble) -> None:
    session.configure(weather="sunny", wind="calm", player_handicap=12)
    session.select_course(pebble)
    session.update_hole(1, score=5, putts=2)

    payload = session.build_submission().to_payload()

    assert payload["courseName"] == "Pebble Beach Golf Links"
    assert payload["coursePar"] == 72
    assert payload["courseRating"] == 71.4
    assert payload["teeBox"] == "white"
    assert payload["holes"] == 18
    assert payload["roundType"] == "outdoor"
    assert payload["startingHole"] == "front"
    assert payload["weather"] == "sunny"
    assert payload["handicap"] == 12
    assert len(payload["holesData"]) == 18
    assert payload["holesData"][0]["holeNumber"] == 1
    assert payload["holesData"][0]["score"] == 5


def test_indoor_submission_drops_weather(rng) -> None:
    config = RoundConfiguration(environment="indoor", weather="rain", temperature=12)
    session = ScorecardSession(config, rng=rng, jitter=0)

    payload = session.build_submission().to_payload()

    assert payload["roundType"] == "indoor"
    assert "weather" not in payload
    assert "temperature" not in payload
    assert payload["coursePar"] == 72


def test_reset(session, pebble) -> None:
    session.configure(unit_count=9)
    session.select_course(pebble)

    session.reset()

    assert session.config.unit_count == 18
    assert session.config.course_name == ""
    assert session.course is None
    assert len(session.holes) == 18
