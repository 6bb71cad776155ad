from __future__ import annotations

from typing import Dict, Optional, Sequence

from scorecard.rounds.models import TeeColor

from .models import CourseHole, CourseLocation, GolfCourse

_TEES = (TeeColor.BLACK, TeeColor.BLUE, TeeColor.WHITE, TeeColor.GOLD, TeeColor.RED)


def _holes(rows: Sequence[tuple]) -> list[CourseHole]:
    """Build holes from ``(number, par, handicap, yardages...)`` rows.

    Yardages are listed in tee order black, blue, white, gold, red; shorter
    rows simply leave the remaining tees without a yardage.
    """

    holes = []
    for number, par, handicap, *yards in rows:
        holes.append(
            CourseHole(
                number=number,
                par=par,
                handicap=handicap,
                yardage=dict(zip(_TEES, yards)),
            )
        )
    return holes


def _seed_courses() -> Dict[str, GolfCourse]:
    courses: Dict[str, GolfCourse] = {}

    pebble = GolfCourse(
        id="pebble-beach",
        name="Pebble Beach Golf Links",
        location=CourseLocation(
            city="Pebble Beach", state="California", country="USA"
        ),
        designer="Jack Neville, Douglas Grant",
        year_opened=1919,
        course_rating={"black": 75.5, "blue": 74.0, "white": 71.4, "gold": 68.8, "red": 71.0},
        slope_rating={"black": 145, "blue": 142, "white": 133, "gold": 124, "red": 129},
        total_par=72,
        holes=_holes(
            [
                (1, 4, 11, 377, 377, 350, 335, 308),
                (2, 5, 15, 502, 502, 480, 450, 417),
                (3, 4, 5, 390, 390, 370, 340, 310),
                (4, 4, 17, 327, 327, 310, 288, 268),
                (5, 3, 7, 188, 188, 166, 148, 130),
                (6, 5, 1, 523, 523, 495, 465, 430),
                (7, 3, 13, 106, 106, 100, 95, 85),
                (8, 4, 3, 418, 418, 395, 365, 335),
                (9, 4, 9, 464, 464, 440, 410, 380),
                (10, 4, 2, 446, 446, 424, 390, 360),
                (11, 4, 12, 384, 384, 365, 335, 305),
                (12, 3, 16, 202, 202, 180, 158, 135),
                (13, 4, 8, 392, 392, 370, 340, 310),
                (14, 5, 6, 580, 580, 555, 520, 485),
                (15, 4, 10, 397, 397, 375, 345, 315),
                (16, 4, 14, 402, 402, 380, 350, 320),
                (17, 3, 18, 209, 209, 180, 158, 135),
                (18, 5, 4, 543, 543, 520, 485, 450),
            ]
        ),
        description=(
            "One of the most beautiful and challenging courses in the world, "
            "home to the AT&T Pebble Beach Pro-Am"
        ),
    )
    courses[pebble.id] = pebble

    augusta = GolfCourse(
        id="augusta-national",
        name="Augusta National Golf Club",
        location=CourseLocation(city="Augusta", state="Georgia", country="USA"),
        designer="Alister MacKenzie, Bobby Jones",
        year_opened=1933,
        course_rating={"black": 78.1, "blue": 76.2, "white": 73.9},
        slope_rating={"black": 155, "blue": 148, "white": 137},
        total_par=72,
        holes=_holes(
            [
                (1, 4, 9, 445, 435, 400),
                (2, 5, 11, 575, 565, 525),
                (3, 4, 15, 350, 340, 320),
                (4, 3, 17, 240, 230, 205),
                (5, 4, 1, 495, 485, 455),
                (6, 3, 13, 180, 175, 165),
                (7, 4, 3, 450, 440, 410),
                (8, 5, 7, 570, 560, 520),
                (9, 4, 5, 460, 450, 420),
                (10, 4, 2, 495, 485, 455),
                (11, 4, 4, 520, 510, 480),
                (12, 3, 16, 155, 150, 140),
                (13, 5, 8, 510, 500, 470),
                (14, 4, 12, 440, 430, 400),
                (15, 5, 6, 530, 520, 490),
                (16, 3, 18, 170, 165, 155),
                (17, 4, 10, 440, 430, 400),
                (18, 4, 14, 465, 455, 425),
            ]
        ),
        description="Home of the Masters Tournament",
    )
    courses[augusta.id] = augusta

    rideau = GolfCourse(
        id="rideau-view",
        name="Rideau View Golf Club",
        location=CourseLocation(city="Ottawa", state="Ontario", country="Canada"),
        designer="Robbie Robinson",
        year_opened=1987,
        course_rating={"black": 73.2, "blue": 71.8, "white": 69.5, "gold": 67.2, "red": 69.8},
        slope_rating={"black": 135, "blue": 130, "white": 125, "gold": 118, "red": 125},
        total_par=72,
        holes=_holes(
            [
                (1, 4, 7, 410, 385, 360, 335, 310),
                (2, 4, 13, 390, 365, 340, 315, 290),
                (3, 3, 17, 180, 165, 150, 135, 120),
                (4, 5, 3, 520, 495, 470, 445, 420),
                (5, 4, 9, 415, 390, 365, 340, 315),
                (6, 4, 15, 380, 355, 330, 305, 280),
                (7, 3, 11, 175, 160, 145, 130, 115),
                (8, 5, 1, 535, 510, 485, 460, 435),
                (9, 4, 5, 425, 400, 375, 350, 325),
                (10, 4, 8, 395, 370, 345, 320, 295),
                (11, 3, 16, 165, 150, 135, 120, 105),
                (12, 4, 4, 420, 395, 370, 345, 320),
                (13, 4, 12, 405, 380, 355, 330, 305),
                (14, 5, 2, 545, 520, 495, 470, 445),
                (15, 3, 18, 190, 175, 160, 145, 130),
                (16, 4, 14, 385, 360, 335, 310, 285),
                (17, 4, 6, 430, 405, 380, 355, 330),
                (18, 4, 10, 440, 415, 390, 365, 340),
            ]
        ),
        description=(
            "Scenic parkland course overlooking the Ottawa River with "
            "challenging layout"
        ),
    )
    courses[rideau.id] = rideau

    return courses


_COURSES = _seed_courses()


def list_courses() -> list[GolfCourse]:
    return list(_COURSES.values())


def get_stored_course(course_id: str) -> Optional[GolfCourse]:
    return _COURSES.get(course_id)


__all__ = ["get_stored_course", "list_courses"]
