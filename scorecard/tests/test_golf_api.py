from fastapi.testclient import TestClient

from scorecard.app import app
from scorecard.config import reset_settings_cache

from .conftest import FRONT_NINE_PARS, FRONT_NINE_PUTTS, FRONT_NINE_SCORES


def _front_nine_payload() -> list[dict]:
    return [
        {"holeNumber": number, "par": par, "score": score, "putts": putts}
        for number, (par, score, putts) in enumerate(
            zip(FRONT_NINE_PARS, FRONT_NINE_SCORES, FRONT_NINE_PUTTS), start=1
        )
    ]


def test_health_endpoint() -> None:
    response = TestClient(app).get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_search_courses(golf_client) -> None:
    response = golf_client.get("/api/golf/courses", params={"q": "pebble"})

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 1
    assert body["query"] == "pebble"
    course = body["courses"][0]
    assert course["id"] == "pebble-beach"
    assert course["courseRating"]["white"] == 71.4
    assert len(course["holes"]) == 18


def test_search_short_query_lists_courses(golf_client) -> None:
    body = golf_client.get("/api/golf/courses", params={"q": "a", "limit": 2}).json()

    assert body["total"] == 2


def test_search_rejects_bad_limit(golf_client) -> None:
    response = golf_client.get("/api/golf/courses", params={"limit": 0})

    assert response.status_code == 422


def test_get_course(golf_client) -> None:
    ok = golf_client.get("/api/golf/courses/rideau-view")
    missing = golf_client.get("/api/golf/courses/nope")

    assert ok.status_code == 200
    assert ok.json()["location"]["city"] == "Ottawa"
    assert missing.status_code == 404
    assert missing.json()["detail"] == "course not found"


def test_holes_for_course_back_nine(golf_client) -> None:
    response = golf_client.post(
        "/api/golf/scorecard/holes",
        json={
            "unitCount": 9,
            "startSegment": "back",
            "teeColor": "blue",
            "courseId": "pebble-beach",
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["sourced"] is True
    assert body["courseRating"] == 74.0
    assert body["courseSlope"] == 142
    assert [hole["holeNumber"] for hole in body["holes"]] == list(range(10, 19))
    assert body["holes"][0]["yardage"] == 446


def test_holes_keep_existing_scores(golf_client) -> None:
    response = golf_client.post(
        "/api/golf/scorecard/holes",
        json={
            "courseId": "pebble-beach",
            "unitCount": 9,
            "existingHoles": _front_nine_payload(),
        },
    )

    holes = response.json()["holes"]
    assert [hole["score"] for hole in holes] == FRONT_NINE_SCORES
    assert holes[4]["par"] == 3


def test_existing_holes_must_match_layout(golf_client) -> None:
    response = golf_client.post(
        "/api/golf/scorecard/holes",
        json={
            "courseId": "pebble-beach",
            "unitCount": 9,
            "startSegment": "back",
            "existingHoles": _front_nine_payload(),
        },
    )

    assert response.status_code == 400
    assert "expected holes 10..18" in response.json()["detail"]


def test_synthetic_holes_without_course(golf_client) -> None:
    body = golf_client.post("/api/golf/scorecard/holes", json={}).json()

    assert body["sourced"] is False
    assert len(body["holes"]) == 18
    assert body["courseRating"] is None


def test_holes_for_unknown_course(golf_client) -> None:
    response = golf_client.post(
        "/api/golf/scorecard/holes", json={"courseId": "missing"}
    )

    assert response.status_code == 404


def test_round_stats_endpoint(golf_client) -> None:
    response = golf_client.post(
        "/api/golf/scorecard/stats",
        json={"holes": _front_nine_payload(), "handicap": 4},
    )

    assert response.status_code == 200
    stats = response.json()["stats"]
    assert stats["totalScore"] == 41
    assert stats["differential"] == "+5"
    assert stats["pars"] == 4
    assert stats["bogeys"] == 5
    assert stats["girPercentage"] == 44
    assert stats["netScore"] == 37


def test_round_stats_without_scores(golf_client) -> None:
    response = golf_client.post(
        "/api/golf/scorecard/stats", json={"holes": [{"hole": 1, "par": 4}]}
    )

    assert response.json() == {"stats": None}


def test_round_stats_rejects_bad_par(golf_client) -> None:
    response = golf_client.post(
        "/api/golf/scorecard/stats", json={"holes": [{"hole": 1, "par": 6, "score": 5}]}
    )

    assert response.status_code == 422


def test_summary_endpoint(golf_client) -> None:
    golf = golf_client.post(
        "/api/golf/summary",
        json={"payload": {"gross_score": 82, "total_putts": 31}, "courseName": "Home"},
    ).json()
    empty = golf_client.post("/api/golf/summary", json={"payload": {}}).json()

    assert golf["summary"] == {"primaryLine": "82 at Home", "secondaryLine": "31 putts"}
    assert empty == {"summary": None}


def test_highlights_endpoint(golf_client) -> None:
    response = golf_client.post(
        "/api/golf/highlights",
        json={
            "rounds": [
                {"date": "2024-05-01", "grossScore": 81, "totalPutts": 30},
                {"date": "2024-05-08", "grossScore": 79, "totalPutts": 32},
            ]
        },
    )

    body = response.json()
    assert body["totalRounds"] == 2
    assert body["highlights"][0] == {"label": "Last 5 Avg", "value": "80"}
    assert body["recentRounds"][0]["score"] == 79


def test_api_key_required_when_enabled(monkeypatch, golf_client) -> None:
    monkeypatch.setenv("REQUIRE_API_KEY", "1")
    monkeypatch.setenv("API_KEY", "secret,other")
    reset_settings_cache()

    denied = golf_client.get("/api/golf/courses")
    header = golf_client.get("/api/golf/courses", headers={"x-api-key": "secret"})
    query = golf_client.get("/api/golf/courses", params={"apiKey": "other"})

    assert denied.status_code == 401
    assert denied.json()["detail"] == "invalid api key"
    assert header.status_code == 200
    assert query.status_code == 200
