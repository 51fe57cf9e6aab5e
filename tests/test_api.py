"""End-to-end tests through the HTTP layer."""
import pytest
from fastapi.testclient import TestClient

from main import app

PROFILE = {
    "weight": 55,
    "height": 164,
    "age": 20,
    "gender": "female",
    "activity_level": "moderately_active",
    "goal": "lose_fat",
}


@pytest.fixture(scope="module")
def client():
    with TestClient(app) as c:
        yield c


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "healthy", "foods": 22}


def test_targets(client):
    res = client.post("/api/targets", json=PROFILE)
    assert res.status_code == 200
    body = res.json()
    assert body["bmi"] == 20.4
    assert body["bmi_category"] == "normal"
    assert body["bmr"] == 1314
    assert body["tdee"] == 2037
    assert body["targets"] == {"calories": 1537, "protein": 110, "carbs": 178, "fat": 43}


def test_targets_out_of_range_returns_violations(client):
    res = client.post("/api/targets", json={**PROFILE, "weight": 500})
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["message"] == "Invalid body metrics"
    assert error["details"]["violations"] == ["Weight must be between 30 and 200 kg"]


def test_targets_unknown_gender_is_rejected(client):
    res = client.post("/api/targets", json={**PROFILE, "gender": "other"})
    assert res.status_code == 422
    fields = [e["field"] for e in res.json()["error"]["details"]["validation_errors"]]
    assert "body.gender" in fields


def test_validate_metrics(client):
    res = client.post("/api/metrics/validate", json={"weight": 25, "age": 30})
    assert res.json() == {"valid": False, "violations": ["Weight must be between 30 and 200 kg"]}
    res = client.post("/api/metrics/validate", json={})
    assert res.json() == {"valid": True, "violations": []}


def test_bmi(client):
    res = client.post("/api/bmi", json={"weight": 70, "height": 175})
    assert res.json() == {"bmi": 22.9, "category": "normal"}


def test_deficit(client):
    res = client.post("/api/deficit", json={
        "targets": {"calories": 2000, "protein": 100, "carbs": 250, "fat": 60},
        "consumed": {"calories": 500, "protein": 120, "carbs": 100},
    })
    assert res.status_code == 200
    assert res.json() == {"calories": 1500, "protein": 0, "carbs": 150, "fat": 60}


def test_food_not_found_envelope(client):
    res = client.get("/api/foods/nope")
    assert res.status_code == 404
    assert res.json() == {
        "error": {
            "message": "Food with id 'nope' not found",
            "status_code": 404,
            "details": {"resource": "Food", "id": "nope"},
        }
    }


def test_food_search_and_tag_filter(client):
    res = client.get("/api/foods", params={"q": "chicken"})
    ids = [f["id"] for f in res.json()]
    assert "chicken_breast" in ids and "chicken_salad" in ids
    res = client.get("/api/foods", params={"q": "chicken", "tag": "takeout"})
    assert [f["id"] for f in res.json()] == ["chicken_salad"]


def test_food_nutrition(client):
    res = client.get("/api/foods/chicken_breast/nutrition", params={"weight_g": 100})
    assert res.json()["calories"] == 110
    res = client.get("/api/foods/chicken_breast/nutrition")
    assert res.json()["weight_g"] == 200
    assert client.get("/api/foods/chicken_breast/nutrition", params={"weight_g": 0}).status_code == 422


def test_fallback_foods(client):
    res = client.get("/api/foods/fallback", params={"scenario": "takeout", "count": 2})
    assert res.status_code == 200
    body = res.json()
    assert len(body) == 2
    assert {f["name"] for f in body} <= {"Chicken Breast Salad", "Beef Noodle Soup", "Egg Fried Rice"}
    assert all(f["confidence"] == 0.6 for f in body)


def test_intake_summary(client):
    res = client.post("/api/intake/summary", json={
        "day": "2026-10-19",
        "entries": [
            {"food_name": "Oatmeal", "calories": 300, "protein": 20, "carbs": 30, "fat": 10,
             "logged_at": "2026-10-18T08:00:00"},
            {"food_name": "Chicken Breast", "calories": 220, "protein": 46, "carbs": 0, "fat": 3,
             "logged_at": "2026-10-19T12:30:00"},
        ],
        "targets": {"calories": 2000, "protein": 110, "carbs": 250, "fat": 60},
    })
    assert res.status_code == 200
    body = res.json()
    assert body["date"] == "2026-10-19"
    assert body["entries"] == 1
    assert body["consumed"]["protein"] == 46
    assert body["deficit"]["protein"] == 64
    assert body["calorie_progress"] == 11.0


def test_recommendations_with_scenario(client):
    res = client.post("/api/recommendations", json={
        "deficit": {"calories": 200, "protein": 50, "carbs": 0, "fat": 0},
        "scenario": "canteen",
        "top_k": 2,
    })
    assert res.status_code == 200
    body = res.json()
    assert body["suggestions"][0]["food_id"] == "steamed_fish"
    assert len(body["suggestions"]) == 2
    assert body["advice"]["scenario"] == "canteen"


def test_scenario_advice_unknown(client):
    res = client.get("/api/scenarios/moon")
    assert res.status_code == 404
    assert res.json()["error"]["details"]["resource"] == "Scenario"


def test_recommendations_reject_negative_deficit(client):
    res = client.post("/api/recommendations", json={
        "deficit": {"calories": 0, "protein": -50, "carbs": 0, "fat": 0},
    })
    assert res.status_code == 422
    fields = [e["field"] for e in res.json()["error"]["details"]["validation_errors"]]
    assert "body.deficit.protein" in fields


def test_targets_default_to_maintain_without_goal(client):
    profile = {k: v for k, v in PROFILE.items() if k != "goal"}
    res = client.post("/api/targets", json=profile)
    assert res.status_code == 200
    assert res.json()["targets"]["calories"] == 2037
