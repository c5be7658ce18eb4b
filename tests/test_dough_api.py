"""Tests for the dough HTTP endpoints."""

from fastapi.testclient import TestClient

from dough_calculator.api.app import create_app
from dough_calculator.config import Settings
from dough_calculator.containers import build_container


def test_health(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_compute_without_poolish(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/api/dough",
        json={"balls": 4, "ballWeightG": 280, "hydrationPct": 65, "usePoolish": False},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["totalDoughG"] == 1120.0
    assert data["flourG"] == 667.0
    assert data["waterG"] == 433.5
    assert data["saltG"] == 19.5
    assert data["saltRule"] == container.settings.salt_rule_text
    assert data["poolish"] is None
    assert data["finalMix"] == {
        "flourG": 667.0,
        "waterG": 433.5,
        "saltG": 19.5,
        "note": None,
    }


def test_compute_with_capped_poolish(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/api/dough",
        json={
            "balls": 1,
            "ballWeightG": 250,
            "hydrationPct": 50,
            "usePoolish": True,
            "poolishMode": "fixed",
            "poolishFlourFixedG": 10000,
            "poolishHydrationPct": 130,
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["poolish"]["flourG"] == 61.9
    assert data["poolish"]["honeyG"] == 5.0
    assert data["poolish"]["hydrationPct"] == 130.0
    assert data["finalMix"]["note"]
    assert data["poolish"]["note"] == data["finalMix"]["note"]


def test_empty_payload_uses_defaults(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/api/dough", json={})

    assert response.status_code == 200
    data = response.json()
    assert data["totalDoughG"] == 250.0
    assert data["poolish"] is None


def test_infinite_balls_are_clamped(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/api/dough", json={"balls": "inf", "ballWeightG": 250})

    assert response.status_code == 200
    assert response.json()["totalDoughG"] == 25000.0


def test_snake_case_fields_are_accepted(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/api/dough", json={"balls": 2, "ball_weight_g": 300})

    assert response.status_code == 200
    assert response.json()["totalDoughG"] == 600.0


def test_unknown_poolish_mode_is_rejected(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/api/dough", json={"usePoolish": True, "poolishMode": "sourdough"}
    )

    assert response.status_code == 422


def test_defaults_endpoint_lists_ranges(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/api/dough/defaults")

    assert response.status_code == 200
    data = response.json()
    assert data["balls"] == {"default": 1, "min": 1, "max": 100}
    assert data["hydrationPct"] == {"default": 65, "min": 50, "max": 80}
    assert data["poolishFlourFixedG"]["max"] is None
    assert isinstance(data["ballWeightG"]["default"], int)
    assert isinstance(data["poolishHydrationPct"]["max"], int)


def test_cors_headers_when_origins_configured() -> None:
    container = build_container(
        Settings(cors_allowed_origins="https://dough.example.com")
    )
    client = TestClient(create_app(container))

    response = client.post(
        "/api/dough",
        json={"balls": 2},
        headers={"Origin": "https://dough.example.com"},
    )

    assert response.status_code == 200
    assert (
        response.headers["access-control-allow-origin"] == "https://dough.example.com"
    )
