"""Tests for the HTTP API."""

from fastapi.testclient import TestClient

from nutriscan.api.app import create_app
from nutriscan.domain.profiles import UserProfile
from tests.conftest import ENERGY_DRINK_INGREDIENTS

ZERO_FACTS = {
    "calories": 0,
    "protein": 0,
    "carbs": 0,
    "fat": 0,
    "sugar": 0,
    "sodium": 0,
}


def test_health_endpoint(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_classify_omits_absent_fields(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/classify",
        json={
            "product": {
                "name": "Oats",
                "brand": "Farm",
                "ingredients": ["Rolled Oats"],
                "nutritionalInfo": ZERO_FACTS,
            },
            "profile": {"allergens": [], "fitnessGoals": ["general health"]},
        },
    )

    assert response.status_code == 200
    assert response.json() == {
        "classification": "healthy",
        "reasons": ["No problematic ingredients detected"],
    }


def test_classify_reports_warnings_and_fitness(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/classify",
        json={
            "product": {
                "name": "Latte",
                "brand": "Cafe",
                "ingredients": ["Milk", "Sugar"],
                "nutritionalInfo": {**ZERO_FACTS, "calories": 50, "protein": 2},
            },
            "profile": {
                "allergens": ["dairy"],
                "healthConditions": ["none"],
                "fitnessGoals": ["muscle gain"],
            },
        },
    )

    data = response.json()
    assert data["classification"] == "risky"
    assert data["warnings"] == ["Contains dairy allergen"]
    assert data["fitnessCompatibility"]["compatible"] is False
    assert "Low in protein for muscle gain" in data["fitnessCompatibility"]["reasons"]
    assert "alternatives" not in data


def test_classify_rejects_unknown_restriction(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/classify",
        json={
            "product": {"ingredients": ["Water"], "nutritionalInfo": ZERO_FACTS},
            "profile": {"dietaryRestrictions": ["carnivore"]},
        },
    )

    assert response.status_code == 422


def test_scan_barcode_endpoint(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/scans/barcode", json={"barcode": "5901234123457"})

    assert response.status_code == 200
    data = response.json()
    assert data["product"]["name"] == "Energy Drink"
    assert data["product"]["ingredients"] == list(ENERGY_DRINK_INGREDIENTS)
    assert data["product"]["nutritionalInfo"]["sodium"] == 100
    assert data["result"]["classification"] == "risky"
    assert data["nutritionScore"] == 70


def test_scan_unknown_barcode_returns_404(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/scans/barcode", json={"barcode": "00000000"})

    assert response.status_code == 404
    assert response.json() == {"detail": "No product data, please scan again."}


def test_scan_invalid_barcode_returns_422(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/scans/barcode", json={"barcode": "not-a-code"})

    assert response.status_code == 422


def test_scan_ingredients_uses_profile(container, profile_repository) -> None:
    profile_repository.profiles["alice"] = UserProfile(allergens=("peanuts",))
    client = TestClient(create_app(container))

    response = client.post(
        "/scans/ingredients",
        json={"ingredients": ["Peanut Oil", "Salt"], "profileId": "alice"},
    )

    data = response.json()
    assert data["product"]["name"] == "Unknown Product"
    assert data["product"]["brand"] == "Unknown Brand"
    assert data["result"]["warnings"] == ["Contains peanuts allergen"]
    assert data["nutritionScore"] == 100


def test_scan_ingredients_requires_ingredients(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/scans/ingredients", json={"ingredients": [" "]})

    assert response.status_code == 422


def test_score_endpoint(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/score", json={**ZERO_FACTS, "sugar": 26})

    assert response.json() == {"score": 85}


def test_profile_endpoints(container, profile_repository) -> None:
    client = TestClient(create_app(container))

    default = client.get("/profiles/alice").json()
    assert default["fitnessGoals"] == ["general health"]
    assert default["healthConditions"] == []

    updated = client.patch(
        "/profiles/alice",
        json={"name": "Alice", "healthConditions": ["none", "diabetes"]},
    ).json()
    assert updated["name"] == "Alice"
    assert updated["healthConditions"] == ["diabetes"]

    with_allergen = client.post(
        "/profiles/alice/allergens", json={"label": "Sesame"}
    ).json()
    assert with_allergen["allergens"] == ["sesame"]
    assert with_allergen["customAllergens"] == {"sesame": "Sesame"}
    assert profile_repository.profiles["alice"].name == "Alice"

    reset = client.delete("/profiles/alice").json()
    assert reset["name"] == ""
    assert "alice" not in profile_repository.profiles


def test_blank_custom_allergen_is_rejected(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/profiles/alice/allergens", json={"label": "   "})

    assert response.status_code == 422


def test_blank_allergens_are_rejected(container, profile_repository) -> None:
    client = TestClient(create_app(container))

    patched = client.patch("/profiles/bob", json={"allergens": ["", "  "]})
    classified = client.post(
        "/classify",
        json={
            "product": {"ingredients": ["Rolled Oats"], "nutritionalInfo": ZERO_FACTS},
            "profile": {"allergens": [" "]},
        },
    )
    scanned = client.post(
        "/scans/ingredients",
        json={"ingredients": ["Rolled Oats"], "profileId": "bob"},
    )

    assert patched.status_code == 422
    assert classified.status_code == 422
    assert "bob" not in profile_repository.profiles
    assert scanned.json()["result"]["classification"] == "healthy"


def test_profile_lists_available_allergens(container) -> None:
    client = TestClient(create_app(container))

    profile = client.post(
        "/profiles/carol/allergens", json={"label": "Lupin"}
    ).json()

    assert profile["availableAllergens"]["lupin"] == "Lupin"
    assert profile["availableAllergens"]["tree nuts"] == "Tree Nuts"
    assert list(profile["availableAllergens"])[:2] == ["peanuts", "dairy"]
