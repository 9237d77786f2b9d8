#!/usr/bin/env python3
"""
HTTP tests for the API routes, run through FastAPI's TestClient against an
in-memory database.
"""

import unittest

import pytest
from fastapi.testclient import TestClient

from web.backend.app import app
from web.backend.auth import create_access_token
from web.backend.dependencies import get_db
from web.backend.routers.auth import limiter
from tests import make_session_factory

APARTMENT = {
    "title": "Bright two-bed",
    "address": "10 Oak Ave",
    "city": "Springfield",
    "total_rooms": 2,
    "total_bathrooms": 1,
    "monthly_rent": 1400,
    "amenities": ["wifi", "balcony"],
}


@pytest.mark.api
class ApiTestCase(unittest.TestCase):
    """Wires the app to a fresh database for every test."""

    def setUp(self):
        # Disable rate limiting for tests
        limiter.enabled = False

        factory = make_session_factory()

        def override_get_db():
            session = factory()
            try:
                yield session
            finally:
                session.close()

        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app, raise_server_exceptions=False)

    def tearDown(self):
        app.dependency_overrides.clear()

    def register(self, email: str, first_name: str = "Test"):
        response = self.client.post("/api/auth/register", json={
            "email": email,
            "password": "secret123",
            "first_name": first_name,
            "last_name": "User",
        })
        self.assertEqual(response.status_code, 201, response.text)
        body = response.json()
        return {"Authorization": f"Bearer {body['token']}"}, body["user"]["id"]

    def create_apartment(self, headers, **overrides) -> int:
        payload = dict(APARTMENT, **overrides)
        response = self.client.post("/api/apartments", json=payload, headers=headers)
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()["apartmentId"]

    def create_room(self, headers, apartment_id: int) -> int:
        response = self.client.post("/api/rooms", json={
            "apartment_id": apartment_id,
            "room_type": "bedroom",
            "monthly_rent": 650,
        }, headers=headers)
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()["roomId"]


class TestAuthRoutes(ApiTestCase):

    def test_register_and_login(self):
        self.register("dana@example.com")

        response = self.client.post("/api/auth/login", json={
            "email": "DANA@example.com",
            "password": "secret123",
        })
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["user"]["email"], "dana@example.com")

    def test_duplicate_registration(self):
        self.register("dana@example.com")
        response = self.client.post("/api/auth/register", json={
            "email": "dana@example.com",
            "password": "secret123",
            "first_name": "Dana",
            "last_name": "Again",
        })
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["message"], "User already exists")
        self.assertFalse(response.json()["success"])

    def test_validation_errors_are_400(self):
        response = self.client.post("/api/auth/register", json={
            "email": "not-an-email",
            "password": "123",
            "first_name": "",
            "last_name": "User",
        })
        self.assertEqual(response.status_code, 400)
        fields = {error["field"] for error in response.json()["errors"]}
        self.assertTrue({"email", "password", "first_name"} <= fields)

    def test_wrong_password(self):
        self.register("dana@example.com")
        response = self.client.post("/api/auth/login", json={
            "email": "dana@example.com",
            "password": "nope-nope",
        })
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["message"], "Invalid credentials")

    def test_missing_token_is_401(self):
        response = self.client.post("/api/apartments", json=APARTMENT)
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()["message"], "Access token required")

    def test_invalid_token_is_403(self):
        response = self.client.get("/api/users/profile", headers={"Authorization": "Bearer garbage"})
        self.assertEqual(response.status_code, 403)

    def test_token_for_unknown_user_is_403(self):
        token = create_access_token(4242)
        response = self.client.get("/api/users/profile", headers={"Authorization": f"Bearer {token}"})
        self.assertEqual(response.status_code, 403)

    def test_login_rate_limit(self):
        limiter.enabled = True
        limiter.reset()
        try:
            codes = [
                self.client.post("/api/auth/login", json={
                    "email": "who@example.com",
                    "password": "whatever",
                }).status_code
                for _ in range(21)
            ]
        finally:
            limiter.reset()
            limiter.enabled = False

        self.assertEqual(codes[0], 400)
        self.assertEqual(codes[-1], 429)


class TestApartmentRoutes(ApiTestCase):

    def test_create_list_and_detail(self):
        headers, owner_id = self.register("owner@example.com", first_name="Olive")
        apartment_id = self.create_apartment(headers)

        listing = self.client.get("/api/apartments", params={"city": "spring"}).json()["apartments"]
        self.assertEqual([a["id"] for a in listing], [apartment_id])
        self.assertEqual(listing[0]["first_name"], "Olive")
        self.assertEqual(listing[0]["amenities"], ["wifi", "balcony"])

        detail = self.client.get(f"/api/apartments/{apartment_id}").json()["apartment"]
        self.assertEqual(detail["owner_id"], owner_id)
        self.assertEqual(detail["available_rooms"], [])

    def test_filters_and_pagination_params(self):
        headers, _ = self.register("owner@example.com")
        for i in range(12):
            self.create_apartment(headers, title=f"Place {i}", furnished=(i % 2 == 0))

        self.assertEqual(len(self.client.get("/api/apartments").json()["apartments"]), 10)
        second_page = self.client.get("/api/apartments", params={"page": 2}).json()["apartments"]
        self.assertEqual(len(second_page), 2)
        furnished = self.client.get("/api/apartments", params={"furnished": "true", "limit": 50}).json()
        self.assertEqual(len(furnished["apartments"]), 6)

        self.assertEqual(self.client.get("/api/apartments", params={"page": 0}).status_code, 400)

    def test_unknown_apartment_is_404(self):
        response = self.client.get("/api/apartments/999")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["message"], "Apartment not found")

    def test_only_owner_can_update(self):
        owner_headers, _ = self.register("owner@example.com")
        other_headers, _ = self.register("other@example.com")
        apartment_id = self.create_apartment(owner_headers)

        denied = self.client.put(f"/api/apartments/{apartment_id}", json={"title": "Stolen"}, headers=other_headers)
        self.assertEqual(denied.status_code, 403)

        allowed = self.client.put(
            f"/api/apartments/{apartment_id}",
            json={"monthly_rent": 1250, "owner_id": 12345},
            headers=owner_headers
        )
        self.assertEqual(allowed.status_code, 200)

        detail = self.client.get(f"/api/apartments/{apartment_id}").json()["apartment"]
        self.assertEqual(detail["title"], APARTMENT["title"])
        self.assertEqual(detail["monthly_rent"], 1250.0)

        missing = self.client.put("/api/apartments/999", json={"title": "Ghost"}, headers=owner_headers)
        self.assertEqual(missing.status_code, 404)

    def test_compare_and_save(self):
        headers, _ = self.register("owner@example.com")
        first = self.create_apartment(headers, monthly_rent=1000, total_area=50)
        second = self.create_apartment(headers, monthly_rent=2000)

        compared = self.client.post("/api/apartments/compare", json={"apartment_ids": [first, second]})
        self.assertEqual(compared.status_code, 200)
        stats = compared.json()["stats"]
        self.assertEqual(stats["price_range"]["avg"], 1500.0)
        self.assertEqual(stats["area_range"]["min"], 50.0)

        missing = self.client.post("/api/apartments/compare", json={"apartment_ids": [first, 999]})
        self.assertEqual(missing.status_code, 404)

        too_few = self.client.post("/api/apartments/compare", json={"apartment_ids": [first]})
        self.assertEqual(too_few.status_code, 400)

        saved = self.client.post(
            "/api/apartments/comparisons",
            json={"apartment_ids": [second, first], "comparison_notes": "shortlist"},
            headers=headers
        )
        self.assertEqual(saved.status_code, 201)

        comparisons = self.client.get("/api/apartments/comparisons", headers=headers).json()["comparisons"]
        self.assertEqual(comparisons[0]["apartment_ids"], [second, first])


class TestRoomRoutes(ApiTestCase):

    def test_apply_review_flow(self):
        owner_headers, _ = self.register("owner@example.com")
        applicant_headers, applicant_id = self.register("applicant@example.com", first_name="Alex")
        room_id = self.create_room(owner_headers, self.create_apartment(owner_headers))

        applied = self.client.post(f"/api/rooms/{room_id}/apply", json={"message": "Hi!"}, headers=applicant_headers)
        self.assertEqual(applied.status_code, 201)

        again = self.client.post(f"/api/rooms/{room_id}/apply", json={}, headers=applicant_headers)
        self.assertEqual(again.status_code, 400)
        self.assertEqual(again.json()["message"], "You have already applied for this room")

        forbidden = self.client.get(f"/api/rooms/{room_id}/applications", headers=applicant_headers)
        self.assertEqual(forbidden.status_code, 403)

        applications = self.client.get(f"/api/rooms/{room_id}/applications", headers=owner_headers).json()
        self.assertEqual(len(applications["applications"]), 1)
        application = applications["applications"][0]
        self.assertEqual(application["applicant_id"], applicant_id)

        review_url = f"/api/rooms/applications/{application['id']}"
        self.assertEqual(
            self.client.put(review_url, json={"status": "approved"}, headers=applicant_headers).status_code,
            403
        )
        self.assertEqual(
            self.client.put(review_url, json={"status": "pending"}, headers=owner_headers).status_code,
            400
        )
        approved = self.client.put(review_url, json={"status": "approved"}, headers=owner_headers)
        self.assertEqual(approved.status_code, 200)

        room = self.client.get(f"/api/rooms/{room_id}").json()["room"]
        self.assertEqual(room["status"], "rented")
        self.assertEqual(self.client.get("/api/rooms").json()["rooms"], [])

    def test_non_owner_cannot_add_room(self):
        owner_headers, _ = self.register("owner@example.com")
        other_headers, _ = self.register("other@example.com")
        apartment_id = self.create_apartment(owner_headers)

        response = self.client.post("/api/rooms", json={
            "apartment_id": apartment_id,
            "room_type": "studio",
            "monthly_rent": 800,
        }, headers=other_headers)
        self.assertEqual(response.status_code, 403)

    def test_invalid_room_type(self):
        headers, _ = self.register("owner@example.com")
        apartment_id = self.create_apartment(headers)
        response = self.client.post("/api/rooms", json={
            "apartment_id": apartment_id,
            "room_type": "castle",
            "monthly_rent": 800,
        }, headers=headers)
        self.assertEqual(response.status_code, 400)


class TestUserRoutes(ApiTestCase):

    def test_profile_roundtrip(self):
        headers, _ = self.register("me@example.com")
        response = self.client.put("/api/users/profile", json={
            "age": 29,
            "budget_min": 700,
            "budget_max": 1100,
            "lifestyle_preferences": {"smoking": False, "pets": True},
        }, headers=headers)
        self.assertEqual(response.status_code, 200)

        profile = self.client.get("/api/users/profile", headers=headers).json()["profile"]
        self.assertEqual(profile["age"], 29)
        self.assertEqual(profile["lifestyle_preferences"], {"pets": True, "smoking": False})
        self.assertEqual(profile["verification_status"], "unverified")

    def test_profile_validation(self):
        headers, _ = self.register("me@example.com")
        self.assertEqual(
            self.client.put("/api/users/profile", json={"age": 12}, headers=headers).status_code,
            400
        )
        self.assertEqual(
            self.client.put("/api/users/profile", json={"budget_min": 900, "budget_max": 100}, headers=headers).status_code,
            400
        )

    def test_mutual_interest(self):
        alice_headers, alice_id = self.register("alice@example.com", first_name="Alice")
        bob_headers, bob_id = self.register("bob@example.com", first_name="Bob")

        first = self.client.post("/api/users/interest", json={"user_id": bob_id}, headers=alice_headers).json()
        self.assertFalse(first["mutual"])

        second = self.client.post("/api/users/interest", json={"user_id": alice_id}, headers=bob_headers).json()
        self.assertTrue(second["mutual"])

        matches = self.client.get("/api/users/matches", headers=alice_headers).json()["matches"]
        self.assertEqual([m["user_id"] for m in matches], [bob_id])
        self.assertEqual(matches[0]["first_name"], "Bob")

        self_interest = self.client.post("/api/users/interest", json={"user_id": alice_id}, headers=alice_headers)
        self.assertEqual(self_interest.status_code, 400)

    def test_roommates_only_lists_verified_users(self):
        headers, _ = self.register("me@example.com")
        self.register("other@example.com")

        response = self.client.get("/api/users/roommates", headers=headers)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["matches"], [])


class TestHealth(ApiTestCase):

    def test_health(self):
        response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "healthy")


if __name__ == '__main__':
    unittest.main()
