#!/usr/bin/env python3
"""
API tests using FastAPI's TestClient on an in-memory database.
"""

import math
import unittest

import pytest
from fastapi.testclient import TestClient

from web.backend.app import app
from web.backend.dependencies import get_db
from database.repositories import OpportunityRepository, OrganizationRepository, VolunteerRepository
from tests import create_test_engine, create_test_session_factory


@pytest.mark.db
class ApiTestCase(unittest.TestCase):

    def setUp(self):
        self.engine = create_test_engine()
        self.SessionLocal = create_test_session_factory(self.engine)

        def override_get_db():
            session = self.SessionLocal()
            try:
                yield session
            finally:
                session.close()

        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()
        self.engine.dispose()

    def create_organization(self, name="City Food Bank", **fields):
        response = self.client.post("/api/organizations", json={"name": name, **fields})
        self.assertEqual(response.status_code, 201)
        return response.json()["organization"]

    def create_volunteer(self, user_id, **fields):
        response = self.client.post("/api/volunteers", json={"user_id": user_id, **fields})
        self.assertEqual(response.status_code, 201)
        return response.json()["volunteer"]

    def create_opportunity(self, organization_id, title="Shift", **fields):
        payload = {"organization_id": organization_id, "title": title, "description": "Help out", **fields}
        response = self.client.post("/api/opportunities", json=payload)
        self.assertEqual(response.status_code, 201)
        return response.json()["opportunity"]


class TestRoot(ApiTestCase):

    def test_health(self):
        response = self.client.get("/health")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "healthy")

    def test_index_lists_endpoints(self):
        response = self.client.get("/")

        self.assertIn("GET /api/opportunities/match", response.json()["endpoints"]["opportunities"])


class TestDiscovery(ApiTestCase):

    def setUp(self):
        super().setUp()
        org = self.create_organization()
        self.org_id = org["id"]
        self.teaching = self.create_opportunity(self.org_id, "Tutoring", required_skills=["teaching", "logistics"],
                                                latitude=0.0001, longitude=0.05)
        self.logistics = self.create_opportunity(self.org_id, "Warehouse", required_skills=["logistics"],
                                                 latitude=0.0001, longitude=0.2)

    def test_lists_active_with_pagination(self):
        response = self.client.get("/api/opportunities")
        body = response.json()

        self.assertEqual(response.status_code, 200)
        self.assertTrue(body["success"])
        self.assertEqual([op["id"] for op in body["opportunities"]], [self.teaching["id"], self.logistics["id"]])
        self.assertEqual(body["pagination"], {"current_page": 1, "total_pages": 1, "total_items": 2})
        self.assertEqual(body["opportunities"][0]["organization_name"], "City Food Bank")
        self.assertIsNone(body["opportunities"][0]["distance_km"])

    def test_skill_filter(self):
        body = self.client.get("/api/opportunities", params={"skills": "teaching"}).json()

        self.assertEqual([op["title"] for op in body["opportunities"]], ["Tutoring"])

    def test_geo_filter_annotates_distance(self):
        body = self.client.get("/api/opportunities", params={"latitude": "0", "longitude": "0"}).json()

        self.assertEqual([op["title"] for op in body["opportunities"]], ["Tutoring"])
        self.assertEqual(body["opportunities"][0]["distance_km"], 5.6)

    def test_malformed_params_are_ignored(self):
        params = {"latitude": "abc", "longitude": "0", "radius": "-1", "page": "zero", "limit": "x"}
        response = self.client.get("/api/opportunities", params=params)

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["pagination"]["total_items"], 2)

    def test_page_past_the_end(self):
        body = self.client.get("/api/opportunities", params={"page": "3", "limit": "1"}).json()

        self.assertEqual(body["opportunities"], [])
        self.assertEqual(body["pagination"], {"current_page": 3, "total_pages": 2, "total_items": 2})

    def test_empty_database(self):
        self.engine.dispose()
        self.engine = create_test_engine()
        self.SessionLocal = create_test_session_factory(self.engine)

        body = self.client.get("/api/opportunities").json()

        self.assertEqual(body["opportunities"], [])
        self.assertEqual(body["pagination"]["total_pages"], 0)


class TestMatches(ApiTestCase):

    def test_unknown_volunteer(self):
        response = self.client.get("/api/opportunities/match", params={"user_id": 42})

        self.assertEqual(response.status_code, 404)
        self.assertFalse(response.json()["success"])
        self.assertEqual(response.json()["type"], "VolunteerNotFoundException")

    def test_missing_user_id(self):
        response = self.client.get("/api/opportunities/match")

        self.assertEqual(response.status_code, 422)
        self.assertIn("user_id", response.json()["error"])

    def test_ranked_matches(self):
        org = self.create_organization(latitude=0.0001, longitude=0.0001)
        self.create_volunteer(1, skills=["a", "b"], latitude=0.0001, longitude=0.0001)
        near = self.create_opportunity(org["id"], "Near", required_skills=["a", "b", "c"],
                                       latitude=0.0001, longitude=0.0901)
        perfect = self.create_opportunity(org["id"], "Perfect", required_skills=["a", "b"])
        self.create_opportunity(org["id"], "Unrelated", required_skills=["x"], latitude=40.0, longitude=-74.0)

        body = self.client.get("/api/opportunities/match", params={"user_id": 1}).json()

        self.assertEqual([m["id"] for m in body["matches"]], [perfect["id"], near["id"]])
        self.assertEqual(body["total_matches"], 2)
        self.assertEqual(body["matches"][0]["match_score"], 100)
        self.assertEqual(body["matches"][1]["match_score"], 72)
        self.assertEqual(body["matches"][1]["match_details"], {
            "skill_compatibility": 67,
            "distance_km": 10.0,
            "common_skills": ["a", "b"],
        })
        self.assertEqual(body["matches"][1]["organization"], "City Food Bank")


class TestOpportunities(ApiTestCase):

    def test_create_defaults(self):
        org = self.create_organization(latitude=-23.55, longitude=-46.63)

        opportunity = self.create_opportunity(org["id"])

        self.assertEqual(opportunity["status"], "active")
        self.assertEqual(opportunity["vacancies"], 1)
        self.assertEqual((opportunity["latitude"], opportunity["longitude"]), (-23.55, -46.63))
        self.assertEqual(opportunity["organization_name"], "City Food Bank")

    def test_create_validation(self):
        org = self.create_organization()

        response = self.client.post("/api/opportunities", json={"organization_id": org["id"], "description": "x"})

        self.assertEqual(response.status_code, 422)
        self.assertEqual(response.json()["error"], "Invalid or missing fields: title")

    def test_create_for_unknown_organization(self):
        response = self.client.post("/api/opportunities", json={
            "organization_id": 999, "title": "Shift", "description": "Help"
        })

        self.assertEqual(response.status_code, 404)

    def test_get(self):
        org = self.create_organization()
        created = self.create_opportunity(org["id"], required_skills=["cooking"])

        response = self.client.get(f"/api/opportunities/{created['id']}")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["opportunity"]["required_skills"], ["cooking"])
        self.assertEqual(self.client.get("/api/opportunities/999").status_code, 404)


class TestApplications(ApiTestCase):

    def setUp(self):
        super().setUp()
        self.org = self.create_organization(name="Shelter")
        self.opportunity = self.create_opportunity(self.org["id"], "Night shift")
        self.volunteer = self.create_volunteer(5, skills=["cooking"])

    def apply(self, opportunity_id=None, user_id=5, message="Happy to help"):
        opportunity_id = opportunity_id or self.opportunity["id"]
        return self.client.post(f"/api/opportunities/{opportunity_id}/apply",
                                json={"user_id": user_id, "message": message})

    def test_apply(self):
        response = self.apply()
        application = response.json()["application"]

        self.assertEqual(response.status_code, 201)
        self.assertEqual(application["status"], "pending")
        self.assertEqual(application["volunteer_id"], self.volunteer["id"])

    def test_duplicate_application(self):
        self.apply()
        response = self.apply()

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["type"], "DuplicateApplicationException")

    def test_apply_errors(self):
        self.assertEqual(self.apply(opportunity_id=999).status_code, 404)
        self.assertEqual(self.apply(user_id=999).status_code, 404)

    def test_list_applications(self):
        self.apply()

        body = self.client.get("/api/volunteers/5/applications").json()

        self.assertEqual(body["total"], 1)
        self.assertEqual(body["applications"][0]["opportunity"], {
            "id": self.opportunity["id"],
            "title": "Night shift",
            "organization": "Shelter",
        })
        self.assertEqual(self.client.get("/api/volunteers/999/applications").status_code, 404)


class TestVolunteersAndOrganizations(ApiTestCase):

    def test_volunteer_profile(self):
        self.create_volunteer(3, display_name="Ana", skills=["driving"])

        body = self.client.get("/api/volunteers/3").json()

        self.assertEqual(body["volunteer"]["skills"], ["driving"])
        self.assertEqual(body["volunteer"]["latitude"], 0.0)

    def test_duplicate_volunteer(self):
        self.create_volunteer(3)

        response = self.client.post("/api/volunteers", json={"user_id": 3})

        self.assertEqual(response.status_code, 400)

    def test_organization_profile_counts_opportunities(self):
        org = self.create_organization()
        self.create_opportunity(org["id"])

        body = self.client.get(f"/api/organizations/{org['id']}").json()

        self.assertEqual(body["organization"]["opportunities_count"], 1)
        self.assertEqual(self.client.get("/api/organizations/999").status_code, 404)

    def test_update_organization(self):
        org = self.create_organization(phone="123")

        response = self.client.put(f"/api/organizations/{org['id']}", json={"name": "Food Bank North"})
        updated = response.json()["organization"]

        self.assertEqual(response.status_code, 200)
        self.assertEqual(updated["name"], "Food Bank North")
        self.assertEqual(updated["phone"], "123")
        self.assertEqual(self.client.put("/api/organizations/999", json={"name": "x"}).status_code, 404)


class TestNonFiniteCoordinates(ApiTestCase):

    def post_raw(self, path, body):
        return self.client.post(path, content=body, headers={"Content-Type": "application/json"})

    def test_requests_reject_infinity_and_nan(self):
        org = self.create_organization()
        cases = [
            ("/api/volunteers", '{"user_id": 1, "latitude": Infinity}'),
            ("/api/volunteers", '{"user_id": 1, "longitude": NaN}'),
            ("/api/organizations", '{"name": "A", "latitude": -Infinity}'),
            ("/api/opportunities",
             '{"organization_id": %d, "title": "T", "description": "D", "longitude": Infinity}' % org["id"]),
        ]
        for path, body in cases:
            with self.subTest(path=path, body=body):
                response = self.post_raw(path, body)
                self.assertEqual(response.status_code, 422)
                self.assertFalse(response.json()["success"])

        update = self.client.put(
            f"/api/organizations/{org['id']}",
            content='{"latitude": NaN}',
            headers={"Content-Type": "application/json"}
        )
        self.assertEqual(update.status_code, 422)
        self.assertEqual(self.client.get("/api/volunteers/1").status_code, 404)

    def test_stored_infinite_coordinate_does_not_break_queries(self):
        session = self.SessionLocal()
        try:
            org = OrganizationRepository(session).create_organization("Legacy")
            OpportunityRepository(session).create_opportunity(
                org, "Broken location", "Imported row", required_skills=["x"], latitude=math.inf
            )
            VolunteerRepository(session).create_volunteer(1, skills=["a"])
            session.commit()
        finally:
            session.close()

        matches = self.client.get("/api/opportunities/match", params={"user_id": 1})
        discovery = self.client.get("/api/opportunities", params={"latitude": "0", "longitude": "0"})

        self.assertEqual(matches.status_code, 200)
        self.assertEqual(matches.json()["matches"], [])
        self.assertEqual(discovery.status_code, 200)
        self.assertEqual(discovery.json()["opportunities"], [])


if __name__ == '__main__':
    unittest.main()
