"""API tests for owner-scoped aircraft CRUD."""

import unittest

from tests.support import ApiTestCase


class TestCreateAircraft(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.token = self.register()["token"]
        self.headers = self.auth_headers(self.token)

    def test_defaults_and_owner(self) -> None:
        data = self.create_aircraft(self.token)
        self.assertEqual(data["tailNumber"], "N12345")
        self.assertEqual(data["status"], "active")
        self.assertEqual(data["specifications"], {})
        self.assertEqual(data["owner"]["username"], "alice")

    def test_optional_fields_kept(self) -> None:
        data = self.create_aircraft(
            self.token,
            tailNumber="N777AB",
            status="maintenance",
            specifications={"engines": 2, "seats": 189},
        )
        self.assertEqual(data["status"], "maintenance")
        self.assertEqual(data["specifications"], {"engines": 2, "seats": 189})

    def test_missing_required_field(self) -> None:
        resp = self.client.post(
            "/api/aircraft",
            json={"tailNumber": "N1", "model": "A320"},
            headers=self.headers,
        )
        self.assertEqual(resp.status_code, 400)
        self.assertIn("error", resp.json())

    def test_blank_required_field(self) -> None:
        resp = self.client.post(
            "/api/aircraft",
            json={"tailNumber": "  ", "model": "A320", "manufacturer": "Airbus", "year": 2010},
            headers=self.headers,
        )
        self.assertEqual(resp.status_code, 400)

    def test_duplicate_tail_number(self) -> None:
        self.create_aircraft(self.token)
        resp = self.client.post(
            "/api/aircraft",
            json={"tailNumber": "N12345", "model": "A320", "manufacturer": "Airbus", "year": 2010},
            headers=self.headers,
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"], "Aircraft with this tail number already exists")

    def test_duplicate_tail_number_across_owners(self) -> None:
        self.create_aircraft(self.token)
        other = self.register(username="bob", email="bob@example.com")["token"]
        resp = self.client.post(
            "/api/aircraft",
            json={"tailNumber": "n12345", "model": "A320", "manufacturer": "Airbus", "year": 2010},
            headers=self.auth_headers(other),
        )
        self.assertEqual(resp.status_code, 400)


class TestListAircraft(ApiTestCase):
    def test_list_is_owner_scoped_newest_first(self) -> None:
        alice = self.register()["token"]
        bob = self.register(username="bob", email="bob@example.com")["token"]
        first = self.create_aircraft(alice, tailNumber="N100")
        second = self.create_aircraft(alice, tailNumber="N200")
        self.create_aircraft(bob, tailNumber="N300")

        resp = self.client.get("/api/aircraft", headers=self.auth_headers(alice))
        self.assertEqual(resp.status_code, 200)
        ids = [a["id"] for a in resp.json()["data"]]
        self.assertEqual(ids, [second["id"], first["id"]])

        resp = self.client.get("/api/aircraft", headers=self.auth_headers(bob))
        self.assertEqual([a["tailNumber"] for a in resp.json()["data"]], ["N300"])


class TestUpdateAircraft(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.token = self.register()["token"]
        self.aircraft = self.create_aircraft(self.token)

    def test_merges_provided_fields(self) -> None:
        resp = self.client.put(
            f"/api/aircraft/{self.aircraft['id']}",
            json={"status": "retired"},
            headers=self.auth_headers(self.token),
        )
        self.assertEqual(resp.status_code, 200)
        data = resp.json()["data"]
        self.assertEqual(data["status"], "retired")
        self.assertEqual(data["model"], "737-800")
        self.assertEqual(data["tailNumber"], "N12345")

    def test_nonexistent_id(self) -> None:
        resp = self.client.put(
            "/api/aircraft/9999",
            json={"status": "retired"},
            headers=self.auth_headers(self.token),
        )
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["error"], "Aircraft not found")

    def test_other_owner_cannot_update(self) -> None:
        bob = self.register(username="bob", email="bob@example.com")["token"]
        resp = self.client.put(
            f"/api/aircraft/{self.aircraft['id']}",
            json={"status": "stolen"},
            headers=self.auth_headers(bob),
        )
        self.assertEqual(resp.status_code, 404)

    def test_tail_number_conflict_on_update(self) -> None:
        other = self.create_aircraft(self.token, tailNumber="N999")
        resp = self.client.put(
            f"/api/aircraft/{other['id']}",
            json={"tailNumber": "N12345"},
            headers=self.auth_headers(self.token),
        )
        self.assertEqual(resp.status_code, 400)


class TestDeleteAircraft(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.token = self.register()["token"]
        self.aircraft = self.create_aircraft(self.token)

    def test_delete(self) -> None:
        resp = self.client.delete(
            f"/api/aircraft/{self.aircraft['id']}", headers=self.auth_headers(self.token)
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"message": "Aircraft deleted successfully"})
        listed = self.client.get("/api/aircraft", headers=self.auth_headers(self.token))
        self.assertEqual(listed.json()["data"], [])

    def test_delete_nonexistent(self) -> None:
        resp = self.client.delete("/api/aircraft/9999", headers=self.auth_headers(self.token))
        self.assertEqual(resp.status_code, 404)

    def test_other_owner_cannot_delete(self) -> None:
        bob = self.register(username="bob", email="bob@example.com")["token"]
        resp = self.client.delete(
            f"/api/aircraft/{self.aircraft['id']}", headers=self.auth_headers(bob)
        )
        self.assertEqual(resp.status_code, 404)

    def test_delete_refused_while_presented(self) -> None:
        self.client.post(
            "/api/presentations",
            json={
                "title": "Walkaround",
                "scheduledDate": "2026-11-01T10:00:00Z",
                "duration": 30,
                "aircraftId": self.aircraft["id"],
            },
            headers=self.auth_headers(self.token),
        )
        resp = self.client.delete(
            f"/api/aircraft/{self.aircraft['id']}", headers=self.auth_headers(self.token)
        )
        self.assertEqual(resp.status_code, 400)


if __name__ == "__main__":
    unittest.main()
