"""End-to-end flow: viewer owns aircraft, only an admin may list users."""

import unittest

from aione.core.security import decode_access_token
from tests.support import ApiTestCase


class TestViewerAndAdminFlow(ApiTestCase):
    def test_flow(self) -> None:
        a = self.register(username="pilot_a", email="a@example.com", password="secret-a", role="viewer")

        login_a = self.client.post(
            "/api/auth/login", json={"email": "a@example.com", "password": "secret-a"}
        )
        self.assertEqual(login_a.status_code, 200)
        token_a = login_a.json()["token"]
        payload = decode_access_token(token_a)
        self.assertEqual(int(payload["sub"]), a["user"]["id"])
        self.assertEqual(payload["username"], "pilot_a")
        self.assertEqual(payload["role"], "viewer")

        created = self.create_aircraft(token_a, tailNumber="N12345")

        listed = self.client.get("/api/aircraft", headers=self.auth_headers(token_a))
        self.assertEqual(listed.status_code, 200)
        self.assertEqual(len(listed.json()["data"]), 1)
        self.assertEqual(listed.json()["data"][0]["id"], created["id"])
        self.assertEqual(listed.json()["data"][0]["tailNumber"], "N12345")

        forbidden = self.client.get("/api/users", headers=self.auth_headers(token_a))
        self.assertEqual(forbidden.status_code, 403)

        self.register(username="admin_b", email="b@example.com", password="secret-b", role="admin")
        login_b = self.client.post(
            "/api/auth/login", json={"email": "b@example.com", "password": "secret-b"}
        )
        self.assertEqual(login_b.status_code, 200)

        users = self.client.get("/api/users", headers=self.auth_headers(login_b.json()["token"]))
        self.assertEqual(users.status_code, 200)
        self.assertEqual(
            sorted(u["username"] for u in users.json()["data"]), ["admin_b", "pilot_a"]
        )


if __name__ == "__main__":
    unittest.main()
