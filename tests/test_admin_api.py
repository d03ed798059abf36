"""HTTP tests for admin-only routes and the public maintenance/health endpoints."""

import unittest

from coinhub.models import AdminSettings, User
from tests.support import ApiTestCase, bearer

ADMIN_ROUTES = (
    ("get", "/api/admin/users", None),
    ("patch", "/api/admin/users/abc", {"coins": 1}),
    ("post", "/api/admin/broadcast", {"message": "hi"}),
    ("post", "/api/admin/maintenance", {"message": "down"}),
)


class TestAdminGuards(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.register("alice", "a@x.com", "pw123")
        self.user_token = self.token_for("alice", "pw123")

    def _call(self, method: str, path: str, body: dict | None, headers: dict | None = None):
        kwargs = {"headers": headers or {}}
        if body is not None:
            kwargs["json"] = body
        return getattr(self.client, method)(path, **kwargs)

    def test_missing_token_unauthorized(self) -> None:
        for method, path, body in ADMIN_ROUTES:
            with self.subTest(path=path, method=method):
                self.assertEqual(self._call(method, path, body).status_code, 401)

    def test_invalid_token_forbidden(self) -> None:
        for method, path, body in ADMIN_ROUTES:
            with self.subTest(path=path, method=method):
                resp = self._call(method, path, body, bearer("not-a-token"))
                self.assertEqual(resp.status_code, 403)

    def test_non_admin_forbidden_without_side_effects(self) -> None:
        for method, path, body in ADMIN_ROUTES:
            with self.subTest(path=path, method=method):
                resp = self._call(method, path, body, bearer(self.user_token))
                self.assertEqual(resp.status_code, 403)
                self.assertEqual(resp.json()["detail"], "Admin access required")
        with self.SessionLocal() as db:
            self.assertEqual(db.query(AdminSettings).count(), 0)


class TestAdminTokenSnapshot(ApiTestCase):
    """Admin rights follow the token until it expires, even after demotion or a ban."""

    def test_demoted_admin_keeps_access_until_expiry(self) -> None:
        token = self.create_admin()
        with self.SessionLocal() as db:
            db.query(User).filter(User.username == "root").update({"role": "user", "status": "banned"})
            db.commit()
        self.assertEqual(self.client.get("/api/admin/users", headers=bearer(token)).status_code, 200)
        self.assertEqual(self.login("root", "rootpw").status_code, 403)


class TestAdminUsers(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.admin = bearer(self.create_admin())
        self.register("alice", "a@x.com", "pw123")
        self.register("bob", "b@x.com", "pw123")
        self.alice_id = self.get_user_row("alice").user_id

    def test_list_in_storage_order_without_hash(self) -> None:
        resp = self.client.get("/api/admin/users", headers=self.admin)
        self.assertEqual(resp.status_code, 200)
        users = resp.json()
        self.assertEqual([u["username"] for u in users], ["root", "alice", "bob"])
        for u in users:
            self.assertNotIn("passwordHash", u)
            self.assertNotIn("password_hash", u)
            self.assertIn("createdAt", u)
        self.assertEqual(users[0]["coins"], 999999)

    def test_update_coins_and_status(self) -> None:
        resp = self.client.patch(
            f"/api/admin/users/{self.alice_id}",
            json={"coins": 500, "status": "banned"},
            headers=self.admin,
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["coins"], 500)
        self.assertEqual(resp.json()["status"], "banned")
        self.assertEqual(self.login("alice", "pw123").status_code, 403)

    def test_reactivate(self) -> None:
        url = f"/api/admin/users/{self.alice_id}"
        self.client.patch(url, json={"status": "suspended"}, headers=self.admin)
        self.assertEqual(self.login("alice", "pw123").status_code, 403)
        self.client.patch(url, json={"status": "active"}, headers=self.admin)
        self.assertEqual(self.login("alice", "pw123").status_code, 200)

    def test_promote_to_admin(self) -> None:
        self.client.patch(
            f"/api/admin/users/{self.alice_id}", json={"role": "admin"}, headers=self.admin
        )
        token = self.token_for("alice", "pw123")
        self.assertEqual(self.client.get("/api/admin/users", headers=bearer(token)).status_code, 200)

    def test_rejects_fields_outside_allow_list(self) -> None:
        for body in (
            {"username": "mallory"},
            {"password": "x"},
            {"userId": "other"},
            {"coins": -1},
            {"status": "deleted"},
            {"role": "superuser"},
        ):
            with self.subTest(body=body):
                resp = self.client.patch(
                    f"/api/admin/users/{self.alice_id}", json=body, headers=self.admin
                )
                self.assertEqual(resp.status_code, 400)
        row = self.get_user_row("alice")
        self.assertEqual((row.username, row.coins, row.role), ("alice", 100, "user"))

    def test_unknown_user(self) -> None:
        resp = self.client.patch("/api/admin/users/missing", json={"coins": 1}, headers=self.admin)
        self.assertEqual(resp.status_code, 404)


class TestBroadcastAndMaintenance(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.admin = bearer(self.create_admin())

    def test_maintenance_defaults_off(self) -> None:
        resp = self.client.get("/api/maintenance")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"maintenanceMode": False, "message": ""})

    def test_toggle(self) -> None:
        on = self.client.post("/api/admin/maintenance", json={"message": "Upgrading"}, headers=self.admin)
        self.assertEqual(on.status_code, 200)
        self.assertEqual(on.json(), {"message": "Maintenance mode enabled", "maintenanceMode": True})
        self.assertEqual(
            self.client.get("/api/maintenance").json(),
            {"maintenanceMode": True, "message": "Upgrading"},
        )
        off = self.client.post("/api/admin/maintenance", json={"message": ""}, headers=self.admin)
        self.assertEqual(off.json()["maintenanceMode"], False)
        self.assertEqual(
            self.client.get("/api/maintenance").json(),
            {"maintenanceMode": False, "message": ""},
        )

    def test_missing_body_disables(self) -> None:
        self.client.post("/api/admin/maintenance", json={"message": "Upgrading"}, headers=self.admin)
        off = self.client.post("/api/admin/maintenance", headers=self.admin)
        self.assertEqual(off.status_code, 200, off.text)
        self.assertEqual(off.json(), {"message": "Maintenance mode disabled", "maintenanceMode": False})
        self.assertEqual(
            self.client.get("/api/maintenance").json(),
            {"maintenanceMode": False, "message": ""},
        )

    def test_broadcast_stores_last_message(self) -> None:
        for message in ("hello", "world"):
            resp = self.client.post("/api/admin/broadcast", json={"message": message}, headers=self.admin)
            self.assertEqual(resp.status_code, 200)
            self.assertEqual(resp.json(), {"message": "Broadcast sent successfully"})
        with self.SessionLocal() as db:
            rows = db.query(AdminSettings).all()
        self.assertEqual(len(rows), 1)
        self.assertEqual(rows[0].last_broadcast, "world")

    def test_empty_broadcast_rejected(self) -> None:
        resp = self.client.post("/api/admin/broadcast", json={"message": ""}, headers=self.admin)
        self.assertEqual(resp.status_code, 400)


class TestHealth(ApiTestCase):
    def test_health(self) -> None:
        resp = self.client.get("/api/health/")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["database"], "connected")
        self.assertEqual(resp.json()["status"], "ok")

    def test_root(self) -> None:
        self.assertEqual(self.client.get("/").json(), {"message": "coinhub API"})


if __name__ == "__main__":
    unittest.main()
