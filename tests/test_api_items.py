"""API tests for /items: listing, authenticated creation, owner-only deletion."""

import unittest
from datetime import UTC, datetime, timedelta
from unittest.mock import patch

from lostfound.core.config import get_settings
from lostfound.core.security import ACCESS_TOKEN_TTL, create_access_token
from lostfound.models import ItemReport
from support import ApiTestCase


class TestCreateAndList(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.alice_id, self.alice = self.signup("alice", "alice@x.com")

    def test_create_then_list(self) -> None:
        res = self.create_item(self.alice)
        self.assertEqual(res.status_code, 200)
        body = res.json()
        self.assertEqual(body["message"], "Item added successfully")
        self.assertIsInstance(body["id"], int)

        listed = self.client.get("/items").json()
        self.assertEqual(len(listed), 1)
        entry = listed[0]
        self.assertEqual(entry["id"], body["id"])
        self.assertEqual(entry["name"], "Black Backpack")
        self.assertEqual(entry["description"], "Left at bus stop")
        self.assertEqual(entry["location"], "Main St")
        self.assertEqual(entry["type"], "lost")
        self.assertEqual(entry["user_id"], self.alice_id)
        self.assertEqual(entry["username"], "alice")
        self.assertEqual(entry["email"], "alice@x.com")
        self.assertIsNone(entry["contact_number"])
        self.assertIsNone(entry["image_url"])

    def test_owner_comes_from_token_not_form(self) -> None:
        res = self.create_item(self.alice, user_id=str(self.alice_id))
        self.assertEqual(res.status_code, 200)

        res = self.create_item(self.alice, user_id=str(self.alice_id + 100))
        self.assertEqual(res.status_code, 403)
        self.assertEqual(self.db.query(ItemReport).count(), 1)

    def test_create_requires_token(self) -> None:
        res = self.create_item({})
        self.assertEqual(res.status_code, 401)
        self.assertEqual(res.json()["detail"], "No token provided")

    def test_invalid_type_is_400(self) -> None:
        res = self.create_item(self.alice, type="stolen")
        self.assertEqual(res.status_code, 400)
        self.assertEqual(self.db.query(ItemReport).count(), 0)

    def test_missing_field_is_400(self) -> None:
        res = self.client.post(
            "/items",
            data={"name": "Keys", "type": "found", "location": "Gym"},
            headers=self.alice,
        )
        self.assertEqual(res.status_code, 400)
        self.assertIn("description", res.json()["detail"])

    def test_upload_image_is_served(self) -> None:
        res = self.client.post(
            "/items",
            data={
                "name": "Keys",
                "description": "Three keys on a ring",
                "location": "Gym",
                "type": "found",
            },
            files={"image": ("keys.png", b"\x89PNG fake image", "image/png")},
            headers=self.alice,
        )
        self.assertEqual(res.status_code, 200)
        image_url = self.client.get("/items").json()[0]["image_url"]
        self.assertTrue(image_url.startswith("/uploads/"))

        served = self.client.get(image_url)
        self.assertEqual(served.status_code, 200)
        self.assertEqual(served.content, b"\x89PNG fake image")

    def test_upload_wrong_extension_is_400(self) -> None:
        res = self.client.post(
            "/items",
            data={"name": "Keys", "description": "Ring", "location": "Gym", "type": "found"},
            files={"image": ("keys.exe", b"MZ", "application/octet-stream")},
            headers=self.alice,
        )
        self.assertEqual(res.status_code, 400)

    def test_filter_and_order(self) -> None:
        lost_old = self.create_item(self.alice, name="Wallet").json()["id"]
        found = self.create_item(self.alice, name="Umbrella", type="found").json()["id"]
        lost_new = self.create_item(self.alice, name="Phone").json()["id"]

        self.assertEqual(
            [r["id"] for r in self.client.get("/items").json()],
            [lost_new, found, lost_old],
        )
        lost = self.client.get("/items", params={"type": "lost"}).json()
        self.assertEqual([r["id"] for r in lost], [lost_new, lost_old])
        self.assertTrue(all(r["type"] == "lost" for r in lost))
        self.assertEqual(
            [r["id"] for r in self.client.get("/items", params={"type": "found"}).json()],
            [found],
        )
        self.assertEqual(len(self.client.get("/items", params={"type": "other"}).json()), 3)


class TestDelete(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.alice_id, self.alice = self.signup("alice", "alice@x.com")
        self.bob_id, self.bob = self.signup("bob", "bob@x.com")
        self.item_id = self.create_item(self.alice).json()["id"]

    def test_owner_deletes(self) -> None:
        res = self.client.delete(f"/items/{self.item_id}", headers=self.alice)
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json(), {"message": "Item deleted successfully"})
        self.assertEqual(self.client.get("/items").json(), [])

    def test_other_user_forbidden(self) -> None:
        res = self.client.delete(f"/items/{self.item_id}", headers=self.bob)
        self.assertEqual(res.status_code, 403)
        self.assertEqual(len(self.client.get("/items").json()), 1)

    def test_not_found(self) -> None:
        res = self.client.delete("/items/99999", headers=self.alice)
        self.assertEqual(res.status_code, 404)

    def test_deleted_twice_is_not_found(self) -> None:
        self.client.delete(f"/items/{self.item_id}", headers=self.alice)
        res = self.client.delete(f"/items/{self.item_id}", headers=self.alice)
        self.assertEqual(res.status_code, 404)

    def test_non_integer_id_is_400(self) -> None:
        res = self.client.delete("/items/abc", headers=self.alice)
        self.assertEqual(res.status_code, 400)


class TestTokenVerifier(ApiTestCase):
    """Each token failure cause maps to its own stable response."""

    def setUp(self) -> None:
        super().setUp()
        self.alice_id, self.alice = self.signup("alice", "alice@x.com")
        self.item_id = self.create_item(self.alice).json()["id"]
        self.url = f"/items/{self.item_id}"

    def _assert_401(self, res, detail: str) -> None:
        self.assertEqual(res.status_code, 401)
        self.assertEqual(res.json()["detail"], detail)
        self.assertEqual(res.headers.get("www-authenticate"), "Bearer")
        self.assertEqual(self.db.query(ItemReport).count(), 1)

    def test_no_header(self) -> None:
        self._assert_401(self.client.delete(self.url), "No token provided")

    def test_scheme_without_token(self) -> None:
        res = self.client.delete(self.url, headers={"Authorization": "Bearer"})
        self._assert_401(res, "Malformed token")

    def test_wrong_scheme(self) -> None:
        res = self.client.delete(self.url, headers={"Authorization": "Basic abc123"})
        self._assert_401(res, "Malformed token")

    def test_garbage_token(self) -> None:
        res = self.client.delete(self.url, headers={"Authorization": "Bearer not.a.jwt"})
        self._assert_401(res, "Invalid or expired token")

    def test_expired_token(self) -> None:
        issued = datetime.now(UTC) - ACCESS_TOKEN_TTL - timedelta(seconds=5)
        token = create_access_token(self.alice_id, "alice", get_settings(), now=issued)
        res = self.client.delete(self.url, headers={"Authorization": f"Bearer {token}"})
        self._assert_401(res, "Invalid or expired token")

    def test_unexpected_verifier_failure_is_500(self) -> None:
        with patch(
            "lostfound.api.deps.decode_access_token",
            side_effect=RuntimeError("signing key unavailable"),
        ):
            res = self.client.delete(self.url, headers=self.alice)
        self.assertEqual(res.status_code, 500)
        self.assertEqual(res.json()["detail"], "Token verification failed")
        self.assertEqual(self.db.query(ItemReport).count(), 1)


if __name__ == "__main__":
    unittest.main()
