import unittest

from tests.base import ApiTestCase


class TestUserUpsert(ApiTestCase):
    def test_second_upsert_reports_existing(self):
        first = self.client.patch(
            "/users/a@x.com", json={"name": "Ada", "photo": "ada.png"}
        )
        second = self.client.patch("/users/a@x.com", json={"name": "Someone else"})

        self.assertEqual(first.status_code, 201)
        self.assertTrue(first.json()["success"])
        self.assertEqual(second.status_code, 200)
        self.assertEqual(
            second.json(),
            {"success": False, "message": "user already exists", "data": None},
        )
        self.assertEqual(self.db.users.count_documents({"email": "a@x.com"}), 1)
        self.assertEqual(self.db.users.find_one({"email": "a@x.com"})["name"], "Ada")

    def test_upsert_without_body(self):
        response = self.client.patch("/users/b@x.com")
        self.assertEqual(response.status_code, 201)
        self.assertIsNotNone(self.db.users.find_one({"email": "b@x.com"}))

    def test_upsert_cannot_self_grant_admin(self):
        self.client.patch("/users/c@x.com", json={"name": "C", "role": "admin"})
        self.assertIsNone(self.db.users.find_one({"email": "c@x.com"}).get("role"))


class TestLoginFlow(ApiTestCase):
    def test_fresh_user_is_not_admin(self):
        self.client.patch("/users/a@x.com", json={"name": "Ada"})
        token_response = self.client.post("/jwt", json={"email": "a@x.com"})
        self.assertEqual(token_response.status_code, 200)
        token = token_response.json()["data"]["token"]

        response = self.client.get(
            "/user/admin/a@x.com", headers={"Authorization": f"Bearer {token}"}
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertTrue(body["success"])
        self.assertIs(body["data"], False)

    def test_admin_check_reports_true_for_admin(self):
        admin = self.add_admin("boss@x.com")
        body = self.client.get(
            f"/user/admin/{admin}", headers=self.auth_headers(admin)
        ).json()
        self.assertIs(body["data"], True)

    def test_jwt_requires_email(self):
        response = self.client.post("/jwt", json={"name": "nobody"})
        self.assertEqual(response.status_code, 400)

    def test_log_out(self):
        response = self.client.get("/log-out")
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.json()["success"])


class TestUserAdministration(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.headers = self.auth_headers(self.add_admin())
        self.user_id = self.add_user("member@x.com")

    def test_list_users(self):
        body = self.client.get("/users", headers=self.headers).json()
        emails = {user["email"] for user in body["data"]}
        self.assertEqual(emails, {"admin@bistro.com", "member@x.com"})

    def test_promote_user(self):
        response = self.client.patch(
            f"/user/update/role/{self.user_id}", headers=self.headers
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["data"]["modifiedCount"], 1)
        self.assertEqual(self.db.users.find_one({"_id": self.user_id})["role"], "admin")

    def test_delete_user(self):
        response = self.client.delete(f"/user/delete/{self.user_id}", headers=self.headers)
        self.assertEqual(response.json()["data"], {"deletedCount": 1})
        self.assertIsNone(self.db.users.find_one({"_id": self.user_id}))


if __name__ == "__main__":
    unittest.main()
