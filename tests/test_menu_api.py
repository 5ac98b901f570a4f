import unittest

from bson import ObjectId

from tests.base import ApiTestCase


class TestPublicMenu(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.db.menu.insert_many(
            [
                {"name": "Caesar Salad", "category": "salad", "price": 12.5},
                {"name": "Margherita", "category": "pizza", "price": 14},
            ]
        )
        self.db.reviews.insert_one(
            {"name": "Jane", "details": "Great soup", "rating": 5}
        )

    def test_liveness(self):
        response = self.client.get("/")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.text, "Bistro boss restaurant server running...")

    def test_list_menu(self):
        response = self.client.get("/menu")
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertTrue(body["success"])
        self.assertEqual([item["name"] for item in body["data"]], ["Caesar Salad", "Margherita"])
        self.assertTrue(ObjectId.is_valid(body["data"][0]["_id"]))

    def test_repeated_reads_match(self):
        first = self.client.get("/menu").json()
        second = self.client.get("/menu").json()
        self.assertEqual(first, second)

    def test_list_reviews(self):
        body = self.client.get("/reviews").json()
        self.assertEqual(len(body["data"]), 1)
        self.assertEqual(body["data"][0]["rating"], 5)

    def test_get_single_item(self):
        item_id = self.db.menu.find_one({"name": "Margherita"})["_id"]
        body = self.client.get(f"/menu/{item_id}").json()
        self.assertEqual(body["data"]["category"], "pizza")

    def test_get_missing_item(self):
        response = self.client.get(f"/menu/{ObjectId()}")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"message": "menu item not found"})


class TestAdminMenu(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.headers = self.auth_headers(self.add_admin())

    def test_add_item(self):
        response = self.client.post(
            "/menu",
            json={"name": "Tiramisu", "category": "dessert", "price": 7.25, "image": "t.png"},
            headers=self.headers,
        )
        self.assertEqual(response.status_code, 201)
        inserted_id = response.json()["data"]["insertedId"]
        stored = self.db.menu.find_one({"_id": ObjectId(inserted_id)})
        self.assertEqual(stored["name"], "Tiramisu")
        self.assertEqual(stored["price"], 7.25)

    def test_update_item_only_touches_sent_fields(self):
        item_id = self.db.menu.insert_one(
            {"name": "Soup", "category": "soup", "price": 5}
        ).inserted_id
        response = self.client.patch(
            f"/menu/{item_id}", json={"price": 6.5}, headers=self.headers
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["data"]["modifiedCount"], 1)
        stored = self.db.menu.find_one({"_id": item_id})
        self.assertEqual(stored["price"], 6.5)
        self.assertEqual(stored["name"], "Soup")

    def test_update_with_empty_body(self):
        item_id = self.db.menu.insert_one({"name": "Soup"}).inserted_id
        response = self.client.patch(f"/menu/{item_id}", json={}, headers=self.headers)
        self.assertEqual(response.status_code, 400)

    def test_update_unknown_item(self):
        response = self.client.patch(
            f"/menu/{ObjectId()}", json={"price": 3}, headers=self.headers
        )
        body = response.json()
        self.assertEqual(response.status_code, 200)
        self.assertFalse(body["success"])
        self.assertEqual(body["data"]["matchedCount"], 0)

    def test_delete_item(self):
        item_id = self.db.menu.insert_one({"name": "Soup"}).inserted_id
        response = self.client.delete(f"/menu/{item_id}", headers=self.headers)
        self.assertEqual(response.json()["data"], {"deletedCount": 1})
        self.assertIsNone(self.db.menu.find_one({"_id": item_id}))

    def test_malformed_id_is_a_store_failure(self):
        response = self.client.delete("/menu/not-an-id", headers=self.headers)
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"message": "database operation failed"})

    def test_missing_name_is_rejected(self):
        response = self.client.post("/menu", json={"price": 3}, headers=self.headers)
        self.assertEqual(response.status_code, 400)
        self.assertEqual(self.db.menu.count_documents({}), 0)

    def test_name_cannot_be_cleared(self):
        item_id = self.db.menu.insert_one({"name": "Soup", "price": 5}).inserted_id
        response = self.client.patch(
            f"/menu/{item_id}", json={"name": None}, headers=self.headers
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(self.db.menu.find_one({"_id": item_id})["name"], "Soup")
        self.assertEqual(self.client.get("/menu").status_code, 200)

    def test_bookkeeping_fields_in_body_are_ignored(self):
        response = self.client.post(
            "/menu",
            json={"name": "Pie", "created_at": "yesterday", "_id": "nope"},
            headers=self.headers,
        )
        self.assertEqual(response.status_code, 201)
        stored = self.db.menu.find_one({"name": "Pie"})
        self.assertIsInstance(stored["_id"], ObjectId)
        self.assertNotEqual(stored["created_at"], "yesterday")


if __name__ == "__main__":
    unittest.main()
