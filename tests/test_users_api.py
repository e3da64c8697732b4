import unittest

from api_client import ApiTestCase


class UsersApiTests(ApiTestCase):
    def test_create_user_hides_password(self):
        user = self.create_user()

        self.assertEqual(user["username"], "jane")
        self.assertEqual(user["email"], "jane@example.com")
        self.assertIn("id", user)
        self.assertIn("createdAt", user)
        self.assertNotIn("password", user)
        self.assertNotIn("passwordHash", user)

    def test_get_user(self):
        user = self.create_user()
        response = self.client.get(f"/api/users/{user['id']}")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), user)

    def test_missing_user_is_404(self):
        response = self.client.get("/api/users/missing")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"message": "User not found"})

    def test_duplicate_username_is_409(self):
        self.create_user()
        response = self.client.post(
            "/api/users",
            json={"username": "jane", "email": "second@example.com", "password": "correct-horse"},
        )
        self.assertEqual(response.status_code, 409)
        self.assertIn("already registered", response.json()["message"])

    def test_invalid_payload_is_400_with_errors(self):
        response = self.client.post(
            "/api/users",
            json={"username": "jane", "email": "not-an-email", "password": "correct-horse"},
        )
        self.assertEqual(response.status_code, 400)
        body = response.json()
        self.assertTrue(body["message"].startswith("Invalid request payload"))
        self.assertIn("email", body["message"])
        self.assertTrue(body["errors"])


class HealthAndTemplatesApiTests(ApiTestCase):
    def test_health(self):
        response = self.client.get("/api/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "healthy"})

    def test_templates(self):
        response = self.client.get("/api/templates")
        self.assertEqual(response.status_code, 200)
        templates = response.json()
        self.assertEqual(len(templates), 10)
        self.assertEqual(templates[0]["id"], "modern")
        self.assertEqual(
            {t["id"] for t in templates},
            {"modern", "classic", "creative", "minimal", "executive", "tech", "elegant", "bold", "academic", "startup"},
        )
        self.assertTrue(all(t["name"] and t["description"] for t in templates))

    def test_unknown_route_uses_message_body(self):
        response = self.client.get("/api/nope")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"message": "Not Found"})


if __name__ == "__main__":
    unittest.main()
