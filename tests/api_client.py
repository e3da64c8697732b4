from __future__ import annotations

import os
import tempfile
import unittest

from fastapi.testclient import TestClient

from resume_builder.main import create_app
from resume_builder.storage.resume_store import ResumeStore


class ApiTestCase(unittest.TestCase):
    """Runs each test against a fresh app with its own sqlite file."""

    ai_client = None
    raise_server_exceptions = True

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.store = ResumeStore(os.path.join(self._tmp.name, "api.db"))
        self.app = create_app(store=self.store, ai_client_factory=lambda: self.ai_client)
        self.client = TestClient(self.app, raise_server_exceptions=self.raise_server_exceptions)
        self.client.__enter__()
        self.addCleanup(self.client.__exit__, None, None, None)

    def create_user(self, username: str = "jane", email: str = "jane@example.com") -> dict:
        response = self.client.post(
            "/api/users",
            json={"username": username, "email": email, "password": "correct-horse"},
        )
        self.assertEqual(response.status_code, 200, response.text)
        return response.json()
