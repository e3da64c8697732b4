import os
import sqlite3
import tempfile
import unittest

from resume_builder.core.errors import ConflictError, ValidationFailed
from resume_builder.schemas import ResumeCreate, ResumeUpdate, UserCreate
from resume_builder.storage.resume_store import ResumeStore, hash_password
from resume_payloads import sample_resume_payload


class ResumeStoreTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.db_path = os.path.join(self._tmp.name, "nested", "resumes.db")
        self.store = ResumeStore(self.db_path)
        self.store.open()
        self.addCleanup(self.store.close)
        self.user = self.store.create_user(
            UserCreate(username="jane", email="Jane@Example.com", password="correct-horse")
        )

    def _create_resume(self, **overrides):
        return self.store.create_resume(ResumeCreate.model_validate(sample_resume_payload(self.user.id, **overrides)))

    def test_user_round_trip(self):
        self.assertEqual(self.user.email, "jane@example.com")
        self.assertEqual(self.store.get_user(self.user.id), self.user)
        self.assertEqual(self.store.get_user_by_username("jane"), self.user)
        self.assertEqual(self.store.get_user_by_email("JANE@example.com "), self.user)
        self.assertIsNone(self.store.get_user("missing"))

    def test_duplicate_username_or_email_conflicts(self):
        with self.assertRaises(ConflictError):
            self.store.create_user(UserCreate(username="jane", email="other@example.com", password="password1"))
        with self.assertRaises(ConflictError):
            self.store.create_user(UserCreate(username="other", email="jane@example.com", password="password1"))

    def test_passwords_are_stored_hashed(self):
        conn = sqlite3.connect(self.db_path)
        self.addCleanup(conn.close)
        (stored,) = conn.execute("SELECT password_hash FROM users WHERE id = ?", (self.user.id,)).fetchone()

        self.assertTrue(stored.startswith("pbkdf2_sha256$200000$"))
        self.assertNotIn("correct-horse", stored)

        salt = "00" * 16
        self.assertEqual(hash_password("pw", salt=salt), hash_password("pw", salt=salt))
        self.assertNotEqual(hash_password("pw"), hash_password("pw"))

    def test_create_and_get_resume(self):
        resume = self._create_resume()

        fetched = self.store.get_resume(resume.id)
        self.assertEqual(fetched, resume)
        self.assertEqual(fetched.user_id, self.user.id)
        self.assertEqual(fetched.personal_info.first_name, "Jane")
        self.assertEqual([item.id for item in fetched.experience], ["exp-1", "exp-2"])
        self.assertIsNone(fetched.experience[0].end_date)
        self.assertEqual(fetched.created_at, fetched.updated_at)

    def test_resume_for_unknown_user_is_rejected(self):
        with self.assertRaises(ValidationFailed):
            self.store.create_resume(ResumeCreate.model_validate(sample_resume_payload("ghost")))

    def test_partial_update_keeps_other_sections(self):
        resume = self._create_resume()

        updated = self.store.update_resume(
            resume.id,
            ResumeUpdate.model_validate({"title": "Renamed", "skills": [{"category": "Tools", "skills": ["Git"]}]}),
        )

        self.assertEqual(updated.title, "Renamed")
        self.assertEqual(updated.skills[0].category, "Tools")
        self.assertEqual(updated.experience, resume.experience)
        self.assertEqual(updated.personal_info, resume.personal_info)
        self.assertGreater(updated.updated_at, resume.updated_at)
        self.assertEqual(updated.created_at, resume.created_at)

    def test_update_missing_resume_returns_none(self):
        self.assertIsNone(self.store.update_resume("missing", ResumeUpdate(title="x")))

    def test_list_orders_most_recently_updated_first(self):
        first = self._create_resume(title="First")
        second = self._create_resume(title="Second")
        self.store.update_resume(first.id, ResumeUpdate(is_public=True))

        listed = self.store.list_resumes_by_user(self.user.id)

        self.assertEqual([r.id for r in listed], [first.id, second.id])
        self.assertTrue(listed[0].is_public)
        self.assertEqual(self.store.list_resumes_by_user("nobody"), [])

    def test_delete_resume(self):
        resume = self._create_resume()
        self.assertTrue(self.store.delete_resume(resume.id))
        self.assertFalse(self.store.delete_resume(resume.id))
        self.assertIsNone(self.store.get_resume(resume.id))

    def test_data_survives_reopen(self):
        resume = self._create_resume()
        self.store.close()

        reopened = ResumeStore(self.db_path)
        reopened.open()
        self.addCleanup(reopened.close)
        self.assertEqual(reopened.get_resume(resume.id), resume)


if __name__ == "__main__":
    unittest.main()
