import unittest

from pydantic import ValidationError

from resume_builder.schemas import (
    ExperienceItem,
    PersonalInfo,
    ResumeCreate,
    ResumeDraft,
    ResumeUpdate,
    UserCreate,
)
from resume_payloads import sample_resume_payload


class ResumeSchemaTests(unittest.TestCase):
    def test_camel_case_payload_parses_and_dumps_with_aliases(self):
        resume = ResumeCreate.model_validate(sample_resume_payload())

        self.assertEqual(resume.personal_info.first_name, "Jane")
        self.assertEqual(resume.personal_info.full_name, "Jane Doe")
        self.assertEqual(resume.experience[0].start_date, "2021-03")

        dumped = resume.model_dump(by_alias=True)
        self.assertIn("personalInfo", dumped)
        self.assertIn("isPublic", dumped)
        self.assertEqual(dumped["personalInfo"]["firstName"], "Jane")

    def test_personal_info_requires_name_and_email_only(self):
        info = PersonalInfo.model_validate({"firstName": "A", "lastName": "B", "email": "a@b.io"})
        self.assertEqual(info.phone, "")
        self.assertIsNone(info.linkedin)

        with self.assertRaises(ValidationError):
            PersonalInfo.model_validate({"firstName": "A", "email": "a@b.io"})

    def test_invalid_email_is_rejected(self):
        with self.assertRaises(ValidationError):
            PersonalInfo.model_validate({"firstName": "A", "lastName": "B", "email": "not-an-email"})

    def test_blank_url_becomes_none_and_bad_url_is_rejected(self):
        info = PersonalInfo.model_validate(
            {"firstName": "A", "lastName": "B", "email": "a@b.io", "linkedin": "  ", "website": ""}
        )
        self.assertIsNone(info.linkedin)
        self.assertIsNone(info.website)

        with self.assertRaises(ValidationError):
            PersonalInfo.model_validate(
                {"firstName": "A", "lastName": "B", "email": "a@b.io", "website": "ftp://example.com"}
            )

    def test_current_experience_drops_end_date(self):
        item = ExperienceItem.model_validate(
            {"id": "1", "position": "Engineer", "company": "Acme", "endDate": "2024", "current": True}
        )
        self.assertTrue(item.current)
        self.assertIsNone(item.end_date)

    def test_template_is_normalized_and_validated(self):
        resume = ResumeCreate.model_validate(sample_resume_payload(template="Classic"))
        self.assertEqual(resume.template, "classic")

        with self.assertRaises(ValidationError):
            ResumeCreate.model_validate(sample_resume_payload(template="neon"))

    def test_defaults_for_new_resume(self):
        payload = sample_resume_payload()
        for key in ("title", "template", "projects", "achievements"):
            payload.pop(key)
        resume = ResumeCreate.model_validate(payload)

        self.assertEqual(resume.title, "My Resume")
        self.assertEqual(resume.template, "modern")
        self.assertFalse(resume.is_public)
        self.assertEqual(resume.projects, [])

    def test_update_tracks_only_sent_fields(self):
        update = ResumeUpdate.model_validate({"title": "Renamed"})
        self.assertEqual(update.model_fields_set, {"title"})
        self.assertEqual(update.model_dump(exclude_unset=True), {"title": "Renamed"})

    def test_update_rejects_explicit_null(self):
        with self.assertRaises(ValidationError):
            ResumeUpdate.model_validate({"personalInfo": None})

    def test_draft_accepts_blank_section_entries(self):
        draft = ResumeDraft.model_validate(
            {
                "experience": [{"position": "", "company": "", "endDate": "2024", "current": True}],
                "skills": [{"category": "", "skills": []}],
                "projects": [{"name": "", "description": ""}],
            }
        )
        self.assertEqual(draft.experience[0].position, "")
        self.assertIsNone(draft.experience[0].end_date)
        self.assertEqual(draft.skills[0].category, "")

        with self.assertRaises(ValidationError):
            ExperienceItem.model_validate({"id": "1", "position": "", "company": ""})

    def test_draft_accepts_incomplete_personal_info(self):
        draft = ResumeDraft.model_validate({"personalInfo": {"title": "Designer"}})
        self.assertEqual(draft.personal_info.title, "Designer")
        self.assertEqual(draft.personal_info.email, "")
        self.assertEqual(ResumeDraft().experience, [])


class UserSchemaTests(unittest.TestCase):
    def test_valid_user(self):
        user = UserCreate.model_validate({"username": "jane.doe", "email": "jane@example.com", "password": "s3cretpass"})
        self.assertEqual(user.username, "jane.doe")

    def test_short_password_and_bad_username_are_rejected(self):
        with self.assertRaises(ValidationError):
            UserCreate.model_validate({"username": "jane", "email": "jane@example.com", "password": "short"})
        with self.assertRaises(ValidationError):
            UserCreate.model_validate({"username": "jane doe!", "email": "jane@example.com", "password": "longenough"})


if __name__ == "__main__":
    unittest.main()
