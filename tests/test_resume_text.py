from resume_builder.schemas import ResumeCreate, ResumeDraft, SkillCategory
from resume_builder.services.ats_scorer import analyze_resume_text
from resume_builder.services.resume_text import flatten_skills, resume_to_text
from resume_payloads import sample_resume_payload


def test_flatten_skills_keeps_order_and_drops_blanks() -> None:
    skills = [
        SkillCategory(category="Technical", skills=["Python", " ", "SQL"]),
        SkillCategory(category="Soft", skills=["Mentoring "]),
    ]
    assert flatten_skills(skills) == ["Python", "SQL", "Mentoring"]


def test_resume_text_contains_contact_sections_and_bullets() -> None:
    text = resume_to_text(ResumeCreate.model_validate(sample_resume_payload()))
    lines = text.split("\n")

    assert lines[0] == "Jane Doe"
    assert "Email: jane@example.com" in lines
    assert "Phone: +1 555 0100" in lines
    for heading in ("SUMMARY", "EXPERIENCE", "EDUCATION", "SKILLS", "PROJECTS", "CERTIFICATIONS", "ACHIEVEMENTS"):
        assert heading in lines
    assert "2021-03 - Present" in lines
    assert "- Led development of the billing platform" in lines
    assert "Technical: Python, SQL, Docker, AWS" in lines


def test_rendered_sample_resume_has_no_formatting_issues() -> None:
    text = resume_to_text(ResumeCreate.model_validate(sample_resume_payload()))
    analysis = analyze_resume_text(text)

    assert analysis.formatting.issues == []
    assert "development" in analysis.keyword_matches


def test_empty_draft_renders_empty_text() -> None:
    assert resume_to_text(ResumeDraft()) == ""
