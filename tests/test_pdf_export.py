from resume_builder.schemas import ResumeCreate
from resume_builder.services.pdf_export import pdf_filename, render_resume_pdf
from resume_payloads import sample_resume_payload


def _resume(**overrides) -> ResumeCreate:
    return ResumeCreate.model_validate(sample_resume_payload(**overrides))


def test_render_produces_pdf_document() -> None:
    pdf = render_resume_pdf(_resume())
    assert pdf.startswith(b"%PDF")
    assert b"%%EOF" in pdf[-64:]


def test_minimal_resume_renders() -> None:
    pdf = render_resume_pdf(
        _resume(
            personalInfo={"firstName": "Min", "lastName": "Imal", "email": "min@example.com"},
            experience=[],
            education=[],
            skills=[],
            projects=[],
            certifications=[],
            achievements=[],
        )
    )
    assert pdf.startswith(b"%PDF")


def test_long_resume_spills_onto_more_pages() -> None:
    bullets = ["Shipped features that improved retention across several product lines " * 3] * 20
    experience = [
        {"id": f"exp-{index}", "position": "Engineer", "company": "Acme", "description": bullets}
        for index in range(6)
    ]
    short_pdf = render_resume_pdf(_resume())
    long_pdf = render_resume_pdf(_resume(experience=experience))
    assert len(long_pdf) > len(short_pdf)


def test_filename_uses_first_and_last_name() -> None:
    assert pdf_filename(_resume()) == "Jane_Doe_Resume.pdf"
    odd = _resume(personalInfo={"firstName": "Ana María", "lastName": "O'Neil", "email": "a@b.io"})
    assert pdf_filename(odd) == "Ana_Mara_ONeil_Resume.pdf"
