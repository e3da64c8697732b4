from resume_builder.core.config import settings
from resume_builder.main import app


def _registered_paths() -> set[str]:
    return {route.path for route in app.routes}


def test_resume_builder_routes_are_registered() -> None:
    prefix = settings.api_prefix
    expected = {
        "/health",
        "/users",
        "/users/{user_id}",
        "/templates",
        "/resumes",
        "/resumes/{resume_id}",
        "/resumes/user/{user_id}",
        "/resumes/{resume_id}/pdf",
        "/ai/improve-text",
        "/ai/generate-summary",
        "/ai/analyze-ats",
        "/ai/suggestions",
        "/ai/chat",
        "/ai/chat/section-advice",
        "/ai/chat/career-advice",
    }
    missing = {prefix + path for path in expected} - _registered_paths()
    assert not missing


def test_api_prefix_is_rooted() -> None:
    assert settings.api_prefix.startswith("/")
