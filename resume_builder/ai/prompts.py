from typing import Sequence

from resume_builder.ai.types import ChatMessage

_MAX_JOB_DESCRIPTION_CHARS = 2000


def _job_description_block(job_description: str | None) -> str:
    text = (job_description or "").strip()
    if not text:
        return ""
    if len(text) > _MAX_JOB_DESCRIPTION_CHARS:
        text = text[:_MAX_JOB_DESCRIPTION_CHARS] + "..."
    return f"\n\nTARGET JOB DESCRIPTION:\n{text}"


def build_improve_text_messages(
    text: str,
    context: str,
    job_description: str | None = None,
) -> list[ChatMessage]:
    system = (
        "You are an expert resume writer. "
        "Rewrite the given text so it reads more professional and impactful. "
        "Keep the facts, do not invent numbers, and return only the rewritten text."
    )
    user = (
        f"Improve this {context} text to make it more professional and impactful: \"{text}\""
        f"{_job_description_block(job_description)}"
    )
    return [
        ChatMessage(role="system", content=system),
        ChatMessage(role="user", content=user),
    ]


def build_summary_messages(
    title: str,
    skills: Sequence[str],
    experience_count: int,
    job_description: str | None = None,
) -> list[ChatMessage]:
    experience = str(experience_count) if experience_count > 0 else "multiple"
    system = (
        "You are an expert resume writer. "
        "Write a 2-3 sentence professional summary in the first person implied style. "
        "Return only the summary text."
    )
    user = (
        "Generate a professional summary for a resume: "
        f"Title: {title or 'professional'}, Skills: {', '.join(skills)}, Experience: {experience}"
        f"{_job_description_block(job_description)}"
    )
    return [
        ChatMessage(role="system", content=system),
        ChatMessage(role="user", content=user),
    ]


def build_suggestion_messages(section: str, section_text: str) -> list[ChatMessage]:
    system = (
        "You are an expert resume reviewer. "
        "Give one concise, actionable improvement for the requested resume section."
    )
    user = f"Provide improvement suggestions for the {section} section of this resume."
    if section_text:
        user += f"\n\nRESUME:\n{section_text}"
    return [
        ChatMessage(role="system", content=system),
        ChatMessage(role="user", content=user),
    ]


def build_chat_messages(
    system_prompt: str,
    user_message: str,
    history: Sequence[tuple[str, str]] = (),
) -> list[ChatMessage]:
    messages = [ChatMessage(role="system", content=system_prompt)]
    for role, content in history:
        content = (content or "").strip()
        if not content:
            continue
        messages.append(ChatMessage(role="assistant" if role == "assistant" else "user", content=content))
    messages.append(ChatMessage(role="user", content=user_message))
    return messages
