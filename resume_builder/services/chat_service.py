from __future__ import annotations

import json
import logging
import time
from typing import Any, Callable, Sequence

from resume_builder.ai.completion import complete_or_none
from resume_builder.ai.prompts import build_chat_messages
from resume_builder.ai.types import AIClient
from resume_builder.core.config import settings
from resume_builder.schemas.ai import ChatHistoryMessage, ChatResponse
from resume_builder.schemas.resume import ExperienceDraft, PersonalInfoDraft, ResumeDraft
from resume_builder.utils.events import log_event, short_hash

logger = logging.getLogger("resume_builder.chat")

IMPROVEMENT = "improvement"
ATS_OPTIMIZATION = "ats_optimization"
SKILLS_GUIDANCE = "skills_guidance"
SUMMARY_HELP = "summary_help"
EXPERIENCE_HELP = "experience_help"
FORMATTING_DESIGN = "formatting_design"
GENERAL = "general"

ACTION_RUN_ATS = "Run ATS analysis"
ACTION_GENERATE_SUMMARY = "Use AI to generate a professional summary"
ACTION_IMPROVE_EXPERIENCE = "Use AI text improvement for experience"
ACTION_SKILL_SUGGESTIONS = "Get skill optimization suggestions"

_MAX_HISTORY_TURNS = 4
_MAX_SUGGESTIONS = 5
_MAX_ACTIONS = 3
_MODEL_CONFIDENCE = 0.9


def _contains(*needles: str) -> Callable[[str], bool]:
    def predicate(lowered: str) -> bool:
        return any(needle in lowered for needle in needles)

    return predicate


# First matching rule wins.
INTENT_RULES: tuple[tuple[Callable[[str], bool], str], ...] = (
    (_contains("improve", "better"), IMPROVEMENT),
    (_contains("ats", "keywords"), ATS_OPTIMIZATION),
    (_contains("skill"), SKILLS_GUIDANCE),
    (_contains("summary", "objective"), SUMMARY_HELP),
    (_contains("experience"), EXPERIENCE_HELP),
    (_contains("template", "format"), FORMATTING_DESIGN),
)

# Canned answers are picked by their own keyword order, not by intent priority.
FALLBACK_RULES: tuple[tuple[Callable[[str], bool], str], ...] = (
    (_contains("experience"), EXPERIENCE_HELP),
    (_contains("summary"), SUMMARY_HELP),
    (_contains("ats", "keywords"), ATS_OPTIMIZATION),
)

DIRECT_ANSWERS: dict[str, str] = {
    EXPERIENCE_HELP: (
        "Use action verbs and quantify outcomes (e.g., 'Reduced costs by 18%'). "
        "Focus bullets on impact, not tasks."
    ),
    SUMMARY_HELP: "Write 2-3 sentences: title, years, top achievements, and target role. Keep it ATS-friendly.",
    SKILLS_GUIDANCE: (
        "Group skills by Technical/Soft, mirror keywords from the target JD, "
        "and keep names standard (e.g., React, Node.js, SQL)."
    ),
    ATS_OPTIMIZATION: (
        "Extract keywords from target JDs, use standard titles, avoid tables/graphics, "
        "and keep layout simple for ATS."
    ),
}
_DEFAULT_DIRECT_ANSWER = (
    "Tell me which section (summary, experience, skills, ATS) you want to improve and your target role. "
    "I will give focused steps."
)

FALLBACK_RESPONSES: dict[str, ChatResponse] = {
    ATS_OPTIMIZATION: ChatResponse(
        message=(
            "Pull keywords from target job descriptions, use standard skill names, "
            "and keep formatting simple for ATS parsing."
        ),
        suggestions=["Extract keywords from JD", "Avoid tables/graphics", "Use standard titles"],
        actions=[ACTION_RUN_ATS],
        confidence=0.9,
    ),
    SUMMARY_HELP: ChatResponse(
        message="Write 2-3 concise sentences: title, years, top achievements, and target role.",
        suggestions=["Lead with title/years", "Include 2-3 strengths", "Tailor to target role"],
        actions=[ACTION_GENERATE_SUMMARY],
        confidence=0.9,
    ),
    EXPERIENCE_HELP: ChatResponse(
        message=(
            "Focus on achievements using action verbs and numbers. Example: 'Reduced page load time by 40% "
            "by optimizing bundle splitting and caching.'"
        ),
        suggestions=["Start bullets with verbs", "Quantify results", "Show impact"],
        actions=[ACTION_IMPROVE_EXPERIENCE],
        confidence=0.9,
    ),
    GENERAL: ChatResponse(
        message=(
            "Tell me which section you want to improve (summary, experience, skills, ATS). "
            "I will give focused, actionable steps."
        ),
        suggestions=["Choose a section to focus", "Share target job title/JD"],
        actions=[ACTION_RUN_ATS, "Generate a professional summary"],
        confidence=0.85,
    ),
}


def classify_intent(message: str) -> str:
    lowered = (message or "").lower()
    for predicate, intent in INTENT_RULES:
        if predicate(lowered):
            return intent
    return GENERAL


def fallback_category(message: str) -> str:
    lowered = (message or "").lower()
    for predicate, category in FALLBACK_RULES:
        if predicate(lowered):
            return category
    return GENERAL


def fallback_response(message: str) -> ChatResponse:
    return FALLBACK_RESPONSES[fallback_category(message)].model_copy(deep=True)


def direct_answer(message: str) -> str:
    return DIRECT_ANSWERS.get(classify_intent(message), _DEFAULT_DIRECT_ANSWER)


def extract_suggestions(message: str) -> list[str]:
    lowered = message.lower()
    suggestions: list[str] = []
    if "experience" in lowered:
        suggestions.extend(["Start bullets with strong action verbs", "Add metrics (e.g., +25% conversion)"])
    if "skill" in lowered:
        suggestions.extend(["Group skills by Technical/Soft", "Match skills to JD keywords"])
    if "summary" in lowered:
        suggestions.append("Include title, years of experience, 2-3 key strengths")
    if "ats" in lowered or "keywords" in lowered:
        suggestions.extend(["Add industry keywords from target JD", "Keep layout ATS-friendly"])
    if len(suggestions) < 3:
        suggestions.extend(["Ensure consistent formatting", "Keep resume to 1-2 pages"])
    return suggestions[:_MAX_SUGGESTIONS]


def extract_actions(message: str) -> list[str]:
    lowered = message.lower()
    actions: list[str] = []
    if "summary" in lowered:
        actions.append(ACTION_GENERATE_SUMMARY)
    if "ats" in lowered or "keywords" in lowered:
        actions.append(ACTION_RUN_ATS)
    if "improve" in lowered or "experience" in lowered:
        actions.append(ACTION_IMPROVE_EXPERIENCE)
    if "skill" in lowered:
        actions.append(ACTION_SKILL_SUGGESTIONS)
    return actions[:_MAX_ACTIONS]


def describe_resume(resume: ResumeDraft | None) -> str:
    if resume is None:
        return "no resume data"
    parts: list[str] = []
    if resume.personal_info.title:
        parts.append(f"title={resume.personal_info.title}")
    parts.append(f"experience={len(resume.experience)}")
    parts.append(f"skills={len(resume.skills)}")
    parts.append(f"education={len(resume.education)}")
    return ", ".join(parts)


def build_system_prompt(resume: ResumeDraft | None, context: str | None = None) -> str:
    parts = [
        "You are an expert resume and job search assistant.",
        "Answer directly, be concise, and provide actionable steps and examples.",
    ]
    if resume is not None:
        if resume.personal_info.title:
            parts.append(f"The user target role is {resume.personal_info.title}.")
        parts.append(f"Resume overview: {describe_resume(resume)}.")
    if context:
        parts.append(f"Section content: {context}")
    return " ".join(parts)


class AIChatService:
    """Resume assistant chat: keyword intent rules plus model or canned answers."""

    def __init__(self, client: AIClient | None) -> None:
        self._client = client

    async def chat(
        self,
        message: str,
        resume_data: ResumeDraft | None = None,
        history: Sequence[ChatHistoryMessage] = (),
        *,
        context: str | None = None,
    ) -> ChatResponse:
        started_at = time.perf_counter()
        user_message = (message or "").strip()
        intent = classify_intent(user_message)

        recent = [(turn.role, turn.content) for turn in list(history)[-_MAX_HISTORY_TURNS:]]
        messages = build_chat_messages(build_system_prompt(resume_data, context), user_message, recent)
        reply = await complete_or_none(
            self._client,
            messages,
            operation="chat",
            max_tokens=256,
            temperature=0.7,
        )

        if reply is None:
            response = fallback_response(user_message)
            source = "fallback"
        else:
            response = ChatResponse(
                message=reply or direct_answer(user_message),
                suggestions=extract_suggestions(user_message),
                actions=extract_actions(user_message),
                confidence=_MODEL_CONFIDENCE,
            )
            source = "model"

        log_event(
            logger,
            "chat_request",
            intent=intent,
            source=source,
            history_turns=len(recent),
            message_len=len(user_message),
            message_hash=short_hash(user_message),
            duration_ms=int((time.perf_counter() - started_at) * 1000),
        )
        return response

    async def section_advice(self, section: str, content: Any) -> ChatResponse:
        message = f"Give me specific advice on improving my {section} section"
        return await self.chat(message, context=_render_content(content))

    async def career_advice(self, job_title: str, experience: Sequence[ExperienceDraft]) -> ChatResponse:
        message = (
            f"I'm applying for {job_title} positions. "
            "What specific advice do you have for my resume based on my experience?"
        )
        resume = ResumeDraft(
            personal_info=PersonalInfoDraft(title=job_title),
            experience=list(experience),
        )
        return await self.chat(message, resume)


def _render_content(content: Any) -> str:
    if isinstance(content, str):
        text = content.strip()
    else:
        text = json.dumps(content, ensure_ascii=False, default=str)
    limit = settings.log_message_max_chars
    if len(text) > limit:
        text = text[:limit] + "..."
    return text
