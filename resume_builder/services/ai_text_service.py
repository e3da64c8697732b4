from __future__ import annotations

import logging
from typing import Sequence

from resume_builder.ai.completion import complete_or_none
from resume_builder.ai.prompts import (
    build_improve_text_messages,
    build_suggestion_messages,
    build_summary_messages,
)
from resume_builder.ai.types import AIClient
from resume_builder.schemas.ai import AIImprovementSuggestion, ATSAnalysis
from resume_builder.schemas.resume import (
    ExperienceDraft,
    ExperienceItem,
    PersonalInfo,
    PersonalInfoDraft,
    ResumeContent,
    ResumeDraft,
    SkillCategory,
    SkillCategoryDraft,
)
from resume_builder.services.ats_scorer import analyze_resume_text
from resume_builder.services.resume_text import flatten_skills, resume_to_text

logger = logging.getLogger(__name__)


def fallback_summary(
    personal_info: PersonalInfo | PersonalInfoDraft,
    experience: Sequence[ExperienceItem | ExperienceDraft],
    skills: Sequence[SkillCategory | SkillCategoryDraft],
) -> str:
    title = (personal_info.title or "").strip() or "professional"
    summary = f"Experienced {title} with a proven track record of success. "

    if experience:
        position = (experience[0].position or "").strip() or "various roles"
        summary += f"Skilled in {position} with strong leadership and analytical capabilities. "

    skill_names = flatten_skills(skills)
    if skill_names:
        summary += f"Proficient in {', '.join(skill_names[:3])} and committed to delivering excellent results."
    else:
        summary += "Committed to continuous professional growth and delivering exceptional results."

    return summary


def fallback_suggestions(section: str) -> list[AIImprovementSuggestion]:
    return [
        AIImprovementSuggestion(
            section=section,
            field=section,
            type="improvement",
            title="General Improvement",
            description=f"Consider enhancing the {section} section with more specific details and achievements.",
            confidence=0.7,
        )
    ]


class AITextService:
    """Prompt construction and fallbacks around the hosted text model."""

    def __init__(self, client: AIClient | None) -> None:
        self._client = client

    @property
    def available(self) -> bool:
        return self._client is not None

    async def improve_text(self, text: str, context: str, job_description: str | None = None) -> str:
        improved = await complete_or_none(
            self._client,
            build_improve_text_messages(text, context, job_description),
            operation="improve_text",
            max_tokens=100,
            temperature=0.7,
        )
        return improved or text

    async def generate_summary(
        self,
        personal_info: PersonalInfo | PersonalInfoDraft,
        experience: Sequence[ExperienceItem | ExperienceDraft],
        skills: Sequence[SkillCategory | SkillCategoryDraft],
        job_description: str | None = None,
    ) -> str:
        summary = await complete_or_none(
            self._client,
            build_summary_messages(
                personal_info.title,
                flatten_skills(skills),
                len(experience),
                job_description,
            ),
            operation="generate_summary",
            max_tokens=150,
            temperature=0.7,
        )
        return summary or fallback_summary(personal_info, experience, skills)

    def analyze_ats(
        self,
        resume: ResumeContent | ResumeDraft | None = None,
        *,
        resume_text: str | None = None,
        job_description: str | None = None,
    ) -> ATSAnalysis:
        text = resume_to_text(resume) if resume is not None else (resume_text or "")
        return analyze_resume_text(text, job_description)

    async def get_suggestions(
        self,
        resume: ResumeContent | ResumeDraft,
        section: str,
    ) -> list[AIImprovementSuggestion]:
        suggestion = await complete_or_none(
            self._client,
            build_suggestion_messages(section, resume_to_text(resume)),
            operation="suggestions",
            max_tokens=80,
            temperature=0.6,
        )
        if not suggestion:
            return fallback_suggestions(section)
        return [
            AIImprovementSuggestion(
                section=section,
                field=section,
                type="improvement",
                title="AI Suggestion",
                description=suggestion,
                confidence=0.8,
            )
        ]
