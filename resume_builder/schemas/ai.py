from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import Field, computed_field, field_validator, model_validator

from .resume import CamelModel, ExperienceDraft, PersonalInfoDraft, ResumeDraft, SkillCategoryDraft

SuggestionType = Literal["improvement", "optimization", "grammar", "ats"]
ChatRole = Literal["user", "assistant"]


class ImproveTextRequest(CamelModel):
    text: str = Field(min_length=1, max_length=10000)
    context: str = Field(min_length=1, max_length=200)
    job_description: str | None = Field(default=None, max_length=50000)


class ImproveTextResponse(CamelModel):
    improved_text: str


class GenerateSummaryRequest(CamelModel):
    personal_info: PersonalInfoDraft
    experience: list[ExperienceDraft]
    skills: list[SkillCategoryDraft]
    job_description: str | None = Field(default=None, max_length=50000)


class GenerateSummaryResponse(CamelModel):
    summary: str


class FormattingReport(CamelModel):
    score: int = Field(ge=0, le=100)
    issues: list[str] = Field(default_factory=list)


class ATSAnalysis(CamelModel):
    score: int = Field(ge=0, le=100)
    suggestions: list[str] = Field(default_factory=list)
    keyword_matches: list[str] = Field(default_factory=list)
    missing_keywords: list[str] = Field(default_factory=list)
    formatting: FormattingReport

    @computed_field  # type: ignore[prop-decorator]
    @property
    def keywords(self) -> list[str]:
        return list(self.keyword_matches)


class AnalyzeATSRequest(CamelModel):
    resume_data: ResumeDraft | None = None
    resume_text: str | None = Field(default=None, max_length=100000)
    job_description: str | None = Field(default=None, max_length=50000)

    @model_validator(mode="after")
    def _require_resume(self) -> "AnalyzeATSRequest":
        if self.resume_data is None and not (self.resume_text or "").strip():
            raise ValueError("resumeData or resumeText is required")
        return self


class SuggestionsRequest(CamelModel):
    resume_data: ResumeDraft
    section: str = Field(min_length=1, max_length=100)


class AIImprovementSuggestion(CamelModel):
    section: str
    field: str
    type: SuggestionType
    title: str
    description: str
    suggested_text: str | None = None
    confidence: float = Field(ge=0.0, le=1.0)


class ChatHistoryMessage(CamelModel):
    id: str | None = None
    role: ChatRole
    content: str = Field(max_length=10000)
    timestamp: datetime | None = None


class ChatRequest(CamelModel):
    message: str = Field(min_length=1, max_length=4000)
    resume_data: ResumeDraft | None = None
    conversation_history: list[ChatHistoryMessage] = Field(default_factory=list, max_length=100)

    @field_validator("message")
    @classmethod
    def _strip_message(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("message is required")
        return stripped


class ChatResponse(CamelModel):
    message: str
    suggestions: list[str] = Field(default_factory=list)
    actions: list[str] = Field(default_factory=list)
    confidence: float = Field(ge=0.0, le=1.0)


class SectionAdviceRequest(CamelModel):
    section: str = Field(min_length=1, max_length=100)
    content: str | list[Any] | dict[str, Any]

    @field_validator("content")
    @classmethod
    def _require_content(cls, value: str | list[Any] | dict[str, Any]) -> str | list[Any] | dict[str, Any]:
        if not value:
            raise ValueError("content is required")
        return value


class CareerAdviceRequest(CamelModel):
    job_title: str = Field(min_length=1, max_length=200)
    experience: list[ExperienceDraft] = Field(default_factory=list)


class MessageResponse(CamelModel):
    message: str
