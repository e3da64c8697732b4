from __future__ import annotations

import re
from datetime import datetime
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from resume_builder.templates import DEFAULT_TEMPLATE_ID, TEMPLATE_IDS

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def validate_email(value: str) -> str:
    normalized = (value or "").strip()
    if not _EMAIL_RE.match(normalized):
        raise ValueError("must be a valid email address")
    return normalized


def validate_optional_url(value: str | None) -> str | None:
    if value is None:
        return None
    normalized = value.strip()
    if not normalized:
        return None
    parsed = urlparse(normalized)
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise ValueError("must be a valid http(s) URL")
    return normalized


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PersonalInfo(CamelModel):
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: str = Field(max_length=320)
    phone: str = Field(default="", max_length=50)
    location: str = Field(default="", max_length=200)
    title: str = Field(default="", max_length=200)
    summary: str = Field(default="", max_length=5000)
    linkedin: str | None = None
    website: str | None = None
    photo: str | None = None

    @field_validator("email")
    @classmethod
    def _validate_email(cls, value: str) -> str:
        return validate_email(value)

    @field_validator("linkedin", "website")
    @classmethod
    def _validate_urls(cls, value: str | None) -> str | None:
        return validate_optional_url(value)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class ExperienceItem(CamelModel):
    id: str
    position: str = Field(min_length=1)
    company: str = Field(min_length=1)
    start_date: str = ""
    end_date: str | None = None
    current: bool = False
    location: str = ""
    description: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _drop_end_date_when_current(self) -> "ExperienceItem":
        if self.current:
            self.end_date = None
        return self


class EducationItem(CamelModel):
    id: str
    degree: str = Field(min_length=1)
    institution: str = Field(min_length=1)
    start_date: str = ""
    end_date: str | None = None
    location: str = ""
    gpa: str | None = None
    description: list[str] | None = None


class SkillCategory(CamelModel):
    category: str = Field(min_length=1)
    skills: list[str] = Field(default_factory=list)


class ProjectItem(CamelModel):
    id: str
    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    technologies: list[str] = Field(default_factory=list)
    url: str | None = None
    github: str | None = None
    start_date: str | None = None
    end_date: str | None = None

    @field_validator("url", "github")
    @classmethod
    def _validate_urls(cls, value: str | None) -> str | None:
        return validate_optional_url(value)


class CertificationItem(CamelModel):
    id: str
    name: str = Field(min_length=1)
    issuer: str = Field(min_length=1)
    date: str = ""
    expiration_date: str | None = None
    credential_id: str | None = None
    url: str | None = None

    @field_validator("url")
    @classmethod
    def _validate_url(cls, value: str | None) -> str | None:
        return validate_optional_url(value)


class AchievementItem(CamelModel):
    id: str
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    date: str = ""


def _validate_template(value: str) -> str:
    normalized = (value or "").strip().lower()
    if normalized not in TEMPLATE_IDS:
        raise ValueError(f"unknown template '{value}'")
    return normalized


class ResumeContent(CamelModel):
    """Resume sections as edited in the form; also the payload AI endpoints analyze."""

    personal_info: PersonalInfo
    experience: list[ExperienceItem] = Field(default_factory=list)
    education: list[EducationItem] = Field(default_factory=list)
    skills: list[SkillCategory] = Field(default_factory=list)
    projects: list[ProjectItem] = Field(default_factory=list)
    certifications: list[CertificationItem] = Field(default_factory=list)
    achievements: list[AchievementItem] = Field(default_factory=list)


class ResumeCreate(ResumeContent):
    user_id: str = Field(min_length=1)
    title: str = Field(default="My Resume", min_length=1, max_length=200)
    template: str = DEFAULT_TEMPLATE_ID
    is_public: bool = False

    @field_validator("template")
    @classmethod
    def _check_template(cls, value: str) -> str:
        return _validate_template(value)


class ResumeUpdate(CamelModel):
    user_id: str | None = Field(default=None, min_length=1)
    title: str | None = Field(default=None, min_length=1, max_length=200)
    personal_info: PersonalInfo | None = None
    experience: list[ExperienceItem] | None = None
    education: list[EducationItem] | None = None
    skills: list[SkillCategory] | None = None
    projects: list[ProjectItem] | None = None
    certifications: list[CertificationItem] | None = None
    achievements: list[AchievementItem] | None = None
    template: str | None = None
    is_public: bool | None = None

    @field_validator("template")
    @classmethod
    def _check_template(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return _validate_template(value)

    @model_validator(mode="after")
    def _reject_explicit_nulls(self) -> "ResumeUpdate":
        for name in self.model_fields_set:
            if getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self


class ExperienceDraft(CamelModel):
    """Experience entry as the form holds it; blank fields are allowed."""

    id: str = ""
    position: str = ""
    company: str = ""
    start_date: str = ""
    end_date: str | None = None
    current: bool = False
    location: str = ""
    description: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _drop_end_date_when_current(self) -> "ExperienceDraft":
        if self.current:
            self.end_date = None
        return self


class EducationDraft(CamelModel):
    id: str = ""
    degree: str = ""
    institution: str = ""
    start_date: str = ""
    end_date: str | None = None
    location: str = ""
    gpa: str | None = None
    description: list[str] | None = None


class SkillCategoryDraft(CamelModel):
    category: str = ""
    skills: list[str] = Field(default_factory=list)


class ProjectDraft(CamelModel):
    id: str = ""
    name: str = ""
    description: str = ""
    technologies: list[str] = Field(default_factory=list)
    url: str | None = None
    github: str | None = None
    start_date: str | None = None
    end_date: str | None = None


class CertificationDraft(CamelModel):
    id: str = ""
    name: str = ""
    issuer: str = ""
    date: str = ""
    expiration_date: str | None = None
    credential_id: str | None = None
    url: str | None = None


class AchievementDraft(CamelModel):
    id: str = ""
    title: str = ""
    description: str = ""
    date: str = ""


class PersonalInfoDraft(CamelModel):
    """Personal info as it may look mid-edit; AI endpoints accept incomplete drafts."""

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    title: str = ""
    summary: str = ""
    linkedin: str | None = None
    website: str | None = None
    photo: str | None = None


class ResumeDraft(CamelModel):
    personal_info: PersonalInfoDraft = Field(default_factory=PersonalInfoDraft)
    experience: list[ExperienceDraft] = Field(default_factory=list)
    education: list[EducationDraft] = Field(default_factory=list)
    skills: list[SkillCategoryDraft] = Field(default_factory=list)
    projects: list[ProjectDraft] = Field(default_factory=list)
    certifications: list[CertificationDraft] = Field(default_factory=list)
    achievements: list[AchievementDraft] = Field(default_factory=list)


class Resume(ResumeCreate):
    id: str
    created_at: datetime
    updated_at: datetime
