from .ai import (
    AIImprovementSuggestion,
    ATSAnalysis,
    AnalyzeATSRequest,
    CareerAdviceRequest,
    ChatHistoryMessage,
    ChatRequest,
    ChatResponse,
    FormattingReport,
    GenerateSummaryRequest,
    GenerateSummaryResponse,
    ImproveTextRequest,
    ImproveTextResponse,
    MessageResponse,
    SectionAdviceRequest,
    SuggestionsRequest,
)
from .resume import (
    AchievementDraft,
    AchievementItem,
    CertificationDraft,
    CertificationItem,
    EducationDraft,
    EducationItem,
    ExperienceDraft,
    ExperienceItem,
    PersonalInfo,
    PersonalInfoDraft,
    ProjectDraft,
    ProjectItem,
    Resume,
    ResumeContent,
    ResumeCreate,
    ResumeDraft,
    ResumeUpdate,
    SkillCategory,
    SkillCategoryDraft,
)
from .user import User, UserCreate

__all__ = [
    "AIImprovementSuggestion",
    "ATSAnalysis",
    "AnalyzeATSRequest",
    "CareerAdviceRequest",
    "ChatHistoryMessage",
    "ChatRequest",
    "ChatResponse",
    "FormattingReport",
    "GenerateSummaryRequest",
    "GenerateSummaryResponse",
    "ImproveTextRequest",
    "ImproveTextResponse",
    "MessageResponse",
    "SectionAdviceRequest",
    "SuggestionsRequest",
    "AchievementDraft",
    "AchievementItem",
    "CertificationDraft",
    "CertificationItem",
    "EducationDraft",
    "EducationItem",
    "ExperienceDraft",
    "ExperienceItem",
    "PersonalInfo",
    "PersonalInfoDraft",
    "ProjectDraft",
    "ProjectItem",
    "Resume",
    "ResumeContent",
    "ResumeCreate",
    "ResumeDraft",
    "ResumeUpdate",
    "SkillCategory",
    "SkillCategoryDraft",
    "User",
    "UserCreate",
]
