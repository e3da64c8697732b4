"""Deterministic ATS compatibility scoring over plain resume text.

No I/O and no shared state: identical input always yields an identical
analysis because the vocabulary, checks and thresholds below are constants.
"""

from __future__ import annotations

import math
import re
from typing import Callable

from resume_builder.schemas.ai import ATSAnalysis, FormattingReport

KEYWORD_VOCABULARY: tuple[str, ...] = (
    "leadership",
    "management",
    "analysis",
    "communication",
    "teamwork",
    "project",
    "development",
    "strategic",
    "results",
    "achievement",
    "collaboration",
    "problem-solving",
    "innovation",
    "efficiency",
)

MIN_LINE_COUNT = 10
ISSUE_PENALTY = 15
SUGGEST_KEYWORDS_BELOW_SCORE = 70
MIN_KEYWORD_MATCHES = 5

_CONTACT_PATTERN = re.compile(r"email|phone|@")
_EXPERIENCE_PATTERN = re.compile(r"experience|work|employment|job", re.IGNORECASE)
_SKILLS_PATTERN = re.compile(r"skills|technical|technologies", re.IGNORECASE)

ISSUE_MARKUP = "Avoid HTML tags and special characters"
ISSUE_TOO_SHORT = "Resume appears too short - consider adding more sections"
ISSUE_NO_CONTACT = "Missing contact information"
ISSUE_NO_EXPERIENCE = "Missing work experience section"
ISSUE_NO_SKILLS = "Missing skills section"

SUGGESTION_ADD_KEYWORDS = "Add more relevant keywords from job descriptions"
SUGGESTION_FORMATTING = "Improve formatting for better ATS compatibility"
SUGGESTION_INDUSTRY_TERMS = "Include more industry-relevant keywords"
SUGGESTION_QUANTIFY = "Add quantifiable achievements with numbers/percentages"

# Each check flags an issue when its predicate returns True.
FORMATTING_CHECKS: tuple[tuple[Callable[[str], bool], str], ...] = (
    (lambda text: "<" in text or ">" in text, ISSUE_MARKUP),
    (lambda text: len(text.split("\n")) < MIN_LINE_COUNT, ISSUE_TOO_SHORT),
    (lambda text: not _CONTACT_PATTERN.search(text.lower()), ISSUE_NO_CONTACT),
    (lambda text: not _EXPERIENCE_PATTERN.search(text), ISSUE_NO_EXPERIENCE),
    (lambda text: not _SKILLS_PATTERN.search(text), ISSUE_NO_SKILLS),
)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def formatting_issues(resume_text: str) -> list[str]:
    return [message for predicate, message in FORMATTING_CHECKS if predicate(resume_text)]


def formatting_score(issue_count: int) -> int:
    return max(0, 100 - ISSUE_PENALTY * issue_count)


def match_keywords(resume_text: str) -> tuple[list[str], list[str]]:
    """Split the vocabulary into (found, missing), both in vocabulary order."""
    lowered = resume_text.lower()
    found = [keyword for keyword in KEYWORD_VOCABULARY if keyword in lowered]
    missing = [keyword for keyword in KEYWORD_VOCABULARY if keyword not in found]
    return found, missing


def keyword_ratio(match_count: int) -> float:
    return match_count / len(KEYWORD_VOCABULARY)


def overall_score(match_count: int, format_score: int) -> int:
    return round_half_up((keyword_ratio(match_count) * 100 + format_score) / 2)


def build_suggestions(
    resume_text: str,
    *,
    score: int,
    issue_count: int,
    match_count: int,
) -> list[str]:
    suggestions: list[str] = []
    if score < SUGGEST_KEYWORDS_BELOW_SCORE:
        suggestions.append(SUGGESTION_ADD_KEYWORDS)
    if issue_count > 0:
        suggestions.append(SUGGESTION_FORMATTING)
    if match_count < MIN_KEYWORD_MATCHES:
        suggestions.append(SUGGESTION_INDUSTRY_TERMS)
    if "achieved" not in resume_text and "accomplished" not in resume_text:
        suggestions.append(SUGGESTION_QUANTIFY)
    return suggestions


def analyze_resume_text(resume_text: str, job_description: str | None = None) -> ATSAnalysis:
    """Score ``resume_text`` for ATS compatibility.

    ``job_description`` is accepted for interface stability but does not
    affect the result: keywords come from the fixed vocabulary.
    """
    _ = job_description
    text = resume_text or ""

    issues = formatting_issues(text)
    format_score = formatting_score(len(issues))
    found, missing = match_keywords(text)
    score = overall_score(len(found), format_score)

    return ATSAnalysis(
        score=score,
        suggestions=build_suggestions(
            text,
            score=score,
            issue_count=len(issues),
            match_count=len(found),
        ),
        keyword_matches=found,
        missing_keywords=missing,
        formatting=FormattingReport(score=format_score, issues=issues),
    )
