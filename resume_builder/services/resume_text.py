from __future__ import annotations

from typing import Iterable

from resume_builder.schemas.resume import ResumeContent, ResumeDraft, SkillCategory, SkillCategoryDraft


def flatten_skills(skills: Iterable[SkillCategory | SkillCategoryDraft]) -> list[str]:
    names: list[str] = []
    for category in skills:
        names.extend(skill.strip() for skill in category.skills if skill and skill.strip())
    return names


def _date_range(start: str | None, end: str | None, *, current: bool = False) -> str:
    start = (start or "").strip()
    end = "Present" if current else (end or "").strip()
    if start and end:
        return f"{start} - {end}"
    return start or end


def _join(*parts: str | None, sep: str = " | ") -> str:
    return sep.join(part.strip() for part in parts if part and part.strip())


def resume_to_text(resume: ResumeContent | ResumeDraft) -> str:
    """Render structured resume data as newline-separated plain text."""
    info = resume.personal_info
    lines: list[str] = []

    name = _join(info.first_name, info.last_name, sep=" ")
    if name:
        lines.append(name)
    if info.title:
        lines.append(info.title)
    if info.email:
        lines.append(f"Email: {info.email}")
    if info.phone:
        lines.append(f"Phone: {info.phone}")
    if info.location:
        lines.append(f"Location: {info.location}")
    for link in (info.linkedin, info.website):
        if link:
            lines.append(link)

    if info.summary:
        lines.extend(["", "SUMMARY", info.summary])

    if resume.experience:
        lines.extend(["", "EXPERIENCE"])
        for item in resume.experience:
            lines.append(_join(item.position, item.company, item.location))
            dates = _date_range(item.start_date, item.end_date, current=item.current)
            if dates:
                lines.append(dates)
            lines.extend(f"- {bullet}" for bullet in item.description if bullet.strip())

    if resume.education:
        lines.extend(["", "EDUCATION"])
        for item in resume.education:
            lines.append(_join(item.degree, item.institution, item.location))
            dates = _date_range(item.start_date, item.end_date)
            if dates:
                lines.append(dates)
            if item.gpa:
                lines.append(f"GPA: {item.gpa}")
            lines.extend(f"- {bullet}" for bullet in item.description or [] if bullet.strip())

    if resume.skills:
        lines.extend(["", "SKILLS"])
        for category in resume.skills:
            lines.append(f"{category.category}: {', '.join(category.skills)}")

    if resume.projects:
        lines.extend(["", "PROJECTS"])
        for project in resume.projects:
            lines.append(project.name)
            lines.append(project.description)
            if project.technologies:
                lines.append(f"Technologies: {', '.join(project.technologies)}")

    if resume.certifications:
        lines.extend(["", "CERTIFICATIONS"])
        for cert in resume.certifications:
            lines.append(_join(cert.name, cert.issuer, cert.date))

    if resume.achievements:
        lines.extend(["", "ACHIEVEMENTS"])
        for achievement in resume.achievements:
            lines.append(_join(achievement.title, achievement.date))
            lines.append(achievement.description)

    return "\n".join(lines).strip()
