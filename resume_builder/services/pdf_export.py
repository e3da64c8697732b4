from __future__ import annotations

import re
from io import BytesIO

from reportlab.lib.pagesizes import LETTER
from reportlab.lib.units import inch
from reportlab.pdfgen import canvas

from resume_builder.schemas.resume import ResumeContent

FONT_BODY = "Helvetica"
FONT_BOLD = "Helvetica-Bold"
SIZE_NAME = 20
SIZE_TITLE = 14
SIZE_SECTION = 12
SIZE_ITEM = 11
SIZE_BODY = 10
MARGIN = 0.75 * inch
BULLET_INDENT = 12
BULLET_CHAR = "•"

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9_.-]+")


def pdf_filename(resume: ResumeContent) -> str:
    info = resume.personal_info
    first = _UNSAFE_FILENAME_CHARS.sub("", info.first_name.replace(" ", "_")) or "Resume"
    last = _UNSAFE_FILENAME_CHARS.sub("", info.last_name.replace(" ", "_"))
    stem = f"{first}_{last}" if last else first
    return f"{stem}_Resume.pdf"


def render_resume_pdf(resume: ResumeContent) -> bytes:
    """Render a resume to a single-column PDF document."""
    buf = BytesIO()
    c = canvas.Canvas(buf, pagesize=LETTER)
    width, height = LETTER
    max_width = width - 2 * MARGIN
    y = height - MARGIN

    def new_page() -> None:
        nonlocal y
        c.showPage()
        y = height - MARGIN

    def ensure_space(points: float) -> None:
        if y - points <= MARGIN:
            new_page()

    def wrap_text(text: str, font: str, size: float, avail_width: float) -> list[str]:
        words = text.split()
        if not words:
            return []
        lines: list[str] = []
        cur = words[0]
        for word in words[1:]:
            test = f"{cur} {word}"
            if c.stringWidth(test, font, size) <= avail_width:
                cur = test
            else:
                lines.append(cur)
                cur = word
        lines.append(cur)
        return lines

    def draw_text(text: str, *, font: str = FONT_BODY, size: float = SIZE_BODY, x: float = MARGIN) -> None:
        nonlocal y
        leading = size * 1.35
        for line in wrap_text(text, font, size, max_width - (x - MARGIN)):
            ensure_space(leading)
            c.setFont(font, size)
            c.drawString(x, y, line)
            y -= leading

    def draw_heading(text: str) -> None:
        nonlocal y
        ensure_space(SIZE_SECTION * 4)
        y -= 6
        c.setFont(FONT_BOLD, SIZE_SECTION)
        c.drawString(MARGIN, y, text)
        y -= 4
        c.setLineWidth(0.5)
        c.line(MARGIN, y, width - MARGIN, y)
        y -= SIZE_SECTION + 2

    def draw_row(left: str, right: str = "") -> None:
        nonlocal y
        ensure_space(SIZE_ITEM * 2)
        c.setFont(FONT_BOLD, SIZE_ITEM)
        c.drawString(MARGIN, y, left)
        if right:
            c.setFont(FONT_BODY, SIZE_BODY)
            c.drawRightString(width - MARGIN, y, right)
        y -= SIZE_ITEM * 1.35

    def draw_bullets(bullets: list[str]) -> None:
        nonlocal y
        for bullet in bullets:
            if not bullet.strip():
                continue
            ensure_space(SIZE_BODY * 1.35)
            c.setFont(FONT_BODY, SIZE_BODY)
            c.drawString(MARGIN + 4, y, BULLET_CHAR)
            draw_text(bullet, x=MARGIN + BULLET_INDENT)

    def date_range(start: str | None, end: str | None) -> str:
        start = (start or "").strip()
        end = (end or "").strip()
        if start and end:
            return f"{start} - {end}"
        return start or end

    info = resume.personal_info
    c.setTitle(f"{info.full_name} Resume")

    c.setFont(FONT_BOLD, SIZE_NAME)
    c.drawString(MARGIN, y, info.full_name)
    y -= SIZE_NAME
    if info.title:
        draw_text(info.title, size=SIZE_TITLE)
    contact = " | ".join(part for part in (info.email, info.phone, info.location) if part)
    if contact:
        draw_text(contact)
    for link in (info.linkedin, info.website):
        if link:
            draw_text(link)

    if info.summary:
        draw_heading("PROFESSIONAL SUMMARY")
        draw_text(info.summary)

    if resume.experience:
        draw_heading("WORK EXPERIENCE")
        for exp in resume.experience:
            end = "Present" if exp.current else exp.end_date
            draw_row(exp.position, date_range(exp.start_date, end))
            draw_text(" | ".join(part for part in (exp.company, exp.location) if part))
            draw_bullets(exp.description)
            y -= 4

    if resume.education:
        draw_heading("EDUCATION")
        for edu in resume.education:
            draw_row(edu.degree, date_range(edu.start_date, edu.end_date or "Present"))
            draw_text(" | ".join(part for part in (edu.institution, edu.location) if part))
            if edu.gpa:
                draw_text(f"GPA: {edu.gpa}")
            draw_bullets(edu.description or [])
            y -= 4

    if resume.skills:
        draw_heading("TECHNICAL SKILLS")
        for category in resume.skills:
            draw_text(f"{category.category}: {', '.join(category.skills)}")

    if resume.projects:
        draw_heading("PROJECTS")
        for project in resume.projects:
            draw_row(project.name, date_range(project.start_date, project.end_date))
            draw_text(project.description)
            if project.technologies:
                draw_text(f"Technologies: {', '.join(project.technologies)}")
            y -= 4

    if resume.certifications:
        draw_heading("CERTIFICATIONS")
        for cert in resume.certifications:
            draw_row(cert.name, cert.date)
            draw_text(cert.issuer)

    if resume.achievements:
        draw_heading("ACHIEVEMENTS")
        for achievement in resume.achievements:
            draw_row(achievement.title, achievement.date)
            draw_text(achievement.description)

    c.save()
    return buf.getvalue()
