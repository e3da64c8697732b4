from __future__ import annotations

from pydantic import BaseModel


class Template(BaseModel):
    id: str
    name: str
    description: str
    preview: str


DEFAULT_TEMPLATE_ID = "modern"

_TEMPLATE_ROWS: tuple[tuple[str, str, str], ...] = (
    ("modern", "Modern", "Clean and professional"),
    ("classic", "Classic", "Traditional layout"),
    ("creative", "Creative", "Eye-catching design"),
    ("minimal", "Minimal", "Clean and simple"),
    ("executive", "Executive", "Premium and sophisticated"),
    ("tech", "Tech", "Modern tech industry style"),
    ("elegant", "Elegant", "Refined and graceful"),
    ("bold", "Bold", "Strong and confident"),
    ("academic", "Academic", "Research and education focused"),
    ("startup", "Startup", "Dynamic and innovative"),
)

TEMPLATES: tuple[Template, ...] = tuple(
    Template(id=template_id, name=name, description=description, preview=f"{template_id}-preview")
    for template_id, name, description in _TEMPLATE_ROWS
)

TEMPLATE_IDS: frozenset[str] = frozenset(template.id for template in TEMPLATES)


def list_templates() -> list[Template]:
    return list(TEMPLATES)


def get_template(template_id: str) -> Template | None:
    normalized = (template_id or "").strip().lower()
    for template in TEMPLATES:
        if template.id == normalized:
            return template
    return None
