from .catalog import (
    DEFAULT_TEMPLATE_ID,
    TEMPLATE_IDS,
    TEMPLATES,
    Template,
    get_template,
    list_templates,
)

__all__ = [
    "DEFAULT_TEMPLATE_ID",
    "TEMPLATE_IDS",
    "TEMPLATES",
    "Template",
    "get_template",
    "list_templates",
]
