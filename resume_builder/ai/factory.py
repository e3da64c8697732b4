import logging

from resume_builder.ai.config import AIConfig, load_ai_config
from resume_builder.ai.types import AIClient

from resume_builder.ai.providers.openai_provider import OpenAIProvider

logger = logging.getLogger(__name__)

_DISABLED_PROVIDERS = {"none", "off", "disabled", "fallback"}


def _looks_like_placeholder(value: str) -> bool:
    lower = value.strip().lower()
    return lower.startswith("your_") or lower.startswith("replace_") or lower in {"changeme", "todo"}


def get_ai_client(cfg: AIConfig | None = None) -> AIClient | None:
    """Build the configured language-model client, or ``None`` when AI is unavailable."""
    cfg = cfg or load_ai_config()

    if not cfg.enabled or cfg.provider in _DISABLED_PROVIDERS:
        logger.info("AI provider disabled; deterministic fallbacks will be used.")
        return None

    if cfg.provider == "openai":
        if not cfg.api_key or _looks_like_placeholder(cfg.api_key):
            logger.info("OPENAI_API_KEY is not configured; deterministic fallbacks will be used.")
            return None
        return OpenAIProvider(
            model=cfg.model,
            api_key=cfg.api_key,
            base_url=cfg.base_url,
            timeout_s=cfg.timeout_s,
            max_retries=cfg.max_retries,
        )

    raise ValueError(f"Unsupported AI_PROVIDER='{cfg.provider}'")
