from __future__ import annotations

import logging
import time
from typing import Sequence

from resume_builder.ai.types import AIClient, ChatMessage
from resume_builder.utils.events import log_event

logger = logging.getLogger(__name__)


async def complete_or_none(
    client: AIClient | None,
    messages: Sequence[ChatMessage],
    *,
    operation: str,
    max_tokens: int = 256,
    temperature: float = 0.7,
) -> str | None:
    """Run one completion.

    Returns ``None`` when the model is unavailable or the call failed, and the
    stripped reply (possibly empty) otherwise.
    """
    if client is None:
        log_event(logger, "ai_call", operation=operation, status="skipped", error_code="ai_disabled")
        return None

    started = time.perf_counter()
    prompt_len = sum(len(m.content) for m in messages)
    try:
        text = await client.complete(messages, max_tokens=max_tokens, temperature=temperature)
    except Exception as exc:  # noqa: BLE001
        logger.warning("ai_call_failed operation=%s prompt_len=%s: %s", operation, prompt_len, exc)
        log_event(
            logger,
            "ai_call",
            operation=operation,
            status="error",
            error_code="ai_exception",
            latency_ms=int((time.perf_counter() - started) * 1000),
        )
        return None

    text = (text or "").strip()
    log_event(
        logger,
        "ai_call",
        operation=operation,
        status="success" if text else "empty",
        latency_ms=int((time.perf_counter() - started) * 1000),
        prompt_len=prompt_len,
        response_len=len(text),
    )
    return text
