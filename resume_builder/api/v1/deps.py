from __future__ import annotations

from fastapi import Request

from resume_builder.services.ai_text_service import AITextService
from resume_builder.services.chat_service import AIChatService
from resume_builder.storage.resume_store import ResumeStore


def get_store(request: Request) -> ResumeStore:
    return request.app.state.store


def get_text_service(request: Request) -> AITextService:
    return request.app.state.text_service


def get_chat_service(request: Request) -> AIChatService:
    return request.app.state.chat_service
