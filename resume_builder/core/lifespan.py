from contextlib import asynccontextmanager
import logging

from resume_builder.core.config import settings
from resume_builder.services.ai_text_service import AITextService
from resume_builder.services.chat_service import AIChatService
from resume_builder.storage.resume_store import ResumeStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    store = getattr(app.state, "store", None)
    if store is None:
        store = ResumeStore(settings.database_path)
        app.state.store = store
    store.open()

    ai_client = app.state.ai_client_factory()
    app.state.ai_client = ai_client
    app.state.text_service = AITextService(ai_client)
    app.state.chat_service = AIChatService(ai_client)
    logger.info(
        "startup_complete db_path=%s ai_enabled=%s",
        store.db_path,
        app.state.text_service.available,
    )

    try:
        yield
    finally:
        store.close()
