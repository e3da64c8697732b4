from fastapi import APIRouter, Depends, Request

from resume_builder.api.v1.deps import get_chat_service, get_text_service
from resume_builder.core.rate_limit import rate_limit
from resume_builder.schemas.ai import (
    AIImprovementSuggestion,
    AnalyzeATSRequest,
    ATSAnalysis,
    CareerAdviceRequest,
    ChatRequest,
    ChatResponse,
    GenerateSummaryRequest,
    GenerateSummaryResponse,
    ImproveTextRequest,
    ImproveTextResponse,
    SectionAdviceRequest,
    SuggestionsRequest,
)
from resume_builder.services.ai_text_service import AITextService
from resume_builder.services.chat_service import AIChatService

router = APIRouter(prefix="/ai")


@router.post("/improve-text", response_model=ImproveTextResponse)
@rate_limit()
async def improve_text(
    request: Request,
    payload: ImproveTextRequest,
    service: AITextService = Depends(get_text_service),
):
    _ = request
    improved = await service.improve_text(payload.text, payload.context, payload.job_description)
    return ImproveTextResponse(improved_text=improved)


@router.post("/generate-summary", response_model=GenerateSummaryResponse)
@rate_limit()
async def generate_summary(
    request: Request,
    payload: GenerateSummaryRequest,
    service: AITextService = Depends(get_text_service),
):
    _ = request
    summary = await service.generate_summary(
        payload.personal_info,
        payload.experience,
        payload.skills,
        payload.job_description,
    )
    return GenerateSummaryResponse(summary=summary)


@router.post("/analyze-ats", response_model=ATSAnalysis)
@rate_limit()
async def analyze_ats(
    request: Request,
    payload: AnalyzeATSRequest,
    service: AITextService = Depends(get_text_service),
):
    _ = request
    return service.analyze_ats(
        payload.resume_data,
        resume_text=payload.resume_text,
        job_description=payload.job_description,
    )


@router.post("/suggestions", response_model=list[AIImprovementSuggestion])
@rate_limit()
async def suggestions(
    request: Request,
    payload: SuggestionsRequest,
    service: AITextService = Depends(get_text_service),
):
    _ = request
    return await service.get_suggestions(payload.resume_data, payload.section)


@router.post("/chat", response_model=ChatResponse)
@rate_limit()
async def chat(
    request: Request,
    payload: ChatRequest,
    service: AIChatService = Depends(get_chat_service),
):
    _ = request
    return await service.chat(payload.message, payload.resume_data, payload.conversation_history)


@router.post("/chat/section-advice", response_model=ChatResponse)
@rate_limit()
async def section_advice(
    request: Request,
    payload: SectionAdviceRequest,
    service: AIChatService = Depends(get_chat_service),
):
    _ = request
    return await service.section_advice(payload.section, payload.content)


@router.post("/chat/career-advice", response_model=ChatResponse)
@rate_limit()
async def career_advice(
    request: Request,
    payload: CareerAdviceRequest,
    service: AIChatService = Depends(get_chat_service),
):
    _ = request
    return await service.career_advice(payload.job_title, payload.experience)
