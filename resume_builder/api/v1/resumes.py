from fastapi import APIRouter, Depends
from fastapi.responses import Response

from resume_builder.api.v1.deps import get_store
from resume_builder.core.errors import NotFoundError
from resume_builder.schemas.ai import MessageResponse
from resume_builder.schemas.resume import Resume, ResumeCreate, ResumeUpdate
from resume_builder.services.pdf_export import pdf_filename, render_resume_pdf
from resume_builder.storage.resume_store import ResumeStore

router = APIRouter()

RESUME_NOT_FOUND = "Resume not found"


def _require_resume(store: ResumeStore, resume_id: str) -> Resume:
    resume = store.get_resume(resume_id)
    if resume is None:
        raise NotFoundError(RESUME_NOT_FOUND)
    return resume


@router.get("/resumes/user/{user_id}", response_model=list[Resume])
def list_user_resumes(user_id: str, store: ResumeStore = Depends(get_store)):
    return store.list_resumes_by_user(user_id)


@router.get("/resumes/{resume_id}", response_model=Resume)
def get_resume(resume_id: str, store: ResumeStore = Depends(get_store)):
    return _require_resume(store, resume_id)


@router.post("/resumes", response_model=Resume)
def create_resume(payload: ResumeCreate, store: ResumeStore = Depends(get_store)):
    return store.create_resume(payload)


@router.put("/resumes/{resume_id}", response_model=Resume)
def update_resume(resume_id: str, payload: ResumeUpdate, store: ResumeStore = Depends(get_store)):
    resume = store.update_resume(resume_id, payload)
    if resume is None:
        raise NotFoundError(RESUME_NOT_FOUND)
    return resume


@router.delete("/resumes/{resume_id}", response_model=MessageResponse)
def delete_resume(resume_id: str, store: ResumeStore = Depends(get_store)):
    if not store.delete_resume(resume_id):
        raise NotFoundError(RESUME_NOT_FOUND)
    return MessageResponse(message="Resume deleted successfully")


@router.get("/resumes/{resume_id}/pdf", response_class=Response)
def export_resume_pdf(resume_id: str, store: ResumeStore = Depends(get_store)):
    resume = _require_resume(store, resume_id)
    return Response(
        content=render_resume_pdf(resume),
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{pdf_filename(resume)}"'},
    )
