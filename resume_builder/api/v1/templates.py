from fastapi import APIRouter

from resume_builder.templates import Template, list_templates

router = APIRouter()


@router.get("/templates", response_model=list[Template])
async def get_templates():
    return list_templates()
