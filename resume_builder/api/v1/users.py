from fastapi import APIRouter, Depends

from resume_builder.api.v1.deps import get_store
from resume_builder.core.errors import NotFoundError
from resume_builder.schemas.user import User, UserCreate
from resume_builder.storage.resume_store import ResumeStore

router = APIRouter()


@router.post("/users", response_model=User)
def create_user(payload: UserCreate, store: ResumeStore = Depends(get_store)):
    return store.create_user(payload)


@router.get("/users/{user_id}", response_model=User)
def get_user(user_id: str, store: ResumeStore = Depends(get_store)):
    user = store.get_user(user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user
