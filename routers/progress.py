# routers/progress.py
from typing import Annotated

from fastapi import APIRouter, Depends

from deps.identity import current_user_id
from progress import ProgressStore, get_progress_store
from schemas.progress import ProgressEvent, ProgressSnapshot

router = APIRouter(prefix="/progress", tags=["progress"])

UserId = Annotated[str, Depends(current_user_id)]
Store = Annotated[ProgressStore, Depends(get_progress_store)]


@router.get("", response_model=ProgressSnapshot)
def get_progress(user_id: UserId, store: Store):
    return store.load(user_id)


@router.post("", response_model=ProgressSnapshot)
def save_progress(event: ProgressEvent, user_id: UserId, store: Store):
    return store.save(user_id, event)
