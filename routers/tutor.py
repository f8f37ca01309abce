# routers/tutor.py
from fastapi import APIRouter

import tutor
from schemas.tutor import AnswerBundle, AskRequest

router = APIRouter(prefix="/ai", tags=["ai"])


@router.post("/ask", response_model=AnswerBundle)
def ask_question(req: AskRequest):
    # Pre-defined answers for common questions; an LLM could sit behind tutor.answer later
    return tutor.answer(req.question, req.context)
