# routers/health.py
from fastapi import APIRouter

from config import APP_NAME, APP_VERSION
from schemas.health import HealthOut

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthOut)
def health_check():
    return {"status": "ok", "version": APP_VERSION, "service": APP_NAME}
