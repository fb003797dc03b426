from datetime import datetime, timezone

from fastapi import APIRouter

from stockdash.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
def health_check():
    settings = get_settings()
    return {
        "status": "ok",
        "app": settings.APP_NAME,
        "environment": settings.ENVIRONMENT,
        "dataDir": settings.DATA_DIR,
        "time": datetime.now(timezone.utc).isoformat(),
    }
