from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from classgrid.core.config import Settings, get_settings

router = APIRouter()


@router.get("/health")
def health() -> dict:
    return {"status": "ok"}


@router.get("/health/live")
def health_live(settings: Settings = Depends(get_settings)) -> dict:
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "days": settings.days,
        "room_count": settings.room_count,
        "max_weekly_load": settings.max_weekly_load,
    }
