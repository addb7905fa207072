from __future__ import annotations

from fastapi import APIRouter
from core.config import get_settings

router = APIRouter(tags=["health"])

@router.get("/health", summary="Health check")
def health():
    """
    Health endpoint minimale.
    Non chiama football-data: segnala solo se la chiave è configurata.
    """
    try:
        settings = get_settings()
    except ValueError:
        return {"status": "ok", "upstream_configured": False, "default_league": None}
    return {
        "status": "ok",
        "upstream_configured": True,
        "default_league": settings.default_league,
    }
