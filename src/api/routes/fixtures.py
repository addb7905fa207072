from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse, Response

from core.config import Settings, get_settings
from core.leagues import normalize_league
from core.logging import get_logger
from predictions.pipeline import attach_probabilities
from providers.football_data.fixtures_provider import (
    FootballDataFixturesProvider,
    current_week_range,
)
from providers.football_data.http_client import FootballDataClient, sanitize_error_message
from providers.football_data.standings_provider import (
    FootballDataStandingsProvider,
    StandingsDegraded,
)

router = APIRouter(tags=["fixtures"])
logger = get_logger("api.routes.fixtures")

FAILURE_MESSAGE = "Failed to fetch fixtures"


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_fixtures_payload(settings: Settings, league: str) -> Dict[str, Any]:
    """
    Fixtures della settimana corrente + standings + probabilità.
    Le fixtures sono obbligatorie (errore propagato), le standings best effort.
    """
    date_from, date_to = current_week_range()
    client = FootballDataClient(settings)

    fixtures_data = FootballDataFixturesProvider(client).fetch_matches(league, date_from, date_to)
    stats = client.get_stats()
    logger.info(
        "fixtures upstream ok",
        extra={"league": league, "http_status": stats["last_status"], "latency_ms": stats["latency_ms"]},
    )
    standings_result = FootballDataStandingsProvider(client).fetch_standings(league)
    if isinstance(standings_result, StandingsDegraded):
        logger.info("risposta senza standings", extra={"league": league})

    standings = standings_result.standings
    return {
        **fixtures_data,
        "matches": attach_probabilities(fixtures_data["matches"], standings),
        "standings": standings,
        "lastUpdated": _utc_now_iso(),
    }


@router.options("/fixtures", include_in_schema=False)
def fixtures_preflight() -> Response:
    return Response(status_code=200)


@router.get("/fixtures", summary="Fixtures della settimana con probabilità")
def get_fixtures(
    league: Optional[str] = Query(None, description="Codice competizione football-data (default: PL)"),
):
    settings: Optional[Settings] = None
    try:
        settings = get_settings()
        code = normalize_league(league, settings.default_league)
        payload = build_fixtures_payload(settings, code)
        # il render JSON (allow_nan=False) avviene qui: deve restare dentro il try
        return JSONResponse(content=payload, headers={"Cache-Control": settings.cache_control})
    except Exception as exc:
        api_key = settings.football_data_api_key if settings else None
        message = sanitize_error_message(exc, api_key)
        logger.error("Errore recupero fixtures: %s", message)
        return JSONResponse(
            status_code=500,
            content={"error": FAILURE_MESSAGE, "message": message},
        )
