from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Any, Dict, Optional, Tuple

from core.logging import get_logger
from .exceptions import InvalidPayloadError
from .http_client import FootballDataClient

log = get_logger(__name__)


def current_week_range(today: Optional[date] = None) -> Tuple[str, str]:
    """
    Finestra della settimana corrente: domenica (indice 0) + 7 giorni.
    Le date sono calcolate in UTC e formattate YYYY-MM-DD.
    """
    if today is None:
        today = datetime.now(timezone.utc).date()
    # weekday(): lunedì=0 ... domenica=6 -> indice con domenica=0
    days_since_sunday = (today.weekday() + 1) % 7
    start = today - timedelta(days=days_since_sunday)
    end = start + timedelta(days=7)
    return start.isoformat(), end.isoformat()


class FootballDataFixturesProvider:
    def __init__(self, client: Optional[FootballDataClient] = None) -> None:
        self.client = client or FootballDataClient()

    def fetch_matches(self, league: str, date_from: str, date_to: str) -> Dict[str, Any]:
        """
        Ritorna il payload grezzo di /competitions/{league}/matches.
        Qualsiasi errore upstream viene propagato: senza fixtures la richiesta fallisce.
        """
        params = {"dateFrom": date_from[:10], "dateTo": date_to[:10]}
        data = self.client.get(f"/competitions/{league}/matches", params=params)
        matches = data.get("matches")
        if not isinstance(matches, list):
            raise InvalidPayloadError("Formato inatteso: 'matches' non è una lista")
        log.info(
            "fixtures ricevute count=%s",
            len(matches),
            extra={"league": league, "date_from": date_from, "date_to": date_to},
        )
        return data
