from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from core.logging import get_logger
from core.models import StandingsMap, TeamSeasonStats
from .exceptions import InvalidPayloadError, UpstreamAPIError
from .http_client import FootballDataClient

log = get_logger(__name__)


@dataclass(frozen=True)
class StandingsOk:
    standings: StandingsMap


@dataclass(frozen=True)
class StandingsDegraded:
    cause: str
    standings: StandingsMap = field(default_factory=dict)


StandingsResult = Union[StandingsOk, StandingsDegraded]


def _to_int(value: Any) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value.strip())
    return 0


def _row_to_stats(row: Dict[str, Any]) -> TeamSeasonStats:
    position = row.get("position")
    return {
        "position": position if isinstance(position, int) else None,
        "points": _to_int(row.get("points")),
        "goalsFor": _to_int(row.get("goalsFor")),
        "goalsAgainst": _to_int(row.get("goalsAgainst")),
        "goalDifference": _to_int(row.get("goalDifference")),
        "won": _to_int(row.get("won")),
        "draw": _to_int(row.get("draw")),
        "lost": _to_int(row.get("lost")),
        "played": _to_int(row.get("playedGames")),
    }


def parse_standings(data: Dict[str, Any]) -> StandingsMap:
    """
    Mappa team_id -> TeamSeasonStats dalla prima tabella di /standings.
    Payload senza tabelle -> mappa vuota; tipi inattesi -> InvalidPayloadError.
    """
    blocks = data.get("standings")
    if blocks is None:
        return {}
    if not isinstance(blocks, list):
        raise InvalidPayloadError("Formato inatteso: 'standings' non è una lista")
    if not blocks:
        return {}
    first = blocks[0]
    if not isinstance(first, dict):
        raise InvalidPayloadError("Formato inatteso: blocco standings non è un oggetto")
    table: Optional[List[Any]] = first.get("table")
    if table is None:
        return {}
    if not isinstance(table, list):
        raise InvalidPayloadError("Formato inatteso: 'table' non è una lista")

    out: StandingsMap = {}
    for row in table:
        if not isinstance(row, dict):
            continue
        team = row.get("team")
        team_id = team.get("id") if isinstance(team, dict) else None
        if not isinstance(team_id, int) or isinstance(team_id, bool):
            continue
        out[team_id] = _row_to_stats(row)
    return out


class FootballDataStandingsProvider:
    def __init__(self, client: Optional[FootballDataClient] = None) -> None:
        self.client = client or FootballDataClient()

    def fetch_standings(self, league: str) -> StandingsResult:
        """
        Best effort: un errore sulla classifica non deve far fallire la richiesta.
        Ritorna StandingsDegraded con mappa vuota e causa loggata.
        """
        try:
            data = self.client.get(f"/competitions/{league}/standings")
            standings = parse_standings(data)
        except UpstreamAPIError as exc:
            return self._degraded(league, str(exc))
        except Exception as exc:
            # qualsiasi payload anomalo (inf, annidamento eccessivo, ...) -> classifica assente
            return self._degraded(league, f"payload standings non valido: {exc}")
        return StandingsOk(standings=standings)

    @staticmethod
    def _degraded(league: str, cause: str) -> StandingsDegraded:
        log.warning(
            "Impossibile recuperare standings, continuo senza: %s",
            cause,
            extra={"league": league, "degraded_cause": cause},
        )
        return StandingsDegraded(cause=cause)
