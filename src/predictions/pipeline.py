from __future__ import annotations

from typing import Any, List, Optional

from core.logging import get_logger
from core.models import Fixture, StandingsMap, TeamSeasonStats
from predictions.model import calculate_probabilities

logger = get_logger("predictions.pipeline")

UNRESOLVED_STATUSES = frozenset({"SCHEDULED", "TIMED"})


def _lookup(standings: StandingsMap, team: Any) -> Optional[TeamSeasonStats]:
    if not isinstance(team, dict):
        return None
    return standings.get(team.get("id"))


def attach_probabilities(matches: List[Any], standings: StandingsMap) -> List[Any]:
    """
    Aggiunge il blocco 'probabilities' alle partite SCHEDULED/TIMED.
    Le altre passano invariate; l'input non viene modificato.
    """
    out: List[Any] = []
    enriched = 0
    for match in matches:
        if not isinstance(match, dict) or match.get("status") not in UNRESOLVED_STATUSES:
            out.append(match)
            continue
        home = match.get("homeTeam")
        away = match.get("awayTeam")
        probabilities = calculate_probabilities(
            home,
            away,
            _lookup(standings, home),
            _lookup(standings, away),
        )
        item: Fixture = {**match, "probabilities": probabilities}  # type: ignore[misc]
        out.append(item)
        enriched += 1
    logger.debug("probabilities calcolate per %s/%s partite", enriched, len(matches))
    return out
