from __future__ import annotations

import re
from typing import Optional

from core.logging import get_logger

logger = get_logger("core.leagues")

_CODE_PATTERN = re.compile(r"^[A-Z0-9]{2,10}$")

LEAGUE_ALIASES = {
    "EPL": "PL",
    "PREMIER_LEAGUE": "PL",
    "LA_LIGA": "PD",
    "LALIGA": "PD",
    "BUNDESLIGA": "BL1",
    "SERIE_A": "SA",
    "SERIEA": "SA",
    "LIGUE_1": "FL1",
    "LIGUE1": "FL1",
    "EREDIVISIE": "DED",
    "CHAMPIONS_LEAGUE": "CL",
    "CHAMPIONSHIP": "ELC",
}


def normalize_league(raw: Optional[str], default: str) -> str:
    """Codice competizione football-data; valori mancanti o malformati -> default."""
    if raw is None:
        return default
    code = str(raw).strip().upper().replace(" ", "_").replace("-", "_")
    if not code:
        return default
    alias = LEAGUE_ALIASES.get(code)
    if alias:
        return alias
    if not _CODE_PATTERN.match(code):
        logger.warning("league non valida %r, uso default %s", raw, default)
        return default
    return code
