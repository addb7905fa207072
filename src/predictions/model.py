from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Mapping, Optional

from core.models import Probabilities

DEFAULT_STRENGTH = 0.5
HOME_ADVANTAGE = 0.1
DRAW_ALLOWANCE = 0.3
MIN_WIN_PROB = 0.15
MAX_WIN_PROB = 0.75
DEFAULT_GOALS_PER_GAME = 1.5
FIRST_HALF_SHARE = 0.6


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def round2(value: float) -> float:
    # arrotondamento half-up sul valore binario esatto (come toFixed(2))
    return float(Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def _num(stats: Mapping[str, Any], key: str) -> float:
    value = stats.get(key)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    return 0.0


def calculate_team_strength(stats: Optional[Mapping[str, Any]]) -> float:
    """
    Forza della squadra in [0.1, 0.9]:
    - punti per partita / 3 (peso 0.4)
    - differenza reti per partita / 3, limitata a [-1, 1] e riportata in [0, 1] (peso 0.3)
    - percentuale vittorie (peso 0.3)
    Senza statistiche o con 0 partite giocate -> 0.5.
    """
    if not stats:
        return DEFAULT_STRENGTH
    played = _num(stats, "played")
    if played <= 0:
        return DEFAULT_STRENGTH

    ppg = _num(stats, "points") / played / 3
    gdpg = _num(stats, "goalDifference") / played
    normalized_gd = _clamp(gdpg / 3, -1.0, 1.0)
    win_ratio = _num(stats, "won") / played

    strength = ppg * 0.4 + (normalized_gd + 1) / 2 * 0.3 + win_ratio * 0.3
    return _clamp(strength, 0.1, 0.9)


def goals_per_game(stats: Optional[Mapping[str, Any]]) -> float:
    if not stats:
        return DEFAULT_GOALS_PER_GAME
    played = _num(stats, "played")
    goals_for = stats.get("goalsFor")
    if played <= 0 or not isinstance(goals_for, (int, float)) or isinstance(goals_for, bool):
        return DEFAULT_GOALS_PER_GAME
    return goals_for / played


def calculate_probabilities(
    home_team: Optional[Mapping[str, Any]],
    away_team: Optional[Mapping[str, Any]],
    home_stats: Optional[Mapping[str, Any]] = None,
    away_stats: Optional[Mapping[str, Any]] = None,
) -> Probabilities:
    """
    Probabilità per una partita non ancora giocata.

    Le probabilità di vittoria sono limitate a [0.15, 0.75] senza
    rinormalizzazione: il pareggio resta implicito e non viene restituito.
    home_team/away_team non entrano nel calcolo.
    """
    home_strength = calculate_team_strength(home_stats) + HOME_ADVANTAGE
    away_strength = calculate_team_strength(away_stats)

    total = home_strength + away_strength + DRAW_ALLOWANCE
    team1_win = _clamp(home_strength / total, MIN_WIN_PROB, MAX_WIN_PROB)
    team2_win = _clamp(away_strength / total, MIN_WIN_PROB, MAX_WIN_PROB)

    expected = goals_per_game(home_stats) + goals_per_game(away_stats)

    if expected > 1.5:
        over1_5 = min(0.95, 0.6 + (expected - 1.5) * 0.15)
    else:
        over1_5 = 0.4 + expected * 0.13
    under1_5 = 1 - over1_5

    if expected > 2.5:
        over2_5 = min(0.85, 0.4 + (expected - 2.5) * 0.12)
    else:
        over2_5 = 0.25 + expected * 0.1

    first_half = expected * FIRST_HALF_SHARE
    first_half_over0_5 = min(0.9, 0.5 + first_half * 0.2)
    first_half_under1_5 = max(0.0, min(0.9, 0.7 - first_half * 0.1))

    return {
        "team1Win": round2(team1_win),
        "team2Win": round2(team2_win),
        "over1_5": round2(over1_5),
        "under1_5": round2(under1_5),
        "over2_5": round2(over2_5),
        "firstHalfOver0_5": round2(first_half_over0_5),
        "firstHalfUnder1_5": round2(first_half_under1_5),
    }


__all__ = [
    "calculate_team_strength",
    "calculate_probabilities",
    "goals_per_game",
    "round2",
]
