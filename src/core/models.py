from __future__ import annotations
from typing import Any, Dict, Optional, TypedDict


class TeamRef(TypedDict, total=False):
    id: int
    name: str
    shortName: str
    tla: str
    crest: str


class TeamSeasonStats(TypedDict):
    position: Optional[int]
    points: int
    goalsFor: int
    goalsAgainst: int
    goalDifference: int
    won: int
    draw: int
    lost: int
    played: int


class Probabilities(TypedDict):
    team1Win: float
    team2Win: float
    over1_5: float
    under1_5: float
    over2_5: float
    firstHalfOver0_5: float
    firstHalfUnder1_5: float


class Fixture(TypedDict, total=False):
    id: int
    utcDate: str              # ISO 8601
    status: str               # SCHEDULED, TIMED, IN_PLAY, FINISHED, ...
    homeTeam: TeamRef
    awayTeam: TeamRef
    score: Dict[str, Any]
    probabilities: Probabilities


StandingsMap = Dict[int, TeamSeasonStats]
