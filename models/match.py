"""
Match-play state models for the golf scoring system.

These records are derived from scores on every evaluation and are never
stored.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class Side(Enum):
    """One of the two sides of a match."""
    A = "A"
    B = "B"

    @property
    def opponent(self) -> "Side":
        return Side.B if self is Side.A else Side.A


class MatchFormat(Enum):
    """Supported match-play formats."""
    SINGLES = "singles"
    FOUR_BALL = "fourball"
    FOURSOMES = "foursomes"


@dataclass(frozen=True)
class HoleResult:
    """Result of a single hole: +1 side A wins, -1 side B wins, 0 otherwise."""
    hole_number: int
    result: int
    is_graded: bool

    @property
    def is_halved(self) -> bool:
        return self.is_graded and self.result == 0

    @property
    def winner(self) -> Optional[Side]:
        if not self.is_graded or self.result == 0:
            return None
        return Side.A if self.result > 0 else Side.B


@dataclass(frozen=True)
class RunningStatus:
    """Match status after a hole."""
    hole_number: int
    differential: int
    leader: Optional[Side]
    holes_graded: int


@dataclass(frozen=True)
class MatchCompletion:
    """Whether and how a match finished."""
    is_over: bool
    ended_on_hole: Optional[int] = None
    winner: Optional[Side] = None
    notation: Optional[str] = None
    differential: int = 0
    holes_remaining: int = 0


@dataclass
class MatchState:
    """Everything derived from one evaluation of a match."""
    hole_results: List[HoleResult] = field(default_factory=list)
    running_status: List[RunningStatus] = field(default_factory=list)
    completion: MatchCompletion = field(default_factory=lambda: MatchCompletion(is_over=False))
    status_text: str = "AS"

    @property
    def holes_graded(self) -> int:
        return sum(1 for hole in self.hole_results if hole.is_graded)


@dataclass
class TeamMatchResult:
    """A team match and its evaluated state."""
    match_id: str
    team_a_id: str
    team_b_id: str
    match_format: MatchFormat
    state: MatchState
    points: float = 1.0
