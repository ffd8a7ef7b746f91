"""
Leaderboard and standings models for the golf scoring system.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union

Number = Union[int, float]


@dataclass
class StrokePlayTotals:
    """Gross and net totals over the holes played so far."""
    player_id: str
    gross: int
    net: int
    holes_played: int
    gross_to_par: int
    net_to_par: int
    net_hole_scores: List[int] = field(default_factory=list)


@dataclass
class LeaderboardEntry:
    """A player or team with the value of the active ranking metric."""
    entity_id: str
    name: str
    value: Optional[Number]


@dataclass
class RankedEntry:
    """A leaderboard row with its position and display label (e.g. "T2")."""
    position: Optional[int]
    label: str
    entity_id: str
    name: str
    value: Optional[Number]

    @property
    def is_tied(self) -> bool:
        return self.label.startswith("T")


@dataclass
class TeamStanding:
    """Aggregated team-match results for one team."""
    team_id: str
    name: str
    total_points: float = 0.0
    matches_won: int = 0
    matches_lost: int = 0
    matches_halved: int = 0

    @property
    def matches_played(self) -> int:
        return self.matches_won + self.matches_lost + self.matches_halved
