"""
Player and team score models for the golf scoring system.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class PlayerRoundScore:
    """A player's hole-by-hole strokes for one round (0 = not yet played)."""
    player_id: str
    handicap: float = 0.0
    hole_scores: List[int] = field(default_factory=list)
    name: Optional[str] = None

    def __post_init__(self):
        if self.hole_scores is None:
            self.hole_scores = []
        if self.name is None:
            self.name = self.player_id

    @property
    def holes_played(self) -> int:
        return sum(1 for score in self.hole_scores if score)


@dataclass
class Team:
    """
    A side in a team format.

    For foursomes, hole_scores holds the single shared ball and handicap
    (when set) replaces the allowance computed from the players.
    """
    team_id: str
    name: str
    players: List[PlayerRoundScore] = field(default_factory=list)
    hole_scores: Optional[List[int]] = None
    handicap: Optional[float] = None

    @property
    def player_ids(self) -> List[str]:
        return [player.player_id for player in self.players]
