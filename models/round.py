"""
Round data models: everything a scoring run needs, loaded from a round file.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from .course import Course
from .match import MatchFormat
from .player import PlayerRoundScore, Team


@dataclass
class MatchDefinition:
    """A match to evaluate and, optionally, the event teams its sides play for."""
    match_id: str
    match_format: MatchFormat
    side_a: Union[PlayerRoundScore, Team]
    side_b: Union[PlayerRoundScore, Team]
    team_a_id: Optional[str] = None
    team_b_id: Optional[str] = None
    points: Optional[float] = None

    @property
    def is_team_match(self) -> bool:
        return self.team_a_id is not None and self.team_b_id is not None


@dataclass
class RoundData:
    """A course, the players' scores and the matches of one round."""
    course: Course
    players: List[PlayerRoundScore] = field(default_factory=list)
    team_names: Dict[str, str] = field(default_factory=dict)
    matches: List[MatchDefinition] = field(default_factory=list)
    name: str = "round"

    def get_player(self, player_id: str) -> Optional[PlayerRoundScore]:
        for player in self.players:
            if player.player_id == player_id:
                return player
        return None
