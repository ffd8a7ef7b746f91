"""
Handicap stroke allocation.

Strokes are handed out in cycles of 18 in stroke-index order: a handicap
of 20 gives one stroke on every hole plus a second stroke on stroke
indices 1 and 2.
"""

import math
from typing import List, Sequence, Tuple

from models.player import Team
from .exceptions import MatchPreconditionError
from .validation import validate_stroke_index, validate_hole_count

ALLOCATION_CYCLE = 18


def strokes_received(handicap: float, stroke_index: int, hole_count: int = ALLOCATION_CYCLE) -> int:
    """Return the strokes a player with the given handicap receives on a hole."""
    validate_stroke_index(stroke_index, hole_count)
    if handicap <= 0:
        return 0

    base = math.floor(handicap / ALLOCATION_CYCLE)
    extra = 1 if stroke_index <= handicap % ALLOCATION_CYCLE else 0
    return base + extra


def strokes_per_hole(handicap: float, stroke_indices: Sequence[int]) -> List[int]:
    """Return the strokes received on every hole of a course."""
    hole_count = len(stroke_indices)
    validate_hole_count(hole_count)
    return [strokes_received(handicap, si, hole_count) for si in stroke_indices]


def match_play_allowance(handicap_a: float, handicap_b: float) -> Tuple[float, float]:
    """
    Play the match off the lower handicap.

    The higher-handicap side receives the difference, the other plays off
    zero.
    """
    difference = abs(handicap_a - handicap_b)
    if handicap_a > handicap_b:
        return difference, 0.0
    if handicap_b > handicap_a:
        return 0.0, difference
    return 0.0, 0.0


def foursomes_team_handicap(team: Team, allowance: float = 0.5) -> float:
    """Team handicap for alternate shot: explicit value or combined handicaps times allowance."""
    if team.handicap is not None:
        return team.handicap
    if not team.players:
        raise MatchPreconditionError(f"Team {team.team_id} has no players")
    return sum(player.handicap for player in team.players) * allowance
