"""
Team standings for Ryder Cup style events.

Each finished match is worth a number of points (1 by default): the winner
takes them all, a halved match splits them. Matches still in progress
count as remaining.
"""

from typing import Dict, Mapping, Optional, Sequence, Tuple, Union

from models.leaderboard import TeamStanding
from models.match import Side, MatchCompletion, TeamMatchResult
from utils.text_utils import TextUtils
from .exceptions import ScoringValidationError

TIE = "tie"


def team_match_points(completion: MatchCompletion, points: float = 1.0,
                      halve_share: float = 0.5) -> Tuple[float, float]:
    """Points earned by side A and side B from one match."""
    if not completion.is_over:
        return 0.0, 0.0
    if completion.winner is Side.A:
        return points, 0.0
    if completion.winner is Side.B:
        return 0.0, points
    return points * halve_share, points * halve_share


def compute_team_standings(results: Sequence[TeamMatchResult],
                           team_names: Optional[Mapping[str, str]] = None,
                           halve_share: float = 0.5) -> Tuple[Dict[str, TeamStanding], int, int]:
    """
    Aggregate team match results.

    Returns (standings by team id, matches completed, matches remaining).
    """
    team_names = team_names or {}
    standings: Dict[str, TeamStanding] = {}

    def standing_for(team_id: str) -> TeamStanding:
        if team_id not in standings:
            standings[team_id] = TeamStanding(team_id=team_id, name=team_names.get(team_id, team_id))
        return standings[team_id]

    completed = 0
    remaining = 0
    for result in results:
        if result.team_a_id == result.team_b_id:
            raise ScoringValidationError(f"Match {result.match_id} has the same team on both sides")

        team_a = standing_for(result.team_a_id)
        team_b = standing_for(result.team_b_id)
        completion = result.state.completion
        if not completion.is_over:
            remaining += 1
            continue

        completed += 1
        points_a, points_b = team_match_points(completion, result.points, halve_share)
        team_a.total_points += points_a
        team_b.total_points += points_b

        if completion.winner is Side.A:
            team_a.matches_won += 1
            team_b.matches_lost += 1
        elif completion.winner is Side.B:
            team_b.matches_won += 1
            team_a.matches_lost += 1
        else:
            team_a.matches_halved += 1
            team_b.matches_halved += 1

    return standings, completed, remaining


def points_to_win(total_points_available: float) -> float:
    """Points needed to win outright: strictly more than half."""
    if total_points_available <= 0:
        raise ScoringValidationError("An event needs at least one point on offer")
    return total_points_available / 2 + 0.5


def has_team_won(points_a: float, points_b: float, target: float,
                 matches_remaining: int) -> Union[Side, str, None]:
    """The winning side, "tie" when all matches are done and level, else None."""
    if points_a >= target:
        return Side.A
    if points_b >= target:
        return Side.B
    if matches_remaining == 0 and points_a == points_b:
        return TIE
    return None


def format_team_score(points_a: float, points_b: float) -> str:
    """Scoreboard text such as "3.5 - 2.5"."""
    return f"{TextUtils.format_points(points_a)} - {TextUtils.format_points(points_b)}"
