"""
Match-play evaluation for singles, four-ball and foursomes.

Hole results are signed from side A's point of view: +1 side A won the
hole, -1 side B won it, 0 halved. Every HoleResult also carries an
is_graded flag so a hole that has not been scored by both sides is never
mistaken for a halve.

State is always rebuilt from the full list of scores; nothing here caches
running totals between calls.
"""

from typing import List, Optional, Sequence, Tuple, Union

from models.match import (
    Side, MatchFormat, HoleResult, RunningStatus, MatchCompletion, MatchState
)
from models.player import PlayerRoundScore, Team
from utils.text_utils import TextUtils
from .exceptions import MatchPreconditionError, ScoringValidationError
from .handicap import strokes_per_hole, match_play_allowance, foursomes_team_handicap
from .validation import (
    validate_course, validate_scores, validate_hole_count, default_stroke_indices
)

HANDICAP_MODE_FULL = "full"
HANDICAP_MODE_DIFFERENCE = "difference"
HANDICAP_MODES = (HANDICAP_MODE_FULL, HANDICAP_MODE_DIFFERENCE)

MatchSide = Union[PlayerRoundScore, Team]


def compare_net_scores(net_a: int, net_b: int) -> int:
    """Lower net score wins the hole."""
    if net_a < net_b:
        return 1
    if net_b < net_a:
        return -1
    return 0


def _net_scores(scores: Sequence[Optional[int]], stroke_indices: Sequence[int],
                handicap: float) -> List[Optional[int]]:
    # None marks an unplayed hole; a net score of 0 is a real score.
    normalized = validate_scores(scores, len(stroke_indices))
    strokes = strokes_per_hole(handicap, stroke_indices)
    return [score - received if score else None for score, received in zip(normalized, strokes)]


def hole_results_from_nets(nets_a: Sequence[Optional[int]],
                           nets_b: Sequence[Optional[int]]) -> List[HoleResult]:
    """Compare two sides' per-hole net scores (None = no score)."""
    if len(nets_a) != len(nets_b):
        raise ScoringValidationError(
            f"Sides have different hole counts: {len(nets_a)} and {len(nets_b)}"
        )

    results = []
    for hole_number, (net_a, net_b) in enumerate(zip(nets_a, nets_b), 1):
        if net_a is None or net_b is None:
            results.append(HoleResult(hole_number, 0, False))
        else:
            results.append(HoleResult(hole_number, compare_net_scores(net_a, net_b), True))
    return results


def _check_handicap_mode(handicap_mode: str) -> None:
    if handicap_mode not in HANDICAP_MODES:
        raise ScoringValidationError(f"Unknown handicap mode: {handicap_mode}")


def _course_indices(pars: Sequence[int], stroke_indices: Optional[Sequence[int]]) -> Sequence[int]:
    if stroke_indices is None:
        stroke_indices = default_stroke_indices(len(pars))
    validate_course(pars, stroke_indices)
    return stroke_indices


def singles_hole_results(player_a: PlayerRoundScore, player_b: PlayerRoundScore,
                         pars: Sequence[int], stroke_indices: Optional[Sequence[int]] = None,
                         handicap_mode: str = HANDICAP_MODE_FULL) -> List[HoleResult]:
    """Hole results for a one-against-one match."""
    _check_handicap_mode(handicap_mode)
    stroke_indices = _course_indices(pars, stroke_indices)

    handicap_a, handicap_b = player_a.handicap, player_b.handicap
    if handicap_mode == HANDICAP_MODE_DIFFERENCE:
        handicap_a, handicap_b = match_play_allowance(handicap_a, handicap_b)

    return hole_results_from_nets(
        _net_scores(player_a.hole_scores, stroke_indices, handicap_a),
        _net_scores(player_b.hole_scores, stroke_indices, handicap_b)
    )


def best_ball_nets(member_nets: Sequence[Sequence[Optional[int]]]) -> List[Optional[int]]:
    """Lowest net among the members that scored each hole; None if nobody did."""
    if not member_nets:
        raise MatchPreconditionError("A four-ball side needs at least one player")

    best = []
    for hole_nets in zip(*member_nets):
        valid = [net for net in hole_nets if net is not None]
        best.append(min(valid) if valid else None)
    return best


def four_ball_hole_results(team_a: Team, team_b: Team, pars: Sequence[int],
                           stroke_indices: Optional[Sequence[int]] = None,
                           handicap_mode: str = HANDICAP_MODE_FULL) -> List[HoleResult]:
    """
    Hole results for a better-ball match.

    In "difference" mode all four players play off the lowest handicap in
    the match.
    """
    _check_handicap_mode(handicap_mode)
    stroke_indices = _course_indices(pars, stroke_indices)
    for team in (team_a, team_b):
        if not team.players:
            raise MatchPreconditionError(f"Team {team.team_id} has no players")

    offset = 0.0
    if handicap_mode == HANDICAP_MODE_DIFFERENCE:
        offset = min(player.handicap for player in team_a.players + team_b.players)

    def side_nets(team: Team) -> List[Optional[int]]:
        return best_ball_nets([
            _net_scores(player.hole_scores, stroke_indices, player.handicap - offset)
            for player in team.players
        ])

    return hole_results_from_nets(side_nets(team_a), side_nets(team_b))


def foursomes_hole_results(team_a: Team, team_b: Team, pars: Sequence[int],
                           stroke_indices: Optional[Sequence[int]] = None,
                           allowance: float = 0.5,
                           handicap_mode: str = HANDICAP_MODE_FULL) -> List[HoleResult]:
    """Hole results for an alternate-shot match, one shared ball per side."""
    _check_handicap_mode(handicap_mode)
    stroke_indices = _course_indices(pars, stroke_indices)
    for team in (team_a, team_b):
        if team.hole_scores is None:
            raise MatchPreconditionError(f"Foursomes team {team.team_id} has no shared scores")

    handicap_a = foursomes_team_handicap(team_a, allowance)
    handicap_b = foursomes_team_handicap(team_b, allowance)
    if handicap_mode == HANDICAP_MODE_DIFFERENCE:
        handicap_a, handicap_b = match_play_allowance(handicap_a, handicap_b)

    return hole_results_from_nets(
        _net_scores(team_a.hole_scores, stroke_indices, handicap_a),
        _net_scores(team_b.hole_scores, stroke_indices, handicap_b)
    )


def results_from_signs(signs: Sequence[int], holes_graded: Optional[int] = None) -> List[HoleResult]:
    """
    Build hole results from signed values for callers that only store signs.

    The first holes_graded entries are graded (all of them by default); the
    rest are treated as not yet played.
    """
    if holes_graded is None:
        holes_graded = len(signs)
    results = []
    for index, sign in enumerate(signs):
        if sign not in (-1, 0, 1):
            raise ScoringValidationError(f"Hole result must be -1, 0 or 1, got {sign}")
        results.append(HoleResult(index + 1, sign, index < holes_graded))
    return results


def running_status(hole_results: Sequence[HoleResult]) -> List[RunningStatus]:
    """Status after every hole, counting graded holes only."""
    statuses = []
    wins_a = wins_b = graded = 0
    for hole in hole_results:
        if hole.is_graded:
            graded += 1
            if hole.result > 0:
                wins_a += 1
            elif hole.result < 0:
                wins_b += 1

        leader = None
        if wins_a > wins_b:
            leader = Side.A
        elif wins_b > wins_a:
            leader = Side.B
        statuses.append(RunningStatus(hole.hole_number, abs(wins_a - wins_b), leader, graded))
    return statuses


def match_completion(hole_results: Sequence[HoleResult], total_holes: Optional[int] = None) -> MatchCompletion:
    """
    Decide whether the match is over.

    Only the unbroken run of graded holes from hole 1 is considered, so a
    match can never finish on a hole before both sides have scored every
    hole up to it.
    """
    if total_holes is None:
        total_holes = len(hole_results)
    validate_hole_count(total_holes)
    if len(hole_results) > total_holes:
        raise ScoringValidationError(
            f"Got {len(hole_results)} hole results for a {total_holes}-hole match"
        )

    lead = 0
    played = 0
    for hole in hole_results:
        if not hole.is_graded:
            break
        played += 1
        lead += hole.result
        remaining = total_holes - played
        differential = abs(lead)

        if differential > remaining:
            winner = Side.A if lead > 0 else Side.B
            notation = TextUtils.format_match_result(differential, remaining)
            return MatchCompletion(
                is_over=True,
                ended_on_hole=played,
                winner=winner,
                notation=notation,
                differential=differential,
                holes_remaining=remaining
            )

    if played == total_holes:
        return MatchCompletion(
            is_over=True,
            ended_on_hole=total_holes,
            winner=None,
            notation="AS",
            differential=0,
            holes_remaining=0
        )

    return MatchCompletion(is_over=False, differential=abs(lead), holes_remaining=total_holes - played)


def evaluate_results(hole_results: Sequence[HoleResult], total_holes: Optional[int] = None) -> MatchState:
    """Running status, completion and display text for a list of hole results."""
    statuses = running_status(hole_results)
    completion = match_completion(hole_results, total_holes)

    if completion.is_over:
        status_text = completion.notation
    elif statuses:
        status_text = TextUtils.format_match_status(statuses[-1].differential, statuses[-1].leader)
    else:
        status_text = "AS"

    return MatchState(
        hole_results=list(hole_results),
        running_status=statuses,
        completion=completion,
        status_text=status_text
    )


def _as_player(side: MatchSide) -> PlayerRoundScore:
    if isinstance(side, PlayerRoundScore):
        return side
    if len(side.players) != 1:
        raise MatchPreconditionError(
            f"Singles side {side.team_id} must have exactly one player, has {len(side.players)}"
        )
    return side.players[0]


def _as_team(side: MatchSide) -> Team:
    if isinstance(side, Team):
        return side
    raise MatchPreconditionError(f"Team format needs a team, got player {side.player_id}")


def evaluate_match(side_a: MatchSide, side_b: MatchSide, pars: Sequence[int],
                   stroke_indices: Optional[Sequence[int]] = None,
                   match_format: MatchFormat = MatchFormat.SINGLES,
                   handicap_mode: str = HANDICAP_MODE_FULL,
                   foursomes_allowance: float = 0.5) -> MatchState:
    """Evaluate a match of the given format from the current scores."""
    if match_format is MatchFormat.SINGLES:
        results = singles_hole_results(
            _as_player(side_a), _as_player(side_b), pars, stroke_indices, handicap_mode
        )
    elif match_format is MatchFormat.FOUR_BALL:
        results = four_ball_hole_results(
            _as_team(side_a), _as_team(side_b), pars, stroke_indices, handicap_mode
        )
    elif match_format is MatchFormat.FOURSOMES:
        results = foursomes_hole_results(
            _as_team(side_a), _as_team(side_b), pars, stroke_indices, foursomes_allowance, handicap_mode
        )
    else:
        raise ScoringValidationError(f"Unsupported match format: {match_format}")

    return evaluate_results(results, len(pars))


def evaluate_sides(sides: Sequence[MatchSide], pars: Sequence[int],
                   stroke_indices: Optional[Sequence[int]] = None,
                   match_format: MatchFormat = MatchFormat.SINGLES,
                   handicap_mode: str = HANDICAP_MODE_FULL,
                   foursomes_allowance: float = 0.5) -> MatchState:
    """Evaluate a match given as a list of sides; exactly two are required."""
    if len(sides) != 2:
        raise MatchPreconditionError(f"Match play needs exactly two sides, got {len(sides)}")
    return evaluate_match(
        sides[0], sides[1], pars, stroke_indices, match_format, handicap_mode, foursomes_allowance
    )


def match_points(completion: MatchCompletion, win: float = 2, halve: float = 1) -> Tuple[float, float]:
    """Leaderboard points for each side of a finished match; (0, 0) while in progress."""
    if not completion.is_over:
        return 0, 0
    if completion.winner is Side.A:
        return win, 0
    if completion.winner is Side.B:
        return 0, win
    return halve, halve
