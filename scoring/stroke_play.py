"""
Gross and net stroke-play totals.
"""

from typing import List, Optional, Sequence

from models.leaderboard import StrokePlayTotals
from models.player import PlayerRoundScore
from .handicap import strokes_per_hole
from .validation import validate_course, validate_scores, default_stroke_indices


def net_hole_scores(scores: Sequence[Optional[int]], stroke_indices: Sequence[int],
                    handicap: float) -> List[int]:
    """Net score per hole; unplayed holes stay 0."""
    normalized = validate_scores(scores, len(stroke_indices))
    strokes = strokes_per_hole(handicap, stroke_indices)
    return [score - received if score else 0 for score, received in zip(normalized, strokes)]


def running_totals(scores: Sequence[Optional[int]]) -> List[int]:
    """Cumulative gross score after each hole."""
    totals = []
    total = 0
    for score in scores:
        total += score or 0
        totals.append(total)
    return totals


def stroke_play_totals(player: PlayerRoundScore, pars: Sequence[int],
                       stroke_indices: Optional[Sequence[int]] = None) -> StrokePlayTotals:
    """
    Gross/net totals for a player over the holes played so far.

    Scores relative to par only count the par of played holes, so a player
    who is level through 9 holes reads 0 rather than -36.
    """
    if stroke_indices is None:
        stroke_indices = default_stroke_indices(len(pars))
    validate_course(pars, stroke_indices)
    scores = validate_scores(player.hole_scores, len(pars))
    nets = net_hole_scores(scores, stroke_indices, player.handicap)

    gross = sum(scores)
    net = sum(nets)
    played_par = sum(par for score, par in zip(scores, pars) if score)

    return StrokePlayTotals(
        player_id=player.player_id,
        gross=gross,
        net=net,
        holes_played=sum(1 for score in scores if score),
        gross_to_par=gross - played_par,
        net_to_par=net - played_par,
        net_hole_scores=nets
    )
