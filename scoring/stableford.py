"""
Stableford points.

Points are awarded on the net score relative to par and capped at 4, so an
eagle and an albatross both score 4.
"""

from typing import List, Optional, Sequence

from .exceptions import ScoringValidationError
from .handicap import strokes_received
from .validation import validate_course, validate_scores, default_stroke_indices

MAX_POINTS = 4


def points_for_net_score(net_score: int, par: int) -> int:
    """Points for a net score on a hole of the given par."""
    diff = net_score - par
    if diff <= -2:
        return MAX_POINTS
    if diff == -1:
        return 3
    if diff == 0:
        return 2
    if diff == 1:
        return 1
    return 0


def stableford_points(score: Optional[int], par: int, stroke_index: int, handicap: float,
                      hole_count: int = 18) -> int:
    """Points for one hole. A missing score (0 or None) scores 0."""
    if not score:
        return 0
    if score < 0:
        raise ScoringValidationError(f"Negative score {score}")

    net_score = score - strokes_received(handicap, stroke_index, hole_count)
    return points_for_net_score(net_score, par)


def stableford_breakdown(scores: Sequence[Optional[int]], pars: Sequence[int],
                         stroke_indices: Optional[Sequence[int]] = None,
                         handicap: float = 0.0) -> List[int]:
    """Per-hole points for a round; unplayed holes score 0."""
    if stroke_indices is None:
        stroke_indices = default_stroke_indices(len(pars))
    validate_course(pars, stroke_indices)
    hole_count = len(pars)
    normalized = validate_scores(scores, hole_count)

    return [
        stableford_points(score, par, si, handicap, hole_count)
        for score, par, si in zip(normalized, pars, stroke_indices)
    ]


def total_stableford(scores: Sequence[Optional[int]], pars: Sequence[int],
                     stroke_indices: Optional[Sequence[int]] = None,
                     handicap: float = 0.0) -> int:
    """Total points over the holes that have a score."""
    return sum(stableford_breakdown(scores, pars, stroke_indices, handicap))


def is_round_complete(scores: Sequence[Optional[int]]) -> bool:
    """True when every hole has a score."""
    return bool(scores) and all(scores)
