"""
Input validation for the scoring engine.

Every public scoring function validates its parallel arrays here before
computing anything. A missing score (0 or None) is valid input.
"""

from typing import List, Optional, Sequence

from .exceptions import ScoringValidationError


def validate_hole_count(hole_count: int) -> None:
    """Reject courses without holes."""
    if hole_count <= 0:
        raise ScoringValidationError(f"Hole count must be positive, got {hole_count}")


def validate_stroke_index(stroke_index: int, hole_count: int = 18) -> None:
    """Reject a stroke index outside 1..hole_count."""
    validate_hole_count(hole_count)
    if stroke_index < 1 or stroke_index > hole_count:
        raise ScoringValidationError(
            f"Stroke index {stroke_index} is out of range 1..{hole_count}"
        )


def validate_course(pars: Sequence[int], stroke_indices: Sequence[int]) -> None:
    """
    Validate a course definition.

    Pars and stroke indices must have the same, non-zero length and the
    stroke indices must be a permutation of 1..hole_count.
    """
    hole_count = len(pars)
    validate_hole_count(hole_count)
    if len(stroke_indices) != hole_count:
        raise ScoringValidationError(
            f"Got {len(stroke_indices)} stroke indices for {hole_count} pars"
        )

    seen = set()
    for stroke_index in stroke_indices:
        validate_stroke_index(stroke_index, hole_count)
        if stroke_index in seen:
            raise ScoringValidationError(f"Duplicate stroke index {stroke_index}")
        seen.add(stroke_index)

    for par in pars:
        if par < 1:
            raise ScoringValidationError(f"Par must be positive, got {par}")


def validate_scores(scores: Sequence[Optional[int]], hole_count: int) -> List[int]:
    """
    Validate one player's hole scores and return them with None replaced by 0.
    """
    if len(scores) != hole_count:
        raise ScoringValidationError(
            f"Got {len(scores)} hole scores for a {hole_count}-hole course"
        )

    normalized = []
    for hole_number, score in enumerate(scores, 1):
        if score is None:
            normalized.append(0)
            continue
        if isinstance(score, bool) or not isinstance(score, (int, float)):
            raise ScoringValidationError(f"Score {score!r} on hole {hole_number} is not a number")
        if score < 0:
            raise ScoringValidationError(f"Negative score {score} on hole {hole_number}")
        if score != int(score):
            raise ScoringValidationError(f"Score {score} on hole {hole_number} is not a whole number of strokes")
        normalized.append(int(score))
    return normalized


def default_stroke_indices(hole_count: int) -> List[int]:
    """Stroke indices in hole order, used when a course has none."""
    validate_hole_count(hole_count)
    return list(range(1, hole_count + 1))
