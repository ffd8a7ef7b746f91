"""
Scoring engine package for the golf scoring system.

Pure functions only: no I/O, no logging, no cached state.
"""

from .exceptions import ScoringValidationError, MatchPreconditionError
from .handicap import strokes_received, strokes_per_hole, match_play_allowance, foursomes_team_handicap
from .stableford import stableford_points, stableford_breakdown, total_stableford, is_round_complete
from .stroke_play import net_hole_scores, running_totals, stroke_play_totals
from .match_play import (
    evaluate_match, evaluate_sides, evaluate_results, running_status, match_completion,
    results_from_signs, match_points, HANDICAP_MODE_FULL, HANDICAP_MODE_DIFFERENCE
)
from .team_standings import (
    team_match_points, compute_team_standings, points_to_win, has_team_won, format_team_score
)

__all__ = [
    'ScoringValidationError', 'MatchPreconditionError',
    'strokes_received', 'strokes_per_hole', 'match_play_allowance', 'foursomes_team_handicap',
    'stableford_points', 'stableford_breakdown', 'total_stableford', 'is_round_complete',
    'net_hole_scores', 'running_totals', 'stroke_play_totals',
    'evaluate_match', 'evaluate_sides', 'evaluate_results', 'running_status', 'match_completion',
    'results_from_signs', 'match_points', 'HANDICAP_MODE_FULL', 'HANDICAP_MODE_DIFFERENCE',
    'team_match_points', 'compute_team_standings', 'points_to_win', 'has_team_won', 'format_team_score'
]
