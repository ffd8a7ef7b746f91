"""
Ranking processor for the golf scoring system.

This is the boundary between callers and the pure scoring engine: it reads
the configuration, feeds round data through the engine, logs what it did
and reports each computation to an optional trace hook.
"""

import logging
import pandas as pd
from typing import Any, Callable, Dict, List, Optional, Tuple

from config.config_manager import ConfigManager
from models.leaderboard import LeaderboardEntry, RankedEntry, StrokePlayTotals
from models.match import Side, TeamMatchResult
from models.round import RoundData
from ranking.leaderboard import RankingMetric, rank_entries, match_points_value
from scoring.exceptions import ScoringValidationError
from scoring.match_play import evaluate_match
from scoring.stableford import total_stableford
from scoring.stroke_play import stroke_play_totals
from scoring.team_standings import compute_team_standings, points_to_win, has_team_won

logger = logging.getLogger(__name__)

TraceHook = Callable[[str, Dict[str, Any]], None]


class RankingProcessor:
    """Computes leaderboards, match states and team standings for a round."""

    def __init__(self, config_file: str = "config.yaml", trace_hook: Optional[TraceHook] = None,
                 config: Optional[Dict[str, Any]] = None):
        if config is not None:
            self.config = ConfigManager.merge_with_defaults(config)
        else:
            self.config = ConfigManager.load_config(config_file)
        self.trace_hook = trace_hook

        scoring_config = self.config['scoring']
        points_config = self.config['points']
        self.handicap_mode = scoring_config['match_handicap_mode']
        self.foursomes_allowance = float(scoring_config['foursomes_allowance'])
        self.match_win_points = points_config['match_win']
        self.match_halve_points = points_config['match_halve']
        self.team_match_points = float(points_config['team_match_win'])
        self.team_halve_share = float(points_config['team_match_halve_share'])

    def _trace(self, event: str, payload: Dict[str, Any]) -> None:
        logger.debug(f"{event}: {payload}")
        if self.trace_hook is not None:
            self.trace_hook(event, payload)

    def get_stroke_play_totals(self, round_data: RoundData) -> Dict[str, StrokePlayTotals]:
        """Gross/net totals for every player in the round."""
        course = round_data.course
        totals = {}
        for player in round_data.players:
            try:
                totals[player.player_id] = stroke_play_totals(player, course.pars, course.stroke_indices)
            except ScoringValidationError as e:
                logger.error(f"Invalid scores for player {player.player_id}: {e}")
                raise
        self._trace('stroke_play_totals', {'players': len(totals)})
        return totals

    def get_stableford_totals(self, round_data: RoundData) -> Dict[str, int]:
        """Stableford points for every player in the round."""
        course = round_data.course
        totals = {}
        for player in round_data.players:
            try:
                totals[player.player_id] = total_stableford(
                    player.hole_scores, course.pars, course.stroke_indices, player.handicap
                )
            except ScoringValidationError as e:
                logger.error(f"Invalid scores for player {player.player_id}: {e}")
                raise
        self._trace('stableford_totals', {'players': len(totals)})
        return totals

    def evaluate_matches(self, round_data: RoundData) -> List[TeamMatchResult]:
        """Evaluate every match in the round from the current scores."""
        course = round_data.course
        results = []
        for match in round_data.matches:
            try:
                state = evaluate_match(
                    match.side_a, match.side_b, course.pars, course.stroke_indices,
                    match.match_format, self.handicap_mode, self.foursomes_allowance
                )
            except ScoringValidationError as e:
                logger.error(f"Could not evaluate match {match.match_id}: {e}")
                raise

            results.append(TeamMatchResult(
                match_id=match.match_id,
                team_a_id=match.team_a_id or self._side_id(match.side_a),
                team_b_id=match.team_b_id or self._side_id(match.side_b),
                match_format=match.match_format,
                state=state,
                points=match.points if match.points is not None else self.team_match_points
            ))
            self._trace('match_evaluated', {
                'match_id': match.match_id,
                'status': state.status_text,
                'is_over': state.completion.is_over,
                'ended_on_hole': state.completion.ended_on_hole
            })

        logger.info(f"Evaluated {len(results)} matches")
        return results

    @staticmethod
    def _side_id(side) -> str:
        return getattr(side, 'team_id', None) or side.player_id

    def get_player_match_records(self, round_data: RoundData,
                                 results: Optional[List[TeamMatchResult]] = None) -> Dict[str, Tuple[int, int, int]]:
        """(won, halved, lost) per player over the finished matches they played in."""
        if results is None:
            results = self.evaluate_matches(round_data)

        records: Dict[str, List[int]] = {}
        for match, result in zip(round_data.matches, results):
            completion = result.state.completion
            if not completion.is_over:
                continue
            for side, members in ((Side.A, self._members(match.side_a)), (Side.B, self._members(match.side_b))):
                for player_id in members:
                    record = records.setdefault(player_id, [0, 0, 0])
                    if completion.winner is None:
                        record[1] += 1
                    elif completion.winner is side:
                        record[0] += 1
                    else:
                        record[2] += 1

        return {player_id: tuple(record) for player_id, record in records.items()}

    @staticmethod
    def _members(side) -> List[str]:
        if hasattr(side, 'players'):
            return side.player_ids
        return [side.player_id]

    def build_leaderboard_entries(self, round_data: RoundData, metric: RankingMetric) -> List[LeaderboardEntry]:
        """One entry per player with the metric's value (None if nothing to rank yet)."""
        entries = []
        if metric is RankingMetric.MATCH_POINTS:
            records = self.get_player_match_records(round_data)
            for player in round_data.players:
                value = None
                if player.player_id in records:
                    won, halved, _ = records[player.player_id]
                    value = match_points_value(won, halved, self.match_win_points, self.match_halve_points)
                entries.append(LeaderboardEntry(player.player_id, player.name, value))
            return entries

        if metric is RankingMetric.STABLEFORD:
            values = self.get_stableford_totals(round_data)
        else:
            totals = self.get_stroke_play_totals(round_data)
            values = {
                player_id: total.gross if metric is RankingMetric.GROSS else total.net
                for player_id, total in totals.items()
            }

        for player in round_data.players:
            value = values[player.player_id] if player.holes_played else None
            entries.append(LeaderboardEntry(player.player_id, player.name, value))
        return entries

    def get_leaderboard(self, round_data: RoundData, metric: RankingMetric) -> List[RankedEntry]:
        """Ranked leaderboard for the round under the given metric."""
        entries = self.build_leaderboard_entries(round_data, metric)
        ranked = rank_entries(entries, metric)
        self._trace('leaderboard_ranked', {
            'metric': metric.value,
            'entries': len(ranked),
            'leader': ranked[0].entity_id if ranked and ranked[0].position else None
        })
        logger.info(f"Ranked {len(ranked)} players by {metric.value}")
        return ranked

    def get_team_standings(self, round_data: RoundData,
                           results: Optional[List[TeamMatchResult]] = None) -> Dict[str, Any]:
        """Team standings over the round's team matches, with the overall outcome so far."""
        if results is None:
            results = self.evaluate_matches(round_data)

        team_results = [
            result for match, result in zip(round_data.matches, results) if match.is_team_match
        ]
        standings, completed, remaining = compute_team_standings(
            team_results, round_data.team_names, self.team_halve_share
        )

        outcome = None
        target = None
        if len(standings) == 2 and team_results:
            team_a_id, team_b_id = team_results[0].team_a_id, team_results[0].team_b_id
            target = points_to_win(sum(result.points for result in team_results))
            winner = has_team_won(
                standings[team_a_id].total_points, standings[team_b_id].total_points, target, remaining
            )
            if winner is Side.A:
                outcome = team_a_id
            elif winner is Side.B:
                outcome = team_b_id
            else:
                outcome = winner
        elif len(standings) > 2:
            logger.warning(f"Team standings cover {len(standings)} teams; no overall winner is decided")

        self._trace('team_standings', {'completed': completed, 'remaining': remaining, 'outcome': outcome})
        return {
            'standings': standings,
            'matches_completed': completed,
            'matches_remaining': remaining,
            'points_to_win': target,
            'winner': outcome
        }

    def get_round_statistics(self, round_data: RoundData) -> Dict[str, Any]:
        """Get overall round statistics."""
        if not round_data.players:
            return {}

        stableford = self.get_stableford_totals(round_data)
        holes_played = [player.holes_played for player in round_data.players]
        total_points = sum(stableford.values())

        return {
            'total_players': len(round_data.players),
            'complete_cards': sum(1 for h in holes_played if h == round_data.course.hole_count),
            'average_holes_played': round(sum(holes_played) / len(holes_played), 2),
            'total_stableford_points': total_points,
            'average_stableford_points': round(total_points / len(round_data.players), 2),
            'matches': len(round_data.matches)
        }

    def export_leaderboard_to_csv(self, ranked: List[RankedEntry], output_file: str,
                                  metric: RankingMetric) -> int:
        """
        Export a ranked leaderboard to CSV file.
        Returns the number of rows exported.
        """
        if not ranked:
            logger.warning("No leaderboard entries found for export")
            return 0

        data = []
        for entry in ranked:
            data.append({
                'Position': entry.label,
                'ID': entry.entity_id,
                'Name': entry.name,
                metric.value.replace('_', ' ').title(): entry.value if entry.value is not None else ''
            })

        df = pd.DataFrame(data)
        df.to_csv(output_file, index=False, encoding='utf-8')

        logger.info(f"Exported {len(ranked)} leaderboard rows to {output_file}")
        return len(ranked)
