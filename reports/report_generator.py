"""
Report generator for the golf scoring system.
"""

import os
import pandas as pd
import logging
from typing import Dict, List, Optional

from models.match import TeamMatchResult
from models.round import RoundData
from ranking.leaderboard import RankingMetric
from ranking.ranking_processor import RankingProcessor
from scoring.stableford import stableford_breakdown
from utils.text_utils import TextUtils

logger = logging.getLogger(__name__)


class ReportGenerator:
    """Generates CSV reports for a scored round."""

    def __init__(self, ranking_processor: RankingProcessor):
        self.ranking_processor = ranking_processor
        self.config = ranking_processor.config

    def generate_leaderboard_report(self, round_data: RoundData, metric: RankingMetric,
                                    output_file: str) -> int:
        """Generate a leaderboard report for one metric."""
        ranked = self.ranking_processor.get_leaderboard(round_data, metric)
        return self.ranking_processor.export_leaderboard_to_csv(ranked, output_file, metric)

    def generate_scorecard_report(self, round_data: RoundData, output_file: str) -> int:
        """
        Generate a hole-by-hole scorecard report.
        Returns the number of rows written (one per player and hole).
        """
        if not round_data.players:
            logger.warning("No players found for scorecard report")
            return 0

        course = round_data.course
        totals = self.ranking_processor.get_stroke_play_totals(round_data)

        data = []
        for player in round_data.players:
            points = stableford_breakdown(player.hole_scores, course.pars, course.stroke_indices, player.handicap)
            nets = totals[player.player_id].net_hole_scores
            for hole, gross, net, hole_points in zip(course.holes, player.hole_scores, nets, points):
                data.append({
                    'Player': player.name,
                    'Hole': hole.number,
                    'Par': hole.par,
                    'Stroke Index': hole.stroke_index,
                    'Gross': gross or '',
                    'Net': net if gross else '',
                    'Points': hole_points if gross else ''
                })

        df = pd.DataFrame(data)
        df.to_csv(output_file, index=False, encoding='utf-8')

        logger.info(f"Generated scorecard report with {len(round_data.players)} players: {output_file}")
        return len(data)

    def generate_stroke_play_report(self, round_data: RoundData, output_file: str) -> int:
        """Generate a gross/net summary per player."""
        totals = self.ranking_processor.get_stroke_play_totals(round_data)
        if not totals:
            logger.warning("No players found for stroke play report")
            return 0

        stableford = self.ranking_processor.get_stableford_totals(round_data)
        data = []
        for player in round_data.players:
            total = totals[player.player_id]
            data.append({
                'ID': player.player_id,
                'Name': player.name,
                'Handicap': player.handicap,
                'Holes Played': total.holes_played,
                'Gross': total.gross,
                'Gross To Par': TextUtils.format_to_par(total.gross_to_par),
                'Net': total.net,
                'Net To Par': TextUtils.format_to_par(total.net_to_par),
                'Stableford': stableford[player.player_id]
            })

        df = pd.DataFrame(data)
        df.to_csv(output_file, index=False, encoding='utf-8')

        logger.info(f"Generated stroke play report with {len(data)} players: {output_file}")
        return len(data)

    def generate_match_report(self, round_data: RoundData, output_file: str,
                              results: Optional[List[TeamMatchResult]] = None) -> int:
        """Generate a summary row per match."""
        if not round_data.matches:
            logger.info("No matches found for match report")
            return 0
        if results is None:
            results = self.ranking_processor.evaluate_matches(round_data)

        data = []
        for match, result in zip(round_data.matches, results):
            completion = result.state.completion
            winner = ''
            if completion.is_over:
                winner = completion.winner.value if completion.winner else 'Halved'
            data.append({
                'Match': match.match_id,
                'Format': match.match_format.value,
                'Side A': self._side_name(match.side_a),
                'Side B': self._side_name(match.side_b),
                'Holes Graded': result.state.holes_graded,
                'Status': result.state.status_text,
                'Finished': completion.is_over,
                'Ended On Hole': completion.ended_on_hole or '',
                'Winner': winner
            })

        df = pd.DataFrame(data)
        df.to_csv(output_file, index=False, encoding='utf-8')

        logger.info(f"Generated match report with {len(data)} matches: {output_file}")
        return len(data)

    @staticmethod
    def _side_name(side) -> str:
        return side.name

    def generate_team_standings_report(self, round_data: RoundData, output_file: str,
                                       results: Optional[List[TeamMatchResult]] = None) -> int:
        """Generate the team standings table."""
        summary = self.ranking_processor.get_team_standings(round_data, results)
        standings = summary['standings']
        if not standings:
            logger.info("No team matches found for standings report")
            return 0

        data = []
        ordered = sorted(standings.values(), key=lambda s: -s.total_points)
        for standing in ordered:
            data.append({
                'Team': standing.name,
                'Points': TextUtils.format_points(standing.total_points),
                'Won': standing.matches_won,
                'Lost': standing.matches_lost,
                'Halved': standing.matches_halved
            })

        df = pd.DataFrame(data)
        df.to_csv(output_file, index=False, encoding='utf-8')

        logger.info(f"Generated team standings report with {len(data)} teams: {output_file} "
                    f"({summary['matches_completed']} completed, {summary['matches_remaining']} remaining)")
        return len(data)

    def generate_all_reports(self, round_data: RoundData, output_directory: Optional[str] = None) -> Dict[str, int]:
        """Generate all available reports in the specified directory."""
        if output_directory is None:
            output_directory = self.config['reports']['output_dir']
        os.makedirs(output_directory, exist_ok=True)

        prefix = TextUtils.safe_filename(round_data.name) or 'round'
        report_results = {}

        for metric_name in self.config['reports']['metrics']:
            metric = RankingMetric.from_name(metric_name)
            report = os.path.join(output_directory, f"{prefix}_leaderboard_{metric.value}.csv")
            report_results[f'leaderboard_{metric.value}'] = self.generate_leaderboard_report(
                round_data, metric, report
            )

        scorecard_report = os.path.join(output_directory, f"{prefix}_scorecards.csv")
        report_results['scorecards'] = self.generate_scorecard_report(round_data, scorecard_report)

        stroke_play_report = os.path.join(output_directory, f"{prefix}_stroke_play.csv")
        report_results['stroke_play'] = self.generate_stroke_play_report(round_data, stroke_play_report)

        if round_data.matches:
            results = self.ranking_processor.evaluate_matches(round_data)

            match_report = os.path.join(output_directory, f"{prefix}_matches.csv")
            report_results['matches'] = self.generate_match_report(round_data, match_report, results)

            standings_report = os.path.join(output_directory, f"{prefix}_team_standings.csv")
            report_results['team_standings'] = self.generate_team_standings_report(
                round_data, standings_report, results
            )

        logger.info(f"Generated all reports in directory: {output_directory}")
        return report_results
