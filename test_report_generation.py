#!/usr/bin/env python3
"""
Tests for configuration, round loading and CSV report generation.
"""

import unittest
import tempfile
import os
import shutil
import pandas as pd
import yaml

from config.config_manager import ConfigManager
from config.round_loader import RoundLoader
from golf_scoring_main import main
from models.match import MatchFormat
from models.player import Team
from ranking.ranking_processor import RankingProcessor
from reports.report_generator import ReportGenerator
from scoring.exceptions import ScoringValidationError


def course_dict(hole_count=18):
    return {
        'name': 'Test Links',
        'holes': [{'number': n, 'par': 4, 'stroke_index': n} for n in range(1, hole_count + 1)]
    }


def round_dict():
    return {
        'name': 'Test Round',
        'course': course_dict(),
        'players': [
            {'id': 'alice', 'name': 'Alice', 'handicap': 0, 'scores': [4] * 18},
            {'id': 'ben', 'name': 'Ben', 'handicap': 18, 'scores': [5] * 18},
            {'id': 'chloe', 'name': 'Chloe', 'handicap': 0, 'scores': [4] * 9 + [None] * 9},
        ],
        'teams': [
            {'id': 'blue', 'name': 'Blue'},
            {'id': 'red', 'name': 'Red'},
        ],
        'matches': [
            {'id': 'm1', 'format': 'singles', 'side_a': 'alice', 'side_b': 'ben',
             'team_a': 'blue', 'team_b': 'red'},
        ]
    }


class TestConfigManager(unittest.TestCase):
    """Test cases for ConfigManager."""

    def setUp(self):
        """Set up test fixtures."""
        self.test_dir = tempfile.mkdtemp()
        self.test_config_path = os.path.join(self.test_dir, "test_config.yaml")

    def tearDown(self):
        """Clean up test fixtures."""
        shutil.rmtree(self.test_dir)

    def test_default_config_fallback(self):
        """Test fallback to default config when file is missing."""
        config = ConfigManager.load_config(os.path.join(self.test_dir, "nonexistent.yaml"))
        self.assertEqual(config, ConfigManager.get_default_config())

    def test_partial_config_merged(self):
        """Test a partial config keeps the defaults for keys it leaves out."""
        with open(self.test_config_path, 'w') as f:
            yaml.dump({'scoring': {'match_handicap_mode': 'difference'}}, f)

        config = ConfigManager.load_config(self.test_config_path)
        self.assertEqual(config['scoring']['match_handicap_mode'], 'difference')
        self.assertEqual(config['scoring']['foursomes_allowance'], 0.5)
        self.assertEqual(config['points']['match_win'], 2)

    def test_malformed_config(self):
        """Test malformed YAML falls back to the defaults."""
        with open(self.test_config_path, 'w') as f:
            f.write("scoring: [unclosed\n")

        with self.assertLogs('config.config_manager', level='WARNING'):
            config = ConfigManager.load_config(self.test_config_path)
        self.assertEqual(config['scoring']['match_handicap_mode'], 'full')

    def test_defaults_not_shared(self):
        """Test each call returns an independent copy."""
        config = ConfigManager.get_default_config()
        config['points']['match_win'] = 99
        self.assertEqual(ConfigManager.get_default_config()['points']['match_win'], 2)


class TestRoundLoader(unittest.TestCase):
    """Test cases for RoundLoader."""

    def setUp(self):
        """Set up test fixtures."""
        self.test_dir = tempfile.mkdtemp()
        self.round_path = os.path.join(self.test_dir, "round.yaml")

    def tearDown(self):
        """Clean up test fixtures."""
        shutil.rmtree(self.test_dir)

    def test_load_round(self):
        """Test loading a round from YAML."""
        with open(self.round_path, 'w') as f:
            yaml.dump(round_dict(), f)

        round_data = RoundLoader.load_round(self.round_path)
        self.assertEqual(round_data.name, 'Test Round')
        self.assertEqual(round_data.course.hole_count, 18)
        self.assertEqual(len(round_data.players), 3)
        self.assertEqual(round_data.team_names, {'blue': 'Blue', 'red': 'Red'})

        chloe = round_data.get_player('chloe')
        self.assertEqual(chloe.hole_scores[9:], [0] * 9)
        self.assertEqual(chloe.holes_played, 9)

        match = round_data.matches[0]
        self.assertEqual(match.match_format, MatchFormat.SINGLES)
        self.assertIs(match.side_a, round_data.get_player('alice'))
        self.assertTrue(match.is_team_match)
        self.assertIsNone(match.points)

    def test_team_sides(self):
        """Test team sides with a shared ball and handicap."""
        raw = round_dict()
        raw['matches'] = [{
            'id': 'fs',
            'format': 'foursomes',
            'side_a': {'players': ['alice', 'ben'], 'scores': [4] * 18, 'handicap': 9},
            'side_b': {'id': 'solo', 'name': 'Chloe', 'players': ['chloe'], 'scores': [5] * 18},
            'points': 2
        }]

        round_data = RoundLoader.parse_round(raw)
        match = round_data.matches[0]
        self.assertIsInstance(match.side_a, Team)
        self.assertEqual(match.side_a.name, 'Alice & Ben')
        self.assertEqual(match.side_a.team_id, 'fs_a')
        self.assertEqual(match.side_a.handicap, 9.0)
        self.assertEqual(match.side_b.team_id, 'solo')
        self.assertIsNone(match.side_b.handicap)
        self.assertEqual(match.points, 2.0)
        self.assertFalse(match.is_team_match)

    def test_missing_course(self):
        """Test a round without a course is rejected."""
        with self.assertRaises(ScoringValidationError):
            RoundLoader.parse_round({'players': []})

    def test_duplicate_stroke_index(self):
        """Test a course whose stroke indices are not a permutation is rejected."""
        raw = round_dict()
        raw['course']['holes'][1]['stroke_index'] = 1
        with self.assertRaises(ScoringValidationError):
            RoundLoader.parse_round(raw)

    def test_wrong_score_count(self):
        """Test a scorecard with the wrong number of holes is rejected."""
        raw = round_dict()
        raw['players'][0]['scores'] = [4] * 17
        with self.assertRaises(ScoringValidationError):
            RoundLoader.parse_round(raw)

    def test_unknown_player_in_match(self):
        """Test matches may only reference players in the round."""
        raw = round_dict()
        raw['matches'][0]['side_b'] = 'zoe'
        with self.assertRaises(ScoringValidationError):
            RoundLoader.parse_round(raw)

    def test_unknown_format(self):
        """Test an unknown match format is rejected."""
        raw = round_dict()
        raw['matches'][0]['format'] = 'greensomes'
        with self.assertRaises(ScoringValidationError):
            RoundLoader.parse_round(raw)

    def test_missing_side(self):
        """Test a match needs two sides."""
        raw = round_dict()
        del raw['matches'][0]['side_b']
        with self.assertRaises(ScoringValidationError):
            RoundLoader.parse_round(raw)

    def test_numeric_ids(self):
        """Test numeric player and team ids in YAML resolve like string ids."""
        raw = round_dict()
        raw['players'][0]['id'] = 1
        raw['players'][1]['id'] = 2
        raw['teams'] = [{'id': 10, 'name': 'Blue'}, {'id': 20, 'name': 'Red'}]
        raw['matches'] = [{'id': 'm1', 'side_a': 1, 'side_b': 2, 'team_a': 10, 'team_b': 20}]

        round_data = RoundLoader.parse_round(raw)
        match = round_data.matches[0]
        self.assertIs(match.side_a, round_data.get_player('1'))
        self.assertIs(match.side_b, round_data.get_player('2'))
        self.assertEqual(match.team_a_id, '10')
        self.assertEqual(match.team_b_id, '20')

        summary = RankingProcessor(config={}).get_team_standings(round_data)
        self.assertEqual(summary['standings']['10'].name, 'Blue')
        self.assertEqual(summary['standings']['20'].name, 'Red')

    def test_unknown_numeric_player(self):
        """Test a numeric side that matches no player is rejected."""
        raw = round_dict()
        raw['matches'][0]['side_b'] = 7
        with self.assertRaises(ScoringValidationError):
            RoundLoader.parse_round(raw)

    def test_fractional_score_rejected(self):
        """Test a fractional stroke count in a round file is rejected."""
        raw = round_dict()
        raw['players'][0]['scores'][3] = 4.5
        with self.assertRaises(ScoringValidationError):
            RoundLoader.parse_round(raw)


class TestReportGenerator(unittest.TestCase):
    """Test cases for ReportGenerator."""

    def setUp(self):
        """Set up test fixtures."""
        self.test_dir = tempfile.mkdtemp()
        self.round_data = RoundLoader.parse_round(round_dict())
        self.processor = RankingProcessor(config={})
        self.generator = ReportGenerator(self.processor)

    def tearDown(self):
        """Clean up test fixtures."""
        shutil.rmtree(self.test_dir)

    def read_report(self, name):
        return pd.read_csv(os.path.join(self.test_dir, name), dtype=str, keep_default_na=False)

    def test_generate_all_reports(self):
        """Test every report is written with the expected row counts."""
        results = self.generator.generate_all_reports(self.round_data, self.test_dir)

        self.assertEqual(results, {
            'leaderboard_gross': 3,
            'leaderboard_net': 3,
            'leaderboard_stableford': 3,
            'scorecards': 54,
            'stroke_play': 3,
            'matches': 1,
            'team_standings': 2
        })
        for metric in ('gross', 'net', 'stableford'):
            self.assertTrue(os.path.exists(os.path.join(self.test_dir, f"test_round_leaderboard_{metric}.csv")))

    def test_stableford_leaderboard_csv(self):
        """Test the Stableford leaderboard CSV uses tie notation."""
        self.generator.generate_all_reports(self.round_data, self.test_dir)
        df = self.read_report("test_round_leaderboard_stableford.csv")

        self.assertEqual(list(df.columns), ['Position', 'ID', 'Name', 'Stableford'])
        self.assertEqual(list(df['Position']), ['T1', 'T1', '3'])
        self.assertEqual(list(df['Stableford']), ['36', '36', '18'])

    def test_scorecard_csv(self):
        """Test unplayed holes are blank on the scorecard."""
        self.generator.generate_all_reports(self.round_data, self.test_dir)
        df = self.read_report("test_round_scorecards.csv")

        chloe = df[df['Player'] == 'Chloe']
        self.assertEqual(len(chloe), 18)
        self.assertEqual(chloe.iloc[0]['Points'], '2')
        self.assertEqual(chloe.iloc[17]['Gross'], '')
        self.assertEqual(chloe.iloc[17]['Points'], '')

        ben = df[df['Player'] == 'Ben']
        self.assertEqual(ben.iloc[0]['Net'], '4')

    def test_stroke_play_csv(self):
        """Test relation to par in the stroke play report."""
        self.generator.generate_all_reports(self.round_data, self.test_dir)
        df = self.read_report("test_round_stroke_play.csv")

        ben = df[df['ID'] == 'ben'].iloc[0]
        self.assertEqual(ben['Gross'], '90')
        self.assertEqual(ben['Gross To Par'], '+18')
        self.assertEqual(ben['Net To Par'], 'E')

        chloe = df[df['ID'] == 'chloe'].iloc[0]
        self.assertEqual(chloe['Holes Played'], '9')
        self.assertEqual(chloe['Gross To Par'], 'E')

    def test_match_and_standings_csv(self):
        """Test the halved singles match splits the team point."""
        self.generator.generate_all_reports(self.round_data, self.test_dir)

        matches = self.read_report("test_round_matches.csv")
        self.assertEqual(matches.iloc[0]['Status'], 'AS')
        self.assertEqual(matches.iloc[0]['Winner'], 'Halved')
        self.assertEqual(matches.iloc[0]['Ended On Hole'], '18')

        standings = self.read_report("test_round_team_standings.csv")
        self.assertEqual(list(standings['Points']), ['0.5', '0.5'])
        self.assertEqual(list(standings['Halved']), ['1', '1'])

    def test_no_matches(self):
        """Test match reports are skipped for a stroke-play-only round."""
        self.round_data.matches = []
        results = self.generator.generate_all_reports(self.round_data, self.test_dir)
        self.assertNotIn('matches', results)
        self.assertNotIn('team_standings', results)


class TestMainEntryPoint(unittest.TestCase):
    """Test cases for the command line entry point."""

    def setUp(self):
        """Set up test fixtures."""
        self.test_dir = tempfile.mkdtemp()
        self.round_path = os.path.join(self.test_dir, "round.yaml")
        self.config_path = os.path.join(self.test_dir, "config.yaml")
        self.output_dir = os.path.join(self.test_dir, "reports")

        with open(self.config_path, 'w') as f:
            yaml.dump({'reports': {'output_dir': self.output_dir, 'metrics': ['stableford']}}, f)

    def tearDown(self):
        """Clean up test fixtures."""
        shutil.rmtree(self.test_dir)

    def test_full_run(self):
        """Test a complete run writes the reports."""
        with open(self.round_path, 'w') as f:
            yaml.dump(round_dict(), f)

        main(self.round_path, self.config_path)
        self.assertTrue(os.path.exists(os.path.join(self.output_dir, "test_round_leaderboard_stableford.csv")))
        self.assertFalse(os.path.exists(os.path.join(self.output_dir, "test_round_leaderboard_gross.csv")))

    def test_invalid_round_exits(self):
        """Test invalid round data exits with status 1."""
        raw = round_dict()
        raw['players'][0]['scores'] = [4, -1] + [4] * 16
        with open(self.round_path, 'w') as f:
            yaml.dump(raw, f)

        with self.assertRaises(SystemExit) as context:
            main(self.round_path, self.config_path)
        self.assertEqual(context.exception.code, 1)


if __name__ == '__main__':
    unittest.main(verbosity=2)
