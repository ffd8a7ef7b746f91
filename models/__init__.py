"""
Models package for the golf scoring system.

This package contains all data models and dataclasses used throughout the system.
"""

from .course import Hole, Course
from .player import PlayerRoundScore, Team
from .match import (
    Side, MatchFormat, HoleResult, RunningStatus, MatchCompletion, MatchState, TeamMatchResult
)
from .leaderboard import StrokePlayTotals, LeaderboardEntry, RankedEntry, TeamStanding
from .round import MatchDefinition, RoundData

__all__ = [
    'Hole', 'Course', 'PlayerRoundScore', 'Team', 'MatchDefinition', 'RoundData',
    'Side', 'MatchFormat', 'HoleResult', 'RunningStatus', 'MatchCompletion', 'MatchState',
    'TeamMatchResult', 'StrokePlayTotals', 'LeaderboardEntry', 'RankedEntry', 'TeamStanding'
]
