"""
Round file loading for the golf scoring system.

A round file is YAML with a course, the players' scores and, optionally,
the event teams and the matches to evaluate:

    course:
      name: Links
      holes:
        - {number: 1, par: 4, stroke_index: 7, distance: 380}
    players:
      - {id: alice, name: Alice, handicap: 12.4, scores: [5, 4, null, ...]}
    teams:
      - {id: europe, name: Europe}
    matches:
      - {id: m1, format: singles, side_a: alice, side_b: carol, team_a: europe, team_b: usa}
      - id: m2
        format: foursomes
        side_a: {players: [bob, erin], scores: [...], handicap: 9}
        side_b: {players: [dan, fay], scores: [...]}
"""

import logging
import yaml
from typing import Any, Dict, List, Union

from models.course import Course, Hole
from models.match import MatchFormat
from models.player import PlayerRoundScore, Team
from models.round import MatchDefinition, RoundData
from scoring.exceptions import ScoringValidationError
from scoring.validation import validate_course, validate_scores

logger = logging.getLogger(__name__)


class RoundLoader:
    """Loads and validates round files."""

    @staticmethod
    def load_round(round_file: str) -> RoundData:
        """Load a round from a YAML file."""
        with open(round_file, 'r', encoding='utf-8') as f:
            raw = yaml.safe_load(f) or {}

        round_data = RoundLoader.parse_round(raw)
        logger.info(f"Loaded round '{round_data.name}' from {round_file}: "
                    f"{len(round_data.players)} players, {len(round_data.matches)} matches")
        return round_data

    @staticmethod
    def parse_round(raw: Dict[str, Any]) -> RoundData:
        """Build a RoundData from already-parsed YAML."""
        if 'course' not in raw:
            raise ScoringValidationError("Round file has no course")

        course = RoundLoader._parse_course(raw['course'])
        hole_count = course.hole_count

        players = []
        for entry in raw.get('players') or []:
            player = PlayerRoundScore(
                player_id=str(entry['id']),
                handicap=float(entry.get('handicap', 0.0)),
                hole_scores=validate_scores(entry.get('scores') or [0] * hole_count, hole_count),
                name=entry.get('name')
            )
            players.append(player)

        team_names = {str(team['id']): team.get('name', str(team['id'])) for team in raw.get('teams') or []}

        round_data = RoundData(
            course=course,
            players=players,
            team_names=team_names,
            name=raw.get('name', course.name)
        )

        for entry in raw.get('matches') or []:
            round_data.matches.append(RoundLoader._parse_match(entry, round_data))

        return round_data

    @staticmethod
    def _parse_course(raw: Dict[str, Any]) -> Course:
        holes = [
            Hole(
                number=int(hole.get('number', index)),
                par=int(hole['par']),
                stroke_index=int(hole['stroke_index']),
                distance=int(hole.get('distance', 0))
            )
            for index, hole in enumerate(raw.get('holes') or [], 1)
        ]
        course = Course(name=raw.get('name', 'Unnamed course'), holes=holes)
        validate_course(course.pars, course.stroke_indices)
        return course

    @staticmethod
    def _parse_match(raw: Dict[str, Any], round_data: RoundData) -> MatchDefinition:
        match_id = str(raw.get('id', f"match_{len(round_data.matches) + 1}"))
        try:
            match_format = MatchFormat(raw.get('format', 'singles'))
        except ValueError:
            raise ScoringValidationError(f"Match {match_id} has unknown format {raw.get('format')!r}")

        if 'side_a' not in raw or 'side_b' not in raw:
            raise ScoringValidationError(f"Match {match_id} needs side_a and side_b")

        return MatchDefinition(
            match_id=match_id,
            match_format=match_format,
            side_a=RoundLoader._parse_side(raw['side_a'], f"{match_id}_a", round_data),
            side_b=RoundLoader._parse_side(raw['side_b'], f"{match_id}_b", round_data),
            team_a_id=str(raw['team_a']) if raw.get('team_a') is not None else None,
            team_b_id=str(raw['team_b']) if raw.get('team_b') is not None else None,
            points=float(raw['points']) if 'points' in raw else None
        )

    @staticmethod
    def _parse_side(raw: Union[str, Dict[str, Any]], side_id: str,
                    round_data: RoundData) -> Union[PlayerRoundScore, Team]:
        if not isinstance(raw, dict):
            return RoundLoader._lookup_player(str(raw), round_data)

        players: List[PlayerRoundScore] = [
            RoundLoader._lookup_player(str(player_id), round_data) for player_id in raw.get('players') or []
        ]
        scores = raw.get('scores')
        if scores is not None:
            scores = validate_scores(scores, round_data.course.hole_count)
        handicap = raw.get('handicap')

        return Team(
            team_id=str(raw.get('id', side_id)),
            name=raw.get('name', " & ".join(player.name for player in players) or side_id),
            players=players,
            hole_scores=scores,
            handicap=float(handicap) if handicap is not None else None
        )

    @staticmethod
    def _lookup_player(player_id: str, round_data: RoundData) -> PlayerRoundScore:
        player = round_data.get_player(player_id)
        if player is None:
            raise ScoringValidationError(f"Unknown player '{player_id}' in match definition")
        return player
