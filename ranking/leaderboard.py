"""
Leaderboard ranking with golf tie notation.

Tied entries share a position and are labelled "T2"; the next distinct
entry takes the position it would have had without the tie, so two players
tied for second are followed by "4".
"""

from collections import Counter
from enum import Enum
from typing import List, Sequence

from models.leaderboard import LeaderboardEntry, RankedEntry

NO_POSITION_LABEL = "-"


class RankingMetric(Enum):
    """Leaderboard metrics and their sort direction."""
    GROSS = "gross"
    NET = "net"
    STABLEFORD = "stableford"
    MATCH_POINTS = "matches"

    @property
    def descending(self) -> bool:
        return self in (RankingMetric.STABLEFORD, RankingMetric.MATCH_POINTS)

    @classmethod
    def from_name(cls, name: str) -> "RankingMetric":
        for metric in cls:
            if metric.value == name.lower() or metric.name == name.upper():
                return metric
        raise ValueError(f"Unknown ranking metric: {name}")


def rank_entries(entries: Sequence[LeaderboardEntry], metric: RankingMetric) -> List[RankedEntry]:
    """
    Rank entries by the metric.

    The sort is stable, so equal values keep their input order. Ties are
    exact comparisons of the values. Entries without a value (nothing
    played yet) come last with no position.
    """
    valued = [entry for entry in entries if entry.value is not None]
    unvalued = [entry for entry in entries if entry.value is None]

    if metric.descending:
        ordered = sorted(valued, key=lambda e: -e.value)
    else:
        ordered = sorted(valued, key=lambda e: e.value)

    positions = []
    for index, entry in enumerate(ordered):
        if index > 0 and entry.value == ordered[index - 1].value:
            positions.append(positions[-1])
        else:
            positions.append(index + 1)

    counts = Counter(positions)
    ranked = []
    for position, entry in zip(positions, ordered):
        label = f"T{position}" if counts[position] > 1 else str(position)
        ranked.append(RankedEntry(position, label, entry.entity_id, entry.name, entry.value))

    for entry in unvalued:
        ranked.append(RankedEntry(None, NO_POSITION_LABEL, entry.entity_id, entry.name, None))

    return ranked


def match_points_value(matches_won: int, matches_halved: int, win: float = 2, halve: float = 1) -> float:
    """Leaderboard value for the match-points metric."""
    return matches_won * win + matches_halved * halve
