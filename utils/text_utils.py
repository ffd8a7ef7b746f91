"""
Text formatting utilities for the golf scoring system.
"""

from typing import Optional

from models.match import Side


class TextUtils:
    """Utilities for rendering scores and match status as golf shorthand."""

    @staticmethod
    def format_to_par(relative: int) -> str:
        """Format a score relative to par: "E", "+3" or "-2"."""
        if relative == 0:
            return "E"
        if relative > 0:
            return f"+{relative}"
        return str(relative)

    @staticmethod
    def format_score_with_par(score: int, relative: int) -> str:
        """Format a gross score followed by its relation to par, e.g. "75 (+3)"."""
        return f"{score} ({TextUtils.format_to_par(relative)})"

    @staticmethod
    def format_match_status(differential: int, leader: Optional[Side],
                            perspective: Side = Side.A) -> str:
        """
        Live match status from one side's point of view.

        Returns "AS" when level, otherwise "2 UP" or "2 DOWN".
        """
        if differential == 0 or leader is None:
            return "AS"
        direction = "UP" if leader is perspective else "DOWN"
        return f"{differential} {direction}"

    @staticmethod
    def format_match_result(differential: int, holes_remaining: int) -> str:
        """Final result: "3&2" when won early, "1 UP" when decided on the last hole."""
        if holes_remaining == 0:
            return f"{differential} UP"
        return f"{differential}&{holes_remaining}"

    @staticmethod
    def format_points(points: float) -> str:
        """Format team points without a trailing ".0" (3.5 -> "3.5", 3.0 -> "3")."""
        if float(points).is_integer():
            return str(int(points))
        return f"{points:g}"

    @staticmethod
    def safe_filename(name: str) -> str:
        """Sanitize a name for use in a report filename."""
        safe = "".join(c for c in name if c.isalnum() or c in (' ', '-', '_')).strip()
        return safe.replace(' ', '_').lower()
