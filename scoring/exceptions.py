"""
Exceptions raised by the scoring engine.
"""


class ScoringValidationError(ValueError):
    """Raised when scoring input is malformed (lengths, stroke indices, scores)."""


class MatchPreconditionError(ScoringValidationError):
    """Raised when a match cannot be evaluated, e.g. it does not have two sides."""
