"""
Course data models for the golf scoring system.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class Hole:
    """A single hole on a course."""
    number: int
    par: int
    stroke_index: int
    distance: int = 0


@dataclass
class Course:
    """A course definition: an ordered list of holes."""
    name: str
    holes: List[Hole] = field(default_factory=list)

    @property
    def hole_count(self) -> int:
        return len(self.holes)

    @property
    def pars(self) -> List[int]:
        return [hole.par for hole in self.holes]

    @property
    def stroke_indices(self) -> List[int]:
        return [hole.stroke_index for hole in self.holes]

    @property
    def total_par(self) -> int:
        return sum(self.pars)
