"""
core/result.py

What a sort leaves behind: the final row and how many swaps it took.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple

from .row import Row


@dataclass(frozen=True)
class SortResult:
    """
    Output of one run of a sorting algorithm.

    Holds its own copy of the final row, so later swaps on the
    row that was passed in never leak into the result.
    """
    after: Row
    swap_count: int
    pass_count: int = 0
    algorithm: str = ""
    history: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if self.swap_count < 0:
            raise ValueError(f"swap_count cannot be negative, got {self.swap_count}")
        if self.pass_count < 0:
            raise ValueError(f"pass_count cannot be negative, got {self.pass_count}")
        # Frozen dataclass: assign through object.__setattr__
        object.__setattr__(self, "after", self.after.copy())
        object.__setattr__(self, "history", tuple(self.history))

    def __repr__(self) -> str:
        return (
            f"SortResult(algorithm={self.algorithm!r}, "
            f"swaps={self.swap_count}, passes={self.pass_count}, "
            f"after='{self.after.render()}')"
        )
