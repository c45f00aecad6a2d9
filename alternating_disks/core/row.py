"""
core/row.py

A row of disks, light and dark.

The row only ever changes by swapping two neighbours.
Nothing is inserted, nothing is removed, nothing jumps.

Inspired by:
- The alternating disks puzzle (Levitin)
- Bubble sort on a two-valued key
"""

from __future__ import annotations
from enum import IntEnum
from typing import Iterable, Iterator, Tuple, Union
import numpy as np


class DiskColor(IntEnum):
    """State of one disk."""
    LIGHT = 0
    DARK = 1

    @property
    def code(self) -> str:
        """Single-letter code used by Row.render()."""
        return "L" if self is DiskColor.LIGHT else "D"

    @classmethod
    def from_code(cls, code: str) -> "DiskColor":
        if code == "L":
            return cls.LIGHT
        if code == "D":
            return cls.DARK
        raise ValueError(f"Unknown disk code: {code!r}")


ColorLike = Union[DiskColor, str, int]


class Row:
    """
    An ordered, fixed-length row of 2n disks.

    Built in the alternating state: dark at every even index,
    light at every odd index. Exactly n of each color.

    The only mutator is swap(i), which exchanges positions i and i+1.
    There is no item assignment; every change to a row is an adjacent
    transposition.
    """

    def __init__(self, light_count: int):
        if isinstance(light_count, bool) or not isinstance(light_count, (int, np.integer)):
            raise ValueError(f"light_count must be an integer, got {light_count!r}")
        if light_count < 1:
            raise ValueError(f"light_count must be positive, got {light_count}")

        self._colors = np.full(2 * int(light_count), DiskColor.LIGHT, dtype=np.int8)
        self._colors[::2] = DiskColor.DARK

    @classmethod
    def from_colors(cls, colors: Iterable[ColorLike]) -> "Row":
        """
        Build a row from an explicit sequence of colors.

        Accepts DiskColor members, their integer values, or the letter
        codes "L" / "D". The sequence must be non-empty, even in length,
        and hold as many light disks as dark ones.
        """
        parsed = [DiskColor.from_code(c) if isinstance(c, str) else DiskColor(c) for c in colors]
        if not parsed:
            raise ValueError("A row needs at least one pair of disks")
        if len(parsed) % 2 != 0:
            raise ValueError(f"A row needs an even number of disks, got {len(parsed)}")

        dark = sum(1 for c in parsed if c is DiskColor.DARK)
        if dark * 2 != len(parsed):
            raise ValueError(
                f"A row needs equal light and dark disks, got "
                f"{len(parsed) - dark} light and {dark} dark"
            )

        row = cls(len(parsed) // 2)
        row._colors[:] = parsed
        return row

    def copy(self) -> "Row":
        """Independent copy; swaps on one never show up in the other."""
        clone = Row.__new__(Row)
        clone._colors = self._colors.copy()
        return clone

    # ------------------------------------------------------------------
    # Counts and access
    # ------------------------------------------------------------------

    def total_count(self) -> int:
        return int(self._colors.size)

    def light_count(self) -> int:
        return self.total_count() // 2

    def dark_count(self) -> int:
        return self.light_count()

    def is_valid_index(self, index: int) -> bool:
        return 0 <= index < self.total_count()

    def get(self, index: int) -> DiskColor:
        if not self.is_valid_index(index):
            raise IndexError(f"Disk index {index} out of range for {self.total_count()} disks")
        return DiskColor(int(self._colors[index]))

    def colors(self) -> Tuple[DiskColor, ...]:
        return tuple(DiskColor(int(c)) for c in self._colors)

    def swap(self, left_index: int) -> None:
        """Exchange the disks at left_index and left_index + 1."""
        right_index = left_index + 1
        if not self.is_valid_index(left_index) or not self.is_valid_index(right_index):
            raise IndexError(
                f"Cannot swap at {left_index}: need both {left_index} and "
                f"{right_index} within {self.total_count()} disks"
            )
        colors = self._colors
        colors[left_index], colors[right_index] = colors[right_index], colors[left_index]

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------

    def equals(self, other: "Row") -> bool:
        """Element-wise equality. Rows of different length are never equal."""
        return bool(np.array_equal(self._colors, other._colors))

    def is_alternating(self) -> bool:
        """True if every even index holds a dark disk."""
        # An empty scan is not alternating: at least one dark disk must be seen.
        seen = False
        for i in range(0, self.total_count(), 2):
            if self.get(i) == DiskColor.DARK:
                seen = True
            else:
                return False
        return seen

    def is_sorted(self) -> bool:
        """True if the first half holds only light disks."""
        # Same rule as is_alternating: an empty scan is not sorted.
        seen = False
        for i in range(self.total_count() // 2):
            if self.get(i) == DiskColor.LIGHT:
                seen = True
            else:
                return False
        return seen

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> str:
        return " ".join(DiskColor(int(c)).code for c in self._colors)

    def __len__(self) -> int:
        return self.total_count()

    def __iter__(self) -> Iterator[DiskColor]:
        return iter(self.colors())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Row):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # mutable

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Row(n={self.light_count()}, disks='{self.render()}')"
