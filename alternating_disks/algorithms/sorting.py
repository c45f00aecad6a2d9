"""
algorithms/sorting.py

Two ways to sort a row of alternating disks with adjacent swaps.

Left-to-right: sweep one way, over and over.
Lawnmower: sweep there, sweep back, repeat.

Every swap undoes exactly one dark-before-light inversion, so both
algorithms make the same number of swaps on the same row. They differ
only in how many passes they need.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Optional, Type
import logging

from alternating_disks.core.row import DiskColor, Row
from alternating_disks.core.result import SortResult

logger = logging.getLogger(__name__)


@dataclass
class SortConfig:
    """Configuration for a sorting run."""
    record_history: bool = False    # Keep the rendered row after every pass


class SortingAlgorithm(ABC):
    """
    Abstract base for adjacent-swap sorting algorithms.

    Subclasses implement a single pass. The base class owns the loop:
    copy the input, run passes until the row is sorted, count swaps.
    """

    name: str = ""

    def __init__(self, config: Optional[SortConfig] = None):
        self.config = config or SortConfig()

    @abstractmethod
    def run_pass(self, row: Row) -> int:
        """
        Run one outer iteration on row in place.

        Returns the number of swaps made.
        """
        pass

    def sort(self, before: Row) -> SortResult:
        """Sort a copy of before. The caller's row is never touched."""
        after = before.copy()
        swap_count = 0
        pass_count = 0
        history: List[str] = []

        while not after.is_sorted():
            swaps = self.run_pass(after)
            swap_count += swaps
            pass_count += 1

            if self.config.record_history:
                history.append(after.render())
            logger.debug(f"{self.name} pass {pass_count}: {swaps} swaps -> {after.render()}")

        logger.info(
            f"{self.name} sorted {after.total_count()} disks "
            f"with {swap_count} swaps in {pass_count} passes"
        )
        return SortResult(
            after=after,
            swap_count=swap_count,
            pass_count=pass_count,
            algorithm=self.name,
            history=tuple(history),
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(record_history={self.config.record_history})"


def _forward_scan(row: Row) -> int:
    """Left to right: push each dark disk one step right past a light one."""
    swaps = 0
    for i in range(row.total_count() - 1):
        if row.get(i) == DiskColor.DARK and row.get(i + 1) == DiskColor.LIGHT:
            row.swap(i)
            swaps += 1
    return swaps


def _backward_scan(row: Row) -> int:
    """Right to left: pull each light disk one step left past a dark one."""
    swaps = 0
    for j in range(row.total_count() - 1, 0, -1):
        if row.get(j) == DiskColor.LIGHT and row.get(j - 1) == DiskColor.DARK:
            row.swap(j - 1)
            swaps += 1
    return swaps


class LeftToRight(SortingAlgorithm):
    """One forward scan per pass."""

    name = "left_to_right"

    def run_pass(self, row: Row) -> int:
        return _forward_scan(row)


class Lawnmower(SortingAlgorithm):
    """
    A forward scan then a backward scan per pass.

    The backward scan runs straight after the forward one, before the
    sortedness check, so light disks travel left in the same pass that
    dark disks travel right.
    """

    name = "lawnmower"

    def run_pass(self, row: Row) -> int:
        swaps = _forward_scan(row)
        swaps += _backward_scan(row)
        return swaps


ALGORITHMS: Dict[str, Type[SortingAlgorithm]] = {
    LeftToRight.name: LeftToRight,
    Lawnmower.name: Lawnmower,
}


def get_algorithm(name: str, config: Optional[SortConfig] = None) -> SortingAlgorithm:
    """Look up an algorithm by name."""
    if name not in ALGORITHMS:
        raise ValueError(f"Unknown algorithm: {name}. Known: {sorted(ALGORITHMS)}")
    return ALGORITHMS[name](config)


def sort_left_to_right(before: Row, config: Optional[SortConfig] = None) -> SortResult:
    """Sort disks using the left-to-right algorithm."""
    return LeftToRight(config).sort(before)


def sort_lawnmower(before: Row, config: Optional[SortConfig] = None) -> SortResult:
    """Sort disks using the lawnmower algorithm."""
    return Lawnmower(config).sort(before)
