"""
alternating_disks/algorithms/

Adjacent-swap sorting algorithms for the alternating disks problem.

Algorithms:
- LeftToRight: repeated left-to-right sweeps
- Lawnmower: a sweep right then a sweep back left, repeated
"""

from .sorting import (
    ALGORITHMS,
    Lawnmower,
    LeftToRight,
    SortConfig,
    SortingAlgorithm,
    get_algorithm,
    sort_lawnmower,
    sort_left_to_right,
)

__all__ = [
    "ALGORITHMS",
    "Lawnmower",
    "LeftToRight",
    "SortConfig",
    "SortingAlgorithm",
    "get_algorithm",
    "sort_lawnmower",
    "sort_left_to_right",
]
