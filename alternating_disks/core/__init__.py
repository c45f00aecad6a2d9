"""
Core components of the alternating disks package.

- row: The Row of disks and the DiskColor of each
- result: SortResult, the output of a sort
"""

from .row import DiskColor, Row
from .result import SortResult

__all__ = ["DiskColor", "Row", "SortResult"]
