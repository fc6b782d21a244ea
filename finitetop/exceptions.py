"""
Custom exceptions for the finite topology enumerator.
"""

from __future__ import annotations
from typing import Any, NoReturn

MIN_GROUND_SET_SIZE = 3
MAX_GROUND_SET_SIZE = 7


class FiniteTopologyError(Exception):
    """Base exception for topology enumeration errors."""

    pass


class InvalidGroundSetSize(FiniteTopologyError, ValueError):
    """Raised when a ground set size falls outside the supported range."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            f"Ground set size must be an integer between {MIN_GROUND_SET_SIZE} "
            f"and {MAX_GROUND_SET_SIZE} inclusive, got {value!r}"
        )

    @staticmethod
    def raise_for(value: Any) -> NoReturn:
        """
        Log the rejected size through the algorithm logger and raise.

        Args:
            value: The rejected ground set size

        Raises:
            InvalidGroundSetSize: Always
        """
        from finitetop.logger import topo_logger

        error = InvalidGroundSetSize(value)
        if not topo_logger.disabled:
            topo_logger.error(str(error))
        raise error
