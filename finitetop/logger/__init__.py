"""Logging package for finitetop."""

from finitetop.logger.base_logger import AlgorithmLogger
from finitetop.logger.table_logger import TableLogger
from finitetop.logger.combined_logger import Logger
from finitetop.logger.formatting import (
    format_candidate,
    format_assignment,
)

# Unified singleton for search tracing
topo_logger = Logger("FiniteTopology")
topo_logger.disabled = True

__all__ = [
    "AlgorithmLogger",
    "TableLogger",
    "Logger",
    "topo_logger",
    "format_candidate",
    "format_assignment",
]
