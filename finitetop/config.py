from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from finitetop.topology.engine import Strategy


@dataclass
class EnumerationConfig:
    """Configuration for one enumeration run."""

    size: int
    strategy: Strategy = Strategy.BACKTRACKING
    limit: Optional[int] = None
    count_only: bool = False
    show_progress: bool = False
    progress_every: int = 1000
    summary: bool = False
    debug: bool = False
    debug_html: Optional[Path] = None
    generate: Optional[List[str]] = None
    logger_name: str = "finitetop.enumeration"

    @classmethod
    def from_namespace(cls, args: argparse.Namespace) -> "EnumerationConfig":
        return cls(
            size=args.n,
            strategy=Strategy.parse(args.strategy),
            limit=args.limit,
            count_only=args.count,
            show_progress=args.progress,
            progress_every=args.progress_every,
            summary=args.summary,
            debug=args.debug,
            debug_html=args.debug_html,
            generate=args.generate,
        )

    @property
    def tracing(self) -> bool:
        """True when the algorithm logger should record the search."""
        return self.debug or self.debug_html is not None
