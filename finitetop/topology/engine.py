from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Union

from finitetop.elements.candidate import Candidate
from finitetop.elements.subset import GroundSet
from finitetop.logger import topo_logger
from finitetop.topology.backtracking import BacktrackingSearch
from finitetop.topology.generate_and_test import GenerateAndTestSearch

logger = logging.getLogger(__name__)


class Strategy(Enum):
    BACKTRACKING = "backtracking"
    GENERATE_AND_TEST = "generate"

    @classmethod
    def parse(cls, value: Union[str, "Strategy"]) -> "Strategy":
        if isinstance(value, Strategy):
            return value
        for strategy in cls:
            if value in (strategy.value, strategy.name.lower()):
                return strategy
        raise ValueError(f"Unknown enumeration strategy: {value!r}")


@dataclass(frozen=True)
class EnumerationCursor:
    """Snapshot of how far an engine has progressed."""

    strategy: str
    emitted: int
    exhausted: bool
    progress: float


class TopologyEngine:
    """
    Lazy, resumable enumeration of every topology on an n-element ground set.

    Usage:
        engine = TopologyEngine(4)
        while (topology := engine.produce_next()) is not None:
            ...

    Args:
        n: Ground set size, an integer in [3, 7]
        strategy: Search strategy; backtracking unless told otherwise

    Raises:
        InvalidGroundSetSize: If n is out of range
    """

    def __init__(
        self,
        n: int,
        strategy: Union[str, Strategy] = Strategy.BACKTRACKING,
    ):
        self.ground = GroundSet.validated(n)
        self.strategy = Strategy.parse(strategy)
        if self.strategy is Strategy.GENERATE_AND_TEST:
            self._search: Union[GenerateAndTestSearch, BacktrackingSearch] = (
                GenerateAndTestSearch(self.ground)
            )
        else:
            self._search = BacktrackingSearch(self.ground)
        self.emitted = 0

        logger.debug(
            "engine constructed for n=%d using %s", n, self._search.name
        )
        if not topo_logger.disabled:
            topo_logger.section(
                f"Enumerating topologies on {n} points ({self._search.name})"
            )

    @property
    def size(self) -> int:
        return self.ground.size

    @property
    def exhausted(self) -> bool:
        return self._search.exhausted

    @property
    def progress(self) -> float:
        return self._search.progress

    @property
    def search(self) -> Union[GenerateAndTestSearch, BacktrackingSearch]:
        return self._search

    @property
    def cursor(self) -> EnumerationCursor:
        return EnumerationCursor(
            strategy=self._search.name,
            emitted=self.emitted,
            exhausted=self.exhausted,
            progress=self.progress,
        )

    def produce_next(self) -> Optional[Candidate]:
        """Return the next topology, or None once the enumeration is exhausted."""
        topology = self._search.next_topology()
        if topology is None:
            return None
        self.emitted += 1
        return topology

    def __iter__(self) -> Iterator[Candidate]:
        while True:
            topology = self.produce_next()
            if topology is None:
                return
            yield topology


def enumerate_topologies(
    n: int, strategy: Union[str, Strategy] = Strategy.BACKTRACKING
) -> Iterator[Candidate]:
    """Yield every topology on an n-element ground set."""
    yield from TopologyEngine(n, strategy)


@topo_logger.log_execution
def count_topologies(
    n: int, strategy: Union[str, Strategy] = Strategy.BACKTRACKING
) -> int:
    engine = TopologyEngine(n, strategy)
    for _ in engine:
        pass
    if not topo_logger.disabled:
        topo_logger.result(f"topologies on {n} points", engine.emitted)
    return engine.emitted
