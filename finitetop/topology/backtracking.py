"""
Backtracking enumeration with constraint propagation.

The search decides one SubsetIndex at a time, lowest first, trying Excluded
before Included. Including a subset immediately forces the union and the
intersection with every other included subset; forcing a subset that is
already Excluded cuts the branch on the spot. Every complete assignment the
search reaches is therefore a topology, no final check needed.

State lives in a single ``TernaryAssignment`` plus an explicit stack of
``Decision`` records. Each decision remembers the undo-log mark taken before
it was applied, so backtracking is a pop followed by ``undo_to(mark)``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from finitetop.elements.candidate import Candidate, Cell, TernaryAssignment
from finitetop.elements.subset import GroundSet
from finitetop.logger import topo_logger, format_assignment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Decision:
    """One branching choice on the search path."""

    position: int
    cell: Cell
    mark: int
    alternate_open: bool


class BacktrackingSearch:
    name = "backtracking"

    def __init__(self, ground: GroundSet):
        self.ground = ground
        self.assignment = TernaryAssignment(ground)
        self._stack: List[Decision] = []
        self._started = False
        self._exhausted = False

        self.nodes_visited = 0
        self.branches_cut = 0

        # Contains-bottom and contains-top are forced before the search starts.
        for forced in (ground.bottom, ground.top):
            if not self.assignment.is_included(forced):
                self._include(forced)
        self._root_mark = self.assignment.mark()

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    @property
    def depth(self) -> int:
        return len(self._stack)

    @property
    def progress(self) -> float:
        """Fraction of the search tree already explored.

        A decision sitting on Included means its Excluded subtree is done, so
        the path reads as a binary fraction.
        """
        if self._exhausted:
            return 1.0
        return sum(
            0.5 ** (depth + 1)
            for depth, decision in enumerate(self._stack)
            if decision.cell is Cell.INCLUDED
        )

    def next_topology(self) -> Optional[Candidate]:
        """Resume the search and return the next topology, or None when exhausted."""
        if self._exhausted:
            return None

        if self._started:
            found = self._backtrack() and self._descend()
        else:
            self._started = True
            found = self._descend()

        if not found:
            self._finish()
            return None

        candidate = self.assignment.to_candidate()
        if not topo_logger.disabled:
            topo_logger.debug(
                f"emit {format_assignment(self.assignment.cells())} "
                f"(depth {self.depth})"
            )
        return candidate

    def _finish(self) -> None:
        self._exhausted = True
        self._stack.clear()
        self.assignment.undo_to(self._root_mark)
        logger.debug(
            "backtracking over n=%d exhausted: %d nodes visited, %d branches cut",
            self.ground.size,
            self.nodes_visited,
            self.branches_cut,
        )
        if not topo_logger.disabled:
            topo_logger.result("nodes visited", self.nodes_visited)
            topo_logger.result("branches cut", self.branches_cut)

    def _descend(self) -> bool:
        """Extend the current partial assignment to its first complete one.

        Returns False once no complete assignment is left anywhere.
        """
        position = 0
        while True:
            position = self.assignment.first_undecided(position)
            if position < 0:
                return True
            if self._decide(position, Cell.EXCLUDED, alternate_open=True):
                continue
            if self._decide(position, Cell.INCLUDED, alternate_open=False):
                continue
            if not self._backtrack():
                return False
            position = 0

    def _backtrack(self) -> bool:
        """Undo decisions until one can switch to Included.

        Returns False when the stack runs empty.
        """
        while self._stack:
            decision = self._stack.pop()
            self.assignment.undo_to(decision.mark)
            if decision.alternate_open and self._decide(
                decision.position, Cell.INCLUDED, alternate_open=False
            ):
                return True
        return False

    def _decide(self, position: int, cell: Cell, alternate_open: bool) -> bool:
        mark = self.assignment.mark()
        self.nodes_visited += 1
        if cell is Cell.INCLUDED:
            applied = self._include(position)
        else:
            applied = self._exclude(position)

        if applied:
            self._stack.append(Decision(position, cell, mark, alternate_open))
            return True

        self.assignment.undo_to(mark)
        self.branches_cut += 1
        return False

    def _exclude(self, position: int) -> bool:
        if position in (self.ground.bottom, self.ground.top):
            return False
        self.assignment.assign(position, Cell.EXCLUDED)
        return True

    def _include(self, position: int) -> bool:
        """Include ``position`` and every subset its inclusion forces.

        Returns False if some forced union or intersection is already
        Excluded. The caller is responsible for undoing partial writes.
        """
        assignment = self.assignment
        assignment.assign(position, Cell.INCLUDED)
        worklist = [position]
        while worklist:
            x = worklist.pop()
            for y in assignment.included():
                for forced in (x | y, x & y):
                    if assignment.is_included(forced):
                        continue
                    if assignment.is_excluded(forced):
                        return False
                    assignment.assign(forced, Cell.INCLUDED)
                    worklist.append(forced)
        return True
