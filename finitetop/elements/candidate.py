"""
Candidate families of subsets.

A candidate is stored two ways. ``Candidate`` is the immutable, emitted form:
an arbitrary-precision int with bit i set iff SubsetIndex i is a member.
``TernaryAssignment`` is the working form used while searching: one cell per
SubsetIndex holding Excluded, Included or Undecided, with an undo log so a
search can roll back to any earlier point.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Iterable, Iterator, List, Tuple

import numpy as np

from finitetop.elements.subset import GroundSet, Subset, has_member, members_of


class Cell(IntEnum):
    EXCLUDED = 0
    INCLUDED = 1
    UNDECIDED = 2


class Candidate:
    __slots__ = ("ground", "bitmask")

    def __init__(self, ground: GroundSet, bitmask: int):
        if bitmask < 0 or bitmask >> ground.subset_count:
            raise ValueError(
                f"Bitmask does not fit {ground.subset_count} subset positions"
            )
        self.ground: GroundSet = ground
        self.bitmask: int = bitmask

    @classmethod
    def from_bitmask(cls, bitmask: int, n: int) -> "Candidate":
        return cls(GroundSet(n), bitmask)

    @classmethod
    def from_indices(cls, indices: Iterable[int], n: int) -> "Candidate":
        """Build a candidate from SubsetIndex values; duplicates are ignored."""
        ground = GroundSet(n)
        bitmask = 0
        for index in indices:
            if not 0 <= index < ground.subset_count:
                raise ValueError(f"Subset index {index} out of range for n={n}")
            bitmask |= 1 << index
        return cls(ground, bitmask)

    @classmethod
    def from_assignment(cls, assignment: "TernaryAssignment") -> "Candidate":
        """
        Freeze a fully decided assignment.

        Raises:
            ValueError: If any position is still undecided
        """
        if not assignment.is_complete():
            raise ValueError("Cannot freeze an assignment with undecided positions")
        return cls(assignment.ground, assignment.included_bitmask())

    @property
    def size(self) -> int:
        return self.ground.size

    def members(self) -> List[int]:
        return members_of(self.bitmask)

    def __contains__(self, index: object) -> bool:
        if isinstance(index, Subset):
            return index.ground == self.ground and has_member(self.bitmask, index.index)
        if isinstance(index, int) and index >= 0:
            return has_member(self.bitmask, index)
        return False

    def __iter__(self) -> Iterator[int]:
        return iter(self.members())

    def __len__(self) -> int:
        return bin(self.bitmask).count("1")

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Candidate):
            return self.ground == other.ground and self.bitmask == other.bitmask
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.ground.size, self.bitmask))

    def __repr__(self) -> str:
        return f"Candidate(n={self.ground.size}, members={self.members()})"


class TernaryAssignment:
    """
    Mutable Excluded/Included/Undecided array indexed by SubsetIndex.

    Every write goes through ``assign`` which records the previous value, so
    ``undo_to(mark)`` restores the exact state seen when ``mark()`` was taken.
    """

    def __init__(self, ground: GroundSet):
        self.ground = ground
        self._cells = np.full(ground.subset_count, Cell.UNDECIDED, dtype=np.int8)
        self._undo_log: List[Tuple[int, int]] = []

    def get(self, position: int) -> Cell:
        return Cell(int(self._cells[position]))

    def is_undecided(self, position: int) -> bool:
        return self._cells[position] == Cell.UNDECIDED

    def is_included(self, position: int) -> bool:
        return self._cells[position] == Cell.INCLUDED

    def is_excluded(self, position: int) -> bool:
        return self._cells[position] == Cell.EXCLUDED

    def assign(self, position: int, cell: Cell) -> None:
        self._undo_log.append((position, int(self._cells[position])))
        self._cells[position] = cell

    def mark(self) -> int:
        """Current undo-log height, to be passed back to ``undo_to``."""
        return len(self._undo_log)

    def undo_to(self, mark: int) -> None:
        while len(self._undo_log) > mark:
            position, previous = self._undo_log.pop()
            self._cells[position] = previous

    def included(self) -> List[int]:
        return [int(i) for i in np.flatnonzero(self._cells == Cell.INCLUDED)]

    def included_bitmask(self) -> int:
        bitmask = 0
        for index in self.included():
            bitmask |= 1 << index
        return bitmask

    def first_undecided(self, start: int = 0) -> int:
        """Lowest undecided position >= start, or -1 when none remains."""
        pending = np.flatnonzero(self._cells[start:] == Cell.UNDECIDED)
        if pending.size == 0:
            return -1
        return start + int(pending[0])

    def is_complete(self) -> bool:
        return not bool(np.any(self._cells == Cell.UNDECIDED))

    def cells(self) -> Tuple[int, ...]:
        return tuple(int(c) for c in self._cells)

    def to_candidate(self) -> Candidate:
        return Candidate.from_assignment(self)

    def __len__(self) -> int:
        return len(self._cells)
