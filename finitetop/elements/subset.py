# subset.py
from dataclasses import dataclass
from typing import Any, Iterator, List, Tuple
from functools import total_ordering

from finitetop.exceptions import (
    InvalidGroundSetSize,
    MIN_GROUND_SET_SIZE,
    MAX_GROUND_SET_SIZE,
)


def subset_count(n: int) -> int:
    """Number of subsets of an n-element ground set."""
    return 1 << n


def element_label(j: int) -> str:
    """Label of ground-set element j: 'a', 'b', ..."""
    return chr(ord("a") + j)


def element_positions(index: int, n: int) -> Tuple[int, ...]:
    """Positions of the ground-set elements selected by a SubsetIndex."""
    return tuple(j for j in range(n) if index & (1 << j))


def element_labels(index: int, n: int) -> Tuple[str, ...]:
    """Labels of the ground-set elements selected by a SubsetIndex, in order."""
    return tuple(element_label(j) for j in element_positions(index, n))


def parse_subset(text: str, n: int) -> int:
    """
    SubsetIndex of a subset written with element labels.

    Accepts "ab", "a,b" and "{a,b}"; "{}" and "" denote the empty set.

    Raises:
        ValueError: If a label is not an element of the n-element ground set
    """
    index = 0
    for char in text.strip().strip("{}"):
        if char in ", ":
            continue
        j = ord(char) - ord("a")
        if not 0 <= j < n:
            raise ValueError(f"{char!r} is not an element of a {n}-element ground set")
        index |= 1 << j
    return index


def has_member(mask: int, index: int) -> bool:
    """True if SubsetIndex ``index`` belongs to the candidate ``mask``."""
    return bool(mask >> index & 1)


def with_member(mask: int, index: int) -> int:
    return mask | (1 << index)


def without_member(mask: int, index: int) -> int:
    return mask & ~(1 << index)


def members_of(mask: int) -> List[int]:
    """SubsetIndex values set in a candidate bitmask, in increasing order."""
    members: List[int] = []
    index = 0
    while mask:
        if mask & 1:
            members.append(index)
        mask >>= 1
        index += 1
    return members


@dataclass(frozen=True)
class GroundSet:
    """
    The universe of ``size`` labeled elements over which topologies are built.

    Every subset is identified by an integer in ``[0, 2**size)`` whose bit j
    selects element j.
    """

    size: int

    @classmethod
    def validated(cls, n: Any) -> "GroundSet":
        """
        Build a ground set after checking the supported size range.

        Raises:
            InvalidGroundSetSize: If n is not an integer in [3, 7]
        """
        if (
            isinstance(n, bool)
            or not isinstance(n, int)
            or not MIN_GROUND_SET_SIZE <= n <= MAX_GROUND_SET_SIZE
        ):
            InvalidGroundSetSize.raise_for(n)
        return cls(n)

    @property
    def subset_count(self) -> int:
        return subset_count(self.size)

    @property
    def bottom(self) -> int:
        """Index of the empty set."""
        return 0

    @property
    def top(self) -> int:
        """Index of the full ground set."""
        return self.subset_count - 1

    @property
    def labels(self) -> Tuple[str, ...]:
        return tuple(element_label(j) for j in range(self.size))

    def indices(self) -> range:
        return range(self.subset_count)

    def subset(self, index: int) -> "Subset":
        return Subset(index, self)

    def __len__(self) -> int:
        return self.size


@total_ordering
class Subset:
    __slots__ = ("index", "ground")

    def __init__(self, index: int, ground: GroundSet):
        """
        Subset represents one member of the power set of a ground set.
        index: the SubsetIndex, bit j set iff element j belongs to the subset.
        """
        if not 0 <= index < ground.subset_count:
            raise ValueError(
                f"Subset index {index} out of range for ground set of size {ground.size}"
            )
        self.index: int = index
        self.ground: GroundSet = ground

    @property
    def positions(self) -> Tuple[int, ...]:
        return element_positions(self.index, self.ground.size)

    @property
    def labels(self) -> Tuple[str, ...]:
        return element_labels(self.index, self.ground.size)

    def __iter__(self) -> Iterator[int]:
        return iter(self.positions)

    def __len__(self) -> int:
        return bin(self.index).count("1")

    def __contains__(self, element: object) -> bool:
        if isinstance(element, str):
            return element in self.labels
        if isinstance(element, int):
            return 0 <= element < self.ground.size and bool(self.index >> element & 1)
        return False

    def _check_compatible(self, other: "Subset") -> None:
        if self.ground != other.ground:
            raise ValueError("Cannot combine subsets of different ground sets")

    def __or__(self, other: Any) -> "Subset":
        if isinstance(other, Subset):
            self._check_compatible(other)
            return Subset(self.index | other.index, self.ground)
        return NotImplemented

    def __and__(self, other: Any) -> "Subset":
        if isinstance(other, Subset):
            self._check_compatible(other)
            return Subset(self.index & other.index, self.ground)
        return NotImplemented

    def __lt__(self, other: Any) -> bool:
        if isinstance(other, Subset):
            return self.index < other.index
        return NotImplemented

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Subset):
            return self.index == other.index and self.ground == other.ground
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.index, self.ground.size))

    def __str__(self) -> str:
        return "{" + ",".join(self.labels) + "}"

    def __repr__(self) -> str:
        return f"Subset({self.index}, n={self.ground.size})"
