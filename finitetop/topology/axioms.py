"""
Topology axioms over a family of subsets.

A family T of SubsetIndex values over a ground set with top index U is a
topology when 0 in T, U in T, and T is closed under pairwise union (bitwise
OR) and pairwise intersection (bitwise AND).
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, List, Optional, Set, Tuple

from finitetop.elements.candidate import Candidate
from finitetop.elements.subset import GroundSet, members_of


class Axiom(Enum):
    CONTAINS_BOTTOM = "contains-bottom"
    CONTAINS_TOP = "contains-top"
    UNION_CLOSED = "union-closed"
    INTERSECTION_CLOSED = "intersection-closed"


@dataclass(frozen=True)
class AxiomViolation:
    """First broken axiom found in a candidate.

    ``pair`` is the witnessing pair of members for the closure axioms and
    ``None`` for the bottom/top axioms. ``missing`` is the SubsetIndex that
    would have to be added.
    """

    axiom: Axiom
    missing: int
    pair: Optional[Tuple[int, int]] = None

    def describe(self) -> str:
        if self.pair is None:
            return f"{self.axiom.value}: subset {self.missing} missing"
        i, j = self.pair
        op = "|" if self.axiom is Axiom.UNION_CLOSED else "&"
        return f"{self.axiom.value}: {i} {op} {j} = {self.missing} missing"


def _find_bitmask_violation(mask: int, n: int) -> Optional[AxiomViolation]:
    top = (1 << n) - 1

    if not mask & 1:
        return AxiomViolation(Axiom.CONTAINS_BOTTOM, 0)
    if not mask >> top & 1:
        return AxiomViolation(Axiom.CONTAINS_TOP, top)

    members = members_of(mask)

    for a, i in enumerate(members):
        for j in members[a + 1 :]:
            union = i | j
            if not mask >> union & 1:
                return AxiomViolation(Axiom.UNION_CLOSED, union, (i, j))

    for a, i in enumerate(members):
        for j in members[a + 1 :]:
            meet = i & j
            if not mask >> meet & 1:
                return AxiomViolation(Axiom.INTERSECTION_CLOSED, meet, (i, j))

    return None


def find_violation(candidate: Candidate) -> Optional[AxiomViolation]:
    """
    Return the first axiom the candidate breaks, or None if it is a topology.

    Axioms are checked in the order bottom, top, union, intersection. Within
    each closure axiom, pairs (i, j) with i < j are examined in increasing
    order, so the reported violation is deterministic.
    """
    return _find_bitmask_violation(candidate.bitmask, candidate.size)


def is_topology_bitmask(mask: int, n: int) -> bool:
    """Closure predicate on a raw candidate bitmask of width 2**n."""
    return _find_bitmask_violation(mask, n) is None


def is_topology(candidate: Candidate) -> bool:
    return find_violation(candidate) is None


def _close(members: Iterable[int], combine: Callable[[int, int], int]) -> Set[int]:
    closed: Set[int] = set(members)
    frontier: List[int] = sorted(closed)
    while frontier:
        x = frontier.pop()
        for y in list(closed):
            z = combine(x, y)
            if z not in closed:
                closed.add(z)
                frontier.append(z)
    return closed


def union_closure(members: Iterable[int], ground: GroundSet) -> Candidate:
    """Smallest union-closed family containing ``members``."""
    return Candidate.from_indices(
        _close(members, operator.or_), ground.size
    )


def intersection_closure(members: Iterable[int], ground: GroundSet) -> Candidate:
    """Smallest intersection-closed family containing ``members``."""
    return Candidate.from_indices(
        _close(members, operator.and_), ground.size
    )


def generated_topology(members: Iterable[int], ground: GroundSet) -> Candidate:
    """Smallest topology containing ``members``."""
    seed = set(members) | {ground.bottom, ground.top}
    # The intersection closure of a union-closed family is still union-closed.
    return intersection_closure(union_closure(seed, ground).members(), ground)
