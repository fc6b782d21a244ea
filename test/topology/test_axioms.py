"""
Tests for the topology closure predicate.
"""

import itertools

import pytest
from hypothesis import given, settings, strategies as st

from finitetop.elements.candidate import Candidate
from finitetop.elements.subset import GroundSet
from finitetop.topology.axioms import (
    Axiom,
    find_violation,
    generated_topology,
    intersection_closure,
    is_topology,
    is_topology_bitmask,
    union_closure,
)


def satisfies_axioms_by_definition(members, n):
    family = set(members)
    top = (1 << n) - 1
    if 0 not in family or top not in family:
        return False
    return all(
        (i | j) in family and (i & j) in family
        for i, j in itertools.product(family, repeat=2)
    )


def test_discrete_topology_is_accepted():
    assert is_topology(Candidate.from_indices(range(8), 3))


def test_indiscrete_topology_is_accepted():
    assert is_topology(Candidate.from_indices([0, 7], 3))


def test_missing_union_is_rejected():
    # {a} ∪ {b} = {a,b} (index 3) is missing
    candidate = Candidate.from_indices([0, 1, 2, 7], 3)
    violation = find_violation(candidate)
    assert violation is not None
    assert violation.axiom is Axiom.UNION_CLOSED
    assert violation.pair == (1, 2)
    assert violation.missing == 3
    assert "1 | 2 = 3" in violation.describe()


def test_missing_intersection_is_rejected():
    # {a,b} ∩ {b,c} = {b} (index 2) is missing
    candidate = Candidate.from_indices([0, 3, 6, 7], 3)
    violation = find_violation(candidate)
    assert violation is not None
    assert violation.axiom is Axiom.INTERSECTION_CLOSED
    assert violation.pair == (3, 6)
    assert violation.missing == 2


@pytest.mark.parametrize(
    "members,axiom,missing",
    [
        ([1, 7], Axiom.CONTAINS_BOTTOM, 0),
        ([0, 3], Axiom.CONTAINS_TOP, 7),
        ([], Axiom.CONTAINS_BOTTOM, 0),
    ],
)
def test_missing_bottom_or_top(members, axiom, missing):
    violation = find_violation(Candidate.from_indices(members, 3))
    assert violation is not None
    assert violation.axiom is axiom
    assert violation.missing == missing
    assert violation.pair is None


def test_bitmask_predicate_matches_candidate_predicate():
    for mask in range(1 << 8):
        candidate = Candidate.from_bitmask(mask, 3)
        assert is_topology_bitmask(mask, 3) == is_topology(candidate)


def test_exactly_29_bitmasks_pass_on_three_points():
    assert sum(is_topology_bitmask(mask, 3) for mask in range(1 << 8)) == 29


@given(st.sets(st.integers(min_value=0, max_value=15)))
@settings(max_examples=300)
def test_predicate_agrees_with_definition(members):
    candidate = Candidate.from_indices(members, 4)
    assert is_topology(candidate) == satisfies_axioms_by_definition(members, 4)


@given(st.sets(st.integers(min_value=0, max_value=31), max_size=6))
@settings(max_examples=100)
def test_generated_topology_is_smallest_containing_topology(members):
    ground = GroundSet(5)
    generated = generated_topology(members, ground)
    assert is_topology(generated)
    assert all(m in generated for m in members)
    # Removing any non-forced member of the generated family breaks it,
    # or the member was one of the seeds.
    for index in generated.members():
        if index in members or index in (ground.bottom, ground.top):
            continue
        reduced = Candidate(ground, generated.bitmask & ~(1 << index))
        assert not is_topology(reduced)


def test_single_operation_closures():
    ground = GroundSet(3)
    assert union_closure([1, 2, 4], ground).members() == [1, 2, 3, 4, 5, 6, 7]
    # 1 & 2 = 0, so the empty set appears too
    assert intersection_closure([3, 5, 6], ground).members() == [0, 1, 2, 3, 4, 5, 6]


def test_generated_topology_from_two_points():
    ground = GroundSet(3)
    assert generated_topology([1, 2], ground).members() == [0, 1, 2, 3, 7]
    assert generated_topology([3, 6], ground).members() == [0, 2, 3, 6, 7]
