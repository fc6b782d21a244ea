import pytest

from finitetop.elements.candidate import Candidate, Cell, TernaryAssignment
from finitetop.elements.subset import GroundSet, Subset


def test_candidate_from_indices_and_bitmask_agree():
    from_indices = Candidate.from_indices([0, 1, 3, 7], 3)
    from_bitmask = Candidate.from_bitmask(0b10001011, 3)
    assert from_indices == from_bitmask
    assert hash(from_indices) == hash(from_bitmask)
    assert from_indices.members() == [0, 1, 3, 7]
    assert len(from_indices) == 4
    assert list(from_indices) == [0, 1, 3, 7]


def test_candidate_membership():
    candidate = Candidate.from_indices([0, 7], 3)
    assert 0 in candidate
    assert 7 in candidate
    assert 3 not in candidate
    assert Subset(7, GroundSet(3)) in candidate
    assert Subset(7, GroundSet(4)) not in candidate
    assert "a" not in candidate


def test_candidates_on_different_sizes_differ():
    assert Candidate.from_indices([0], 3) != Candidate.from_indices([0], 4)


def test_candidate_rejects_bits_beyond_width():
    with pytest.raises(ValueError):
        Candidate.from_bitmask(1 << 8, 3)
    with pytest.raises(ValueError):
        Candidate.from_indices([8], 3)


def test_wide_candidate_for_seven_points():
    candidate = Candidate.from_indices([0, 127], 7)
    assert candidate.bitmask == (1 << 127) | 1
    assert candidate.members() == [0, 127]


def test_assignment_starts_undecided():
    assignment = TernaryAssignment(GroundSet(3))
    assert len(assignment) == 8
    assert all(assignment.get(i) is Cell.UNDECIDED for i in range(8))
    assert assignment.first_undecided() == 0
    assert not assignment.is_complete()


def test_assignment_undo_restores_marked_state():
    assignment = TernaryAssignment(GroundSet(3))
    assignment.assign(0, Cell.INCLUDED)
    mark = assignment.mark()
    assignment.assign(1, Cell.EXCLUDED)
    assignment.assign(3, Cell.INCLUDED)
    assignment.assign(3, Cell.EXCLUDED)
    assert assignment.is_excluded(3)

    assignment.undo_to(mark)

    assert assignment.is_included(0)
    assert assignment.is_undecided(1)
    assert assignment.is_undecided(3)
    assert assignment.mark() == mark


def test_assignment_first_undecided_skips_decided():
    assignment = TernaryAssignment(GroundSet(3))
    for position in (0, 1, 2):
        assignment.assign(position, Cell.EXCLUDED)
    assignment.assign(4, Cell.INCLUDED)
    assert assignment.first_undecided() == 3
    assert assignment.first_undecided(4) == 5
    for position in (3, 5, 6, 7):
        assignment.assign(position, Cell.INCLUDED)
    assert assignment.first_undecided() == -1


def test_complete_assignment_freezes_to_candidate():
    assignment = TernaryAssignment(GroundSet(3))
    for position in range(8):
        assignment.assign(
            position, Cell.INCLUDED if position in (0, 3, 7) else Cell.EXCLUDED
        )
    assert assignment.is_complete()
    assert assignment.included() == [0, 3, 7]
    assert assignment.to_candidate() == Candidate.from_indices([0, 3, 7], 3)


def test_partial_assignment_cannot_freeze():
    assignment = TernaryAssignment(GroundSet(3))
    assignment.assign(0, Cell.INCLUDED)
    with pytest.raises(ValueError):
        assignment.to_candidate()
