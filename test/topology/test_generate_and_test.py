import logging

import pytest

from finitetop.elements.subset import GroundSet
from finitetop.topology.backtracking import BacktrackingSearch
from finitetop.topology.generate_and_test import GenerateAndTestSearch


def drain(search):
    results = []
    while True:
        topology = search.next_topology()
        if topology is None:
            return results
        results.append(topology)


def test_three_point_count():
    assert len(drain(GenerateAndTestSearch(GroundSet(3)))) == 29


def test_candidates_come_out_in_increasing_numeric_order():
    results = drain(GenerateAndTestSearch(GroundSet(3)))
    bitmasks = [t.bitmask for t in results]
    assert bitmasks == sorted(bitmasks)
    # indiscrete {0, 7} is the smallest valid bitmask, discrete the largest
    assert results[0].members() == [0, 7]
    assert results[1].members() == [0, 1, 7]
    assert results[-1].bitmask == 0xFF


@pytest.mark.parametrize("n", [3, 4])
def test_strategies_agree(n):
    exhaustive = drain(GenerateAndTestSearch(GroundSet(n)))
    backtracking = drain(BacktrackingSearch(GroundSet(n)))
    assert set(exhaustive) == set(backtracking)
    assert sorted(t.bitmask for t in exhaustive) == sorted(
        t.bitmask for t in backtracking
    )


def test_exhaustion_is_sticky():
    search = GenerateAndTestSearch(GroundSet(3))
    drain(search)
    assert search.exhausted
    assert search.progress == 1.0
    assert search.next_topology() is None
    assert search.tested == 255


def test_cursor_tracks_last_emitted_bitmask():
    search = GenerateAndTestSearch(GroundSet(3))
    first = search.next_topology()
    assert search.cursor == first.bitmask == 0b10000001
    assert 0.0 < search.progress < 1.0


def test_warns_when_range_is_infeasible(caplog):
    with caplog.at_level(logging.WARNING, logger="finitetop.topology.generate_and_test"):
        search = GenerateAndTestSearch(GroundSet(6))
    assert "will not finish" in caplog.text
    assert search.limit == 1 << 64
