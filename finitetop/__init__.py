"""Enumeration of every topology on a small finite ground set."""

__all__ = [
    "GroundSet",
    "Candidate",
    "TopologyEngine",
    "Strategy",
    "InvalidGroundSetSize",
    "enumerate_topologies",
    "count_topologies",
    "format_topology",
]


def __getattr__(name):
    if name in {"GroundSet"}:
        from .elements.subset import GroundSet

        return GroundSet
    if name in {"Candidate"}:
        from .elements.candidate import Candidate

        return Candidate
    if name in {
        "TopologyEngine",
        "Strategy",
        "enumerate_topologies",
        "count_topologies",
    }:
        from .topology.engine import (
            TopologyEngine,
            Strategy,
            enumerate_topologies,
            count_topologies,
        )

        return locals()[name]
    if name == "format_topology":
        from .topology.render import format_topology

        return format_topology
    if name == "InvalidGroundSetSize":
        from .exceptions import InvalidGroundSetSize

        return InvalidGroundSetSize
    raise AttributeError(name)
