from finitetop.topology.axioms import (
    Axiom,
    AxiomViolation,
    find_violation,
    is_topology,
    is_topology_bitmask,
    generated_topology,
)
from finitetop.topology.backtracking import BacktrackingSearch
from finitetop.topology.generate_and_test import GenerateAndTestSearch
from finitetop.topology.engine import (
    TopologyEngine,
    Strategy,
    EnumerationCursor,
    enumerate_topologies,
    count_topologies,
)
from finitetop.topology.render import renderable_elements, format_subset, format_topology

__all__ = [
    "Axiom",
    "AxiomViolation",
    "find_violation",
    "is_topology",
    "is_topology_bitmask",
    "generated_topology",
    "BacktrackingSearch",
    "GenerateAndTestSearch",
    "TopologyEngine",
    "Strategy",
    "EnumerationCursor",
    "enumerate_topologies",
    "count_topologies",
    "renderable_elements",
    "format_subset",
    "format_topology",
]
