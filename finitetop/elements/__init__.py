from finitetop.elements.subset import (
    GroundSet,
    Subset,
    subset_count,
    element_labels,
    has_member,
    with_member,
    without_member,
    members_of,
)
from finitetop.elements.candidate import Candidate, Cell, TernaryAssignment

__all__ = [
    "GroundSet",
    "Subset",
    "subset_count",
    "element_labels",
    "has_member",
    "with_member",
    "without_member",
    "members_of",
    "Candidate",
    "Cell",
    "TernaryAssignment",
]
