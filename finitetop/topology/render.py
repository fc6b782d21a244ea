"""Read-only projection of a topology for printing."""

from typing import List, Tuple

from finitetop.elements.candidate import Candidate
from finitetop.elements.subset import element_labels


def renderable_elements(candidate: Candidate, n: int) -> List[Tuple[int, Tuple[str, ...]]]:
    """
    List every member subset of a candidate with its element labels.

    Args:
        candidate: The family to project
        n: Ground set size used to label elements

    Returns:
        ``(SubsetIndex, labels)`` pairs in increasing SubsetIndex order.
    """
    return [(index, element_labels(index, n)) for index in candidate.members()]


def format_subset(index: int, n: int) -> str:
    """Render one subset as '{a,b}'; the empty set renders as '{}'."""
    return "{" + ",".join(element_labels(index, n)) + "}"


def format_topology(candidate: Candidate, n: int) -> str:
    """Render a family as '{{}, {a}, {a,b,c}}'."""
    return (
        "{"
        + ", ".join(
            "{" + ",".join(labels) + "}"
            for _, labels in renderable_elements(candidate, n)
        )
        + "}"
    )
