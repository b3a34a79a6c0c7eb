"""Graph validation for family tree data."""

from typing import TYPE_CHECKING

import networkx as nx

from .dates import parse_date
from .errors import ParentCycleError

if TYPE_CHECKING:
    from .graph import FamilyGraph

MIN_PARENT_AGE_YEARS = 12


def ensure_no_parent_cycle(lineage: nx.DiGraph) -> None:
    """Raise ParentCycleError if someone is recorded as their own ancestor."""
    try:
        cycle = nx.find_cycle(lineage, orientation="original")
    except nx.NetworkXNoCycle:
        return
    raise ParentCycleError([edge[0] for edge in cycle])


def collect_warnings(graph: "FamilyGraph") -> list[str]:
    """
    Check the family tree for suspicious but non-fatal data:
    - Impossible ages (child born before parent)
    - Parents younger than MIN_PARENT_AGE_YEARS at a child's birth
    - Death before birth

    Returns a list of warning messages.
    """
    warnings: list[str] = []

    for parent, child in graph.lineage.edges():
        parent_person = graph.person(parent)
        child_person = graph.person(child)

        parent_birth = parse_date(parent_person.birth_date)
        child_birth = parse_date(child_person.birth_date)
        if not (parent_birth and child_birth):
            continue

        if child_birth < parent_birth:
            warnings.append(
                f"Impossible: {child_person.display_name} (id={child}) born before parent "
                f"{parent_person.display_name} (id={parent})"
            )
        elif child_birth.year - parent_birth.year < MIN_PARENT_AGE_YEARS:
            warnings.append(
                f"Suspicious: {parent_person.display_name} (id={parent}) was less than "
                f"{MIN_PARENT_AGE_YEARS} years old when {child_person.display_name} "
                f"(id={child}) was born"
            )

    for person in graph.people():
        birth = parse_date(person.birth_date)
        death = parse_date(person.death_date)

        if birth and death and death < birth:
            warnings.append(f"Impossible: {person.display_name} (id={person.id}) died before being born")

    return warnings
