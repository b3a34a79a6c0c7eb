"""NetworkX graph building and adjacency lookups."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
import logging

import networkx as nx

from .errors import (
    DuplicateIdError,
    SelfParentError,
    SelfSpouseError,
    TooManyParentsError,
    UnknownReferenceError,
)
from .models import Edge, ParentEdge, Person, SpouseEdge
from .validation import ensure_no_parent_cycle

logger = logging.getLogger(__name__)

MAX_PARENTS = 2


@dataclass
class FamilyGraph:
    """
    Kinship indices built from people and edges.

    `lineage` holds one node per person (attribute `person`) and one
    PARENT_OF edge per parent -> child pair. Spouses are kept outside the
    digraph since each person has at most one recognized spouse.
    """

    lineage: nx.DiGraph
    spouses: dict[int, int] = field(default_factory=dict)

    def __contains__(self, person_id: int) -> bool:
        return person_id in self.lineage

    def __len__(self) -> int:
        return self.lineage.number_of_nodes()

    def ids(self) -> list[int]:
        return list(self.lineage.nodes)

    def person(self, person_id: int) -> Person:
        return self.lineage.nodes[person_id]["person"]

    def people(self) -> Iterator[Person]:
        for _, data in self.lineage.nodes(data=True):
            yield data["person"]

    def parents_of(self, person_id: int) -> list[int]:
        return list(self.lineage.predecessors(person_id))

    def children_of(self, person_id: int) -> list[int]:
        return list(self.lineage.successors(person_id))

    def spouse_of(self, person_id: int) -> int | None:
        return self.spouses.get(person_id)

    def spouse_pairs(self) -> list[tuple[int, int]]:
        """Each recognized couple once, as (a, b) in the order the edge named them."""
        pairs: list[tuple[int, int]] = []
        seen: set[int] = set()
        for a, b in self.spouses.items():
            if a in seen:
                continue
            seen.update((a, b))
            pairs.append((a, b))
        return pairs


def build_graph(
    people: Iterable[Person], edges: Iterable[Edge], fail_on_unknown_ids: bool = True
) -> FamilyGraph:
    """Build and validate the kinship graph from people and edges."""
    G = nx.DiGraph()

    # Add nodes (persons)
    for person in people:
        if person.id in G:
            raise DuplicateIdError(person.id)
        G.add_node(person.id, person=person)

    def known(person_id: int, edge_kind: str) -> bool:
        if person_id in G:
            return True
        if fail_on_unknown_ids:
            raise UnknownReferenceError(person_id, edge_kind)
        return False

    spouses: dict[int, int] = {}

    # Add edges (relationships)
    for edge in edges:
        if isinstance(edge, SpouseEdge):
            a, b = edge.a, edge.b
            if not (known(a, "spouse") and known(b, "spouse")):
                logger.debug("Dropping spouse edge with unknown id: %s-%s", a, b)
                continue
            if a == b:
                raise SelfSpouseError(a)
            # Only one spouse per person is representable; the first pairing wins.
            if spouses.get(a, b) != b or spouses.get(b, a) != a:
                logger.debug(
                    "Ignoring spouse edge %s-%s: already paired (%s, %s)",
                    a,
                    b,
                    spouses.get(a),
                    spouses.get(b),
                )
                continue
            spouses[a] = b
            spouses[b] = a
        elif isinstance(edge, ParentEdge):
            parent, child = edge.parent, edge.child
            if not (known(parent, "parent") and known(child, "parent")):
                logger.debug("Dropping parent edge with unknown id: %s->%s", parent, child)
                continue
            if parent == child:
                raise SelfParentError(parent)
            G.add_edge(parent, child, relationship_type="PARENT_OF")
        else:
            raise TypeError(f"Unsupported edge type: {type(edge).__name__}")

    # DiGraph edges are unique, so parent lists are already de-duplicated.
    for child in G.nodes:
        if G.in_degree(child) > MAX_PARENTS:
            raise TooManyParentsError(child, list(G.predecessors(child)))

    ensure_no_parent_cycle(G)

    return FamilyGraph(lineage=G, spouses=spouses)
