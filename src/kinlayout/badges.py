"""Kinship badges relative to the root person."""

import networkx as nx

from .graph import FamilyGraph
from .models import Badge


def _mark(badges: dict[int, Badge], person_id: int, badge: Badge) -> None:
    # First rule to reach a person wins.
    badges.setdefault(person_id, badge)


def compute_badges(graph: FamilyGraph, root_id: int) -> dict[int, Badge]:
    """
    Label every person in the graph relative to `root_id`.

    Rules apply in order and never overwrite an earlier badge: self, spouse,
    ancestors, descendants, siblings, in-laws, uncles/aunts with their
    children (cousins), nephews/nieces, and finally unknown.
    """
    badges: dict[int, Badge] = {root_id: Badge.SELF}

    spouse = graph.spouse_of(root_id)
    if spouse is not None:
        _mark(badges, spouse, Badge.SPOUSE)

    # Ancestors and descendants, nearest generation first
    upward = graph.lineage.reverse(copy=False)
    for depth, layer in enumerate(nx.bfs_layers(upward, root_id)):
        if depth == 0:
            continue
        for pid in layer:
            _mark(badges, pid, Badge.PARENT if depth == 1 else Badge.GRANDPARENT)

    for depth, layer in enumerate(nx.bfs_layers(graph.lineage, root_id)):
        if depth == 0:
            continue
        for pid in layer:
            _mark(badges, pid, Badge.CHILD if depth == 1 else Badge.GRANDCHILD)

    # Siblings share at least one parent with root
    root_parents = set(graph.parents_of(root_id))
    for pid in graph.ids():
        if pid in badges:
            continue
        if root_parents.intersection(graph.parents_of(pid)):
            badges[pid] = Badge.SIBLING

    # In-laws: spouses of already labelled relatives
    for pid in graph.ids():
        if pid in badges:
            continue
        partner = graph.spouse_of(pid)
        if partner is not None and badges.get(partner, Badge.SELF) != Badge.SELF:
            badges[pid] = Badge.IN_LAW

    # Uncles/aunts are the grandparents' other children; their children are cousins
    uncles_aunts: dict[int, None] = {}
    for parent in graph.parents_of(root_id):
        for grandparent in graph.parents_of(parent):
            for kid in graph.children_of(grandparent):
                if kid != parent:
                    uncles_aunts[kid] = None
    for pid in uncles_aunts:
        _mark(badges, pid, Badge.UNCLE_AUNT)
        for kid in graph.children_of(pid):
            _mark(badges, kid, Badge.COUSIN)

    # Nephews/nieces
    siblings = [pid for pid in graph.ids() if badges.get(pid) == Badge.SIBLING]
    for sibling in siblings:
        for kid in graph.children_of(sibling):
            _mark(badges, kid, Badge.NEPHEW_NIECE)

    for pid in graph.ids():
        _mark(badges, pid, Badge.UNKNOWN)

    return badges
