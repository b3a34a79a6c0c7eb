"""
Union building: group people into couples and singles and arrange those
unions into one kinship tree.

A union is the atom the solver lays out. Levels come from a breadth-first
walk from the root person (parents -1, children +1, spouse same level). Each
union hangs under at most one parent union that sits exactly one level above
it, which keeps the union graph a forest. Disconnected ancestor branches are
gathered under a memberless VirtualRoot so the solver always sees one tree.
"""

from collections import deque
from dataclasses import dataclass, field
import logging

from .dates import birth_order_key, date_ordinal
from .errors import UnknownRootError
from .graph import FamilyGraph

logger = logging.getLogger(__name__)

VIRTUAL_ROOT_UID = "virtual:root"


def couple_key(a: int, b: int) -> str:
    x, y = sorted((a, b))
    return f"couple:{x}-{y}"


def single_key(a: int) -> str:
    return f"single:{a}"


@dataclass
class Geometry:
    own_width: float = 0.0
    subtree_width: float = 0.0
    slot_left: float = 0.0  # left edge of the subtree slot
    left: float = 0.0  # left edge of the union's own cards
    center: float = 0.0


@dataclass
class RealUnion:
    uid: str
    members: tuple[int, ...]  # (id,) or (first, second), male first when known
    level: int
    children: list[str] = field(default_factory=list)
    geometry: Geometry = field(default_factory=Geometry)

    @property
    def is_couple(self) -> bool:
        return len(self.members) == 2


@dataclass
class VirtualRoot:
    """Synthetic parent of several top-level unions. Never a person."""

    level: int
    children: list[str] = field(default_factory=list)
    geometry: Geometry = field(default_factory=Geometry)
    uid: str = VIRTUAL_ROOT_UID


Union = RealUnion | VirtualRoot


@dataclass
class UnionTree:
    unions: list[Union]  # post-order, starting from `top`
    by_uid: dict[str, Union]
    root: RealUnion
    top: Union
    level_of: dict[int, int]
    union_of_person: dict[int, RealUnion]

    def children(self, union: Union) -> list[Union]:
        return [self.by_uid[uid] for uid in union.children]


def assign_levels(graph: FamilyGraph, root_id: int) -> dict[int, int]:
    """
    Breadth-first generation levels from the root person.

    Every reached person is visited once; the first discovery fixes the level.
    The returned dict iterates in discovery order.
    """
    levels: dict[int, int] = {root_id: 0}
    queue = deque([root_id])

    while queue:
        pid = queue.popleft()
        level = levels[pid]

        neighbours = [(p, level - 1) for p in graph.parents_of(pid)]
        neighbours += [(c, level + 1) for c in graph.children_of(pid)]
        spouse = graph.spouse_of(pid)
        if spouse is not None:
            neighbours.append((spouse, level))

        for other, other_level in neighbours:
            if other in levels:
                continue
            levels[other] = other_level
            queue.append(other)

    return levels


def _form_unions(
    graph: FamilyGraph, levels: dict[int, int]
) -> tuple[dict[str, Union], dict[int, RealUnion]]:
    discovery = {pid: i for i, pid in enumerate(levels)}
    by_uid: dict[str, Union] = {}
    union_of_person: dict[int, RealUnion] = {}

    # Couples
    for a, b in graph.spouse_pairs():
        if a not in levels:
            continue
        members = (a, b)
        if graph.person(a).sex == "female" and graph.person(b).sex == "male":
            members = (b, a)

        # Both partners are drawn on the level of whoever was reached first.
        first, second = sorted((a, b), key=discovery.__getitem__)
        level = levels[first]
        if levels[second] != level:
            logger.debug(
                "Moving person %s from level %s to spouse level %s", second, levels[second], level
            )
            levels[second] = level

        union = RealUnion(uid=couple_key(a, b), members=members, level=level)
        by_uid[union.uid] = union
        union_of_person[a] = union
        union_of_person[b] = union

    # Singles
    for pid, level in levels.items():
        if pid in union_of_person:
            continue
        union = RealUnion(uid=single_key(pid), members=(pid,), level=level)
        by_uid[union.uid] = union
        union_of_person[pid] = union

    return by_uid, union_of_person


def _link_parent_unions(
    graph: FamilyGraph, levels: dict[int, int], union_of_person: dict[int, RealUnion]
) -> dict[str, str]:
    """Attach each union to its parent union; returns child uid -> parent uid."""
    parent_of: dict[str, str] = {}

    # Discovery order: a couple hangs under the parents of the partner
    # closest to the root.
    for child in levels:
        parents = graph.parents_of(child)
        if not parents:
            continue

        # When both parents are spouses of each other, the first parent's
        # union is their couple union.
        parent_union = union_of_person[parents[0]]
        child_union = union_of_person[child]

        if parent_union is child_union or child_union.uid in parent_of:
            continue
        if parent_union.level + 1 != child_union.level:
            logger.debug(
                "Not linking %s (level %s) under %s (level %s)",
                child_union.uid,
                child_union.level,
                parent_union.uid,
                parent_union.level,
            )
            continue

        parent_of[child_union.uid] = parent_union.uid
        parent_union.children.append(child_union.uid)

    return parent_of


def _find_top(by_uid: dict[str, Union], parent_of: dict[str, str]) -> Union:
    candidates = [u for uid, u in by_uid.items() if uid not in parent_of]
    if len(candidates) == 1:
        return candidates[0]

    logger.debug("Joining %d top-level unions under a virtual root", len(candidates))
    return VirtualRoot(
        level=min(u.level for u in candidates) - 1,
        children=[u.uid for u in candidates],
    )


def _collect_post_order(by_uid: dict[str, Union], top: Union) -> list[Union]:
    # Recursion depth equals the number of generations below `top`.
    out: list[Union] = []

    def visit(union: Union) -> None:
        for uid in union.children:
            visit(by_uid[uid])
        out.append(union)

    visit(top)
    return out


def _order_siblings(graph: FamilyGraph, by_uid: dict[str, Union], top: Union) -> None:
    """Sort every union's children: earliest birth in the subtree first."""
    earliest: dict[str, int | None] = {}

    for union in _collect_post_order(by_uid, top):
        dates = [earliest[uid] for uid in union.children]
        if isinstance(union, RealUnion):
            dates += [date_ordinal(graph.person(m).birth_date) for m in union.members]
        known = [d for d in dates if d is not None]
        earliest[union.uid] = min(known) if known else None

    def sibling_key(uid: str) -> tuple:
        union = by_uid[uid]
        return birth_order_key(earliest[uid], min(union.members), uid)

    for union in by_uid.values():
        union.children = sorted(union.children, key=sibling_key)


def build_unions(graph: FamilyGraph, root_id: int) -> UnionTree:
    """Group people reachable from the root into unions and build the union tree."""
    if root_id not in graph:
        raise UnknownRootError(root_id)

    levels = assign_levels(graph, root_id)
    by_uid, union_of_person = _form_unions(graph, levels)
    parent_of = _link_parent_unions(graph, levels, union_of_person)

    top = _find_top(by_uid, parent_of)
    if isinstance(top, VirtualRoot):
        by_uid[top.uid] = top

    _order_siblings(graph, by_uid, top)
    unions = _collect_post_order(by_uid, top)

    return UnionTree(
        unions=unions,
        by_uid=by_uid,
        root=union_of_person[root_id],
        top=top,
        level_of=levels,
        union_of_person=union_of_person,
    )
