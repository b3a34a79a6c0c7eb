"""Expand solved unions into per-person card positions."""

import math

from .config import LayoutOptions
from .graph import FamilyGraph
from .models import Badge, LayoutNode, badge_label
from .unions import RealUnion, UnionTree


def to_pixel(value: float) -> int:
    """Round half up; integer offsets between cards survive rounding."""
    return math.floor(value + 0.5)


def expand(
    tree: UnionTree,
    graph: FamilyGraph,
    badges: dict[int, Badge],
    options: LayoutOptions,
) -> list[LayoutNode]:
    nodes: list[LayoutNode] = []
    emitted: set[int] = set()

    def emit(person_id: int, x: int, level: int, mate_id: int | None = None) -> None:
        if person_id in emitted:
            return
        emitted.add(person_id)
        badge = badges.get(person_id, Badge.UNKNOWN)
        nodes.append(
            LayoutNode(
                id=person_id,
                person=graph.person(person_id),
                badge=badge,
                badge_label=badge_label(badge, options.locale),
                x=x,
                y=level * options.row_height,
                level=level,
                mate_id=mate_id,
            )
        )

    for union in tree.unions:
        if not isinstance(union, RealUnion):
            continue

        x = to_pixel(union.geometry.left)
        if union.is_couple:
            first, second = union.members
            emit(first, x, union.level, mate_id=second)
            emit(second, x + options.card_width + options.spouse_gutter, union.level, mate_id=first)
        else:
            (only,) = union.members
            emit(only, x, union.level)

    return nodes
