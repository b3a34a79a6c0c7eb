"""
Subtree widths (post-order) and horizontal positions (pre-order) for the
union tree.

Every union's subtree is symmetric about the union's center and all of its
descendants fit inside [center - subtree_width / 2, center + subtree_width / 2].
Sibling slots never come closer than `horizontal_gap`, so unions on the same
level in different branches cannot overlap.
"""

from dataclasses import dataclass

from .config import LayoutOptions
from .unions import RealUnion, Union, UnionTree


@dataclass
class RowLayout:
    offsets: list[float]  # child centers relative to the parent center
    extent_left: float  # parent center to the leftmost subtree edge
    extent_right: float  # parent center to the rightmost subtree edge


def own_width(union: Union, options: LayoutOptions) -> float:
    if not isinstance(union, RealUnion):
        return 0
    return options.couple_width if union.is_couple else options.card_width


def pack_row(children: list[Union], gap: float) -> RowLayout:
    """
    Place sibling subtrees left to right in a single sweep.

    Own-width blocks start `gap` apart. Each subtree is centered over its
    block; when a subtree's left edge comes closer than `gap` to the previous
    subtree's right edge, that block and every later one move right by the
    deficit. The row is then centered so that the midpoint of the first and
    last child centers sits on the parent center.
    """
    lefts: list[float] = []
    cursor = 0.0
    prev_right: float | None = None

    for child in children:
        geo = child.geometry
        overhang = (geo.subtree_width - geo.own_width) / 2
        block_left = cursor
        if prev_right is not None:
            deficit = prev_right + gap - (block_left - overhang)
            if deficit > 0:
                block_left += deficit
        lefts.append(block_left)
        prev_right = block_left + geo.own_width + overhang
        cursor = block_left + geo.own_width + gap

    centers = [left + child.geometry.own_width / 2 for left, child in zip(lefts, children)]
    mid = (centers[0] + centers[-1]) / 2

    first = children[0].geometry
    row_left = lefts[0] - (first.subtree_width - first.own_width) / 2

    return RowLayout(
        offsets=[c - mid for c in centers],
        extent_left=mid - row_left,
        extent_right=prev_right - mid,
    )


def compute_widths(tree: UnionTree, options: LayoutOptions) -> None:
    """Fill own and subtree widths; `tree.unions` is already post-ordered."""
    for union in tree.unions:
        geo = union.geometry
        geo.own_width = own_width(union, options)

        children = tree.children(union)
        if not children:
            geo.subtree_width = geo.own_width
            continue

        row = pack_row(children, options.horizontal_gap)
        geo.subtree_width = max(geo.own_width, 2 * max(row.extent_left, row.extent_right))


def assign_positions(tree: UnionTree, options: LayoutOptions) -> None:
    """Assign centers top-down, starting with the top union at x = 0."""
    tree.top.geometry.center = 0.0

    # Reversed post-order visits every parent before its descendants.
    for union in reversed(tree.unions):
        geo = union.geometry
        geo.left = geo.center - geo.own_width / 2
        geo.slot_left = geo.center - geo.subtree_width / 2

        children = tree.children(union)
        if not children:
            continue

        row = pack_row(children, options.horizontal_gap)
        for child, offset in zip(children, row.offsets):
            child.geometry.center = geo.center + offset


def normalize_origin(tree: UnionTree) -> None:
    """Shift everything so the root person's union starts at x = 0."""
    shift = tree.root.geometry.left
    for union in tree.unions:
        geo = union.geometry
        geo.left -= shift
        geo.center -= shift
        geo.slot_left -= shift


def solve(tree: UnionTree, options: LayoutOptions) -> None:
    compute_widths(tree, options)
    assign_positions(tree, options)
    normalize_origin(tree)
