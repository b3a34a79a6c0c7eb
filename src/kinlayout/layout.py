"""
Family tree layout:

1) Build and validate the kinship graph.
2) Group reachable people into unions (couples / singles), assign levels
   from the root and arrange the unions into one tree.
3) Compute subtree widths bottom-up and centers top-down.
4) Expand unions into per-person cards.
5) Label every person with a badge relative to the root.
"""

from collections.abc import Iterable, Mapping
import logging

from .badges import compute_badges
from .config import LayoutOptions, resolve_options
from .expander import expand
from .graph import build_graph
from .models import Edge, LayoutNode, Person
from .solver import solve
from .unions import build_unions
from .validation import collect_warnings

logger = logging.getLogger(__name__)


def compute_layout(
    people: Iterable[Person],
    edges: Iterable[Edge],
    options: LayoutOptions | Mapping,
) -> list[LayoutNode]:
    """
    Compute card positions and badges for everyone reachable from the root.

    Args:
        people: Input persons; ids must be unique.
        edges: SpouseEdge / ParentEdge records.
        options: LayoutOptions or a mapping with the same keys; `root_id` is required.

    Returns:
        One LayoutNode per reachable person, in no particular order.

    Raises:
        DataValidationError: (or a subclass) on any invalid input.
    """
    opt = resolve_options(options)

    graph = build_graph(people, edges, opt.fail_on_unknown_ids)
    logger.debug(
        "Graph has %d people, %d parent edges and %d couples",
        len(graph),
        graph.lineage.number_of_edges(),
        len(graph.spouse_pairs()),
    )
    for warning in collect_warnings(graph):
        logger.warning(warning)

    tree = build_unions(graph, opt.root_id)
    logger.debug("Built %d unions rooted at %s", len(tree.unions), tree.top.uid)

    solve(tree, opt)

    badges = compute_badges(graph, opt.root_id)
    return expand(tree, graph, badges, opt)
