"""Family tree layout engine."""

from .badges import compute_badges
from .config import PROFILES, LayoutOptions
from .errors import (
    DataValidationError,
    DuplicateIdError,
    InvalidOptionsError,
    MissingRootIdError,
    ParentCycleError,
    SelfParentError,
    SelfSpouseError,
    TooManyParentsError,
    UnknownReferenceError,
    UnknownRootError,
)
from .graph import FamilyGraph, build_graph
from .layout import compute_layout
from .models import BADGE_LABELS, Badge, Edge, LayoutNode, ParentEdge, Person, SpouseEdge

__all__ = [
    "BADGE_LABELS",
    "PROFILES",
    "Badge",
    "DataValidationError",
    "DuplicateIdError",
    "Edge",
    "FamilyGraph",
    "InvalidOptionsError",
    "LayoutNode",
    "LayoutOptions",
    "MissingRootIdError",
    "ParentCycleError",
    "ParentEdge",
    "Person",
    "SelfParentError",
    "SelfSpouseError",
    "SpouseEdge",
    "TooManyParentsError",
    "UnknownReferenceError",
    "UnknownRootError",
    "build_graph",
    "compute_badges",
    "compute_layout",
]
