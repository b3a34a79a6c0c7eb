"""Layout options, defaults and deployment profiles."""

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from numbers import Real

from .errors import InvalidOptionsError, MissingRootIdError
from .models import BADGE_LABELS

CARD_WIDTH = 220
CARD_HEIGHT = 250
SPOUSE_GUTTER = 30

# Gaps differ between deployments; callers pin one profile.
PROFILES: dict[str, dict[str, int]] = {
    "compact": {"horizontal_gap": 40, "vertical_gap": 80},
    "spacious": {"horizontal_gap": 90, "vertical_gap": 150},
}
DEFAULT_PROFILE = "compact"

_DIMENSIONS = ("card_width", "card_height", "horizontal_gap", "vertical_gap", "spouse_gutter")


@dataclass(frozen=True)
class LayoutOptions:
    root_id: int | None = None
    card_width: int = CARD_WIDTH
    card_height: int = CARD_HEIGHT
    horizontal_gap: int = PROFILES[DEFAULT_PROFILE]["horizontal_gap"]
    vertical_gap: int = PROFILES[DEFAULT_PROFILE]["vertical_gap"]
    spouse_gutter: int = SPOUSE_GUTTER
    fail_on_unknown_ids: bool = True
    locale: str = "en"

    @classmethod
    def from_profile(cls, profile: str, **overrides) -> "LayoutOptions":
        """Build options from a named gap profile, then apply overrides."""
        if profile not in PROFILES:
            raise InvalidOptionsError(
                f"Unknown layout profile {profile!r} (expected one of {sorted(PROFILES)})"
            )
        return cls(**{**PROFILES[profile], **overrides})

    @property
    def row_height(self) -> int:
        return self.card_height + self.vertical_gap

    @property
    def couple_width(self) -> int:
        return 2 * self.card_width + self.spouse_gutter


def resolve_options(options: "LayoutOptions | Mapping | None") -> LayoutOptions:
    """
    Normalize caller options into a validated LayoutOptions.

    Accepts a LayoutOptions instance or a mapping with the same keys. Missing
    keys take the compact-profile defaults.
    """
    if options is None:
        raise MissingRootIdError(None)

    if isinstance(options, Mapping):
        known = {f.name for f in fields(LayoutOptions)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise InvalidOptionsError(f"Unknown layout option(s): {unknown}")
        resolved = LayoutOptions(**options)
    elif isinstance(options, LayoutOptions):
        resolved = replace(options)
    else:
        raise InvalidOptionsError(f"Unsupported options type: {type(options).__name__}")

    root_id = resolved.root_id
    if isinstance(root_id, bool) or not isinstance(root_id, int):
        raise MissingRootIdError(root_id)

    for name in _DIMENSIONS:
        value = getattr(resolved, name)
        if isinstance(value, bool) or not isinstance(value, Real) or value < 0:
            raise InvalidOptionsError(f"{name} must be a non-negative number (got {value!r})")
    if resolved.card_width == 0 or resolved.card_height == 0:
        raise InvalidOptionsError("card_width and card_height must be positive")

    if resolved.locale not in BADGE_LABELS:
        raise InvalidOptionsError(
            f"Unknown locale {resolved.locale!r} (expected one of {sorted(BADGE_LABELS)})"
        )

    return resolved
