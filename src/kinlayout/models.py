"""Data classes for family tree input and layout output."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Person:
    id: int
    given_name: str | None = None
    surname: str | None = None
    patronymic: str | None = None
    birth_date: str | None = None  # "DD.MM.YYYY"
    sex: str | None = None  # "male" | "female"
    death_date: str | None = None  # "DD.MM.YYYY"

    @property
    def display_name(self) -> str:
        parts = [p for p in (self.given_name, self.patronymic, self.surname) if p]
        return " ".join(parts) if parts else f"#{self.id}"


@dataclass(frozen=True)
class SpouseEdge:
    a: int
    b: int


@dataclass(frozen=True)
class ParentEdge:
    parent: int
    child: int


Edge = SpouseEdge | ParentEdge


class Badge(str, Enum):
    """Kinship of a person relative to the root person."""

    SELF = "self"
    SPOUSE = "spouse"
    CHILD = "child"
    GRANDCHILD = "grandchild"
    PARENT = "parent"
    GRANDPARENT = "grandparent"
    SIBLING = "sibling"
    IN_LAW = "in_law"
    UNCLE_AUNT = "uncle_aunt"
    NEPHEW_NIECE = "nephew_niece"
    COUSIN = "cousin"
    UNKNOWN = "unknown"


BADGE_LABELS: dict[str, dict[Badge, str]] = {
    "en": {
        Badge.SELF: "You",
        Badge.SPOUSE: "Spouse",
        Badge.CHILD: "Child",
        Badge.GRANDCHILD: "Grandchild",
        Badge.PARENT: "Parent",
        Badge.GRANDPARENT: "Grandparent",
        Badge.SIBLING: "Sibling",
        Badge.IN_LAW: "In-law",
        Badge.UNCLE_AUNT: "Uncle/aunt",
        Badge.NEPHEW_NIECE: "Nephew/niece",
        Badge.COUSIN: "Cousin",
        Badge.UNKNOWN: "Unknown",
    },
    "ru": {
        Badge.SELF: "Вы",
        Badge.SPOUSE: "Супруг/супруга",
        Badge.CHILD: "Ребёнок",
        Badge.GRANDCHILD: "Внук/внучка",
        Badge.PARENT: "Родитель",
        Badge.GRANDPARENT: "Дедушка/бабушка",
        Badge.SIBLING: "Брат/сестра",
        Badge.IN_LAW: "Родственник через брак",
        Badge.UNCLE_AUNT: "Дядя/тётя",
        Badge.NEPHEW_NIECE: "Племянник/племянница",
        Badge.COUSIN: "Кузен/кузина",
        Badge.UNKNOWN: "Не определено",
    },
}


def badge_label(badge: Badge, locale: str = "en") -> str:
    """Return the display text for a badge, falling back to English."""
    labels = BADGE_LABELS.get(locale, BADGE_LABELS["en"])
    return labels[badge]


@dataclass
class LayoutNode:
    id: int
    person: Person
    badge: Badge
    badge_label: str
    x: int  # top-left corner of the card
    y: int
    level: int  # 0 = root, negative = ancestors, positive = descendants
    mate_id: int | None = None
