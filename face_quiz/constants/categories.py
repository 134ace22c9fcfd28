"""Canonical contact categories and their display labels."""

from __future__ import annotations

from enum import Enum


class Category(str, Enum):
    """Category a contact belongs to. Values match the app's stored format."""

    FRIENDS_FAMILY = "friends-family"
    COMMUNITY = "community"
    WORK = "work"
    GOALS_HOBBIES = "goals-hobbies"
    MISCELLANEOUS = "miscellaneous"


# Order matters: Miscellaneous is always shown last.
CATEGORY_ORDER: tuple[Category, ...] = (
    Category.FRIENDS_FAMILY,
    Category.COMMUNITY,
    Category.WORK,
    Category.GOALS_HOBBIES,
    Category.MISCELLANEOUS,
)

CATEGORY_LABELS: dict[Category, str] = {
    Category.FRIENDS_FAMILY: "Friends & Family",
    Category.COMMUNITY: "Community",
    Category.WORK: "Work",
    Category.GOALS_HOBBIES: "Goals & Hobbies",
    Category.MISCELLANEOUS: "Miscellaneous",
}

DEFAULT_CATEGORY: Category = Category.MISCELLANEOUS

# The contacts API reports categories in Title Case.
_API_CATEGORY_NAMES: dict[str, Category] = {
    "Family": Category.FRIENDS_FAMILY,
    "Community": Category.COMMUNITY,
    "Work": Category.WORK,
    "Pursuits": Category.GOALS_HOBBIES,
    "Miscellaneous": Category.MISCELLANEOUS,
}


def parse_category(raw_value: str | None) -> Category:
    """Map an app value or API name onto a Category, falling back to the default."""
    if not raw_value:
        return DEFAULT_CATEGORY
    value = raw_value.strip()
    try:
        return Category(value)
    except ValueError:
        return _API_CATEGORY_NAMES.get(value, DEFAULT_CATEGORY)
