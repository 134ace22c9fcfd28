"""Derive the set of contacts that can be quizzed from the active filter."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

from face_quiz.constants.categories import Category
from face_quiz.core.models import Contact, FilterSelection

T = TypeVar("T")


def compute_eligible_pool(contacts: Iterable[Contact], selection: FilterSelection) -> list[Contact]:
    """Return contacts matching the filter that have a photo or a hint.

    An empty category set yields an empty pool rather than "everything".
    Input order is preserved. When an id repeats, the first occurrence that
    passes the filter is kept, so the pool size always equals the number of
    distinct contacts in it.
    """
    if not selection.is_active():
        return []

    pool: list[Contact] = []
    seen_ids: set[str] = set()
    for contact in contacts:
        if contact.id in seen_ids:
            continue
        if contact.category not in selection.categories:
            continue
        if selection.tags and not (contact.tags & selection.tags):
            continue
        if not contact.is_quizzable():
            continue
        seen_ids.add(contact.id)
        pool.append(contact)
    return pool


def available_tags(contacts: Iterable[Contact], categories: Iterable[Category]) -> list[str]:
    """Sorted tags used by contacts in the given categories."""
    category_set = set(categories)
    if not category_set:
        return []
    tags: set[str] = set()
    for contact in contacts:
        if contact.category in category_set:
            tags.update(contact.tags)
    return sorted(tags)


def toggle_all(selected: Iterable[T], universe: Iterable[T]) -> set[T]:
    """Select everything, or clear when at least half is already selected."""
    selected_set = set(selected)
    universe_list = list(universe)
    if universe_list and len(selected_set) >= len(universe_list) / 2:
        return set()
    return set(universe_list)
