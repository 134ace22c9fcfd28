from face_quiz.constants.categories import Category
from face_quiz.core.contact_pool import available_tags, compute_eligible_pool, toggle_all
from face_quiz.core.models import FilterSelection

from conftest import make_contact


def test_empty_category_selection_yields_no_pool():
    contacts = [make_contact(str(i)) for i in range(6)]
    assert compute_eligible_pool(contacts, FilterSelection()) == []
    # Tags alone do not activate the filter.
    assert compute_eligible_pool(contacts, FilterSelection(tags=frozenset({"x"}))) == []


def test_empty_contacts_yield_empty_pool(work_filter):
    assert compute_eligible_pool([], work_filter) == []


def test_filters_by_category():
    contacts = [
        make_contact("a", Category.WORK),
        make_contact("b", Category.COMMUNITY),
        make_contact("c", Category.FRIENDS_FAMILY),
    ]
    selection = FilterSelection(categories=frozenset({Category.WORK, Category.FRIENDS_FAMILY}))
    assert [c.id for c in compute_eligible_pool(contacts, selection)] == ["a", "c"]


def test_tag_filter_requires_at_least_one_shared_tag():
    contacts = [
        make_contact("a", tags=("choir",)),
        make_contact("b", tags=("choir", "gym")),
        make_contact("c", tags=("gym",)),
        make_contact("d"),
    ]
    selection = FilterSelection(
        categories=frozenset({Category.WORK}), tags=frozenset({"choir", "book-club"})
    )
    assert [c.id for c in compute_eligible_pool(contacts, selection)] == ["a", "b"]


def test_requires_photo_or_hint(work_filter):
    contacts = [
        make_contact("photo", photo="me.jpg"),
        make_contact("hint", photo=None, hint="Tall, red scarf"),
        make_contact("neither", photo=None, hint=None),
        make_contact("blank", photo="  ", hint="\t"),
    ]
    assert [c.id for c in compute_eligible_pool(contacts, work_filter)] == ["photo", "hint"]


def test_every_pool_member_matches_the_filter():
    categories = list(Category)
    contacts = []
    for index in range(40):
        contacts.append(
            make_contact(
                str(index),
                category=categories[index % len(categories)],
                tags=(f"t{index % 3}",) if index % 4 else (),
                photo="p.jpg" if index % 5 else None,
                hint="hint" if index % 7 == 0 else None,
            )
        )
    selection = FilterSelection(
        categories=frozenset({Category.WORK, Category.COMMUNITY}), tags=frozenset({"t1"})
    )

    pool = compute_eligible_pool(contacts, selection)

    assert pool
    for contact in pool:
        assert contact.category in selection.categories
        assert contact.tags & selection.tags
        assert contact.is_quizzable()
    expected = [
        c for c in contacts
        if c.category in selection.categories and c.tags & selection.tags and c.is_quizzable()
    ]
    assert pool == expected


def test_duplicate_ids_keep_first_occurrence(work_filter):
    contacts = [make_contact("a", name="First"), make_contact("a", name="Second"), make_contact("b")]
    pool = compute_eligible_pool(contacts, work_filter)
    assert [c.display_name for c in pool] == ["First", "Person b"]


def test_available_tags_come_from_selected_categories():
    contacts = [
        make_contact("a", Category.WORK, tags=("zeta", "alpha")),
        make_contact("b", Category.WORK, tags=("alpha",)),
        make_contact("c", Category.COMMUNITY, tags=("choir",)),
    ]
    assert available_tags(contacts, {Category.WORK}) == ["alpha", "zeta"]
    assert available_tags(contacts, set()) == []


def test_toggle_all_selects_everything_when_less_than_half_selected():
    assert toggle_all({"a"}, ["a", "b", "c", "d"]) == {"a", "b", "c", "d"}


def test_toggle_all_clears_when_half_or_more_selected():
    assert toggle_all({"a", "b"}, ["a", "b", "c", "d"]) == set()
    assert toggle_all(set(), []) == set()


def test_toggling_a_category_clears_selected_tags():
    selection = FilterSelection(categories=frozenset({Category.WORK}), tags=frozenset({"gym"}))

    toggled = selection.with_category_toggled(Category.COMMUNITY)

    assert toggled.categories == {Category.WORK, Category.COMMUNITY}
    assert toggled.tags == frozenset()
    assert toggled.with_category_toggled(Category.WORK).categories == {Category.COMMUNITY}
    assert selection.with_tag_toggled("gym").tags == frozenset()
    assert selection.with_tag_toggled("run").tags == {"gym", "run"}


def test_duplicate_id_keeps_first_eligible_occurrence(work_filter):
    contacts = [
        make_contact("a", category=Category.COMMUNITY, name="Elsewhere"),
        make_contact("a", name="Here"),
    ]
    assert [c.display_name for c in compute_eligible_pool(contacts, work_filter)] == ["Here"]
