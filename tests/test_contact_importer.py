import json

import pytest

from face_quiz.constants.categories import Category
from face_quiz.core.contact_importer import (
    ContactImportError,
    load_contacts_from_file,
    parse_contacts_text,
)


def _record(**overrides):
    record = {"_id": "1", "name": "Ada Lovelace", "photo": "ada.jpg", "category": "work"}
    record.update(overrides)
    return record


def test_parses_api_payload():
    payload = {
        "contacts": [
            _record(groups=["analytics", " book-club ", ""], hint="Wrote the first program"),
        ]
    }

    (contact,) = parse_contacts_text(json.dumps(payload))

    assert contact.id == "1"
    assert contact.display_name == "Ada Lovelace"
    assert contact.category is Category.WORK
    assert contact.tags == {"analytics", "book-club"}
    assert contact.photo_ref == "ada.jpg"
    assert contact.hint == "Wrote the first program"


def test_accepts_bare_list_and_numeric_ids():
    contacts = parse_contacts_text(json.dumps([_record(_id=7), {"id": "8", "name": "Grace"}]))
    assert [c.id for c in contacts] == ["7", "8"]


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("friends-family", Category.FRIENDS_FAMILY),
        ("Family", Category.FRIENDS_FAMILY),
        ("Pursuits", Category.GOALS_HOBBIES),
        ("goals-hobbies", Category.GOALS_HOBBIES),
        ("Community", Category.COMMUNITY),
        ("space-pirates", Category.MISCELLANEOUS),
        (None, Category.MISCELLANEOUS),
    ],
)
def test_category_mapping(raw, expected):
    (contact,) = parse_contacts_text(json.dumps([_record(category=raw)]))
    assert contact.category is expected


def test_blank_photo_and_hint_become_none():
    (contact,) = parse_contacts_text(json.dumps([_record(photo="  ", hint="")]))
    assert contact.photo_ref is None
    assert contact.hint is None
    assert not contact.is_quizzable()


def test_duplicate_ids_are_skipped():
    contacts = parse_contacts_text(json.dumps([_record(name="First"), _record(name="Second")]))
    assert [c.display_name for c in contacts] == ["First"]


def test_invalid_json_raises():
    with pytest.raises(ContactImportError, match="not valid JSON"):
        parse_contacts_text("{not json")


def test_wrong_top_level_shape_raises():
    with pytest.raises(ContactImportError):
        parse_contacts_text(json.dumps({"people": []}))
    with pytest.raises(ContactImportError):
        parse_contacts_text(json.dumps("contacts"))


def test_invalid_record_reports_position():
    with pytest.raises(ContactImportError, match="#2"):
        parse_contacts_text(json.dumps([_record(), _record(_id="2", name="   ")]))
    with pytest.raises(ContactImportError, match="#1"):
        parse_contacts_text(json.dumps([{"name": "No id"}]))


def test_load_resolves_relative_photos(tmp_path):
    photos = tmp_path / "photos"
    photos.mkdir()
    contacts_file = tmp_path / "contacts.json"
    contacts_file.write_text(
        json.dumps(
            [
                _record(_id="a", photo="photos/a.jpg"),
                _record(_id="b", photo="https://example.com/b.jpg"),
                _record(_id="c", photo=None, hint="Hint only"),
            ]
        ),
        encoding="utf-8",
    )

    imported = load_contacts_from_file(contacts_file)

    assert imported.source_path == contacts_file
    refs = {c.id: c.photo_ref for c in imported.contacts}
    assert refs["a"] == str(tmp_path.resolve() / "photos" / "a.jpg")
    assert refs["b"] == "https://example.com/b.jpg"
    assert refs["c"] is None
