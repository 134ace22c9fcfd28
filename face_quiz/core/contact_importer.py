"""Utilities for importing contacts from the contacts API JSON payload.

File format (the body returned by the contacts endpoint, or just its list):

    {
      "contacts": [
        {
          "_id": "64f1c2",
          "name": "Ada Lovelace",
          "photo": "photos/ada.jpg",
          "hint": "Wrote the first program",
          "category": "work",
          "groups": ["analytics", "book-club"]
        }
      ]
    }

``category`` accepts the app value ("goals-hobbies") or the API name
("Pursuits"); anything else falls back to Miscellaneous. ``photo`` and
``hint`` are optional, but contacts without either never reach the quiz.
"""

from __future__ import annotations

from dataclasses import dataclass
import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from face_quiz.constants.categories import parse_category
from face_quiz.core.models import Contact

logger = logging.getLogger(__name__)


class ContactImportError(Exception):
    """Raised when a contacts file cannot be parsed."""


@dataclass(slots=True)
class ImportedContacts:
    """Container for imported contacts and the file they came from."""

    source_path: Path
    contacts: list[Contact]


class ContactRecord(BaseModel):
    """One contact as delivered by the contacts API."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(alias="_id")
    name: str
    photo: str | None = None
    hint: str | None = None
    category: str | None = None
    groups: list[str] = Field(default_factory=list)

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("name")
    @classmethod
    def _require_name(cls, value: str) -> str:
        cleaned = value.strip()
        if not cleaned:
            raise ValueError("Contact name must not be empty.")
        return cleaned

    @field_validator("photo", "hint")
    @classmethod
    def _blank_to_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        cleaned = value.strip()
        return cleaned or None

    def to_contact(self) -> Contact:
        return Contact(
            id=self.id,
            display_name=self.name,
            category=parse_category(self.category),
            tags=frozenset(tag.strip() for tag in self.groups if tag.strip()),
            photo_ref=self.photo,
            hint=self.hint,
        )


def load_contacts_from_file(file_path: Path) -> ImportedContacts:
    """Read a contacts file. Relative photo paths resolve against its folder."""
    text = file_path.read_text(encoding="utf-8")
    contacts = parse_contacts_text(text, photo_base_dir=file_path.resolve().parent)
    logger.info("Imported %d contacts from %s", len(contacts), file_path)
    return ImportedContacts(source_path=file_path, contacts=contacts)


def parse_contacts_text(text: str, photo_base_dir: Path | None = None) -> list[Contact]:
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ContactImportError(f"Contacts file is not valid JSON: {exc.msg} (line {exc.lineno}).") from exc

    if isinstance(payload, dict):
        payload = payload.get("contacts")
    if not isinstance(payload, list):
        raise ContactImportError("Expected a list of contacts or an object with a 'contacts' list.")

    contacts: list[Contact] = []
    seen_ids: set[str] = set()
    for position, raw_record in enumerate(payload, start=1):
        try:
            record = ContactRecord.model_validate(raw_record)
        except ValidationError as exc:
            raise ContactImportError(f"Contact #{position} is invalid: {_first_error(exc)}") from exc
        if record.id in seen_ids:
            logger.warning("Skipping contact #%d: duplicate id %s", position, record.id)
            continue
        seen_ids.add(record.id)
        if record.photo and photo_base_dir is not None:
            record.photo = _resolve_photo_ref(record.photo, photo_base_dir)
        contacts.append(record.to_contact())
    return contacts


def _resolve_photo_ref(photo_ref: str, base_dir: Path) -> str:
    if "://" in photo_ref or photo_ref.startswith("data:"):
        return photo_ref
    path = Path(photo_ref).expanduser()
    if not path.is_absolute():
        path = base_dir / path
    return str(path)


def _first_error(exc: ValidationError) -> str:
    error = exc.errors()[0]
    location = ".".join(str(part) for part in error.get("loc", ())) or "record"
    return f"{location}: {error.get('msg', 'invalid value')}"
