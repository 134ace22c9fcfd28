"""Domain models for the contact quiz."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum, auto

from face_quiz.constants.categories import Category


@dataclass(frozen=True, slots=True)
class Contact:
    """Read-only snapshot of a contact supplied by the contact source."""

    id: str
    display_name: str
    category: Category
    tags: frozenset[str] = field(default_factory=frozenset)
    photo_ref: str | None = None
    hint: str | None = None

    def is_quizzable(self) -> bool:
        """A contact needs a photo or a hint to be shown as a prompt."""
        return _has_text(self.photo_ref) or _has_text(self.hint)


@dataclass(frozen=True, slots=True)
class FilterSelection:
    """Categories and tags the user picked. No categories means no active filter."""

    categories: frozenset[Category] = field(default_factory=frozenset)
    tags: frozenset[str] = field(default_factory=frozenset)

    def is_active(self) -> bool:
        return bool(self.categories)

    def with_category_toggled(self, category: Category) -> FilterSelection:
        # Tag choices depend on the category set, so they are reset with it.
        return FilterSelection(categories=self.categories ^ {category}, tags=frozenset())

    def with_categories(self, categories: set[Category] | frozenset[Category]) -> FilterSelection:
        return FilterSelection(categories=frozenset(categories), tags=frozenset())

    def with_tag_toggled(self, tag: str) -> FilterSelection:
        return replace(self, tags=self.tags ^ {tag})

    def with_tags(self, tags: set[str] | frozenset[str]) -> FilterSelection:
        return replace(self, tags=frozenset(tags))


@dataclass(frozen=True, slots=True)
class Round:
    """One prompt contact plus its ordered answer options."""

    prompt_contact_id: str
    option_ids: tuple[str, ...]
    correct_index: int

    @property
    def correct_contact_id(self) -> str:
        return self.option_ids[self.correct_index]


class SessionPhase(Enum):
    """Discrete states of a quiz session."""

    IDLE = auto()
    LOADING = auto()
    AWAITING_ANSWER = auto()
    FEEDBACK_CORRECT = auto()
    FEEDBACK_INCORRECT = auto()
    COMPLETE = auto()


class OptionHighlight(Enum):
    """Feedback colouring for an answer option."""

    NONE = auto()
    CORRECT = auto()
    INCORRECT = auto()


@dataclass(frozen=True, slots=True)
class PromptView:
    contact_id: str
    photo_ref: str | None
    hint: str | None


@dataclass(frozen=True, slots=True)
class OptionView:
    contact_id: str
    display_name: str
    disabled: bool
    highlight: OptionHighlight = OptionHighlight.NONE


@dataclass(frozen=True, slots=True)
class SessionSnapshot:
    """Everything a host needs to render the current state of a session."""

    phase: SessionPhase
    round_index: int
    total_rounds: int
    score: int
    prompt: PromptView | None
    options: tuple[OptionView, ...]
    eligible_count: int
    min_pool_size: int


@dataclass(frozen=True, slots=True)
class SessionResult:
    """Final tally published when a session completes."""

    score: int
    total_rounds: int


def _has_text(value: str | None) -> bool:
    return value is not None and bool(value.strip())
