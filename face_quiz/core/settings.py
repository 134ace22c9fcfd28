"""User-adjustable session settings."""

from __future__ import annotations

from dataclasses import dataclass

from face_quiz.constants.quiz_constants import (
    CORRECT_ADVANCE_DELAY_MS,
    INCORRECT_CLEAR_DELAY_MS,
    ROUND_COUNT,
)


@dataclass(frozen=True, slots=True)
class SessionSettings:
    """Round count, feedback delays and optional shuffle seed for new sessions."""

    round_count: int = ROUND_COUNT
    correct_advance_delay_ms: int = CORRECT_ADVANCE_DELAY_MS
    incorrect_clear_delay_ms: int = INCORRECT_CLEAR_DELAY_MS
    shuffle_seed: int | None = None

    def __post_init__(self) -> None:
        if self.round_count < 1:
            raise ValueError("A session needs at least one round.")
        if self.correct_advance_delay_ms < 0 or self.incorrect_clear_delay_ms < 0:
            raise ValueError("Feedback delays must not be negative.")
