"""Answer checking for quiz rounds."""

from __future__ import annotations

from dataclasses import dataclass

from face_quiz.core.models import Round


@dataclass(frozen=True, slots=True)
class AnswerEvaluation:
    selected_contact_id: str
    correct: bool


def evaluate(round_: Round, selected_contact_id: str) -> AnswerEvaluation:
    """Compare the selection with the round's correct option. Never mutates state."""
    return AnswerEvaluation(
        selected_contact_id=selected_contact_id,
        correct=selected_contact_id == round_.option_ids[round_.correct_index],
    )
