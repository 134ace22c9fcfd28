"""Service that builds quiz rounds from the eligible contact pool."""

from __future__ import annotations

from collections.abc import Sequence
import random

from face_quiz.constants.quiz_constants import OPTIONS_PER_ROUND
from face_quiz.core.models import Contact, Round

_default_rng = random.Random()


class InsufficientPoolError(ValueError):
    """Raised when a round is requested from a pool with too few contacts."""


def generate_round(
    pool: Sequence[Contact],
    exclude_prompt_id: str | None = None,
    rng: random.Random | None = None,
) -> Round:
    """Pick a prompt contact and four distinct distractors, in shuffled order.

    ``exclude_prompt_id`` is the previous round's prompt. It is avoided as the
    new prompt whenever another contact is available, but may still appear as
    a distractor.
    """
    rng = rng or _default_rng
    candidates = list({contact.id: contact for contact in pool}.values())
    if len(candidates) < OPTIONS_PER_ROUND:
        raise InsufficientPoolError(
            f"A round needs {OPTIONS_PER_ROUND} distinct contacts, pool has {len(candidates)}."
        )

    rng.shuffle(candidates)
    if exclude_prompt_id is not None and candidates[0].id == exclude_prompt_id:
        # The first non-excluded contact of a uniform shuffle is itself uniform.
        swap_index = next(
            (i for i, contact in enumerate(candidates) if contact.id != exclude_prompt_id),
            0,
        )
        candidates[0], candidates[swap_index] = candidates[swap_index], candidates[0]

    prompt = candidates[0]
    option_ids = [contact.id for contact in candidates[:OPTIONS_PER_ROUND]]
    rng.shuffle(option_ids)

    return Round(
        prompt_contact_id=prompt.id,
        option_ids=tuple(option_ids),
        correct_index=option_ids.index(prompt.id),
    )
