"""Quiz session state machine shared between the filter and quiz panels.

A session moves through the phases in ``SessionPhase``:

    IDLE -> LOADING -> AWAITING_ANSWER -> FEEDBACK_CORRECT -> AWAITING_ANSWER ... -> COMPLETE
                                       -> FEEDBACK_INCORRECT -> AWAITING_ANSWER (same round)

Feedback phases end through a scheduled callback. At most one callback is
pending at a time, and every callback carries the generation it was
scheduled in, so a callback that outlives a cancel, a replay or a teardown
is dropped instead of touching the new state.

Contact or filter changes only recompute the eligible pool. An idle session
starts as soon as the pool is large enough; a running session keeps its
current round and draws the next one from the new pool.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
import logging
import random

from face_quiz.constants.quiz_constants import MIN_POOL_SIZE
from face_quiz.core.contact_pool import compute_eligible_pool
from face_quiz.core.models import (
    Contact,
    FilterSelection,
    OptionHighlight,
    OptionView,
    PromptView,
    Round,
    SessionPhase,
    SessionResult,
    SessionSnapshot,
)
from face_quiz.core.services.answer_evaluator import AnswerEvaluation, evaluate
from face_quiz.core.services.round_generator import generate_round
from face_quiz.core.services.scheduler import Scheduler, TimerHandle
from face_quiz.core.settings import SessionSettings

logger = logging.getLogger(__name__)

_ROUND_PHASES = (
    SessionPhase.AWAITING_ANSWER,
    SessionPhase.FEEDBACK_CORRECT,
    SessionPhase.FEEDBACK_INCORRECT,
)


class QuizSession:
    """Owns phase, score and round progression for one quiz screen lifetime."""

    def __init__(
        self,
        scheduler: Scheduler,
        settings: SessionSettings | None = None,
        rng: random.Random | None = None,
        on_change: Callable[[SessionSnapshot], None] | None = None,
        on_complete: Callable[[SessionResult], None] | None = None,
    ) -> None:
        self._scheduler = scheduler
        self._settings = settings or SessionSettings()
        self._active_settings = self._settings
        self._owns_rng = rng is None
        self._rng = rng if rng is not None else random.Random(self._settings.shuffle_seed)
        self._on_change = on_change
        self._on_complete = on_complete

        self._contacts: list[Contact] = []
        self._selection = FilterSelection()
        self._pool: list[Contact] = []

        self._phase = SessionPhase.IDLE
        self._round: Round | None = None
        self._round_contacts: dict[str, Contact] = {}
        self._selected_contact_id: str | None = None
        self._last_prompt_id: str | None = None
        self._round_index: int = 0
        self._total_rounds: int = self._settings.round_count
        self._score: int = 0

        self._pending: TimerHandle | None = None
        self._generation: int = 0
        self._torn_down: bool = False

    # --- Inputs ---

    def set_contacts(self, contacts: Iterable[Contact]) -> None:
        self._contacts = list(contacts)
        self._refresh_pool()

    def set_filter(self, selection: FilterSelection) -> None:
        self._selection = selection
        self._refresh_pool()

    def update_settings(self, settings: SessionSettings) -> None:
        """Store new settings. Round count and delays apply from the next session.

        A changed shuffle seed reseeds the session's own RNG at once. An RNG
        passed in by the caller is left alone.
        """
        if self._owns_rng and settings.shuffle_seed != self._settings.shuffle_seed:
            self._rng.seed(settings.shuffle_seed)
        self._settings = settings

    def submit(self, contact_id: str) -> AnswerEvaluation | None:
        """Answer the current round. Ignored unless a round awaits an answer."""
        if self._torn_down or self._phase is not SessionPhase.AWAITING_ANSWER or self._round is None:
            logger.debug("Ignoring answer %s in phase %s", contact_id, self._phase.name)
            return None
        if contact_id not in self._round.option_ids:
            logger.warning("Ignoring answer %s: not an option of the current round", contact_id)
            return None

        evaluation = evaluate(self._round, contact_id)
        self._selected_contact_id = contact_id
        if evaluation.correct:
            self._score += 1
            self._set_phase(SessionPhase.FEEDBACK_CORRECT)
            self._schedule(self._active_settings.correct_advance_delay_ms, self._advance)
        else:
            self._set_phase(SessionPhase.FEEDBACK_INCORRECT)
            self._schedule(self._active_settings.incorrect_clear_delay_ms, self._clear_feedback)
        return evaluation

    def replay(self) -> bool:
        """Start over after completion. Returns False when not in ``COMPLETE``."""
        if self._torn_down or self._phase is not SessionPhase.COMPLETE:
            logger.debug("Replay ignored in phase %s", self._phase.name)
            return False
        self._cancel_pending()
        self._score = 0
        self._round_index = 0
        logger.info("Replaying quiz with %d eligible contacts", len(self._pool))
        if not self._start_session(exclude_prompt_id=self._last_prompt_id):
            self._enter_idle()
        return True

    def teardown(self) -> None:
        """Release the pending timer. The session ignores all input afterwards."""
        self._cancel_pending()
        self._torn_down = True
        logger.debug("Quiz session torn down in phase %s", self._phase.name)

    # --- State access ---

    @property
    def phase(self) -> SessionPhase:
        return self._phase

    @property
    def score(self) -> int:
        return self._score

    @property
    def round_index(self) -> int:
        return self._round_index

    @property
    def total_rounds(self) -> int:
        return self._total_rounds

    @property
    def current_round(self) -> Round | None:
        return self._round

    @property
    def eligible_pool(self) -> tuple[Contact, ...]:
        return tuple(self._pool)

    @property
    def selection(self) -> FilterSelection:
        return self._selection

    @property
    def contacts(self) -> tuple[Contact, ...]:
        return tuple(self._contacts)

    @property
    def settings(self) -> SessionSettings:
        return self._settings

    @property
    def is_torn_down(self) -> bool:
        return self._torn_down

    def has_pending_transition(self) -> bool:
        return self._pending is not None

    def result(self) -> SessionResult | None:
        if self._phase is not SessionPhase.COMPLETE:
            return None
        return SessionResult(score=self._score, total_rounds=self._total_rounds)

    def snapshot(self) -> SessionSnapshot:
        prompt: PromptView | None = None
        options: tuple[OptionView, ...] = ()
        if self._round is not None and self._phase in _ROUND_PHASES:
            prompt_contact = self._round_contacts[self._round.prompt_contact_id]
            prompt = PromptView(
                contact_id=prompt_contact.id,
                photo_ref=prompt_contact.photo_ref,
                hint=prompt_contact.hint,
            )
            disabled = self._phase is not SessionPhase.AWAITING_ANSWER
            options = tuple(
                OptionView(
                    contact_id=contact_id,
                    display_name=self._round_contacts[contact_id].display_name,
                    disabled=disabled,
                    highlight=self._highlight_for(contact_id),
                )
                for contact_id in self._round.option_ids
            )
        return SessionSnapshot(
            phase=self._phase,
            round_index=self._round_index,
            total_rounds=self._total_rounds,
            score=self._score,
            prompt=prompt,
            options=options,
            eligible_count=len(self._pool),
            min_pool_size=MIN_POOL_SIZE,
        )

    # --- Transitions ---

    def _refresh_pool(self) -> None:
        if self._torn_down:
            return
        self._pool = compute_eligible_pool(self._contacts, self._selection)
        logger.debug("Eligible pool recomputed: %d contacts", len(self._pool))
        if self._phase is SessionPhase.IDLE and self._start_session():
            return
        self._notify()

    def _start_session(self, exclude_prompt_id: str | None = None) -> bool:
        if len(self._pool) < MIN_POOL_SIZE:
            return False
        self._cancel_pending()
        self._active_settings = self._settings
        self._total_rounds = self._active_settings.round_count
        self._score = 0
        self._round_index = 0
        self._round = None
        self._set_phase(SessionPhase.LOADING)
        self._present_round(exclude_prompt_id)
        return True

    def _present_round(self, exclude_prompt_id: str | None) -> None:
        round_ = generate_round(self._pool, exclude_prompt_id=exclude_prompt_id, rng=self._rng)
        self._round_contacts = {
            contact.id: contact for contact in self._pool if contact.id in round_.option_ids
        }
        self._round = round_
        self._selected_contact_id = None
        self._set_phase(SessionPhase.AWAITING_ANSWER)

    def _advance(self) -> None:
        if self._phase is not SessionPhase.FEEDBACK_CORRECT or self._round is None:
            return
        self._last_prompt_id = self._round.prompt_contact_id
        if self._round_index + 1 >= self._total_rounds:
            self._complete()
        elif len(self._pool) < MIN_POOL_SIZE:
            logger.info("Eligible pool shrank to %d contacts; ending session", len(self._pool))
            self._enter_idle()
        else:
            self._round_index += 1
            self._present_round(self._last_prompt_id)

    def _clear_feedback(self) -> None:
        if self._phase is not SessionPhase.FEEDBACK_INCORRECT:
            return
        self._selected_contact_id = None
        self._set_phase(SessionPhase.AWAITING_ANSWER)

    def _complete(self) -> None:
        self._round = None
        self._round_contacts = {}
        self._selected_contact_id = None
        self._set_phase(SessionPhase.COMPLETE)
        result = SessionResult(score=self._score, total_rounds=self._total_rounds)
        logger.info("Quiz complete: %d/%d", result.score, result.total_rounds)
        if self._on_complete is not None:
            self._on_complete(result)

    def _enter_idle(self) -> None:
        self._cancel_pending()
        self._round = None
        self._round_contacts = {}
        self._selected_contact_id = None
        self._score = 0
        self._round_index = 0
        self._set_phase(SessionPhase.IDLE)

    def _set_phase(self, phase: SessionPhase) -> None:
        logger.debug("Phase %s -> %s", self._phase.name, phase.name)
        self._phase = phase
        self._notify()

    def _notify(self) -> None:
        if self._on_change is not None and not self._torn_down:
            self._on_change(self.snapshot())

    def _highlight_for(self, contact_id: str) -> OptionHighlight:
        if self._round is None:
            return OptionHighlight.NONE
        if self._phase is SessionPhase.FEEDBACK_CORRECT and contact_id == self._round.correct_contact_id:
            return OptionHighlight.CORRECT
        if self._phase is SessionPhase.FEEDBACK_INCORRECT and contact_id == self._selected_contact_id:
            return OptionHighlight.INCORRECT
        return OptionHighlight.NONE

    # --- Scheduling ---

    def _schedule(self, delay_ms: int, action: Callable[[], None]) -> None:
        self._cancel_pending()
        if self._torn_down:
            return
        generation = self._generation

        def _fire() -> None:
            if self._torn_down or generation != self._generation:
                logger.debug("Dropping stale transition from generation %d", generation)
                return
            self._pending = None
            action()

        self._pending = self._scheduler.schedule(delay_ms, _fire)

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
        self._generation += 1
