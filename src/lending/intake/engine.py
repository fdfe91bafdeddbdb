"""Wizard engine: state storage, step navigation and submission."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Protocol

from lending.core.config import LOSConfig
from lending.intake import state_machine
from lending.intake.models import (
    FormState,
    StepOutcome,
    SubmissionOutcome,
    SubmissionResult,
    SubmissionStatus,
)
from lending.intake.payload import build_payload
from lending.intake.store import IntakeStore
from lending.intake.validation import ValidationEngine

logger = logging.getLogger(__name__)


class Submitter(Protocol):
    async def submit(self, payload: dict[str, Any]) -> SubmissionOutcome: ...


class WizardEngine:
    """Drives application wizards held in an ``IntakeStore``.

    Navigation and field edits are synchronous. ``submit`` awaits the
    loan-origination call; while it is outstanding the state is flagged
    ``is_submitting`` and further submits for the same state are refused.
    """

    def __init__(
        self,
        store: IntakeStore,
        validation_engine: ValidationEngine,
        client: Submitter,
        los_config: LOSConfig | None = None,
    ) -> None:
        self._store = store
        self._validation = validation_engine
        self._client = client
        self._los_config = los_config or LOSConfig()

    def start(self) -> FormState:
        """Start a new wizard at step 1 with empty fields."""
        state = FormState()
        self._store.save(state)
        logger.info("Started application wizard %s", state.id)
        return state

    def get(self, state_id: str) -> FormState:
        """Raises:
            KeyError: If state_id not found.
        """
        state = self._store.get(state_id)
        if state is None:
            raise KeyError(f"Wizard state {state_id!r} not found")
        return state

    def discard(self, state_id: str) -> None:
        if not self._store.delete(state_id):
            raise KeyError(f"Wizard state {state_id!r} not found")
        logger.info("Discarded application wizard %s", state_id)

    def update_fields(self, state_id: str, values: dict[str, Any]) -> FormState:
        """Set one or more fields. All-or-nothing if any name or value is bad.

        Raises:
            KeyError: If state_id not found.
            ValueError: If a field name is unknown or a value cannot be stored.
        """
        state = self.get(state_id)
        for name, value in values.items():
            state = state_machine.update_field(state, name, value)
        self._store.save(state)
        return state

    def advance(
        self, state_id: str, today: date | None = None
    ) -> tuple[FormState, StepOutcome]:
        """Raises:
            KeyError: If state_id not found.
            ValueError: If already at the last step.
        """
        state, outcome = state_machine.advance(self.get(state_id), self._validation, today)
        self._store.save(state)
        if outcome.ok:
            logger.debug("Wizard %s advanced to step %d", state.id, state.current_step)
        else:
            logger.debug(
                "Wizard %s blocked at step %d: %s",
                state.id, state.current_step, sorted(outcome.errors),
            )
        return state, outcome

    def retreat(self, state_id: str) -> FormState:
        """Raises:
            KeyError: If state_id not found.
            ValueError: If already at the first step.
        """
        state = state_machine.retreat(self.get(state_id))
        self._store.save(state)
        logger.debug("Wizard %s went back to step %d", state.id, state.current_step)
        return state

    async def submit(self, state_id: str, today: date | None = None) -> SubmissionResult:
        """Validate the whole form and send it to the loan-origination system.

        Fields are left untouched whatever the outcome; clearing the wizard
        after a successful submission is up to the caller.

        Raises:
            KeyError: If state_id not found.
            ValueError: If the wizard is not on its last step.
        """
        state, status, errors = state_machine.begin_submission(
            self.get(state_id), self._validation, today
        )
        self._store.save(state)

        if status is SubmissionStatus.INVALID:
            logger.info("Wizard %s submission blocked by %d invalid fields", state_id, len(errors))
            return SubmissionResult(status=status, errors=errors)
        if status is SubmissionStatus.IN_PROGRESS:
            logger.info("Wizard %s already has a submission in flight", state_id)
            return SubmissionResult(
                status=status,
                error="A submission for this application is already in progress.",
            )

        payload = build_payload(state.fields, self._los_config)
        try:
            outcome = await self._client.submit(payload)
        finally:
            # Fields may have been edited while the call was outstanding.
            latest = self._store.get(state_id)
            if latest is not None:
                self._store.save(state_machine.finish_submission(latest))

        if outcome.success:
            logger.info("Wizard %s submitted as %s", state_id, payload["loan"]["displayId"])
            return SubmissionResult(status=SubmissionStatus.SUBMITTED, response=outcome.data)

        logger.warning("Wizard %s submission failed: %s", state_id, outcome.error)
        return SubmissionResult(
            status=SubmissionStatus.FAILED,
            response=outcome.data,
            error=outcome.error,
        )
