"""Pure transitions of the application wizard.

Each function takes a ``FormState`` and returns a new one (plus an outcome
where the transition can be refused). The input state is never mutated, so
the transitions can be exercised without a store, a client or a server.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any

from lending.intake.models import (
    FIELD_NAMES,
    ApplicationFields,
    FormState,
    StepOutcome,
    SubmissionStatus,
)
from lending.intake.steps import STEP_FIELDS, Step
from lending.intake.validation import ValidationEngine


def _touch(state: FormState, **changes: Any) -> FormState:
    changes["updated_at"] = datetime.now(timezone.utc)
    return state.model_copy(update=changes)


def update_field(state: FormState, name: str, value: Any) -> FormState:
    """Set one field. No validation beyond the field's type.

    Raises:
        ValueError: If ``name`` is not a form field or ``value`` cannot be
            stored in it (e.g. an unknown generation code).
    """
    if name not in FIELD_NAMES:
        raise ValueError(f"Unknown field: {name!r}")

    data = state.fields.model_dump(by_alias=True)
    data[name] = value
    try:
        fields = ApplicationFields.model_validate(data)
    except ValueError as exc:
        raise ValueError(f"Invalid value for field {name!r}") from exc
    return _touch(state, fields=fields)


def advance(
    state: FormState, validation: ValidationEngine, today: date | None = None
) -> tuple[FormState, StepOutcome]:
    """Move to the next step if the current step's fields validate.

    Raises:
        ValueError: If already on the last step.
    """
    if state.current_step.is_last:
        raise ValueError("Already at the last step; submit the application instead.")

    group = STEP_FIELDS[state.current_step]
    result = validation.validate_fields(group, state.fields.as_form_data(), today)

    errors = {k: v for k, v in state.errors.items() if k not in group}
    if not result.valid:
        errors.update(result.errors)
        return _touch(state, errors=errors), StepOutcome(ok=False, errors=result.errors)

    next_step = Step(state.current_step + 1)
    return _touch(state, current_step=next_step, errors=errors), StepOutcome(ok=True)


def retreat(state: FormState) -> FormState:
    """Move to the previous step. Entered data is kept and nothing is validated.

    Raises:
        ValueError: If already on the first step.
    """
    if state.current_step.is_first:
        raise ValueError("Already at the first step.")
    return _touch(state, current_step=Step(state.current_step - 1))


def begin_submission(
    state: FormState, validation: ValidationEngine, today: date | None = None
) -> tuple[FormState, SubmissionStatus, dict[str, list[str]]]:
    """Validate the whole form and claim the submission slot.

    Returns the new state, ``READY`` when the caller may go ahead and send
    the application, ``INVALID`` with per-field errors, or ``IN_PROGRESS``
    when another submission is still outstanding.

    Raises:
        ValueError: If not on the last step.
    """
    if not state.current_step.is_last:
        raise ValueError(
            f"Applications can only be submitted from step {Step.COLLATERAL.value}, "
            f"current step is {state.current_step.value}."
        )

    result = validation.validate_all(state.fields.as_form_data(), today)
    if not result.valid:
        return _touch(state, errors=result.errors), SubmissionStatus.INVALID, result.errors

    if state.is_submitting:
        return state, SubmissionStatus.IN_PROGRESS, {}

    return _touch(state, is_submitting=True, errors={}), SubmissionStatus.READY, {}


def finish_submission(state: FormState) -> FormState:
    """Release the submission slot. Fields and step are left as they are."""
    return _touch(state, is_submitting=False)
