"""In-memory store for wizard states."""

from __future__ import annotations

from lending.intake.models import FormState


class IntakeStore:
    """In-memory dict store for wizard states.

    Suitable for single-instance deployment; states do not survive a restart.
    """

    def __init__(self) -> None:
        self._states: dict[str, FormState] = {}

    def save(self, state: FormState) -> None:
        self._states[state.id] = state

    def get(self, state_id: str) -> FormState | None:
        return self._states.get(state_id)

    def delete(self, state_id: str) -> bool:
        return self._states.pop(state_id, None) is not None
