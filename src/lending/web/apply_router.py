"""FastAPI router for the loan application wizard."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException, Request, Response
from pydantic import BaseModel, Field

from lending.intake.models import (
    NONE_SENTINEL,
    US_STATES,
    FormState,
    Gender,
    GenerationCode,
    IncomeFrequency,
    SubmissionStatus,
)
from lending.intake.steps import STEP_TITLES, Step

router = APIRouter()


# --- Request/Response models ---


class WizardStateResponse(BaseModel):
    id: str
    current_step: int
    total_steps: int
    step_title: str
    fields: dict[str, Any]
    is_submitting: bool
    errors: dict[str, list[str]] = Field(default_factory=dict)


class UpdateFieldsRequest(BaseModel):
    fields: dict[str, Any] = Field(default_factory=dict)


class AdvanceResponse(BaseModel):
    ok: bool
    state: WizardStateResponse


class SubmitResponse(BaseModel):
    status: str
    errors: dict[str, list[str]] = Field(default_factory=dict)
    response: Any = None
    error: str | None = None
    state: WizardStateResponse


def _state_response(state: FormState) -> WizardStateResponse:
    return WizardStateResponse(
        id=state.id,
        current_step=state.current_step.value,
        total_steps=len(Step),
        step_title=STEP_TITLES[state.current_step],
        fields=state.fields.as_form_data(),
        is_submitting=state.is_submitting,
        errors=state.errors,
    )


# --- Options ---


@router.get("/api/apply/options")
async def get_options() -> dict[str, Any]:
    return {
        "generation_codes": [NONE_SENTINEL] + [g.value for g in GenerationCode],
        "genders": [g.value for g in Gender],
        "income_frequencies": [f.value for f in IncomeFrequency],
        "states": list(US_STATES),
        "steps": [{"step": s.value, "title": STEP_TITLES[s]} for s in Step],
    }


# --- Wizard endpoints ---


@router.post("/api/apply/wizard")
async def start_wizard(request: Request) -> WizardStateResponse:
    engine = request.app.state.wizard_engine
    return _state_response(engine.start())


@router.get("/api/apply/wizard/{state_id}")
async def get_wizard(state_id: str, request: Request) -> WizardStateResponse:
    engine = request.app.state.wizard_engine
    try:
        state = engine.get(state_id)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _state_response(state)


@router.delete("/api/apply/wizard/{state_id}", status_code=204)
async def discard_wizard(state_id: str, request: Request) -> Response:
    engine = request.app.state.wizard_engine
    try:
        engine.discard(state_id)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)


@router.patch("/api/apply/wizard/{state_id}/fields")
async def update_fields(
    state_id: str, body: UpdateFieldsRequest, request: Request
) -> WizardStateResponse:
    engine = request.app.state.wizard_engine
    try:
        state = engine.update_fields(state_id, body.fields)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _state_response(state)


@router.post("/api/apply/wizard/{state_id}/advance")
async def advance(state_id: str, request: Request) -> AdvanceResponse:
    engine = request.app.state.wizard_engine
    try:
        state, outcome = engine.advance(state_id)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return AdvanceResponse(ok=outcome.ok, state=_state_response(state))


@router.post("/api/apply/wizard/{state_id}/back")
async def go_back(state_id: str, request: Request) -> WizardStateResponse:
    engine = request.app.state.wizard_engine
    try:
        state = engine.retreat(state_id)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _state_response(state)


@router.post("/api/apply/wizard/{state_id}/submit")
async def submit(state_id: str, request: Request, response: Response) -> SubmitResponse:
    engine = request.app.state.wizard_engine
    try:
        result = await engine.submit(state_id)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if result.status is SubmissionStatus.IN_PROGRESS:
        response.status_code = 409
    elif result.status is SubmissionStatus.FAILED:
        response.status_code = 502

    return SubmitResponse(
        status=result.status.value,
        errors=result.errors,
        response=result.response,
        error=result.error,
        state=_state_response(engine.get(state_id)),
    )
