"""Shared models for the loan application wizard."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from lending.intake.steps import FIRST_STEP, Step

# Value the generation-code select uses for "no generation suffix".
NONE_SENTINEL = "customer.generationCode.none"


class GenerationCode(StrEnum):
    """Name suffixes accepted by the loan-origination system."""

    JR = "customer.generationCode.jr"
    SR = "customer.generationCode.sr"
    II = "customer.generationCode.ii"
    III = "customer.generationCode.iii"
    IV = "customer.generationCode.iv"
    V = "customer.generationCode.v"
    VI = "customer.generationCode.vi"
    VII = "customer.generationCode.vii"
    VIII = "customer.generationCode.viii"
    IX = "customer.generationCode.ix"


class Gender(StrEnum):
    FEMALE = "customer.gender.female"
    MALE = "customer.gender.male"


class IncomeFrequency(StrEnum):
    WEEKLY = "customerEmployer.incomeFrequency.weekly"
    BI_WEEKLY = "customerEmployer.incomeFrequency.biWeekly"
    MONTHLY = "customerEmployer.incomeFrequency.monthly"
    ANNUALLY = "customerEmployer.incomeFrequency.annually"
    SEMI_MONTHLY = "customerEmployer.incomeFrequency.semiMonthly"


US_STATES: tuple[str, ...] = (
    "Alabama", "Alaska", "Arizona", "Arkansas", "California", "Colorado",
    "Connecticut", "Delaware", "Florida", "Georgia", "Hawaii", "Idaho",
    "Illinois", "Indiana", "Iowa", "Kansas", "Kentucky", "Louisiana", "Maine",
    "Maryland", "Massachusetts", "Michigan", "Minnesota", "Mississippi",
    "Missouri", "Montana", "Nebraska", "Nevada", "New Hampshire", "New Jersey",
    "New Mexico", "New York", "North Carolina", "North Dakota", "Ohio",
    "Oklahoma", "Oregon", "Pennsylvania", "Rhode Island", "South Carolina",
    "South Dakota", "Tennessee", "Texas", "Utah", "Vermont", "Virginia",
    "Washington", "West Virginia", "Wisconsin", "Wyoming",
)


class ApplicationFields(BaseModel):
    """Everything the applicant enters across the four wizard steps.

    Attributes are snake_case; the wire names used by the front end and by
    the validation rules are the camelCase aliases (``firstName``, ...).
    """

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    # Step 1
    first_name: str = ""
    middle_name: str = ""
    last_name: str = ""
    generation_code: GenerationCode | None = None
    ssn: str = ""
    driver_license: str = ""
    date_of_birth: str = ""
    gender: str = ""

    # Step 2
    email: str = ""
    phone: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""

    # Step 3
    company_name: str = ""
    title: str = ""
    hire_date: str = ""
    income: str = ""
    income_frequency: str = ""
    emp_address: str = ""
    emp_city: str = ""
    emp_state: str = ""
    emp_zip_code: str = ""

    # Step 4
    collateral_address: str = ""
    collateral_city: str = ""
    collateral_state: str = ""
    collateral_zip_code: str = ""
    collateral_vin: str = ""
    collateral_year: str = ""
    collateral_manufacturer_name: str = ""
    collateral_size_of_home: str = ""
    terms_accepted: bool = False
    background_check_accepted: bool = False

    @field_validator("generation_code", mode="before")
    @classmethod
    def _decode_no_generation(cls, value: Any) -> Any:
        if value is None or value == "" or value == NONE_SENTINEL:
            return None
        return value

    def as_form_data(self) -> dict[str, Any]:
        """Return the values keyed by wire name, as the validators see them."""
        data = self.model_dump(by_alias=True, mode="json")
        if data["generationCode"] is None:
            data["generationCode"] = ""
        return data


FIELD_NAMES: tuple[str, ...] = tuple(to_camel(name) for name in ApplicationFields.model_fields)


class ValidationResult(BaseModel):
    """Result of validating a field or step."""

    valid: bool
    errors: dict[str, list[str]] = Field(default_factory=dict)


class FormState(BaseModel):
    """Runtime state of one applicant's pass through the wizard."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    current_step: Step = FIRST_STEP
    fields: ApplicationFields = Field(default_factory=ApplicationFields)
    is_submitting: bool = False
    errors: dict[str, list[str]] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class StepOutcome(BaseModel):
    """Whether a step transition went through, and why not if it didn't."""

    ok: bool
    errors: dict[str, list[str]] = Field(default_factory=dict)


class SubmissionStatus(StrEnum):
    INVALID = "invalid"
    IN_PROGRESS = "in_progress"
    READY = "ready"
    SUBMITTED = "submitted"
    FAILED = "failed"


class SubmissionOutcome(BaseModel):
    """Classified result of one call to the loan-origination system."""

    success: bool
    status_code: int | None = None
    data: Any = None
    error: str | None = None


class SubmissionResult(BaseModel):
    """What a submit attempt produced, as reported to the caller."""

    status: SubmissionStatus
    errors: dict[str, list[str]] = Field(default_factory=dict)
    response: Any = None
    error: str | None = None
