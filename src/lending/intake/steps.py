"""Wizard steps and the fields each one gates on."""

from __future__ import annotations

from enum import IntEnum


class Step(IntEnum):
    """The four screens of the application wizard."""

    PERSONAL = 1
    CONTACT = 2
    EMPLOYMENT = 3
    COLLATERAL = 4

    @property
    def is_first(self) -> bool:
        return self is Step.PERSONAL

    @property
    def is_last(self) -> bool:
        return self is Step.COLLATERAL


FIRST_STEP = Step.PERSONAL
LAST_STEP = Step.COLLATERAL

# Fields validated before leaving a step. The last step has no gate of its
# own; its fields are checked with the rest of the form on submission.
STEP_FIELDS: dict[Step, tuple[str, ...]] = {
    Step.PERSONAL: ("firstName", "lastName", "ssn", "driverLicense", "dateOfBirth", "gender"),
    Step.CONTACT: ("email", "phone", "address", "city", "state", "zipCode"),
    Step.EMPLOYMENT: ("companyName", "title", "hireDate", "income", "incomeFrequency"),
    Step.COLLATERAL: (),
}

STEP_TITLES: dict[Step, str] = {
    Step.PERSONAL: "Personal Information",
    Step.CONTACT: "Contact Information",
    Step.EMPLOYMENT: "Employment Information",
    Step.COLLATERAL: "Collateral Information",
}

_missing = set(Step) - set(STEP_FIELDS)
if _missing:
    raise RuntimeError(f"No field group defined for steps: {sorted(_missing)}")
del _missing
