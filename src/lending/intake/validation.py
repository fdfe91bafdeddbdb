"""Validation engine for the application wizard."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from typing import Any, Callable

from lending.intake.models import FIELD_NAMES, ValidationResult
from lending.intake.validators.common import VALIDATORS

# Rule specs per wire field name. A spec is "validator" or
# "validator:param=value,param=value". Fields not listed accept anything.
FIELD_RULES: dict[str, list[str]] = {
    "firstName": ["required:label=First name", "max_length:limit=50,label=First name"],
    "lastName": ["required:label=Last name", "max_length:limit=50,label=Last name"],
    "ssn": ["required:label=SSN"],
    "driverLicense": [
        "required:label=Driver license",
        "max_length:limit=20,label=Driver license",
    ],
    "dateOfBirth": ["required:label=Date of birth", "date", "min_age:years=18"],
    "gender": ["required:label=Gender"],
    "email": ["required:label=Email", "email"],
    "phone": ["required:label=Phone number"],
    "address": ["required:label=Address", "max_length:limit=100,label=Address"],
    "city": ["required:label=City", "max_length:limit=50,label=City"],
    "state": ["required:label=State"],
    "zipCode": ["required:label=Zip code", "zip_code"],
    "companyName": [
        "required:label=Company name",
        "max_length:limit=100,label=Company name",
    ],
    "title": ["required:label=Title", "max_length:limit=50,label=Title"],
    "hireDate": ["required:label=Hire date", "date", "not_future:label=Hire date"],
    "income": ["required:label=Income", "amount:label=Income", "positive:label=Income"],
    "incomeFrequency": ["required:label=Income frequency"],
    "collateralYear": ["year"],
    "termsAccepted": ["accepted:subject=the terms and conditions"],
    "backgroundCheckAccepted": ["accepted:subject=the background check"],
}


def _parse_rule(spec: str) -> tuple[str, dict[str, Any]]:
    # Validator name may include params like "max_length:limit=50,label=City"
    name, _, raw = spec.partition(":")
    params: dict[str, Any] = {}
    if raw:
        for pair in raw.split(","):
            k, _, v = pair.partition("=")
            params[k.strip()] = v.strip()
    return name, params


class ValidationEngine:
    """Registry-based validation engine.

    Runs the rules of each requested field against the current form data.
    ``today`` is threaded through to the date validators so callers (and
    tests) can pin the reference date.
    """

    def __init__(self, rules: dict[str, list[str]] | None = None) -> None:
        self._validators: dict[str, Callable[..., str | None]] = dict(VALIDATORS)
        self._rules: dict[str, list[str]] = dict(FIELD_RULES if rules is None else rules)

    def register(self, name: str, fn: Callable[..., str | None]) -> None:
        self._validators[name] = fn

    def validate_field(
        self, field_name: str, value: Any, today: date | None = None
    ) -> list[str]:
        """Validate a single field value. Returns list of error messages."""
        errors: list[str] = []
        for spec in self._rules.get(field_name, []):
            name, params = _parse_rule(spec)
            fn = self._validators.get(name)
            if fn is None:
                raise KeyError(f"Unknown validator {name!r} for field {field_name!r}")

            err = fn(value, today=today, **params)
            if err:
                errors.append(err)
                if name == "required":
                    return errors  # No point running other validators on empty
        return errors

    def validate_fields(
        self,
        field_names: Iterable[str],
        data: dict[str, Any],
        today: date | None = None,
    ) -> ValidationResult:
        """Validate the named fields against the submitted form data."""
        today = today or date.today()
        all_errors: dict[str, list[str]] = {}

        for field_name in field_names:
            field_errors = self.validate_field(field_name, data.get(field_name), today)
            if field_errors:
                all_errors[field_name] = field_errors

        return ValidationResult(
            valid=len(all_errors) == 0,
            errors=all_errors,
        )

    def validate_all(self, data: dict[str, Any], today: date | None = None) -> ValidationResult:
        """Validate every field of the form."""
        return self.validate_fields(FIELD_NAMES, data, today)
