"""Shared test fixtures and helpers."""

from __future__ import annotations

import asyncio
from datetime import date
from typing import Any

from lending.intake.models import SubmissionOutcome

TODAY = date(2026, 10, 19)

VALID_FORM: dict[str, Any] = {
    "firstName": "Maria",
    "middleName": "L",
    "lastName": "Garcia",
    "generationCode": "customer.generationCode.none",
    "ssn": "123-45-6789",
    "driverLicense": "D1234567",
    "dateOfBirth": "1985-04-12",
    "gender": "customer.gender.female",
    "email": "maria@example.com",
    "phone": "555-123-4567",
    "address": "123 Main St",
    "city": "Sacramento",
    "state": "California",
    "zipCode": "95814",
    "companyName": "Acme Corp",
    "title": "Engineer",
    "hireDate": "2019-03-01",
    "income": "5200.50",
    "incomeFrequency": "customerEmployer.incomeFrequency.monthly",
    "empAddress": "500 Industrial Way",
    "empCity": "Austin",
    "empState": "Texas",
    "empZipCode": "73301",
    "collateralAddress": "77 Lake Rd",
    "collateralCity": "Reno",
    "collateralState": "Nevada",
    "collateralZipCode": "89501",
    "collateralVin": "1HGCM82633A004352",
    "collateralYear": "2018",
    "collateralManufacturerName": "Clayton",
    "collateralSizeOfHome": "16x80",
    "termsAccepted": True,
    "backgroundCheckAccepted": True,
}


class FakeSubmitter:
    """Records payloads and returns a canned outcome.

    When ``gate`` is set, ``submit`` waits on it before returning, which
    keeps a submission outstanding for as long as the test needs.
    """

    def __init__(
        self,
        outcome: SubmissionOutcome | None = None,
        gate: asyncio.Event | None = None,
    ) -> None:
        self.outcome = outcome or SubmissionOutcome(
            success=True, status_code=201, data={"message": "created"}
        )
        self.gate = gate
        self.payloads: list[dict[str, Any]] = []
        self.started = asyncio.Event() if gate is not None else None

    async def submit(self, payload: dict[str, Any]) -> SubmissionOutcome:
        self.payloads.append(payload)
        if self.gate is not None:
            self.started.set()
            await self.gate.wait()
        return self.outcome
