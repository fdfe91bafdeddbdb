"""Tests for the loan-origination payload builder."""

from __future__ import annotations

import pytest

from lending.core.config import LOSConfig
from lending.intake.models import ApplicationFields
from lending.intake.payload import build_payload, state_code
from tests.conftest import VALID_FORM


@pytest.fixture
def fields():
    return ApplicationFields.model_validate(VALID_FORM)


@pytest.fixture
def payload(fields):
    return build_payload(fields, now_ms=1_760_000_000_000)


class TestStateCode:
    def test_first_two_letters_upper_cased(self):
        assert state_code("California") == "geo.state.CA"
        assert state_code("texas") == "geo.state.TE"


class TestCustomer:
    def test_generation_none_becomes_empty(self):
        fields = ApplicationFields.model_validate(
            {**VALID_FORM, "generationCode": "customer.generationCode.none"}
        )
        assert build_payload(fields)["customer"]["generationCode"] == ""

    def test_generation_code_passed_through(self):
        fields = ApplicationFields.model_validate(
            {**VALID_FORM, "generationCode": "customer.generationCode.iii"}
        )
        assert build_payload(fields)["customer"]["generationCode"] == "customer.generationCode.iii"

    def test_identity_fields(self, payload):
        customer = payload["customer"]
        assert customer["firstName"] == "Maria"
        assert customer["middleName"] == "L"
        assert customer["lastName"] == "Garcia"
        assert customer["birthDate"] == "1985-04-12"
        assert customer["customerType"] == "customer.type.individual"
        assert customer["status"] == "Lead"

    def test_phone(self, payload):
        assert payload["customer"]["Phones"] == {
            "results": [
                {
                    "type": "customer.phoneType.cell",
                    "phone": "555-123-4567",
                    "isPrimary": "1",
                    "isSecondary": "0",
                }
            ]
        }

    def test_primary_and_mailing_address_match(self, payload):
        customer = payload["customer"]
        assert customer["PrimaryAddress"] == {
            "address1": "123 Main St",
            "city": "Sacramento",
            "state": "geo.state.CA",
            "zipcode": "95814",
            "country": "company.country.usa",
        }
        assert customer["MailAddress"] == customer["PrimaryAddress"]
        assert customer["MailAddress"] is not customer["PrimaryAddress"]

    def test_employer(self, payload):
        employer = payload["customer"]["Employer"]
        assert employer["income"] == 5200.5
        assert isinstance(employer["income"], float)
        assert employer["incomeFrequency"] == "customerEmployer.incomeFrequency.monthly"
        assert employer["Address"]["state"] == "geo.state.TE"

    def test_empty_employer_state(self, fields):
        fields = fields.model_copy(update={"emp_state": ""})
        assert build_payload(fields)["customer"]["Employer"]["Address"]["state"] == ""


class TestLoan:
    def test_display_id_uses_timestamp(self, payload):
        assert payload["loan"]["displayId"] == "Loan Application - 1760000000000"

    def test_display_id_defaults_to_now(self, fields):
        display_id = build_payload(fields)["loan"]["displayId"]
        label, _, stamp = display_id.rpartition(" - ")
        assert label == "Loan Application"
        assert stamp.isdigit() and len(stamp) == 13

    def test_loan_setup_constants(self, payload):
        assert payload["loan"]["LoanSetup"] == {
            "loanAmount": "0.00",
            "loanRate": "0.00",
            "contractDate": "2025-01-01",
            "loanClass": "loan.class.consumer",
            "loanType": "loan.type.installment",
            "firstPaymentDate": "2025-01-01",
        }

    def test_loan_setup_from_config(self, fields):
        config = LOSConfig(contract_date="2026-11-01", first_payment_date="2026-12-01")
        setup = build_payload(fields, config)["loan"]["LoanSetup"]
        assert setup["contractDate"] == "2026-11-01"
        assert setup["firstPaymentDate"] == "2026-12-01"

    def test_single_collateral_record(self, payload):
        assert payload["loan"]["Collateral"]["results"] == [
            {
                "a": "77 Lake Rd",
                "b": "Reno",
                "c": "geo.state.NE",
                "d": "89501",
                "collateralType": "collateral.type.consumer",
            }
        ]

    def test_empty_collateral_state(self, fields):
        fields = fields.model_copy(update={"collateral_state": ""})
        assert build_payload(fields)["loan"]["Collateral"]["results"][0]["c"] == ""


class TestCollateralCustomFields:
    def test_four_entries_in_order(self, payload):
        assert payload["collateralCustomFields"] == [
            {"customFieldId": 9, "customFieldValue": "2018"},
            {"customFieldId": 10, "customFieldValue": "1HGCM82633A004352"},
            {"customFieldId": 11, "customFieldValue": "Clayton"},
            {"customFieldId": 13, "customFieldValue": "16x80"},
        ]

    def test_unset_values_are_empty_strings(self, fields):
        fields = fields.model_copy(
            update={
                "collateral_year": "",
                "collateral_vin": "",
                "collateral_manufacturer_name": "",
                "collateral_size_of_home": "",
            }
        )
        entries = build_payload(fields)["collateralCustomFields"]
        assert [e["customFieldId"] for e in entries] == [9, 10, 11, 13]
        assert all(e["customFieldValue"] == "" for e in entries)

    def test_not_embedded_in_collateral_record(self, payload):
        record = payload["loan"]["Collateral"]["results"][0]
        assert set(record) == {"a", "b", "c", "d", "collateralType"}
