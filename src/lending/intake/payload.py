"""Map completed application fields to the loan-origination request document."""

from __future__ import annotations

import time
from typing import Any

from lending.core.config import LOSConfig
from lending.intake.models import ApplicationFields

COUNTRY_USA = "company.country.usa"
CUSTOMER_TYPE = "customer.type.individual"
CUSTOMER_STATUS = "Lead"
PHONE_TYPE_CELL = "customer.phoneType.cell"
COLLATERAL_TYPE = "collateral.type.consumer"
DISPLAY_ID_LABEL = "Loan Application"

# Custom field ids configured on the loan-origination side for collateral
# attributes that have no column of their own.
COLLATERAL_YEAR_FIELD_ID = 9
COLLATERAL_VIN_FIELD_ID = 10
COLLATERAL_MANUFACTURER_FIELD_ID = 11
COLLATERAL_HOME_SIZE_FIELD_ID = 13


def state_code(state_name: str) -> str:
    """Encode a state name as a ``geo.state.XX`` token.

    The code is the first two letters of the name, upper-cased.
    """
    return f"geo.state.{state_name[:2].upper()}"


def _optional_state_code(state_name: str) -> str:
    return state_code(state_name) if state_name else ""


def _address(address1: str, city: str, state: str, zipcode: str) -> dict[str, Any]:
    return {
        "address1": address1,
        "city": city,
        "state": state,
        "zipcode": zipcode,
        "country": COUNTRY_USA,
    }


def build_payload(
    fields: ApplicationFields,
    config: LOSConfig | None = None,
    now_ms: int | None = None,
) -> dict[str, Any]:
    """Build the submission document from validated fields.

    Args:
        fields: Applicant input that already passed full-form validation.
        config: Source of the loan-setup constants. Defaults to LOSConfig().
        now_ms: Millisecond epoch used in the display id. Defaults to now.
    """
    config = config or LOSConfig()
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000

    home = _address(fields.address, fields.city, state_code(fields.state), fields.zip_code)

    customer = {
        "firstName": fields.first_name,
        "middleName": fields.middle_name,
        "lastName": fields.last_name,
        "generationCode": fields.generation_code.value if fields.generation_code else "",
        "ssn": fields.ssn,
        "driverLicense": fields.driver_license,
        "birthDate": fields.date_of_birth,
        "gender": fields.gender,
        "email": fields.email,
        "customerType": CUSTOMER_TYPE,
        "status": CUSTOMER_STATUS,
        "Phones": {
            "results": [
                {
                    "type": PHONE_TYPE_CELL,
                    "phone": fields.phone,
                    "isPrimary": "1",
                    "isSecondary": "0",
                },
            ],
        },
        "PrimaryAddress": home,
        "MailAddress": dict(home),
        "Employer": {
            "companyName": fields.company_name,
            "title": fields.title,
            "hireDate": fields.hire_date,
            "income": float(fields.income),
            "incomeFrequency": fields.income_frequency,
            "Address": _address(
                fields.emp_address,
                fields.emp_city,
                _optional_state_code(fields.emp_state),
                fields.emp_zip_code,
            ),
        },
    }

    loan = {
        "displayId": f"{DISPLAY_ID_LABEL} - {now_ms}",
        "LoanSetup": {
            "loanAmount": config.loan_amount,
            "loanRate": config.loan_rate,
            "contractDate": config.contract_date,
            "loanClass": config.loan_class,
            "loanType": config.loan_type,
            "firstPaymentDate": config.first_payment_date,
        },
        "Collateral": {
            "results": [
                {
                    "a": fields.collateral_address,
                    "b": fields.collateral_city,
                    "c": _optional_state_code(fields.collateral_state),
                    "d": fields.collateral_zip_code,
                    "collateralType": COLLATERAL_TYPE,
                },
            ],
        },
    }

    custom_fields = [
        {"customFieldId": COLLATERAL_YEAR_FIELD_ID, "customFieldValue": fields.collateral_year},
        {"customFieldId": COLLATERAL_VIN_FIELD_ID, "customFieldValue": fields.collateral_vin},
        {
            "customFieldId": COLLATERAL_MANUFACTURER_FIELD_ID,
            "customFieldValue": fields.collateral_manufacturer_name,
        },
        {
            "customFieldId": COLLATERAL_HOME_SIZE_FIELD_ID,
            "customFieldValue": fields.collateral_size_of_home,
        },
    ]

    return {
        "customer": customer,
        "loan": loan,
        "collateralCustomFields": custom_fields,
    }
