"""Unit tests for request/response schemas and error message mapping"""

import pytest
from datetime import datetime, timedelta, timezone
from pydantic import ValidationError
from mortgage_calculator.api.errors import describe_validation_errors
from mortgage_calculator.api.schemas import CalculationSchema, MortgageRequest, ProgramSchema
from mortgage_calculator.domain.calculator import calculate_mortgage
from mortgage_calculator.domain.models import LoanRequest, Program
from mortgage_calculator.utils.date_utils import add_months, to_rfc3339


@pytest.mark.parametrize(
    "flags, program",
    [
        ({"salary": True}, Program.SALARY),
        ({"military": True}, Program.MILITARY),
        ({"base": True}, Program.BASE),
        ({"salary": False, "military": False, "base": True}, Program.BASE),
    ],
)
def test_program_schema_single_flag(flags: dict, program: Program):
    assert ProgramSchema(**flags).to_program() is program


def test_program_schema_no_flags():
    with pytest.raises(ValidationError) as exc_info:
        ProgramSchema()
    assert "choose program" in str(exc_info.value)


def test_program_schema_multiple_flags():
    with pytest.raises(ValidationError) as exc_info:
        ProgramSchema(base=True, military=True)
    assert "choose only 1 program" in str(exc_info.value)


def test_program_schema_round_trip_from_domain():
    schema = ProgramSchema.from_program(Program.MILITARY)
    assert schema.model_dump() == {"salary": False, "military": True, "base": False}


@pytest.mark.parametrize("extra", [{}, {"program": None}])
def test_mortgage_request_missing_program_means_no_flags(extra: dict):
    """Absent or null program is reported like an all-false program"""
    with pytest.raises(ValidationError) as exc_info:
        MortgageRequest(object_cost=1_000_000, initial_payment=200_000, months=12, **extra)

    errors = exc_info.value.errors()
    assert len(errors) == 1
    assert errors[0]["loc"] == ("program",)
    assert describe_validation_errors(errors) == "choose program"


def test_mortgage_request_rejects_long_term():
    with pytest.raises(ValidationError):
        MortgageRequest(
            object_cost=1_000_000,
            initial_payment=200_000,
            months=601,
            program={"base": True},
        )


def test_mortgage_request_rejects_negative_cost():
    with pytest.raises(ValidationError):
        MortgageRequest(
            object_cost=-1,
            initial_payment=0,
            months=12,
            program={"base": True},
        )


def test_mortgage_request_to_domain():
    body = MortgageRequest(
        object_cost=5_000_000,
        initial_payment=1_000_000,
        months=240,
        program={"salary": True},
    )

    assert body.to_domain() == LoanRequest(
        object_cost=5_000_000,
        initial_payment=1_000_000,
        months=240,
        program=Program.SALARY,
    )


def test_calculation_schema_wire_format():
    request = LoanRequest(object_cost=5_000_000, initial_payment=1_000_000, months=240, program=Program.SALARY)
    calculation = calculate_mortgage(request, datetime(2024, 1, 1, tzinfo=timezone.utc))
    calculation.id = 7

    data = CalculationSchema.from_domain(calculation).model_dump(mode="json")

    assert data == {
        "id": 7,
        "params": {"object_cost": 5_000_000, "initial_payment": 1_000_000, "months": 240},
        "program": {"salary": True, "military": False, "base": False},
        "aggregates": {
            "rate": 8,
            "loan_sum": 4_000_000,
            "monthly_payment": 33458,
            "overpayment": 4_029_920,
            "last_payment_date": "2044-01-01T00:00:00Z",
        },
    }


def test_describe_validation_errors_invalid_json():
    errors = [{"type": "json_invalid", "loc": ("body", 1), "msg": "JSON decode error"}]
    assert describe_validation_errors(errors) == "invalid json"


def test_describe_validation_errors_program_message_wins():
    errors = [
        {"type": "missing", "loc": ("body", "object_cost"), "msg": "Field required"},
        {
            "type": "value_error",
            "loc": ("body", "program"),
            "msg": "Value error, choose program",
            "ctx": {"error": ValueError("choose program")},
        },
    ]
    assert describe_validation_errors(errors) == "choose program"


def test_describe_validation_errors_field():
    errors = [{"type": "missing", "loc": ("body", "object_cost"), "msg": "Field required"}]
    assert describe_validation_errors(errors) == "validation error: object_cost: Field required"


def test_add_months_year_rollover():
    assert add_months(datetime(2024, 11, 15), 3) == datetime(2025, 2, 15)
    assert add_months(datetime(2024, 11, 30), 3) == datetime(2025, 3, 2)  # Feb 30 -> Mar 2


def test_add_months_keeps_time_of_day():
    assert add_months(datetime(2024, 3, 31, 9, 45), 1) == datetime(2024, 5, 1, 9, 45)


def test_to_rfc3339():
    assert to_rfc3339(datetime(2044, 1, 1, tzinfo=timezone.utc)) == "2044-01-01T00:00:00Z"
    assert to_rfc3339(datetime(2044, 1, 1, 12, 30)) == "2044-01-01T12:30:00Z"
    offset = timezone(timedelta(hours=3))
    assert to_rfc3339(datetime(2044, 1, 1, tzinfo=offset)) == "2044-01-01T00:00:00+03:00"
