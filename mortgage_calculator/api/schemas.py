"""Pydantic schemas for API request/response validation"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_serializer, field_validator, model_validator

from mortgage_calculator.domain.models import LoanCalculation, LoanRequest, Program
from mortgage_calculator.utils.date_utils import to_rfc3339


class ProgramSchema(BaseModel):
    """Program flags on the wire; exactly one must be true"""

    salary: bool = False
    military: bool = False
    base: bool = False

    @model_validator(mode="after")
    def check_single_program(self) -> "ProgramSchema":
        selected = sum([self.salary, self.military, self.base])
        if selected == 0:
            raise ValueError("choose program")
        if selected > 1:
            raise ValueError("choose only 1 program")
        return self

    def to_program(self) -> Program:
        if self.salary:
            return Program.SALARY
        if self.military:
            return Program.MILITARY
        return Program.BASE

    @classmethod
    def from_program(cls, program: Program) -> "ProgramSchema":
        return cls(**{program.value: True})


class MortgageRequest(BaseModel):
    """Request body for POST /execute"""

    object_cost: float = Field(..., ge=0, allow_inf_nan=False, description="Property price")
    initial_payment: float = Field(..., ge=0, allow_inf_nan=False, description="Down payment")
    months: int = Field(..., ge=1, le=600, description="Loan term in months")
    program: ProgramSchema = Field(default_factory=dict, validate_default=True)

    @field_validator("program", mode="before")
    @classmethod
    def missing_program_has_no_flags(cls, value):
        # Absent or null program reads as "no flag set"
        return {} if value is None else value

    def to_domain(self) -> LoanRequest:
        return LoanRequest(
            object_cost=self.object_cost,
            initial_payment=self.initial_payment,
            months=self.months,
            program=self.program.to_program(),
        )


class ParamsSchema(BaseModel):
    object_cost: float
    initial_payment: float
    months: int


class AggregatesSchema(BaseModel):
    rate: float
    loan_sum: float
    monthly_payment: float
    overpayment: float
    last_payment_date: datetime

    @field_serializer("last_payment_date")
    def serialize_last_payment_date(self, value: datetime) -> str:
        return to_rfc3339(value)


class CalculationSchema(BaseModel):
    """Single calculation as served to clients"""

    id: int
    params: ParamsSchema
    program: ProgramSchema
    aggregates: AggregatesSchema

    @classmethod
    def from_domain(cls, calculation: LoanCalculation) -> "CalculationSchema":
        return cls(
            id=calculation.id,
            params=ParamsSchema(
                object_cost=calculation.params.object_cost,
                initial_payment=calculation.params.initial_payment,
                months=calculation.params.months,
            ),
            program=ProgramSchema.from_program(calculation.program),
            aggregates=AggregatesSchema(
                rate=calculation.aggregates.rate,
                loan_sum=calculation.aggregates.loan_sum,
                monthly_payment=calculation.aggregates.monthly_payment,
                overpayment=calculation.aggregates.overpayment,
                last_payment_date=calculation.aggregates.last_payment_date,
            ),
        )


class MortgageResponse(BaseModel):
    """Response for POST /execute"""

    result: CalculationSchema


class ErrorResponse(BaseModel):
    """Error payload shared by all endpoints"""

    error: str


class HealthResponse(BaseModel):
    status: str
    service: str
    cached_calculations: Optional[int] = None
