"""Mortgage calculation engine - annuity payment and lending rules"""

import math
from datetime import datetime
from typing import Dict

from mortgage_calculator.domain.exceptions import InitialPaymentTooLowError, UnknownProgramError
from mortgage_calculator.domain.models import (
    LoanAggregates,
    LoanCalculation,
    LoanParams,
    LoanRequest,
    Program,
)
from mortgage_calculator.utils.clock import Clock, SystemClock
from mortgage_calculator.utils.date_utils import add_months

# Annual rate in percent per program
PROGRAM_RATES: Dict[Program, float] = {
    Program.SALARY: 8.0,
    Program.MILITARY: 9.0,
    Program.BASE: 10.0,
}

MIN_INITIAL_PAYMENT_RATIO = 0.2


def get_annual_rate(program: Program) -> float:
    """Look up the annual rate for a program, failing fast on anything unmapped"""
    try:
        return PROGRAM_RATES[program]
    except KeyError:
        raise UnknownProgramError(f"No rate configured for program {program!r}") from None


def round_half_away_from_zero(value: float) -> float:
    """Round to the nearest whole unit; .5 goes away from zero (2.5 -> 3, -2.5 -> -3)"""
    whole = math.trunc(value)
    if abs(value - whole) >= 0.5:
        whole += int(math.copysign(1, value))
    return float(whole)


def calculate_annuity_coefficient(monthly_rate: float, months: int) -> float:
    """
    Share of the principal paid each month under a fixed-payment annuity.

    Formula: r * (1 + r)^n / ((1 + r)^n - 1)

    At r == 0 the formula is 0/0; its limit 1/n (straight-line repayment)
    is returned instead.
    """
    if monthly_rate == 0:
        return 1 / months

    growth = (1 + monthly_rate) ** months
    return monthly_rate * growth / (growth - 1)


def calculate_mortgage(
    request: LoanRequest,
    now: datetime,
    min_initial_payment_ratio: float = MIN_INITIAL_PAYMENT_RATIO,
) -> LoanCalculation:
    """
    Compute loan aggregates for a shape-validated request.

    Steps:
    1. Enforce the minimum initial payment (non-strict: exactly 20% passes)
    2. Resolve annual rate from program, derive monthly rate
    3. Annuity payment on the loan sum, rounded to whole units
    4. Overpayment from the rounded payment so that
       overpayment == monthly_payment * months - loan_sum
    5. Last payment date: `now` plus `months` calendar months

    Raises:
        InitialPaymentTooLowError: initial payment below the required share
        UnknownProgramError: program has no rate
    """
    required_payment = request.object_cost * min_initial_payment_ratio
    if request.initial_payment < required_payment and not math.isclose(request.initial_payment, required_payment):
        raise InitialPaymentTooLowError()

    annual_rate = get_annual_rate(request.program)
    monthly_rate = annual_rate / 12 / 100

    loan_sum = request.object_cost - request.initial_payment

    coefficient = calculate_annuity_coefficient(monthly_rate, request.months)
    monthly_payment = round_half_away_from_zero(loan_sum * coefficient)

    total_payment = monthly_payment * request.months
    overpayment = round_half_away_from_zero(total_payment - loan_sum)

    return LoanCalculation(
        params=LoanParams(
            object_cost=request.object_cost,
            initial_payment=request.initial_payment,
            months=request.months,
        ),
        program=request.program,
        aggregates=LoanAggregates(
            rate=annual_rate,
            loan_sum=loan_sum,
            monthly_payment=monthly_payment,
            overpayment=overpayment,
            last_payment_date=add_months(now, request.months),
        ),
    )


class MortgageCalculator:
    """Binds the calculation to a clock and the configured lending threshold"""

    def __init__(
        self,
        clock: Clock | None = None,
        min_initial_payment_ratio: float = MIN_INITIAL_PAYMENT_RATIO,
    ):
        self.clock = clock if clock is not None else SystemClock()
        self.min_initial_payment_ratio = min_initial_payment_ratio

    def calculate(self, request: LoanRequest) -> LoanCalculation:
        return calculate_mortgage(request, self.clock.now(), self.min_initial_payment_ratio)
