"""Domain models - pure Python dataclasses representing mortgage entities"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class Program(str, Enum):
    """Mortgage program; exactly one applies to a request"""

    SALARY = "salary"
    MILITARY = "military"
    BASE = "base"


@dataclass(frozen=True)
class LoanRequest:
    """Shape-validated input for a mortgage calculation"""

    object_cost: float
    initial_payment: float
    months: int
    program: Program


@dataclass(frozen=True)
class LoanParams:
    """Echo of the request parameters"""

    object_cost: float
    initial_payment: float
    months: int


@dataclass(frozen=True)
class LoanAggregates:
    """Computed loan figures"""

    rate: float
    loan_sum: float
    monthly_payment: float
    overpayment: float
    last_payment_date: datetime


@dataclass
class LoanCalculation:
    """Calculation result; id stays 0 until the result store assigns one"""

    params: LoanParams
    program: Program
    aggregates: LoanAggregates
    id: int = field(default=0)
