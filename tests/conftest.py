"""Pytest fixtures for testing"""

import pytest
from datetime import datetime, timezone
from fastapi.testclient import TestClient
from mortgage_calculator.api.main import create_app
from mortgage_calculator.domain.calculator import MortgageCalculator
from mortgage_calculator.domain.models import LoanRequest, Program
from mortgage_calculator.infrastructure.cache.result_store import InMemoryResultStore
from mortgage_calculator.utils.clock import FixedClock


FIXED_NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Clock frozen at 2024-01-01T00:00:00Z"""
    return FixedClock(FIXED_NOW)


@pytest.fixture
def calculator(fixed_clock: FixedClock) -> MortgageCalculator:
    return MortgageCalculator(clock=fixed_clock)


@pytest.fixture
def result_store() -> InMemoryResultStore:
    """Fresh store per test"""
    return InMemoryResultStore()


@pytest.fixture
def client(calculator: MortgageCalculator, result_store: InMemoryResultStore) -> TestClient:
    """Create FastAPI test client wired to the fixed clock and a fresh store"""
    app = create_app(calculator=calculator, result_store=result_store)
    return TestClient(app)


@pytest.fixture
def salary_request() -> LoanRequest:
    """5M object, 1M down, 20 years, salary program"""
    return LoanRequest(
        object_cost=5_000_000,
        initial_payment=1_000_000,
        months=240,
        program=Program.SALARY,
    )
