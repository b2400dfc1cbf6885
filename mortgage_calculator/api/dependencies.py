"""Dependency injection for FastAPI endpoints"""

from fastapi import Request

from mortgage_calculator.domain.calculator import MortgageCalculator
from mortgage_calculator.infrastructure.cache.result_store import InMemoryResultStore


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_calculator(request: Request) -> MortgageCalculator:
    """Provide the calculator bound to the application's clock"""
    return request.app.state.calculator


def get_result_store(request: Request) -> InMemoryResultStore:
    """Provide the application-wide result store"""
    return request.app.state.result_store
