"""GET /cache - list every cached calculation"""

from typing import List
from fastapi import APIRouter, Depends, HTTPException

from mortgage_calculator.api.schemas import CalculationSchema, ErrorResponse
from mortgage_calculator.api.dependencies import get_result_store
from mortgage_calculator.infrastructure.cache.result_store import InMemoryResultStore

router = APIRouter()


@router.get(
    "/cache",
    response_model=List[CalculationSchema],
    responses={400: {"model": ErrorResponse}},
)
def get_cached_calculations(result_store: InMemoryResultStore = Depends(get_result_store)):
    """
    Retrieve all calculations computed since startup.

    Returns:
        Calculations ordered by id; 400 if nothing has been calculated yet
    """
    calculations = result_store.get_all()

    if not calculations:
        raise HTTPException(status_code=400, detail="empty cache")

    return [
        CalculationSchema.from_domain(calculation)
        for calculation in sorted(calculations, key=lambda c: c.id)
    ]
