"""POST /execute - mortgage calculation endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from mortgage_calculator.api.schemas import CalculationSchema, ErrorResponse, MortgageRequest, MortgageResponse
from mortgage_calculator.api.dependencies import get_calculator, get_request_id, get_result_store
from mortgage_calculator.domain.calculator import MortgageCalculator
from mortgage_calculator.domain.exceptions import BusinessRuleViolation, UnknownProgramError
from mortgage_calculator.infrastructure.cache.result_store import InMemoryResultStore
from mortgage_calculator.infrastructure.observability.metrics import record_cache_size, record_calculation
from mortgage_calculator.infrastructure.observability.logging import log_calculation

router = APIRouter()


@router.post(
    "/execute",
    response_model=MortgageResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def execute_calculation(
    request_body: MortgageRequest,
    request: Request,
    calculator: MortgageCalculator = Depends(get_calculator),
    result_store: InMemoryResultStore = Depends(get_result_store),
):
    """
    Calculate mortgage aggregates and cache the result.

    Flow:
    1. Convert the validated body into a domain request (single program)
    2. Apply lending rules and compute annuity payment
    3. Store the calculation, which assigns its id
    4. Return the stored calculation
    """
    start_time = time.time()
    request_id = get_request_id(request)
    loan_request = request_body.to_domain()
    program = loan_request.program.value

    try:
        calculation = calculator.calculate(loan_request)
        calculation_id = result_store.store(calculation)

    except BusinessRuleViolation as e:
        record_calculation(program, accepted=False)
        logging.warning(f"Calculation rejected: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=400, detail=str(e))

    except UnknownProgramError as e:
        logging.error(f"Program without rate reached calculator: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="internal server error")

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="internal server error")

    record_calculation(program, accepted=True)
    record_cache_size(len(result_store))
    duration_ms = (time.time() - start_time) * 1000
    log_calculation(
        request_id,
        calculation_id,
        program,
        loan_request.months,
        calculation.aggregates.monthly_payment,
        duration_ms,
    )

    return MortgageResponse(result=CalculationSchema.from_domain(calculation))
