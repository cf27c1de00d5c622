# Usufruct API - Usufruct Value Calculation Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Usage value calculation endpoint."""

from beartype import beartype
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from ...models.calculation import CalculationRequest
from ...schemas.calculation import CalculationApiResponse, CalculationResponse
from ...schemas.problem import ProblemDetails
from ..dependencies import CalculationServiceDep, CorrelationId
from ..problems import calculation_problem

router = APIRouter(prefix="/calculate", tags=["calculate"])

# Only mounted when debug endpoints are enabled.
debug_router = APIRouter(prefix="/calculate", tags=["debug"])


@router.post(
    "",
    response_model=CalculationApiResponse,
    responses={
        400: {"model": ProblemDetails, "description": "Validation or calculation error"},
        500: {"model": ProblemDetails, "description": "Unexpected server error"},
    },
)
@beartype
async def calculate(
    payload: CalculationRequest,
    request: Request,
    service: CalculationServiceDep,
    correlation_id: CorrelationId,
) -> CalculationApiResponse | JSONResponse:
    """Calculate the usage value of an asset with the selected factor method.

    The factor method decides which factor table and age rules apply.
    Validation and calculation errors are answered with RFC 7807 problem
    details carrying the correlation id.
    """
    result = service.calculate(payload, correlation_id)

    if result.is_err():
        return calculation_problem(request, result.unwrap_err())

    return CalculationApiResponse(
        correlation_id=correlation_id,
        response=CalculationResponse.from_result(result.unwrap()),
    )


@debug_router.get("/throw", include_in_schema=False)
async def throw() -> None:
    """Raise unconditionally to exercise the global exception handler."""
    raise RuntimeError("This is a test exception for integration testing.")
