# src/nbprates/adapters/http/routes.py
"""
NBP Rates API Routes

Exposes bid/ask rates from NBP Table C with day-over-day differences.
"""
from datetime import date

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import JSONResponse

from nbprates.application.rates_service import RatesService
from nbprates.domain.errors import InvalidRangeError
from nbprates.domain.models import CurrencyCode, RatesOk

router = APIRouter(prefix="/api/nbp", tags=["NBP Rates"])

FETCH_FAILED_MESSAGE = "Failed to fetch rates from NBP API"


def get_rates_service(request: Request) -> RatesService:
    return request.app.state.rates_service


@router.get(
    "/rates",
    summary="Get NBP exchange rates",
    description=(
        "Returns buying/selling rates from NBP Table C for the chosen currency "
        "and date range (at most 7 days), with differences against the previous day."
    ),
)
def get_rates(
    currency_code: CurrencyCode = Query(..., alias="currencyCode", description="Currency code (e.g., EUR)."),
    date_from: date = Query(..., alias="dateFrom", description="Start date, YYYY-MM-DD (inclusive)."),
    date_to: date = Query(..., alias="dateTo", description="End date, YYYY-MM-DD (inclusive)."),
    service: RatesService = Depends(get_rates_service),
) -> JSONResponse:
    result = service.get_rates(currency_code, date_from, date_to)

    if isinstance(result, RatesOk):
        return JSONResponse([record.as_json() for record in result.records], status_code=status.HTTP_200_OK)

    if isinstance(result.error, InvalidRangeError):
        return JSONResponse({"error": str(result.error)}, status_code=status.HTTP_400_BAD_REQUEST)

    return JSONResponse(
        {"error": FETCH_FAILED_MESSAGE, "detail": str(result.error)},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
