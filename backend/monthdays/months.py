"""Months router: HTTP collector in front of the month resolver."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, Field, StrictInt, StrictStr

from .services.month_presenter import describe, describe_error
from .services.month_resolver import (
    InvalidMonthError,
    InvalidYearError,
    MonthQuery,
    MonthResult,
    resolve,
    resolve_query,
    resolve_year,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/months", tags=["months"])


class MonthResolveRequest(BaseModel):
    name: str = Field(min_length=1, max_length=40)
    # JSON booleans are rejected, never read as 0 or 1.
    year: StrictInt | StrictStr | None = None


class MonthDaysResponse(BaseModel):
    month: str
    day_count: int
    year: int | None
    is_leap_year_applied: bool
    message: str


class MonthListResponse(BaseModel):
    year: int | None
    items: list[MonthDaysResponse]


def _to_response(result: MonthResult) -> MonthDaysResponse:
    return MonthDaysResponse(
        month=result.canonical_name,
        day_count=result.day_count,
        year=result.year,
        is_leap_year_applied=result.is_leap_year_applied,
        message=describe(result),
    )


def _http_error(exc: InvalidMonthError | InvalidYearError) -> HTTPException:
    # Unknown month is a missing resource; a bad year is bad input.
    status_code = 404 if isinstance(exc, InvalidMonthError) else 422
    logger.info("Rejected month query: %s", exc)
    return HTTPException(status_code=status_code, detail=describe_error(exc))


@router.get("", response_model=MonthListResponse)
def list_months(
    year: str | None = Query(default=None, description="Optional year, e.g. 2024"),
) -> MonthListResponse:
    """
    Day counts for all twelve months, january first.

    Example response (year=2024, first item):
    {"month": "january", "day_count": 31, "year": 2024,
     "is_leap_year_applied": false, "message": "January has 31 days."}
    """
    try:
        results = resolve_year(year)
    except InvalidYearError as exc:
        raise _http_error(exc) from exc

    return MonthListResponse(
        year=results[0].year,
        items=[_to_response(result) for result in results],
    )


@router.get("/{name}", response_model=MonthDaysResponse)
def get_month_days(
    name: str,
    year: str | None = Query(default=None, description="Optional year, e.g. 2024"),
) -> MonthDaysResponse:
    """Number of days in one month, honoring leap years when `year` is given."""
    try:
        result = resolve(name, year)
    except (InvalidMonthError, InvalidYearError) as exc:
        raise _http_error(exc) from exc
    return _to_response(result)


@router.post("/resolve", response_model=MonthDaysResponse)
def resolve_month(payload: MonthResolveRequest) -> MonthDaysResponse:
    try:
        result = resolve_query(MonthQuery(name=payload.name, year=payload.year))
    except (InvalidMonthError, InvalidYearError) as exc:
        raise _http_error(exc) from exc
    return _to_response(result)
