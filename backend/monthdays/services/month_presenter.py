from __future__ import annotations

from .month_resolver import InvalidMonthError, InvalidYearError, MonthResolutionError, MonthResult


def display_name(canonical_name: str) -> str:
    """'february' -> 'February'"""
    return canonical_name.capitalize()


def describe(result: MonthResult) -> str:
    """Render one resolved month as a sentence."""
    name = display_name(result.canonical_name)

    if result.canonical_name != "february":
        return f"{name} has {result.day_count} days."

    if result.year is None:
        return f"{name} has {result.day_count} days (29 in a leap year)."

    if result.is_leap_year_applied:
        return f"{name} has {result.day_count} days in a leap year."
    return f"{name} has {result.day_count} days in a non-leap year."


def describe_error(exc: MonthResolutionError) -> str:
    if isinstance(exc, InvalidMonthError):
        label = "Invalid month"
    elif isinstance(exc, InvalidYearError):
        label = "Invalid year"
    else:
        label = "Invalid input"

    detail = str(exc)
    if not detail:
        return label
    return f"{label}: {detail}"
