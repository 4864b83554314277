"""Month-length resolution with case-insensitive names and Gregorian leap years."""

from __future__ import annotations

from dataclasses import dataclass

CANONICAL_MONTHS: tuple[str, ...] = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)

_THIRTY_DAY_MONTHS: frozenset[str] = frozenset({"april", "june", "september", "november"})


class MonthResolutionError(ValueError):
    """Base exception for month resolution failures."""


class InvalidMonthError(MonthResolutionError):
    """Raised when a name does not match any canonical month."""

    def __init__(self, name: object):
        super().__init__(f"Unknown month name: {name!r}")
        self.name = name


class InvalidYearError(MonthResolutionError):
    """Raised when a supplied year cannot be read as an integer."""

    def __init__(self, value: object):
        super().__init__(f"Year must be an integer, got {value!r}")
        self.value = value


@dataclass(frozen=True)
class MonthQuery:
    """One resolution request as collected from the user."""

    name: str
    year: int | str | None = None


@dataclass(frozen=True)
class MonthResult:
    """Resolved day count for one month."""

    canonical_name: str
    day_count: int
    is_leap_year_applied: bool
    year: int | None = None


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def normalize_month_name(name: object) -> str:
    # Exact English names only; "Feb" and friends are rejected.
    if not isinstance(name, str):
        raise InvalidMonthError(name)
    key = name.strip().lower()
    if key not in CANONICAL_MONTHS:
        raise InvalidMonthError(name)
    return key


def parse_year(year: int | str | None) -> int | None:
    """
    Read an optional year.

    Accepts an int or integer text (surrounding whitespace and a leading sign
    allowed). `None` means no year was given. Everything else, including
    blank text and bools, raises InvalidYearError.
    """
    if year is None:
        return None
    if isinstance(year, bool):
        raise InvalidYearError(year)
    if isinstance(year, int):
        return year
    if isinstance(year, str):
        text = year.strip()
        digits = text[1:] if text[:1] in ("+", "-") else text
        if not digits or not (digits.isascii() and digits.isdigit()):
            raise InvalidYearError(year)
        try:
            return int(text)
        except ValueError as exc:
            # Digit strings past the interpreter's int conversion limit.
            raise InvalidYearError(year) from exc
    raise InvalidYearError(year)


def resolve(name: str, year: int | str | None = None) -> MonthResult:
    """Return the number of days in `name`, honoring leap years when `year` is given."""
    canonical = normalize_month_name(name)
    parsed_year = parse_year(year)

    if canonical == "february":
        leap = parsed_year is not None and is_leap_year(parsed_year)
        return MonthResult(
            canonical_name=canonical,
            day_count=29 if leap else 28,
            is_leap_year_applied=leap,
            year=parsed_year,
        )

    day_count = 30 if canonical in _THIRTY_DAY_MONTHS else 31
    return MonthResult(
        canonical_name=canonical,
        day_count=day_count,
        is_leap_year_applied=False,
        year=parsed_year,
    )


def resolve_query(query: MonthQuery) -> MonthResult:
    return resolve(query.name, query.year)


def resolve_year(year: int | str | None = None) -> list[MonthResult]:
    """Resolve all twelve months for one optional year, january first."""
    parsed_year = parse_year(year)
    return [resolve(name, parsed_year) for name in CANONICAL_MONTHS]
