"""Unit conversions and splitting of time spans and day counts."""

from __future__ import annotations

EUR_TO_BGN = 1.95583
METRES_IN_KILOMETRE = 1000.0
SECONDS_IN_HOUR = 3600
SECONDS_IN_MINUTE = 60
SECONDS_IN_DAY = 86400
MINUTES_IN_HOUR = 60
KILOMETRES_IN_MILE = 1.609344
DAYS_IN_YEAR = 365
DAYS_IN_MONTH = 30
STEPS_IN_MILE = 2000
USD_TO_BGN = 1.85
BGN_RATES = {"USD": 0.54, "EUR": 0.51, "GBP": 0.44}
CENTIMETRES_IN_INCH = 2.54
LITRES_IN_GALLON = 3.78541


def _require_non_negative(value, message="The input must be a positive number."):
    if value < 0:
        raise ValueError(message)


def bgn_to_eur(leva: float) -> float:
    """Convert leva to euro at the fixed rate."""
    return leva / EUR_TO_BGN


def celsius_to_fahrenheit(celsius: float) -> float:
    """Convert degrees Celsius to Fahrenheit."""
    return celsius * (9.0 / 5.0) + 32.0


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    """Convert degrees Fahrenheit to Celsius."""
    return (fahrenheit - 32.0) * (5.0 / 9.0)


def metres_to_kilometres(metres: float) -> float:
    """Convert metres to kilometres."""
    return metres / METRES_IN_KILOMETRE


def hours_to_seconds(hours: int) -> int:
    """Convert a non-negative number of hours to seconds."""
    _require_non_negative(hours)
    return hours * SECONDS_IN_HOUR


def miles_to_kilometres(miles: float) -> float:
    """Convert a non-negative distance in miles to kilometres."""
    _require_non_negative(miles)
    return miles * KILOMETRES_IN_MILE


def is_valid_date(day: int, month: int, year: int) -> bool:
    """Return True when day, month and year are all positive."""
    return day > 0 and month > 0 and year > 0


def date_to_days(day: int, month: int, year: int) -> int:
    """Count days with 365-day years and 30-day months."""
    return year * DAYS_IN_YEAR + month * DAYS_IN_MONTH + day


def days_between(first: tuple[int, int, int], second: tuple[int, int, int]) -> int:
    """Return the absolute day difference of two ``(day, month, year)`` dates."""
    if not (is_valid_date(*first) and is_valid_date(*second)):
        raise ValueError("Input is not a valid date.")
    return abs(date_to_days(*first) - date_to_days(*second))


def split_hms(total_seconds: int) -> tuple[int, int, int]:
    """Split seconds into ``(hours, minutes, seconds)``."""
    _require_non_negative(total_seconds)
    hours, rest = divmod(total_seconds, SECONDS_IN_HOUR)
    minutes, seconds = divmod(rest, SECONDS_IN_MINUTE)
    return hours, minutes, seconds


def split_ymd(total_days: int) -> tuple[int, int, int]:
    """Split days into ``(years, months, days)`` of 365-day years and 30-day months."""
    _require_non_negative(total_days)
    years, rest = divmod(total_days, DAYS_IN_YEAR)
    months, days = divmod(rest, DAYS_IN_MONTH)
    return years, months, days


def miles_to_steps(miles: float) -> float:
    """Convert a non-negative distance in miles to steps."""
    _require_non_negative(miles)
    return miles * STEPS_IN_MILE


def usd_to_bgn(dollars: float) -> float:
    """Convert a non-negative dollar amount to leva."""
    _require_non_negative(dollars)
    return dollars * USD_TO_BGN


def convert_leva(leva: float) -> dict[str, float]:
    """Convert leva to dollars, euro and pounds, keyed by currency code."""
    _require_non_negative(leva, "Input must be a positive value.")
    return {code: leva * rate for code, rate in BGN_RATES.items()}


def cm_to_inches(centimetres: float) -> float:
    """Convert a non-negative length in centimetres to inches."""
    _require_non_negative(centimetres, "Input value must be a positive number.")
    return centimetres / CENTIMETRES_IN_INCH


def litres_to_gallons(litres: float) -> float:
    """Convert a non-negative volume in litres to US gallons."""
    _require_non_negative(litres, "Input value must be a positive number.")
    return litres / LITRES_IN_GALLON


def split_dhms(total_seconds: int) -> tuple[int, int, int, int]:
    """Split seconds into ``(days, hours, minutes, seconds)``."""
    _require_non_negative(total_seconds, "Input value must be a positive number.")
    days, rest = divmod(total_seconds, SECONDS_IN_DAY)
    hours, rest = divmod(rest, SECONDS_IN_HOUR)
    minutes, seconds = divmod(rest, SECONDS_IN_MINUTE)
    return days, hours, minutes, seconds


def split_minutes(total_minutes: int) -> tuple[int, int]:
    """Split minutes into ``(hours, minutes)``."""
    _require_non_negative(total_minutes, "Input value must be a positive number.")
    return divmod(total_minutes, MINUTES_IN_HOUR)