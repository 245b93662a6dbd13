"""
Formatting and validation helpers shared by the public pages.
"""

import re
import secrets
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Union

_WEEKDAYS = (
    "lunedì",
    "martedì",
    "mercoledì",
    "giovedì",
    "venerdì",
    "sabato",
    "domenica",
)

_MONTHS = (
    "gennaio",
    "febbraio",
    "marzo",
    "aprile",
    "maggio",
    "giugno",
    "luglio",
    "agosto",
    "settembre",
    "ottobre",
    "novembre",
    "dicembre",
)

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_RE = re.compile(r"^(\+39)?[\s-]?[0-9]{8,11}$")

SERVICE_COLORS = {
    "fisioterapia": "bg-gradient-to-br from-blue-500 to-blue-600 text-white shadow-lg",
    "osteopatia": "bg-gradient-to-br from-emerald-500 to-green-600 text-white shadow-lg",
    "riabilitazione": "bg-gradient-to-br from-orange-500 to-red-500 text-white shadow-lg",
    "ginnastica": "bg-gradient-to-br from-purple-500 to-indigo-600 text-white shadow-lg",
    "pilates": "bg-gradient-to-br from-pink-500 to-rose-600 text-white shadow-lg",
    "massage": "bg-gradient-to-br from-teal-500 to-cyan-600 text-white shadow-lg",
    "wellness": "bg-gradient-to-br from-amber-500 to-yellow-600 text-white shadow-lg",
}
DEFAULT_SERVICE_COLOR = "bg-gradient-to-br from-gray-500 to-gray-600 text-white shadow-lg"


def format_date(value: date) -> str:
    """
    Format a date in Italian long form.

    Example:
        date(2025, 3, 3) -> "lunedì 3 marzo 2025"
    """
    return (
        f"{_WEEKDAYS[value.weekday()]} {value.day} "
        f"{_MONTHS[value.month - 1]} {value.year}"
    )


def format_time(value: str) -> str:
    """Italian time separator: "09:30" -> "09.30"."""
    return value.replace(":", ".", 1)


def format_price(price: Union[int, float, Decimal]) -> str:
    """
    Format an amount in euro, Italian style.

    Thousands are grouped only from five integer digits up.

    Example:
        1234.5 -> "1234,50 €"
        12345 -> "12.345,00 €"
    """
    amount = Decimal(str(price)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if amount < 0 else ""
    integer, cents = f"{abs(amount):.2f}".split(".")

    if len(integer) < 5:
        return f"{sign}{integer},{cents} €"

    groups = []
    while len(integer) > 3:
        groups.insert(0, integer[-3:])
        integer = integer[:-3]
    groups.insert(0, integer)

    return f"{sign}{'.'.join(groups)},{cents} €"


def validate_email(email: str) -> bool:
    return bool(EMAIL_RE.match(email))


def validate_phone(phone: str) -> bool:
    """Italian phone number with optional +39 prefix."""
    return bool(PHONE_RE.match(phone))


def generate_otp() -> str:
    """Six digit one-time code."""
    return str(100000 + secrets.randbelow(900000))


def get_service_color(category: str) -> str:
    return SERVICE_COLORS.get(category, DEFAULT_SERVICE_COLOR)
