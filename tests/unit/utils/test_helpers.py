from datetime import date

import pytest

from frontend.utils.helpers import (
    DEFAULT_SERVICE_COLOR,
    format_date,
    format_price,
    format_time,
    generate_otp,
    get_service_color,
    validate_email,
    validate_phone,
)


def test_format_date_italian_long_form():
    assert format_date(date(2025, 3, 3)) == "lunedì 3 marzo 2025"
    assert format_date(date(2025, 8, 10)) == "domenica 10 agosto 2025"


def test_format_time():
    assert format_time("09:30") == "09.30"


@pytest.mark.parametrize(
    "amount,expected",
    [
        (12.5, "12,50 €"),
        (40, "40,00 €"),
        (1234.5, "1234,50 €"),
        (12345, "12.345,00 €"),
        (1234567.891, "1.234.567,89 €"),
        (0.005, "0,01 €"),
    ],
)
def test_format_price(amount, expected):
    assert format_price(amount) == expected


@pytest.mark.parametrize(
    "email,valid",
    [
        ("mario.rossi@example.it", True),
        ("mario@localhost", False),
        ("mario rossi@example.it", False),
    ],
)
def test_validate_email(email, valid):
    assert validate_email(email) is valid


@pytest.mark.parametrize(
    "phone,valid",
    [
        ("3331234567", True),
        ("+39 3331234567", True),
        ("+39-0108176855", True),
        ("1234", False),
        ("+44 3331234567", False),
    ],
)
def test_validate_phone(phone, valid):
    assert validate_phone(phone) is valid


def test_generate_otp_is_six_digits():
    for _ in range(50):
        otp = generate_otp()
        assert len(otp) == 6
        assert otp.isdigit()
        assert otp[0] != "0"


def test_service_color_fallback():
    assert "blue" in get_service_color("fisioterapia")
    assert get_service_color("yoga") == DEFAULT_SERVICE_COLOR
