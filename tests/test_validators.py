from datetime import date, timedelta
from decimal import Decimal

import pytest

from employee_management.mappers import to_page
from employee_management.utils.validators import not_in_future, parse_decimal, positive_amount, require_text

def test_require_text_strips_and_rejects_blank():
    assert require_text("  Analyst ", "role") == "Analyst"
    with pytest.raises(ValueError, match="role must not be blank"):
        require_text("   ", "role")

def test_not_in_future():
    today = date.today()
    assert not_in_future(today, "joining_date") == today
    with pytest.raises(ValueError, match="cannot be in the future"):
        not_in_future(today + timedelta(days=1), "joining_date")

def test_parse_decimal_quantizes_to_cents():
    assert parse_decimal("1234.567") == Decimal("1234.57")
    assert parse_decimal(99999.99) == Decimal("99999.99")
    with pytest.raises(ValueError):
        parse_decimal("abc")
    with pytest.raises(ValueError):
        parse_decimal("")

def test_positive_amount():
    assert positive_amount(Decimal("0.01"), "salary") == Decimal("0.01")
    with pytest.raises(ValueError, match="salary must be greater than 0"):
        positive_amount(Decimal("0"), "salary")

def test_to_page_flags():
    page = to_page([1, 2], page=0, size=2, total=5, mapper=str)
    assert page.content == ["1", "2"]
    assert page.total_pages == 3
    assert page.is_first is True
    assert page.is_last is False

    last = to_page([5], page=2, size=2, total=5, mapper=str)
    assert last.is_first is False
    assert last.is_last is True

    beyond = to_page([], page=4, size=2, total=5, mapper=str)
    assert beyond.content == []
    assert beyond.is_last is True

def test_positive_amount_max_digits():
    # 17 integer digits plus cents is the widest value that fits
    assert positive_amount("99999999999999999.99", "salary", 19) == Decimal("99999999999999999.99")
    with pytest.raises(ValueError, match="at most 17 digits"):
        positive_amount(10**17, "salary", 19)
