from datetime import date
from decimal import Decimal, InvalidOperation

def require_text(value: str, field: str) -> str:
    """
    Strips surrounding whitespace and rejects empty strings.
    """
    if value is None or not value.strip():
        raise ValueError(f"{field} must not be blank")
    return value.strip()

def not_in_future(value: date, field: str) -> date:
    """
    Validates that the date is not later than today.
    """
    if value > date.today():
        raise ValueError(f"{field} cannot be in the future: {value.isoformat()}")
    return value

def parse_decimal(value) -> Decimal:
    """
    Converts the value into a Decimal with 2 decimal places.
    Raises ValueError if the input is not numeric.
    """
    if value is None or value == "":
        raise ValueError("Empty decimal value.")
    try:
        return Decimal(str(value)).quantize(Decimal("0.01"))
    except (InvalidOperation, ValueError) as e:
        raise ValueError(f"Invalid decimal: {value}") from e

def positive_amount(value, field: str, max_digits: int = None) -> Decimal:
    amount = parse_decimal(value)
    if amount <= 0:
        raise ValueError(f"{field} must be greater than 0")
    # Digits counted after quantizing, cents included
    if max_digits is not None and len(amount.as_tuple().digits) > max_digits:
        raise ValueError(f"{field} must have at most {max_digits - 2} digits before the decimal point")
    return amount
