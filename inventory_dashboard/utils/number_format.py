"""Number parsing and rendering for persisted JSON records."""
from decimal import Decimal, InvalidOperation
from typing import Union, Optional

Number = Union[int, float, Decimal, str, None]


def parse_decimal(value: Number, default: Optional[Decimal] = Decimal('0')) -> Optional[Decimal]:
    """
    Parse a JSON or form value into a Decimal.

    Floats go through ``str`` so that 999.99 stays 999.99 instead of its
    binary expansion. Empty, unparseable and non-finite ("NaN", "Infinity")
    values return ``default``.

    Examples:
        parse_decimal(999.99) -> Decimal('999.99')
        parse_decimal('49.99') -> Decimal('49.99')
        parse_decimal('') -> Decimal('0')
    """
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        return default
    if isinstance(value, Decimal):
        return value if value.is_finite() else default
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError, TypeError):
        return default
    # NaN and Infinity are not amounts
    return number if number.is_finite() else default


def parse_int(value: Number, default: int = 0) -> int:
    """Parse an integer field, truncating decimals ("3.0" -> 3)."""
    if value is None or value == "" or isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    number = parse_decimal(value, default=None)
    if number is None or not number.is_finite():
        return default
    return int(number)


def to_json_number(value: Number) -> Union[int, float]:
    """
    Render a money value for JSON storage.

    Integral values become ints and everything else a float, which is how
    the records were originally written (``500`` and ``150.75``).
    """
    number = parse_decimal(value)
    if number == number.to_integral_value():
        return int(number)
    return float(number)


def number_text(value: Number) -> str:
    """
    Plain string form of a number used for substring search.

    Examples:
        number_text(500.0) -> "500"
        number_text(Decimal('150.50')) -> "150.5"
        number_text(2499.99) -> "2499.99"
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, int):
        return str(value)
    number = parse_decimal(value, default=None)
    if number is None:
        return str(value)
    if number == number.to_integral_value():
        return str(int(number))
    return format(number.normalize(), 'f')
