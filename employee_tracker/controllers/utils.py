"""
Utility functions used across multiple controllers and prompts for validation.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

# Matches the String(30) name and title columns.
MAX_NAME_LENGTH = 30

# Matches the Numeric(10, 2) salary column.
SALARY_STEP = Decimal("0.01")
MAX_SALARY = Decimal("99999999.99")


def is_valid_name(value: str | None) -> bool:
    """A name is valid when something is left after trimming and it fits its column."""
    if not value or not value.strip():
        return False
    return len(value.strip()) <= MAX_NAME_LENGTH


def parse_salary(value) -> Decimal | None:
    """
    Converts user input to a Decimal salary rounded to cents.
    Returns None if the value is not a finite number, rounds to zero or less,
    or does not fit the salary column.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        salary = Decimal(str(value).strip())
    except InvalidOperation:
        return None
    if not salary.is_finite() or not 0 < salary <= MAX_SALARY:
        return None

    salary = salary.quantize(SALARY_STEP, rounding=ROUND_HALF_UP)
    if not 0 < salary <= MAX_SALARY:
        return None
    return salary
