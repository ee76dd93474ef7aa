"""
Form Input Parsing

The ledger core takes integers and Decimals. People type text.
This module sits in between: it turns what was typed into core values,
or rejects it with a message that says which field was wrong.

IMPORTANT: Parsing NEVER silently fixes input beyond the obvious
(surrounding whitespace, a leading currency symbol, thousands separators).
Range rules (negative deposits, empty history, ...) stay in the core.
"""

import re
from decimal import Decimal
from typing import Optional

from account_ledger.config import LedgerSettings, get_settings
from account_ledger.core import InvalidArgumentError

_ACCOUNT_NUMBER_PATTERN = re.compile(r"[+-]?\d+")
_AMOUNT_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)")


def parse_account_number(text: Optional[str]) -> int:
    """
    Parse an account number.

    Raises:
        InvalidArgumentError: empty or not a whole number
    """
    cleaned = (text or "").strip()
    if not cleaned:
        raise InvalidArgumentError("account_number", "Please enter an account number")
    if not _ACCOUNT_NUMBER_PATTERN.fullmatch(cleaned):
        raise InvalidArgumentError(
            "account_number",
            f"Account number must be a whole number, got {cleaned!r}",
        )
    return int(cleaned)


def parse_amount(
    text: Optional[str],
    field: str = "amount",
    settings: Optional[LedgerSettings] = None,
) -> Decimal:
    """
    Parse a money amount such as "1,250.50" or "$ 20".

    Sign is kept; whether a negative amount is acceptable is for the
    core to decide.

    Raises:
        InvalidArgumentError: empty, not a plain decimal number, or more
            decimal places than configured
    """
    settings = settings or get_settings().ledger
    cleaned = (text or "").strip()

    symbol = settings.currency_symbol
    if symbol and cleaned.startswith(symbol):
        cleaned = cleaned[len(symbol):].strip()
    cleaned = cleaned.replace(",", "")

    if not cleaned:
        raise InvalidArgumentError(field, "Please enter an amount")
    if not _AMOUNT_PATTERN.fullmatch(cleaned):
        raise InvalidArgumentError(field, f"Amount must be a number, got {text.strip()!r}")

    amount = Decimal(cleaned)
    places = settings.amount_decimal_places
    if -amount.as_tuple().exponent > places:
        raise InvalidArgumentError(
            field,
            f"Amount cannot have more than {places} decimal places",
        )
    return amount


def parse_name(
    text: Optional[str],
    settings: Optional[LedgerSettings] = None,
) -> str:
    """
    Parse an account holder name.

    Raises:
        InvalidArgumentError: blank or too long
    """
    settings = settings or get_settings().ledger
    cleaned = (text or "").strip()
    if not cleaned:
        raise InvalidArgumentError("name", "Please enter the account holder name")
    if len(cleaned) > settings.max_name_length:
        raise InvalidArgumentError(
            "name",
            f"Name cannot exceed {settings.max_name_length} characters",
        )
    return cleaned


def format_amount(
    value: Decimal,
    settings: Optional[LedgerSettings] = None,
) -> str:
    """
    Render an amount for display, e.g. Decimal("1234.5") -> "$1,234.50".
    """
    settings = settings or get_settings().ledger
    places = settings.amount_decimal_places
    sign = "-" if value < 0 else ""
    return f"{sign}{settings.currency_symbol}{abs(value):,.{places}f}"
