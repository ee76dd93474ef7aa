"""Form input parsing package."""

from account_ledger.validation.input_parser import (
    format_amount,
    parse_account_number,
    parse_amount,
    parse_name,
)

__all__ = [
    "format_amount",
    "parse_account_number",
    "parse_amount",
    "parse_name",
]
