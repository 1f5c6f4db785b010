"""Formatting helpers for the loan letter.

All functions here are pure: they never raise on user input and never
touch the widgets, so the letter renderer and the exporter can call them
on every keystroke.
"""
import re
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from .config import (
    CURRENCY_SYMBOL, DATE_FORMAT_LETTER, MONTH_NAMES_EN, MAX_AMOUNT_DIGITS, OTHER_REASON,
    EXPORT_FILENAME_PREFIX, EXPORT_FALLBACK_NAME, EXPORT_EXTENSION
)


def _parse_amount(amount) -> Optional[Decimal]:
    """Parse an amount into a finite Decimal, or None if it is not a number.
    
    Values with more than MAX_AMOUNT_DIGITS integer digits count as not a
    number, so "1e999999999" never becomes a huge int.
    """
    if isinstance(amount, bool) or amount is None:
        return None
    try:
        if isinstance(amount, (int, Decimal)):
            value = Decimal(amount)
        elif isinstance(amount, float):
            value = Decimal(repr(amount))
        else:
            text = str(amount).strip()
            # Plain ASCII decimal notation only, no digit separators
            if not text or not text.isascii() or "_" in text:
                return None
            value = Decimal(text)
    except (InvalidOperation, ValueError):
        return None
    if not value.is_finite():
        return None
    if value.adjusted() >= MAX_AMOUNT_DIGITS:
        return None
    return value


def group_indian_digits(digits: str) -> str:
    """Group a run of digits the Indian way: 12345678 -> 1,23,45,678."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])


def format_indian_currency(amount: Union[str, int, float, Decimal]) -> str:
    """Format an amount as whole rupees with Indian digit grouping.
    
    Fractional input is truncated toward zero.
    
    Args:
        amount: Number or numeric string.
        
    Returns:
        Formatted string like "₹1,00,000", or "" if the amount is blank
        or not a number.
    """
    value = _parse_amount(amount)
    if value is None:
        return ""
    whole = int(value)
    sign = "-" if whole < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{group_indian_digits(str(abs(whole)))}"


def resolve_reason(choice: str, other: Optional[str]) -> str:
    """Return the reason text shown in the letter.
    
    The free text only wins when the choice is "Other" and the text is not
    blank; otherwise the choice is returned verbatim.
    """
    other = (other or "").strip()
    if choice == OTHER_REASON and other:
        return other
    return choice


def format_letter_date(day: date = None) -> str:
    """Format a date in the en-IN long form, e.g. "05 March 2026"."""
    if day is None:
        day = date.today()
    return DATE_FORMAT_LETTER.format(day=day.day, month=MONTH_NAMES_EN[day.month], year=day.year)


def safe_file_stem(name: str) -> str:
    """Turn an employee name into a filename-safe stem.
    
    Whitespace runs become a single underscore; characters that are not
    allowed in filenames are dropped. Blank names fall back to "Letter".
    """
    safe = re.sub(r'[\\/*?:"<>|]', "", name or "")
    safe = re.sub(r'\s+', "_", safe.strip())
    return safe or EXPORT_FALLBACK_NAME


def export_filename(name: str) -> str:
    return f"{EXPORT_FILENAME_PREFIX}{safe_file_stem(name)}{EXPORT_EXTENSION}"
