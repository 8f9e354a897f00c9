"""Decimal amount normalization for OFX numeric fields."""

from __future__ import annotations

import re
from decimal import Decimal

DOT_DECIMAL = re.compile(r'^-?[0-9,]+\.?[0-9]{2}$')
"""``1,234.56``, ``1234.56`` or ``123456`` (point omitted)."""

COMMA_DECIMAL = re.compile(r'^-?[0-9.]+,?[0-9]{2}$')
"""``1.234,56``, ``1234,56`` or ``123456`` (comma omitted)."""

NUMERIC_PREFIX = re.compile(r'^[-+]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][-+]?[0-9]+)?')

FINAL_CENTS = re.compile(r'[.,]?([0-9]{2})$')


def parse_amount(text: str) -> Decimal:
    """Convert ``text`` into a ``Decimal`` regardless of the producer's locale.

    Never raises: text without a numeric prefix yields ``Decimal('0')``.
    """

    cleaned = text.strip()
    if DOT_DECIMAL.match(cleaned):
        cleaned = FINAL_CENTS.sub(r'.\1', cleaned.replace(',', ''))
    elif COMMA_DECIMAL.match(cleaned):
        cleaned = FINAL_CENTS.sub(r'.\1', cleaned.replace('.', ''))

    prefix = NUMERIC_PREFIX.match(cleaned)
    if prefix is None:
        return Decimal('0')
    return Decimal(prefix.group(0))
