from decimal import Decimal

import pytest

from ofxbridge.normalizers.amount import parse_amount


@pytest.mark.parametrize('text', ['1,234.56', '1.234,56', '1234.56', '1234,56'])
def test_parse_amount_locales_agree(text: str) -> None:
    assert parse_amount(text) == Decimal('1234.56')


def test_parse_amount_keeps_sign() -> None:
    assert parse_amount('-50.00') == Decimal('-50.00')
    assert parse_amount('-1.234,56') == Decimal('-1234.56')


def test_parse_amount_inserts_missing_point() -> None:
    assert parse_amount('123456') == Decimal('1234.56')
    assert parse_amount('-1,000') == Decimal('-10.00')


def test_parse_amount_plain_literal_fallback() -> None:
    assert parse_amount('1234.5') == Decimal('1234.5')
    assert parse_amount('+7.25') == Decimal('7.25')
    assert parse_amount(' 42.10 ') == Decimal('42.10')


def test_parse_amount_non_numeric_is_zero() -> None:
    assert parse_amount('abc') == Decimal('0')
    assert parse_amount('') == Decimal('0')


def test_parse_amount_uses_numeric_prefix() -> None:
    assert parse_amount('12abc') == Decimal('12')
