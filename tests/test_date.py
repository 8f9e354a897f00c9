from datetime import datetime

import pytest

from ofxbridge.errors import DateFormatError
from ofxbridge.normalizers.date import parse_date


@pytest.mark.parametrize(
    ('text', 'expected'),
    [
        ('20230115120000', datetime(2023, 1, 15, 12, 0, 0)),
        ('20230115', datetime(2023, 1, 15)),
        ('2023-01-15', datetime(2023, 1, 15)),
        ('20230115083015.123', datetime(2023, 1, 15, 8, 30, 15)),
        ('20230115083015.123[-5:EST]', datetime(2023, 1, 15, 8, 30, 15)),
        ('20230115083015[+5.30:IST]', datetime(2023, 1, 15, 8, 30, 15)),
        ('15/01/2023', datetime(2023, 1, 15)),
        ('15/01/2023093000[-3:BRT]', datetime(2023, 1, 15, 9, 30, 0)),
    ],
)
def test_parse_date_notations(text: str, expected: datetime) -> None:
    assert parse_date(text) == expected


def test_parse_date_result_is_naive() -> None:
    assert parse_date('20230115120000[-3:BRT]').tzinfo is None


def test_parse_date_empty_strict_raises() -> None:
    with pytest.raises(DateFormatError) as excinfo:
        parse_date('')
    assert excinfo.value.text == ''


def test_parse_date_empty_lenient_is_none() -> None:
    assert parse_date('', lenient=True) is None


def test_parse_date_malformed_reports_text() -> None:
    with pytest.raises(DateFormatError, match='not-a-date'):
        parse_date('not-a-date')
    assert parse_date('not-a-date', lenient=True) is None


def test_parse_date_out_of_range_is_format_error() -> None:
    with pytest.raises(DateFormatError):
        parse_date('20231345')
    assert parse_date('20231345', lenient=True) is None
