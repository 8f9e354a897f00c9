"""Date-time normalization for OFX date fields.

Two notations are recognised, tried in order:

* ``YYYYMMDD[HHMMSS][.XXX][[gmt offset:tz name]]`` with optional hyphens
  between year, month and day (``YYYY-MM-DD``);
* ``DD/MM/YYYY[HHMMSS][.XXX][[gmt offset:tz name]]``.

Fractional seconds and the bracketed zone are matched but not applied; the
returned ``datetime`` is naive.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime
from typing import Literal, overload

from ofxbridge.errors import DateFormatError

LOGGER = logging.getLogger(__name__)

_SUFFIX = (
    r'(?:(?P<hour>\d{2})(?P<minute>\d{2})(?P<second>\d{2}))?'
    r'(?:\.(?P<fraction>\d+))?'
    r'(?:\[(?P<offset>[-+]?\d+(?:\.\d+)?)(?::(?P<zone>\w+))?\])?'
)

YEAR_FIRST = re.compile(r'(?P<year>\d{4})-?(?P<month>\d{2})-?(?P<day>\d{2})' + _SUFFIX)
DAY_FIRST = re.compile(r'(?P<day>\d{2})/(?P<month>\d{2})/(?P<year>\d{4})' + _SUFFIX)
DATE_PATTERNS = (YEAR_FIRST, DAY_FIRST)


def _build(match: re.Match[str], text: str) -> datetime:
    parts = match.groupdict()
    try:
        return datetime(
            int(parts['year']),
            int(parts['month']),
            int(parts['day']),
            int(parts['hour'] or 0),
            int(parts['minute'] or 0),
            int(parts['second'] or 0),
        )
    except ValueError as exc:
        raise DateFormatError(text) from exc


@overload
def parse_date(text: str, *, lenient: Literal[False] = ...) -> datetime: ...


@overload
def parse_date(text: str, *, lenient: bool) -> datetime | None: ...


def parse_date(text: str, *, lenient: bool = False) -> datetime | None:
    """Parse an OFX date field.

    Args:
        text: Raw field text, possibly empty.
        lenient: Return ``None`` instead of raising when ``text`` is empty or malformed.

    Raises:
        DateFormatError: ``text`` matches no supported notation and ``lenient`` is false.
    """

    cleaned = text.strip()
    try:
        for pattern in DATE_PATTERNS:
            match = pattern.match(cleaned)
            if match:
                return _build(match, text)
        raise DateFormatError(text)
    except DateFormatError:
        if not lenient:
            raise
        LOGGER.debug('Ignoring unparsable OFX date %r', text)
        return None
