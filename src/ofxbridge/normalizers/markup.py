"""SGML to XML normalization for OFX v1 bodies.

OFX v1 leaves the closing tag of data elements optional. Every data element
in the files we see sits on its own line, so a line holding an opening tag
followed by content (and nothing closing it) is closed in place.
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET

from ofxbridge.errors import MarkupParseError

BLANK_TRANSACTION_TYPE = 'OTHER'
"""Value substituted for a ``TRNTYPE`` that only holds whitespace."""

UNCLOSED_TAG = re.compile(r'^<([A-Za-z0-9.]+)>([^<]+)$')
"""Matches ``<NAME>blah`` but neither ``<NAME>`` nor ``<NAME>blah</NAME>``."""

BLANK_TRNTYPE = re.compile(r'<TRNTYPE>[ \t]+(?=[\r\n<]|$)')


def prepare_body(sgml: str) -> str:
    """Apply the lossy clean-ups required before closing tags.

    Producers do not escape ``&``, so every ampersand is dropped rather than
    decoded. A blank ``TRNTYPE`` is filled with ``BLANK_TRANSACTION_TYPE``.
    """

    cleaned = sgml.replace('&', '')
    return BLANK_TRNTYPE.sub(f'<TRNTYPE>{BLANK_TRANSACTION_TYPE}', cleaned)


def close_unclosed_tag(line: str) -> str:
    """Return ``line`` trimmed, with its closing tag added when it is missing."""

    stripped = line.strip()
    match = UNCLOSED_TAG.match(stripped)
    if match:
        tag, content = match.groups()
        return f'<{tag}>{content}</{tag}>'
    return stripped


def sgml_to_xml(sgml: str) -> str:
    """Convert an OFX SGML body into well-formed markup, line by line."""

    lines = sgml.replace('\r\n', '\n').replace('\r', '\n').split('\n')
    return '\n'.join(close_unclosed_tag(line) for line in lines).strip()


def parse_markup(xml: str) -> ET.Element:
    """Parse normalized markup into an element tree.

    Raises:
        MarkupParseError: the markup is not well-formed.
    """

    try:
        return ET.fromstring(xml)
    except ET.ParseError as exc:
        raise MarkupParseError([str(exc)]) from exc
