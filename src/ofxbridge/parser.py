"""Entry point turning decoded OFX text into a ``Document``."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from ofxbridge.builder import build_document
from ofxbridge.normalizers.markup import parse_markup, prepare_body, sgml_to_xml

if TYPE_CHECKING:  # pragma: no cover - typing helpers only
    from ofxbridge.models import Document

LOGGER = logging.getLogger(__name__)

ROOT_TAG = re.compile(r'<OFX>', re.IGNORECASE)


def split_header(text: str) -> tuple[str, str]:
    """Split ``text`` into the free-form header and the SGML body starting at ``<OFX>``."""

    match = ROOT_TAG.search(text)
    if match is None:
        return '', text.strip()
    return text[: match.start()].strip(), text[match.start() :].strip()


def parse_string(text: str) -> Document:
    """Parse decoded OFX content.

    Raises:
        MarkupParseError: the body is not well-formed once unclosed tags are closed.
        MissingBlockError: a mandatory aggregate is absent.
        DateFormatError: a strictly parsed date is malformed.
    """

    header, body = split_header(text)
    root = parse_markup(sgml_to_xml(prepare_body(body)))
    document = build_document(root, header=header)
    LOGGER.debug(
        'Parsed OFX from %s: %d bank account(s), %d account info entries',
        document.sign_on.institute.name or 'unknown institution',
        len(document.bank_accounts),
        len(document.account_info),
    )
    return document
