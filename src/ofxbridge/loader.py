"""Load OFX sources from disk, URLs or raw bytes."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from ofxtools.header import OFXHeaderError, parse_header

import requests
from ofxbridge.config import ReaderSettings, default_settings
from ofxbridge.errors import SourceNotFoundError
from ofxbridge.parser import ROOT_TAG, parse_string
from ofxbridge.utils import get_verify_option, is_url

if TYPE_CHECKING:  # pragma: no cover - typing helpers only
    from ofxbridge.models import Document

LOGGER = logging.getLogger(__name__)


def _fallback_decode(data: bytes, encoding: str) -> str:
    if encoding.lower().replace('_', '-') in {'utf-8', 'utf8'}:
        encoding = 'utf-8-sig'
    return data.decode(encoding, errors='replace')


def decode_ofx(data: bytes, *, fallback_encoding: str = 'utf-8') -> str:
    """Decode ``data`` using the charset declared in its OFX header.

    Files without a conforming v1/v2 header are decoded with ``fallback_encoding``.
    The raw header text is kept in front of the decoded body.
    """

    if not data.strip():
        return ''
    try:
        _header, body = parse_header(io.BytesIO(data))
    except (OFXHeaderError, UnicodeError, LookupError) as exc:
        LOGGER.debug('No usable OFX header (%s); decoding as %s', exc, fallback_encoding)
        return _fallback_decode(data, fallback_encoding)

    match = ROOT_TAG.search(body)
    if match is None:
        return _fallback_decode(data, fallback_encoding)
    header_end = data.upper().find(b'<OFX>')
    raw_header = data[:header_end].decode('ascii', errors='replace') if header_end > 0 else ''
    return f'{raw_header}{body[match.start() :]}'


class OfxLoader:
    """Fetch OFX content from paths or URLs and parse it into a ``Document``."""

    def __init__(
        self,
        settings: ReaderSettings | None = None,
        *,
        session: requests.Session | None = None,
    ) -> None:
        self.settings = settings or default_settings()
        self._session = session

    @property
    def session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
        return self._session

    def read(self, source: str | Path) -> bytes:
        """Return the raw bytes behind ``source``.

        Raises:
            SourceNotFoundError: ``source`` is a path that does not exist.
            requests.RequestException: fetching a URL failed.
        """

        if isinstance(source, str) and is_url(source):
            LOGGER.debug('Fetching OFX from %s', source)
            response = self.session.get(
                source,
                timeout=self.settings.request_timeout,
                verify=get_verify_option(self.settings),
            )
            response.raise_for_status()
            return response.content

        path = Path(source).expanduser()
        if not path.is_file():
            raise SourceNotFoundError(f"File '{path}' could not be found")
        return path.read_bytes()

    def load_bytes(self, data: bytes) -> Document:
        return parse_string(decode_ofx(data, fallback_encoding=self.settings.fallback_encoding))

    def load(self, source: str | Path) -> Document:
        """Load and parse ``source`` (a path or an ``http(s)`` URL)."""

        return self.load_bytes(self.read(source))


def load_from_file(source: str | Path, settings: ReaderSettings | None = None) -> Document:
    """Convenience wrapper around ``OfxLoader(settings).load(source)``."""

    return OfxLoader(settings).load(source)
