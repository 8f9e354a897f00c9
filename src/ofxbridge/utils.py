"""Shared utility functions for ofxbridge."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from ofxbridge.config import ReaderSettings

LOGGER = logging.getLogger(__name__)


def get_verify_option(settings: ReaderSettings) -> bool | str:
    """Return the ``verify`` argument for ``requests`` when fetching remote OFX files.

    A configured CA bundle that does not exist is reported and ignored in favour
    of the default certificate store.
    """
    if settings.ca_cert_path:
        if settings.ca_cert_path.exists():
            return str(settings.ca_cert_path)
        LOGGER.warning(
            'CA certificate path configured but file not found: %s. Using default certificate verification.',
            settings.ca_cert_path,
        )
    return True


def is_url(source: str) -> bool:
    return source.lower().startswith(('http://', 'https://'))
