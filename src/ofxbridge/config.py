"""Configuration utilities and dataclasses for ofxbridge."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

DEFAULT_CONFIG_PATH: Path = Path.home() / '.local/etc/ofxbridge.toml'
"""Default location for the user provided TOML configuration file."""

OUTPUT_FORMATS = ('csv', 'json')

BASE_SETTINGS: dict[str, Any] = {
    'request_timeout': 30,
    'ca_cert_path': None,
    'fallback_encoding': 'utf-8',
    'output_format': 'csv',
}
"""Default settings merged with any local overrides."""


@dataclass(frozen=True, slots=True)
class ReaderSettings:
    """Settings for loading OFX sources and rendering results."""

    request_timeout: int
    ca_cert_path: Path | None
    fallback_encoding: str
    output_format: str


def _merge_dict(base: Mapping[str, Any], overrides: Mapping[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, returning a new dictionary."""

    merged: dict[str, Any] = dict(base)
    for key, value in overrides.items():
        if key in merged and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = _merge_dict(merged[key], value)
        else:
            merged[key] = value
    return merged


def _prepare_settings(raw: Mapping[str, Any]) -> ReaderSettings:
    """Convert a raw dictionary into ``ReaderSettings`` with proper types."""

    ca_path = raw.get('ca_cert_path')
    resolved_ca = Path(ca_path).expanduser() if isinstance(ca_path, str) and ca_path else None
    output_format = str(raw.get('output_format', 'csv')).lower()
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(f'Unsupported output format: {output_format}')
    return ReaderSettings(
        request_timeout=int(raw.get('request_timeout', 30)),
        ca_cert_path=resolved_ca,
        fallback_encoding=str(raw.get('fallback_encoding') or 'utf-8'),
        output_format=output_format,
    )


def default_settings() -> ReaderSettings:
    return _prepare_settings(BASE_SETTINGS)


def load_settings(path: Path | None = None) -> ReaderSettings:
    """Load ``ReaderSettings`` from ``path`` (or the default location).

    An explicit ``path`` must exist; a missing default file yields the defaults.
    """

    config_path = (path or DEFAULT_CONFIG_PATH).expanduser()
    if not config_path.is_file():
        if path is None:
            return default_settings()
        raise FileNotFoundError(f'Configuration file not found: {config_path}')

    with config_path.open('rb') as handle:
        overrides = tomllib.load(handle)

    return _prepare_settings(_merge_dict(BASE_SETTINGS, overrides))
