"""ofxbridge package: typed parsing of OFX/QFX statement files."""

from __future__ import annotations

from importlib import metadata as _metadata


def __getattr__(name: str) -> str:
    """Provide dynamic attributes such as ``__version__`` from package metadata."""

    if name == '__version__':
        return _metadata.version('ofxbridge')
    raise AttributeError(name)
