"""Input discovery helpers for ofxbridge."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from ofxbridge.utils import is_url

if TYPE_CHECKING:  # pragma: no cover - typing helpers only
    from collections.abc import Iterable, Iterator

OFX_SUFFIXES: frozenset[str] = frozenset({'.ofx', '.qfx'})
"""File suffixes picked up when scanning directories."""


def is_ofx_file(path: Path) -> bool:
    return path.suffix.lower() in OFX_SUFFIXES


def iter_sources(target: str | Path) -> Iterator[str | Path]:
    """Yield OFX sources for ``target`` (URL, file or directory)."""

    if isinstance(target, str) and is_url(target):
        yield target
        return

    expanded = Path(target).expanduser()
    if expanded.is_file():
        if not is_ofx_file(expanded):
            raise ValueError(f'Unsupported input format: {expanded.suffix}')
        yield expanded
        return

    if not expanded.is_dir():
        raise FileNotFoundError(f'Input path not found: {expanded}')

    for entry in sorted(expanded.iterdir()):
        if entry.is_file() and is_ofx_file(entry):
            yield entry


def gather_sources(targets: Iterable[str | Path]) -> list[str | Path]:
    """Collect OFX sources for all provided ``targets``."""

    sources: list[str | Path] = []
    for target in targets:
        sources.extend(iter_sources(target))
    return sources
