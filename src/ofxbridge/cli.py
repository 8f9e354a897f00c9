"""Command-line interface for ofxbridge."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import requests
from ofxbridge import __version__ as pkg_version
from ofxbridge.config import OUTPUT_FORMATS, load_settings
from ofxbridge.detect import gather_sources
from ofxbridge.errors import OfxError
from ofxbridge.loader import OfxLoader
from ofxbridge.output import build_csv_payload, build_json_payload, write_output

if TYPE_CHECKING:  # pragma: no cover - typing helpers only
    from ofxbridge.models import Document, Transaction

LOGGER = logging.getLogger('ofxbridge.cli')
# stdout carries the payload, so diagnostics for the whole package go to stderr.
PACKAGE_LOGGER = logging.getLogger('ofxbridge')
if not PACKAGE_LOGGER.handlers:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    PACKAGE_LOGGER.addHandler(handler)
PACKAGE_LOGGER.setLevel(logging.INFO)
PACKAGE_LOGGER.propagate = False


def _emit(message: str, args: argparse.Namespace, *, verbose_only: bool = False, error: bool = False) -> None:
    """Log ``message`` honoring ``--quiet``/``--verbose`` flags."""

    if verbose_only and not args.verbose:
        return
    if args.quiet and not error:
        return
    level = logging.ERROR if error else logging.INFO
    LOGGER.log(level, message)


def _source_name(source: str | Path) -> str:
    return source.name if isinstance(source, Path) else source


def _summary(source: str | Path, document: Document) -> str:
    count = sum(len(account.statement.transactions) for account in document.bank_accounts)
    institute = document.sign_on.institute.name or 'unknown institution'
    return f'{_source_name(source)}: {len(document.bank_accounts)} bank account(s), {count} transactions ({institute})'


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Convert OFX/QFX statements to CSV or JSON')
    parser.add_argument('targets', nargs='+', help='Input files, directories or http(s) URLs')
    parser.add_argument('-c', '--config', type=Path, help='Path to configuration TOML')
    parser.add_argument('-f', '--format', choices=OUTPUT_FORMATS, help='Output format (default from config: csv)')
    parser.add_argument('-o', '--output', type=Path, help='Path to write the output (stdout when omitted)')
    parser.add_argument('--account', help='Account number to export when a file holds several bank accounts')
    parser.add_argument('-V', '--version', action='version', version=f'%(prog)s {pkg_version}')
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument('-q', '--quiet', action='store_true', help='Suppress informational output')
    verbosity.add_argument('-v', '--verbose', action='store_true', help='Print verbose progress details')
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    PACKAGE_LOGGER.setLevel(logging.DEBUG if args.verbose else logging.INFO)
    settings = load_settings(args.config)
    output_format = args.format or settings.output_format
    loader = OfxLoader(settings)
    sources = gather_sources(args.targets)

    documents: list[Document] = []
    transactions: list[Transaction] = []
    failed = False
    for source in sources:
        try:
            document = loader.load(source)
            if output_format == 'csv':
                transactions.extend(document.get_transactions(args.account))
        except (OfxError, requests.RequestException, OSError) as exc:
            _emit(f'Error processing {_source_name(source)}: {exc}', args, error=True)
            failed = True
            continue
        documents.append(document)
        _emit(_summary(source, document), args)
        if document.header:
            _emit(f'Header: {" ".join(document.header.split())}', args, verbose_only=True)

    payload = build_csv_payload(transactions) if output_format == 'csv' else build_json_payload(documents)
    write_output(payload, output_path=args.output)
    if args.output:
        _emit(f'Wrote {args.output}', args)
    else:
        sys.stdout.write(payload)
    return 1 if failed else 0


if __name__ == '__main__':  # pragma: no cover
    raise SystemExit(main())
