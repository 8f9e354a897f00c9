"""Output utilities for rendering parsed OFX documents as CSV or JSON."""

from __future__ import annotations

import csv
import io
import json
from collections.abc import Iterable
from dataclasses import asdict
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from ofxbridge.models import Document, Transaction

CSV_FIELDS = ('unique_id', 'date', 'type', 'amount', 'name', 'memo', 'check_number', 'sic')


def _json_default(value: object) -> object:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Decimal):
        return str(value)
    raise TypeError(f'Object of type {type(value).__name__} is not JSON serializable')


def build_csv_payload(transactions: Iterable[Transaction]) -> str:
    """Serialize transactions into a CSV string, one row per transaction."""

    if not isinstance(transactions, Iterable):
        raise TypeError('transactions must be iterable')

    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=list(CSV_FIELDS))
    writer.writeheader()
    for txn in transactions:
        row = asdict(txn)
        row['date'] = txn.date.date().isoformat()
        row['amount'] = format(txn.amount, 'f')
        writer.writerow({name: row[name] if row[name] is not None else '' for name in CSV_FIELDS})
    return buffer.getvalue()


def document_to_dict(document: Document) -> dict[str, object]:
    if not isinstance(document, Document):
        raise TypeError('invalid OFX document')
    return asdict(document)


def build_json_payload(documents: Iterable[Document]) -> str:
    """Serialize ``documents`` as an indented JSON array."""

    return json.dumps([document_to_dict(document) for document in documents], indent=2, default=_json_default) + '\n'


def write_output(payload: str, *, output_path: Path | str | None) -> str:
    """Write ``payload`` to ``output_path`` if provided and return it."""

    if output_path:
        path = Path(output_path)
        with path.open('w', encoding='utf-8', newline='') as handle:
            handle.write(payload)
    return payload
