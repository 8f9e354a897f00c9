"""Build the typed ``Document`` graph from a normalized OFX element tree."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ofxbridge.errors import MissingBlockError
from ofxbridge.models import (
    AccountInfo,
    AccountType,
    BankAccount,
    Document,
    Institute,
    SignOn,
    Statement,
    Status,
    Transaction,
)
from ofxbridge.normalizers.amount import parse_amount
from ofxbridge.normalizers.date import parse_date
from ofxbridge.normalizers.markup import BLANK_TRANSACTION_TYPE

if TYPE_CHECKING:  # pragma: no cover - typing helpers only
    from xml.etree.ElementTree import Element

SIGNON_PATH = 'SIGNONMSGSRSV1/SONRS'
ACCOUNT_INFO_PATHS = (
    'SIGNUPMSGSRSV1/ACCTINFOTRNRS/ACCTINFO',
    'SIGNUPMSGSRSV1/ACCTINFOTRNRS/ACCTINFORS/ACCTINFO',
)
STATEMENT_RESPONSE_PATH = 'BANKMSGSRSV1/STMTTRNRS'
BANK_ACCOUNT_PATH = 'STMTRS/BANKACCTFROM'


def _text(element: Element | None, path: str) -> str:
    """Return the trimmed text at ``path`` or an empty string."""

    if element is None:
        return ''
    value = element.findtext(path)
    return value.strip() if value else ''


def _optional_text(element: Element | None, path: str) -> str | None:
    value = _text(element, path)
    return value or None


def _require(element: Element, path: str) -> Element:
    found = element.find(path)
    if found is None:
        raise MissingBlockError(path)
    return found


def _status_code(value: str) -> int | None:
    try:
        return int(value)
    except ValueError:
        return None


def _build_status(element: Element | None) -> Status | None:
    if element is None:
        return None
    return Status(
        code=_status_code(_text(element, 'CODE')),
        severity=_text(element, 'SEVERITY'),
        message=_text(element, 'MESSAGE'),
    )


def _account_type(value: str) -> AccountType | str:
    try:
        return AccountType(value)
    except ValueError:
        return value


def build_sign_on(sonrs: Element) -> SignOn:
    return SignOn(
        status=_build_status(sonrs.find('STATUS')),
        date=parse_date(_text(sonrs, 'DTSERVER'), lenient=True),
        language=_text(sonrs, 'LANGUAGE'),
        institute=Institute(name=_text(sonrs, 'FI/ORG'), id=_text(sonrs, 'FI/FID')),
    )


def build_account_info(root: Element) -> tuple[AccountInfo, ...]:
    """Collect sign-up account entries; the section is optional."""

    accounts: list[AccountInfo] = []
    for path in ACCOUNT_INFO_PATHS:
        for entry in root.findall(path):
            accounts.append(AccountInfo(description=_text(entry, 'DESC'), number=_text(entry, './/ACCTID')))
    return tuple(accounts)


def build_transaction(element: Element) -> Transaction:
    return Transaction(
        type=_text(element, 'TRNTYPE') or BLANK_TRANSACTION_TYPE,
        date=parse_date(_text(element, 'DTPOSTED')),
        amount=parse_amount(_text(element, 'TRNAMT')),
        unique_id=_text(element, 'FITID'),
        name=_text(element, 'NAME'),
        memo=_text(element, 'MEMO'),
        sic=_optional_text(element, 'SIC'),
        check_number=_optional_text(element, 'CHECKNUM'),
    )


def build_statement(stmtrs: Element) -> Statement:
    tranlist = stmtrs.find('BANKTRANLIST')
    entries = tranlist.findall('STMTTRN') if tranlist is not None else []
    return Statement(
        currency=_text(stmtrs, 'CURDEF'),
        start_date=parse_date(_text(tranlist, 'DTSTART')),
        end_date=parse_date(_text(tranlist, 'DTEND')),
        transactions=tuple(build_transaction(entry) for entry in entries),
    )


def build_bank_account(stmttrnrs: Element) -> BankAccount:
    """Map one ``STMTTRNRS`` aggregate to a ``BankAccount``.

    Raises:
        MissingBlockError: the ``BANKACCTFROM`` identification block is absent.
        DateFormatError: a statement or transaction date is malformed.
    """

    acctfrom = _require(stmttrnrs, BANK_ACCOUNT_PATH)
    stmtrs = _require(stmttrnrs, 'STMTRS')
    ledger = stmtrs.find('LEDGERBAL')
    balance_text = _optional_text(ledger, 'BALAMT')
    return BankAccount(
        transaction_uid=_text(stmttrnrs, 'TRNUID'),
        agency_number=_text(acctfrom, 'BRANCHID'),
        routing_number=_text(acctfrom, 'BANKID'),
        account_number=_text(acctfrom, 'ACCTID'),
        account_type=_account_type(_text(acctfrom, 'ACCTTYPE')),
        balance=parse_amount(balance_text) if balance_text is not None else None,
        balance_date=parse_date(_text(ledger, 'DTASOF'), lenient=True),
        statement=build_statement(stmtrs),
        status=_build_status(stmttrnrs.find('STATUS')),
    )


def build_document(root: Element, *, header: str = '') -> Document:
    """Populate a ``Document`` from the ``<OFX>`` root element.

    Raises:
        MissingBlockError: the sign-on response or an account identification block is absent.
        DateFormatError: a strictly parsed date is malformed.
    """

    sign_on = build_sign_on(_require(root, SIGNON_PATH))
    return Document(
        header=header,
        sign_on=sign_on,
        account_info=build_account_info(root),
        bank_accounts=tuple(build_bank_account(entry) for entry in root.findall(STATEMENT_RESPONSE_PATH)),
    )
