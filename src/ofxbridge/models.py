"""Typed entities produced from an OFX document."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from ofxbridge.errors import AccountSelectionError

if TYPE_CHECKING:  # pragma: no cover - type-checking imports only
    from datetime import datetime
    from decimal import Decimal


class AccountType(str, Enum):
    """Bank account types defined by OFX; other values are kept as raw text."""

    CHECKING = 'CHECKING'
    SAVINGS = 'SAVINGS'
    MONEYMRKT = 'MONEYMRKT'
    CREDITLINE = 'CREDITLINE'
    CD = 'CD'


@dataclass(frozen=True, slots=True)
class Status:
    """Response status block (``<STATUS>``)."""

    code: int | None
    severity: str
    message: str


@dataclass(frozen=True, slots=True)
class Institute:
    """Financial institution named in the sign-on (`<FI>`)."""

    name: str
    id: str


@dataclass(frozen=True, slots=True)
class SignOn:
    """Sign-on response: session status and institution identity."""

    status: Status | None
    date: datetime | None
    language: str
    institute: Institute


@dataclass(frozen=True, slots=True)
class AccountInfo:
    """Account listed in the sign-up account-information response."""

    description: str
    number: str


@dataclass(frozen=True, slots=True)
class Transaction:
    """Single ``<STMTTRN>`` entry."""

    type: str
    date: datetime
    amount: Decimal
    unique_id: str
    name: str
    memo: str
    sic: str | None = None
    check_number: str | None = None


@dataclass(frozen=True, slots=True)
class Statement:
    currency: str
    start_date: datetime
    end_date: datetime
    transactions: tuple[Transaction, ...] = ()


@dataclass(frozen=True, slots=True)
class BankAccount:
    """One statement-transaction response (``<STMTTRNRS>``)."""

    transaction_uid: str
    agency_number: str
    routing_number: str
    account_number: str
    account_type: AccountType | str
    balance: Decimal | None
    balance_date: datetime | None
    statement: Statement
    status: Status | None = None


@dataclass(frozen=True, slots=True)
class InvestmentAccount:
    """Placeholder for investment statements, which are not parsed."""


@dataclass(frozen=True, slots=True)
class Document:
    """Root of a parsed OFX file."""

    header: str
    sign_on: SignOn
    account_info: tuple[AccountInfo, ...] = ()
    bank_accounts: tuple[BankAccount, ...] = ()
    investment_accounts: tuple[InvestmentAccount, ...] = ()

    @property
    def bank_account(self) -> BankAccount | None:
        """Return the bank account when the document holds exactly one."""

        if len(self.bank_accounts) == 1:
            return self.bank_accounts[0]
        return None

    def get_transactions(self, account_number: str | None = None) -> list[Transaction]:
        """Return the transactions of the selected bank account in source order.

        Without ``account_number`` the document must hold exactly one bank account.
        """

        if account_number is None:
            account = self.bank_account
            if account is None:
                raise AccountSelectionError(
                    f'Expected exactly one bank account, found {len(self.bank_accounts)}; select one explicitly',
                )
            return list(account.statement.transactions)

        for account in self.bank_accounts:
            if account.account_number == account_number:
                return list(account.statement.transactions)
        raise AccountSelectionError(f'No bank account with number {account_number!r}')
