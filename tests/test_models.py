import dataclasses
from datetime import datetime
from decimal import Decimal

import pytest

from ofxbridge.errors import AccountSelectionError
from ofxbridge.models import BankAccount, Document, Institute, SignOn, Statement, Transaction


def _sign_on() -> SignOn:
    return SignOn(status=None, date=None, language='ENG', institute=Institute(name='Bank', id='1'))


def _account(number: str, *ids: str) -> BankAccount:
    transactions = tuple(
        Transaction(
            type='DEBIT',
            date=datetime(2024, 1, 1),
            amount=Decimal('-1.00'),
            unique_id=uid,
            name='',
            memo='',
        )
        for uid in ids
    )
    return BankAccount(
        transaction_uid='0',
        agency_number='',
        routing_number='',
        account_number=number,
        account_type='CHECKING',
        balance=None,
        balance_date=None,
        statement=Statement(
            currency='USD',
            start_date=datetime(2024, 1, 1),
            end_date=datetime(2024, 1, 31),
            transactions=transactions,
        ),
    )


def test_single_account_alias() -> None:
    account = _account('1', 'a', 'b')
    document = Document(header='', sign_on=_sign_on(), bank_accounts=(account,))
    assert document.bank_account is account
    assert [txn.unique_id for txn in document.get_transactions()] == ['a', 'b']


def test_get_transactions_unknown_account() -> None:
    document = Document(header='', sign_on=_sign_on(), bank_accounts=(_account('1'), _account('2', 'x')))
    assert [txn.unique_id for txn in document.get_transactions('2')] == ['x']
    with pytest.raises(AccountSelectionError, match='3'):
        document.get_transactions('3')


def test_get_transactions_returns_copy() -> None:
    document = Document(header='', sign_on=_sign_on(), bank_accounts=(_account('1', 'a'),))
    document.get_transactions().clear()
    assert len(document.get_transactions()) == 1


def test_entities_are_frozen() -> None:
    document = Document(header='', sign_on=_sign_on())
    with pytest.raises(dataclasses.FrozenInstanceError):
        document.header = 'changed'  # type: ignore[misc]
