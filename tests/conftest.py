from collections.abc import Callable

import pytest

OFX_HEADER_LINES = [
    'OFXHEADER:100',
    'DATA:OFXSGML',
    'VERSION:102',
    'SECURITY:NONE',
    'ENCODING:USASCII',
    'CHARSET:1252',
    'COMPRESSION:NONE',
    'OLDFILEUID:NONE',
    'NEWFILEUID:NONE',
    '',
]

SIGNON_LINES = [
    '<SIGNONMSGSRSV1>',
    '<SONRS>',
    '<STATUS>',
    '<CODE>0',
    '<SEVERITY>INFO',
    '</STATUS>',
    '<DTSERVER>20230131120000[-3:BRT]',
    '<LANGUAGE>ENG',
    '<FI>',
    '<ORG>Bank & Trust',
    '<FID>1234',
    '</FI>',
    '</SONRS>',
    '</SIGNONMSGSRSV1>',
]

STATEMENT_LINES = [
    '<STMTTRNRS>',
    '<TRNUID>1001',
    '<STATUS>',
    '<CODE>0',
    '<SEVERITY>INFO',
    '</STATUS>',
    '<STMTRS>',
    '<CURDEF>USD',
    '<BANKACCTFROM>',
    '<BANKID>021000021',
    '<BRANCHID>0001',
    '<ACCTID>123456789',
    '<ACCTTYPE>CHECKING',
    '</BANKACCTFROM>',
    '<BANKTRANLIST>',
    '<DTSTART>20230101',
    '<DTEND>20230131',
    '<STMTTRN>',
    '<TRNTYPE>DEBIT',
    '<DTPOSTED>20230115120000',
    '<TRNAMT>-1,234.56',
    '<FITID>T1',
    '<NAME>Coffee Shop',
    '<MEMO>Latte',
    '</STMTTRN>',
    '<STMTTRN>',
    '<TRNTYPE> ',
    '<DTPOSTED>16/01/2023',
    '<TRNAMT>1.500,00',
    '<FITID>T2',
    '<CHECKNUM>1001',
    '<NAME>Deposit',
    '<SIC>5411',
    '</STMTTRN>',
    '<STMTTRN>',
    '<TRNTYPE>CREDIT',
    '<DTPOSTED>2023-01-20',
    '<TRNAMT>250.00',
    '<FITID>T3',
    '<NAME>Salary',
    '</STMTTRN>',
    '</BANKTRANLIST>',
    '<LEDGERBAL>',
    '<BALAMT>5000.00',
    '<DTASOF>20230131',
    '</LEDGERBAL>',
    '</STMTRS>',
    '</STMTTRNRS>',
]


def build_ofx(*, statements: int = 1, signon: bool = True, newline: str = '\r\n') -> str:
    """Assemble an OFX v1 file with ``statements`` copies of the sample statement."""

    lines = [*OFX_HEADER_LINES, '<OFX>']
    if signon:
        lines.extend(SIGNON_LINES)
    lines.append('<BANKMSGSRSV1>')
    for index in range(statements):
        lines.extend(line.replace('123456789', f'12345678{index + 9}') if index else line for line in STATEMENT_LINES)
    lines.extend(['</BANKMSGSRSV1>', '</OFX>'])
    return newline.join(lines) + newline


@pytest.fixture
def sample_ofx() -> str:
    return build_ofx()


@pytest.fixture
def ofx_factory() -> Callable[..., str]:
    return build_ofx
