"""Directory of Vietnamese banks offered to clients as a selection list.

Informational only: the encoder never rejects a BIN that is not listed here.
"""

from typing import NamedTuple


class Bank(NamedTuple):
    name: str
    short_name: str | None
    bin: str


BANKS: tuple[Bank, ...] = (
    Bank("Vietcombank", "VCB", "970436"),
    Bank("Techcombank", "TCB", "970407"),
    Bank("BIDV", None, "970418"),
    Bank("Agribank", None, "970405"),
    Bank("MB Bank", None, "970422"),
    Bank("ACB", None, "970416"),
    Bank("Sacombank", None, "970403"),
    Bank("VPBank", None, "970432"),
    Bank("VietinBank", None, "970415"),
)

_BY_BIN = {bank.bin: bank for bank in BANKS}


def find_bank(bin_code: str) -> Bank | None:
    """Look up a bank by BIN, ignoring surrounding whitespace."""

    return _BY_BIN.get(bin_code.strip())
