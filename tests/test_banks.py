"""Unit tests for the bank directory."""

from payqr.services.encoder.banks import BANKS, find_bank


def test_find_known_bank():
    """Listed BINs resolve to their bank."""

    bank = find_bank("970436")

    assert bank is not None
    assert bank.name == "Vietcombank"
    assert bank.short_name == "VCB"


def test_find_unknown_bank():
    """Unlisted BINs return None rather than raising."""

    assert find_bank("000000") is None


def test_bins_are_unique():
    """Each BIN appears once so lookups are unambiguous."""

    bins = [bank.bin for bank in BANKS]
    assert len(bins) == len(set(bins))
