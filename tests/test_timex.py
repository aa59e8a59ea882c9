import pytest

from tako.timex import STA_RONLY, ClockStatus, read_only_status


def test_keeps_read_only_bits():
    assert read_only_status(ClockStatus.PLL | ClockStatus.NANO) == ClockStatus.NANO


def test_drops_writable_bits():
    assert read_only_status(ClockStatus.PLL | ClockStatus.FREQHOLD) == 0


def test_all_read_only_bits_survive():
    assert read_only_status(STA_RONLY) == STA_RONLY


@pytest.mark.parametrize("status", list(ClockStatus))
def test_result_is_subset_of_input_and_mask(status):
    result = read_only_status(status)
    assert result & ~status == 0
    assert result & ~STA_RONLY == 0


def test_idempotent():
    value = ClockStatus.CLK | ClockStatus.INS | ClockStatus.PPSERROR
    once = read_only_status(value)
    assert read_only_status(once) == once


def test_negative_status():
    with pytest.raises(ValueError):
        read_only_status(-1)