import pytest

from tako.acct import ACCT_COMM, AcctFlag, AcctV3Record, decode_comp, encode_comp


@pytest.mark.parametrize("value", [0, 1, 100, 4095, 8191])
def test_small_values_are_exact(value):
    assert encode_comp(value) == value
    assert decode_comp(encode_comp(value)) == value


@pytest.mark.parametrize("value", [8192, 10000, 123456, 99999999, 2**30])
def test_large_values_are_close(value):
    approx = decode_comp(encode_comp(value))
    assert abs(approx - value) * 512 <= value


@pytest.mark.parametrize("value", [8192, 123456, 2**30])
def test_encoded_fits_in_16_bits(value):
    assert 0 <= encode_comp(value) <= 0xFFFF


def test_encode_is_stable_on_decoded_value():
    code = encode_comp(99999999)
    assert encode_comp(decode_comp(code)) == code


def test_encode_negative():
    with pytest.raises(ValueError):
        encode_comp(-1)


def test_encode_too_large():
    with pytest.raises(ValueError):
        encode_comp(1 << 40)


def test_decode_out_of_range():
    with pytest.raises(ValueError):
        decode_comp(1 << 16)


def test_record_round_trip():
    record = AcctV3Record(
        flag=AcctFlag.FORK | AcctFlag.SU,
        tty=5,
        exitcode=256,
        uid=1000,
        gid=100,
        pid=4321,
        ppid=1,
        btime=1700000000,
        etime=1.5,
        utime=encode_comp(5000),
        stime=encode_comp(20000),
        comm="bash",
    )
    back = AcctV3Record.unpack(record.pack())
    assert back == record
    assert back.flag & AcctFlag.FORK


def test_record_full_length_comm():
    name = "x" * ACCT_COMM
    assert AcctV3Record.unpack(AcctV3Record(comm=name).pack()).comm == name


def test_record_comm_too_long():
    with pytest.raises(ValueError):
        AcctV3Record(comm="y" * (ACCT_COMM + 1)).pack()


def test_record_field_out_of_range():
    with pytest.raises(ValueError):
        AcctV3Record(utime=1 << 16).pack()


def test_record_truncated():
    with pytest.raises(ValueError):
        AcctV3Record.unpack(AcctV3Record().pack()[:-1])