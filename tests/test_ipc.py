import pytest

from tako.ipc import SEM_UNDO, SemBuf, pack_semops


def test_round_trip():
    op = SemBuf(3, -1, SEM_UNDO)
    assert SemBuf.unpack(op.pack()) == op


def test_default_flags_round_trip():
    assert SemBuf.unpack(SemBuf(0, 1).pack()).flags == 0


def test_num_out_of_range():
    with pytest.raises(ValueError):
        SemBuf(-1, 0).pack()


def test_op_out_of_range():
    with pytest.raises(ValueError):
        SemBuf(0, 1 << 20).pack()


def test_truncated():
    with pytest.raises(ValueError):
        SemBuf.unpack(SemBuf(1, 1).pack()[:-1])


def test_pack_semops_concatenates():
    first = SemBuf(0, -1, SEM_UNDO)
    second = SemBuf(1, 1)
    data = pack_semops([first, second])
    size = len(first.pack())
    assert data == first.pack() + second.pack()
    assert SemBuf.unpack(data[size:]) == second


def test_pack_semops_accepts_generator():
    ops = [SemBuf(i, 1) for i in range(3)]
    assert pack_semops(op for op in ops) == pack_semops(ops)


def test_pack_semops_empty():
    with pytest.raises(ValueError):
        pack_semops([])