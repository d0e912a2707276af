import pytest

from rdsdecode.af import BUFFER_SIZE, AlternativeFrequencies


@pytest.fixture
def af():
    return AlternativeFrequencies()


def test_set_each_frequency(af):
    for value in range(256):
        assert af.contains(value) is False
        expected = 1 <= value <= 204
        assert af.add(value) is expected
        assert af.contains(value) is expected


def test_set_one_frequency(af):
    value = 123
    assert af.contains(value) is False
    af.add(value)
    assert af.contains(value) is True
    buffer = af.to_bytes()
    assert len(buffer) == BUFFER_SIZE
    for position, byte in enumerate(buffer):
        if position == value // 8:
            assert byte == 0x80 >> (value % 8)
        else:
            assert byte == 0


def test_set_clear(af):
    value = 200
    assert af.contains(value) is False
    assert af.add(value) is True
    assert af.contains(value) is True
    af.clear()
    assert af.contains(value) is False


def test_set_invalid_0(af):
    assert af.add(0) is False
    assert af.to_bytes() == bytes(BUFFER_SIZE)


def test_set_invalid(af):
    for value in range(205, 256):
        assert af.add(value) is False
    assert af.to_bytes() == bytes(BUFFER_SIZE)


def test_iteration_and_membership(af):
    for value in (50, 1, 204):
        af.add(value)
    assert list(af) == [1, 50, 204]
    assert len(af) == 3
    assert 50 in af
    assert 51 not in af