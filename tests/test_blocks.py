from rdsdecode.blocks import (
    group0_ms,
    group0_ps_position,
    group0_ta,
    group0a_af1,
    group0a_af2,
    group_pi,
    group_pty,
    group_tp,
)


def _data(a=0, b=0, c=0, d=0):
    return [a, b, c, d]


def test_get_pi():
    assert group_pi(_data(a=0x1234)) == 0x1234


def test_get_pty_0():
    assert group_pty(_data(b=0x040F)) == 0


def test_get_pty_10():
    assert group_pty(_data(b=0x054A)) == 10


def test_get_tp_true():
    assert group_tp(_data(b=0x2556)) is True


def test_get_tp_false():
    assert group_tp(_data(b=0xE800)) is False


def test_group0_get_ta_false():
    assert group0_ta(_data(b=0x054F)) is False


def test_group0_get_ta_true():
    assert group0_ta(_data(b=0x055F)) is True


def test_group0_get_ms_true():
    assert group0_ms(_data(b=0x054F)) is True


def test_group0_get_ms_false():
    assert group0_ms(_data(b=0x0547)) is False


def test_group0_get_af1():
    assert group0a_af1(_data(b=0x0547, c=0xE4A4)) == 0xE4


def test_group0_get_af2():
    assert group0a_af2(_data(b=0x0547, c=0xE4A4)) == 0xA4


def test_group0_get_ps_pos_0():
    assert group0_ps_position(_data(b=0x0544)) == 0


def test_group0_get_ps_pos_3():
    assert group0_ps_position(_data(b=0x0547)) == 3


def test_accepts_tuples():
    assert group_pi((0xBEEF, 0, 0, 0)) == 0xBEEF