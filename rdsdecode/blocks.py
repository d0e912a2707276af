"""Field extraction from the four 16-bit blocks of an RDS group."""

from enum import IntEnum
from typing import Sequence

__all__ = [
    "Block",
    "group_pi",
    "group_pty",
    "group_tp",
    "group0_ta",
    "group0_ms",
    "group0_ps_position",
    "group0a_af1",
    "group0a_af2",
]


class Block(IntEnum):
    """Position of a block within a group."""

    A = 0
    B = 1
    C = 2
    D = 3


def group_pi(data: Sequence[int]) -> int:
    """Programme identification code from block A."""
    return data[Block.A] & 0xFFFF


def group_pty(data: Sequence[int]) -> int:
    """Programme type code from block B."""
    return (data[Block.B] & 0x03E0) >> 5


def group_tp(data: Sequence[int]) -> bool:
    """Traffic programme flag from block B."""
    return bool(data[Block.B] & 0x0400)


def group0_ta(data: Sequence[int]) -> bool:
    """Traffic announcement flag of a type 0 group."""
    return bool(data[Block.B] & 0x10)


def group0_ms(data: Sequence[int]) -> bool:
    """Music/speech switch of a type 0 group (True for music)."""
    return bool(data[Block.B] & 0x8)


def group0_ps_position(data: Sequence[int]) -> int:
    """Segment address (0..3) of the PS characters in a type 0 group."""
    return data[Block.B] & 3


def group0a_af1(data: Sequence[int]) -> int:
    """First alternative frequency code of a type 0A group."""
    return (data[Block.C] >> 8) & 0xFF


def group0a_af2(data: Sequence[int]) -> int:
    """Second alternative frequency code of a type 0A group."""
    return data[Block.C] & 0xFF