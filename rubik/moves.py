"""Move, piece and colour identifiers for a 3x3x3 cube."""

from __future__ import annotations

from enum import IntEnum

_SUFFIXES = ("", "2", "'")


class Spin(IntEnum):
    """The eighteen face turns: clockwise, half turn and counter-clockwise."""

    U = 0
    U2 = 1
    U3 = 2
    D = 3
    D2 = 4
    D3 = 5
    F = 6
    F2 = 7
    F3 = 8
    B = 9
    B2 = 10
    B3 = 11
    L = 12
    L2 = 13
    L3 = 14
    R = 15
    R2 = 16
    R3 = 17

    @property
    def face(self) -> str:
        """Letter of the face this spin turns."""
        return self.name[0]

    def notation(self) -> str:
        """Standard notation for the spin, e.g. ``U``, ``U2`` or ``U'``."""
        return self.face + _SUFFIXES[self.value % 3]

    def inverse(self) -> "Spin":
        """The spin that undoes this one."""
        base = self.value - self.value % 3
        return Spin(base + 2 - self.value % 3)


class Corner(IntEnum):
    """Corner slots and pieces."""

    URF = 0
    UFL = 1
    ULB = 2
    UBR = 3
    DFR = 4
    DLF = 5
    DBL = 6
    DRB = 7


class Edge(IntEnum):
    """Edge slots and pieces."""

    UR = 0
    UF = 1
    UL = 2
    UB = 3
    DR = 4
    DF = 5
    DL = 6
    DB = 7
    FR = 8
    FL = 9
    BL = 10
    BR = 11


class Color(IntEnum):
    """Sticker colours, named after the face whose centre carries them."""

    YELLOW = 0  # up
    BLUE = 1  # left
    RED = 2  # front
    GREEN = 3  # right
    ORANGE = 4  # back
    WHITE = 5  # down


SPIN_COUNT = len(Spin)


def spin_to_str(spin) -> str:
    """Return the notation of a spin given as a :class:`Spin` or its number."""
    try:
        return Spin(spin).notation()
    except ValueError:
        raise ValueError("Unknown spin type") from None