"""Bit-packed cube state and the low-level operations on it.

``edges`` holds twelve 4-bit edge positions in bits 0-47 and twelve
1-bit edge orientations in bits 48-59.  ``corners`` holds eight 4-bit
corner positions in bits 0-31 and eight 2-bit corner orientations in
bits 32-47.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Sequence

EDGES_SOLVED_STATE = 0xBA9876543210
CORNERS_SOLVED_STATE = 0x76543210

CORNER_COUNT = 8
EDGE_COUNT = 12

_EDGE_ORIENTATION_SHIFT = 48
_CORNER_ORIENTATION_SHIFT = 32


def get_piece(pieces: int, index: int) -> int:
    """Return the 4-bit piece number stored at ``index``."""
    return (pieces >> (index * 4)) & 0xF


def set_piece(pieces: int, index: int, value: int) -> int:
    """Return ``pieces`` with slot ``index`` holding ``value``."""
    shift = index * 4
    return (pieces & ~(0xF << shift)) | ((value & 0xF) << shift)


def get_corner_orientation(pieces: int, index: int) -> int:
    """Return the 2-bit orientation of corner slot ``index``."""
    return (pieces >> (_CORNER_ORIENTATION_SHIFT + index * 2)) & 0x3


def set_corner_orientation(pieces: int, index: int, value: int) -> int:
    """Return ``pieces`` with corner ``index`` oriented ``value % 3``.

    Indices outside the eight corners leave ``pieces`` unchanged.
    """
    if not 0 <= index < CORNER_COUNT:
        return pieces
    shift = _CORNER_ORIENTATION_SHIFT + index * 2
    return (pieces & ~(0b11 << shift)) | ((value % 3) << shift)


def get_edge_orientation(pieces: int, index: int) -> int:
    """Return the 1-bit orientation of edge slot ``index``."""
    return (pieces >> (_EDGE_ORIENTATION_SHIFT + index)) & 0x1


def set_edge_orientation(pieces: int, index: int, value: int) -> int:
    """Return ``pieces`` with edge ``index`` oriented ``value & 1``.

    Indices outside the twelve edges leave ``pieces`` unchanged.
    """
    if not 0 <= index < EDGE_COUNT:
        return pieces
    shift = _EDGE_ORIENTATION_SHIFT + index
    return (pieces & ~(1 << shift)) | ((value & 0x1) << shift)


def flip_edge_orientation(pieces: int, index: int) -> int:
    """Return ``pieces`` with the orientation of edge ``index`` toggled."""
    if not 0 <= index < EDGE_COUNT:
        return pieces
    return pieces ^ (1 << (_EDGE_ORIENTATION_SHIFT + index))


@dataclass
class CubeState:
    """Positions and orientations of all corners and edges."""

    edges: int = EDGES_SOLVED_STATE
    corners: int = CORNERS_SOLVED_STATE

    def corner_permutation(self) -> tuple[int, ...]:
        """Piece number held in each corner slot."""
        return tuple(get_piece(self.corners, i) for i in range(CORNER_COUNT))

    def corner_orientations(self) -> tuple[int, ...]:
        """Orientation of each corner slot."""
        return tuple(get_corner_orientation(self.corners, i) for i in range(CORNER_COUNT))

    def edge_permutation(self) -> tuple[int, ...]:
        """Piece number held in each edge slot."""
        return tuple(get_piece(self.edges, i) for i in range(EDGE_COUNT))

    def edge_orientations(self) -> tuple[int, ...]:
        """Orientation of each edge slot."""
        return tuple(get_edge_orientation(self.edges, i) for i in range(EDGE_COUNT))

    def is_solved(self) -> bool:
        """True when every piece is home and correctly oriented."""
        return self.edges == EDGES_SOLVED_STATE and self.corners == CORNERS_SOLVED_STATE

    def copy(self) -> "CubeState":
        """An independent copy of this state."""
        return dataclasses.replace(self)


def _rotate(values: Sequence[int]) -> list[int]:
    """Shift each value one slot forward along a 4-cycle."""
    return [values[-1], *values[:-1]]


def cycle4(
    state: CubeState,
    corners: Sequence[int],
    edges: Sequence[int],
    swap_corners: bool = False,
    swap_edges: bool = False,
) -> None:
    """Quarter-turn: move each listed piece to the next slot of its cycle.

    With ``swap_corners`` the corners are twisted by (2, 1, 2, 1); with
    ``swap_edges`` the four edges are flipped.
    """
    deltas = (2, 1, 2, 1) if swap_corners else (0, 0, 0, 0)

    twists = _rotate([get_corner_orientation(state.corners, c) for c in corners])
    for slot, twist, delta in zip(corners, twists, deltas):
        state.corners = set_corner_orientation(state.corners, slot, twist + delta)
    moved = _rotate([get_piece(state.corners, c) for c in corners])
    for slot, piece in zip(corners, moved):
        state.corners = set_piece(state.corners, slot, piece)

    flips = _rotate([get_edge_orientation(state.edges, e) for e in edges])
    for slot, flip in zip(edges, flips):
        state.edges = set_edge_orientation(state.edges, slot, flip ^ int(swap_edges))
    moved = _rotate([get_piece(state.edges, e) for e in edges])
    for slot, piece in zip(edges, moved):
        state.edges = set_piece(state.edges, slot, piece)


def _swap_pair(state: CubeState, attr: str, i: int, j: int, limit: int, getter, setter) -> None:
    bits = getattr(state, attr)
    if 0 <= i < limit and 0 <= j < limit:
        oi, oj = getter(bits, i), getter(bits, j)
        bits = setter(setter(bits, i, oj), j, oi)
    pi, pj = get_piece(bits, i), get_piece(bits, j)
    bits = set_piece(set_piece(bits, i, pj), j, pi)
    setattr(state, attr, bits)


def cycle2(
    state: CubeState,
    corners: Sequence[int],
    edges: Sequence[int],
    swap_corners: bool = False,
    swap_edges: bool = False,
) -> None:
    """Half-turn: swap opposite slots of the corner and edge cycles.

    A half turn never changes orientation relative to the moved pieces,
    so the flags are accepted only to share the signature of :func:`cycle4`.
    """
    del swap_corners, swap_edges
    for a, b in ((corners[0], corners[2]), (corners[1], corners[3])):
        _swap_pair(state, "corners", a, b, CORNER_COUNT,
                   get_corner_orientation, set_corner_orientation)
    for a, b in ((edges[0], edges[2]), (edges[1], edges[3])):
        _swap_pair(state, "edges", a, b, EDGE_COUNT,
                   get_edge_orientation, set_edge_orientation)