"""Coordinates of the first Kociemba phase and breadth-first pruning tables.

A pruning table maps a coordinate of the cube (corner orientation, edge
orientation or the placement of the four middle-slice edges) to the
least number of face turns that brings that coordinate back to solved.
Unreached entries hold ``0xFF``.
"""

from __future__ import annotations

import math
import os
from collections import deque
from pathlib import Path
from typing import Callable, Iterable, Iterator, Sequence

from .cube import CORNER_COUNT, EDGE_COUNT, CubeState
from .moves import Edge, Spin
from .spins import SpinManager

UNVISITED = 0xFF

CORNER_ORIENTATION_COUNT = 3 ** (CORNER_COUNT - 1)
EDGE_ORIENTATION_COUNT = 2 ** (EDGE_COUNT - 1)
SLICE_EDGE_COUNT = 4
EDGE_SLICE_COUNT = math.comb(EDGE_COUNT, SLICE_EDGE_COUNT)

SLICE_EDGES = frozenset((Edge.FR, Edge.FL, Edge.BL, Edge.BR))

Coordinate = Callable[[CubeState], int]


def n_choose_r(n: int, r: int) -> int:
    """Binomial coefficient; zero when ``r`` exceeds ``n``."""
    if n < 0 or r < 0:
        raise ValueError(f"n and r must be non-negative, got n={n}, r={r}")
    return math.comb(n, r)


def _check_length(values: Sequence[int], needed: int, what: str) -> None:
    if len(values) < needed:
        raise ValueError(f"{what} needs at least {needed} values, got {len(values)}")


def _check_index(index: int, count: int, what: str) -> None:
    if not 0 <= index < count:
        raise ValueError(f"{what} index must be in [0, {count}), got {index}")


def encode_corner_orientation(orientations: Sequence[int]) -> int:
    """Base-3 number formed by the first seven corner orientations."""
    _check_length(orientations, CORNER_COUNT - 1, "Corner orientation")
    index = 0
    for twist in orientations[: CORNER_COUNT - 1]:
        index = index * 3 + twist
    return index


def decode_corner_orientation(index: int) -> tuple[int, ...]:
    """Eight corner orientations; the last one makes the total twist a multiple of 3."""
    _check_index(index, CORNER_ORIENTATION_COUNT, "Corner orientation")
    digits = []
    for _ in range(CORNER_COUNT - 1):
        index, digit = divmod(index, 3)
        digits.append(digit)
    digits.reverse()
    digits.append((3 - sum(digits) % 3) % 3)
    return tuple(digits)


def encode_edge_orientation(orientations: Sequence[int]) -> int:
    """Binary number formed by the first eleven edge orientations."""
    _check_length(orientations, EDGE_COUNT - 1, "Edge orientation")
    index = 0
    for flip in orientations[: EDGE_COUNT - 1]:
        index = (index << 1) | (flip & 1)
    return index


def decode_edge_orientation(index: int) -> tuple[int, ...]:
    """Twelve edge orientations; the last one makes the number of flips even."""
    _check_index(index, EDGE_ORIENTATION_COUNT, "Edge orientation")
    bits = [(index >> shift) & 1 for shift in range(EDGE_COUNT - 2, -1, -1)]
    bits.append(sum(bits) % 2)
    return tuple(bits)


def encode_edge_slice(edges: Sequence[int]) -> int:
    """Rank of the set of slots holding the four middle-slice edges."""
    _check_length(edges, EDGE_COUNT, "Edge slice")
    index = 0
    remaining = SLICE_EDGE_COUNT
    for slot in range(EDGE_COUNT - 1, -1, -1):
        if remaining == 0:
            break
        if edges[slot] in SLICE_EDGES:
            index += n_choose_r(slot, remaining)
            remaining -= 1
    return index


def decode_edge_slice(index: int) -> tuple[int, ...]:
    """An edge permutation whose middle-slice edges sit at the slots ranked ``index``.

    Slice edges are placed in increasing order, the other edges fill the
    remaining slots in increasing order.
    """
    _check_index(index, EDGE_SLICE_COUNT, "Edge slice")
    in_slice = [False] * EDGE_COUNT
    remaining = SLICE_EDGE_COUNT
    for slot in range(EDGE_COUNT - 1, -1, -1):
        if remaining > 0 and index >= n_choose_r(slot, remaining):
            index -= n_choose_r(slot, remaining)
            in_slice[slot] = True
            remaining -= 1
    slice_pieces = iter(sorted(SLICE_EDGES))
    other_pieces = iter(sorted(set(Edge) - SLICE_EDGES))
    return tuple(
        int(next(slice_pieces) if chosen else next(other_pieces)) for chosen in in_slice
    )


def corner_orientation_coordinate(state: CubeState) -> int:
    """Corner orientation coordinate of ``state``."""
    return encode_corner_orientation(state.corner_orientations())


def edge_orientation_coordinate(state: CubeState) -> int:
    """Edge orientation coordinate of ``state``."""
    return encode_edge_orientation(state.edge_orientations())


def edge_slice_coordinate(state: CubeState) -> int:
    """Middle-slice placement coordinate of ``state``."""
    return encode_edge_slice(state.edge_permutation())


class PruningTable:
    """A byte per coordinate value: the turn distance to solved, or ``0xFF``."""

    def __init__(self, size: int = CORNER_ORIENTATION_COUNT) -> None:
        if size <= 0:
            raise ValueError(f"Table size must be positive, got {size}")
        self._table = bytearray([UNVISITED]) * size

    @classmethod
    def generate(
        cls,
        size: int,
        coordinate: Coordinate,
        moves: Iterable[Spin] = tuple(Spin),
    ) -> "PruningTable":
        """Fill a table by breadth-first search from the solved cube."""
        table = cls(size)
        moves = tuple(moves)
        manager = SpinManager()
        start = CubeState()
        table._table[coordinate(start)] = 0
        queue = deque([(start, 0)])
        while queue:
            state, depth = queue.popleft()
            for spin in moves:
                following = state.copy()
                manager.apply_move(following, spin)
                index = coordinate(following)
                if table._table[index] == UNVISITED:
                    table._table[index] = depth + 1
                    queue.append((following, depth + 1))
        return table

    @classmethod
    def corner_orientation(cls) -> "PruningTable":
        """Distances for the corner orientation coordinate."""
        return cls.generate(CORNER_ORIENTATION_COUNT, corner_orientation_coordinate)

    @classmethod
    def edge_orientation(cls) -> "PruningTable":
        """Distances for the edge orientation coordinate."""
        return cls.generate(EDGE_ORIENTATION_COUNT, edge_orientation_coordinate)

    @classmethod
    def edge_slice(cls) -> "PruningTable":
        """Distances for the middle-slice placement coordinate."""
        return cls.generate(EDGE_SLICE_COUNT, edge_slice_coordinate)

    def __len__(self) -> int:
        return len(self._table)

    def __getitem__(self, index: int) -> int:
        return self._table[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._table)

    def write(self, path: str | os.PathLike) -> None:
        """Store the table as raw bytes at ``path``."""
        Path(path).write_bytes(bytes(self._table))

    def read(self, path: str | os.PathLike) -> None:
        """Load the table from raw bytes at ``path``.

        Raises :class:`OSError` when the file cannot be opened and
        :class:`ValueError` when it holds fewer bytes than the table.
        """
        data = Path(path).read_bytes()
        if len(data) < len(self._table):
            raise ValueError(
                f"Incomplete pruning table file {os.fspath(path)}: "
                f"{len(data)} of {len(self._table)} bytes"
            )
        self._table[:] = data[: len(self._table)]

    def max_depth(self) -> int:
        """Largest entry of the table."""
        return max(self._table)