"""The table of face turns and the manager that applies them to a cube."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Mapping, Sequence

from .cube import CubeState, cycle2, cycle4
from .moves import Corner as C
from .moves import Edge as E
from .moves import Spin

CycleFunc = Callable[[CubeState, Sequence[int], Sequence[int], bool, bool], None]


@dataclass(frozen=True)
class SpinDefinition:
    """How one spin moves pieces: the cycle used and the slots involved."""

    cycle: CycleFunc
    corners: tuple[int, int, int, int]
    edges: tuple[int, int, int, int]
    delta_corners: bool = False
    delta_edges: bool = False

    def apply(self, state: CubeState) -> None:
        """Apply this spin to ``state`` in place."""
        self.cycle(state, self.corners, self.edges, self.delta_corners, self.delta_edges)


_U = ((C.URF, C.UFL, C.ULB, C.UBR), (E.UR, E.UF, E.UL, E.UB))
_D = ((C.DFR, C.DRB, C.DBL, C.DLF), (E.DF, E.DR, E.DB, E.DL))
_F = ((C.URF, C.DFR, C.DLF, C.UFL), (E.UF, E.FR, E.DF, E.FL))
_B = ((C.ULB, C.DBL, C.DRB, C.UBR), (E.UB, E.BL, E.DB, E.BR))
_L = ((C.UFL, C.DLF, C.DBL, C.ULB), (E.UL, E.FL, E.DL, E.BL))
_R = ((C.UBR, C.DRB, C.DFR, C.URF), (E.UR, E.BR, E.DR, E.FR))

SPIN_TABLE: Mapping[Spin, SpinDefinition] = {
    Spin.U: SpinDefinition(cycle4, *_U),
    Spin.U2: SpinDefinition(cycle2, *_U),
    Spin.U3: SpinDefinition(cycle4, (C.URF, C.UBR, C.ULB, C.UFL), (E.UR, E.UB, E.UL, E.UF)),
    Spin.D: SpinDefinition(cycle4, *_D),
    Spin.D2: SpinDefinition(cycle2, *_D),
    Spin.D3: SpinDefinition(cycle4, (C.DFR, C.DLF, C.DBL, C.DRB), (E.DF, E.DL, E.DB, E.DR)),
    Spin.F: SpinDefinition(cycle4, *_F, True, True),
    Spin.F2: SpinDefinition(cycle2, *_F),
    Spin.F3: SpinDefinition(
        cycle4, (C.URF, C.UFL, C.DLF, C.DFR), (E.UF, E.FL, E.DF, E.FR), True, True
    ),
    Spin.B: SpinDefinition(cycle4, *_B, True, True),
    Spin.B2: SpinDefinition(cycle2, *_B),
    Spin.B3: SpinDefinition(
        cycle4, (C.ULB, C.UBR, C.DRB, C.DBL), (E.UB, E.BR, E.DB, E.BL), True, True
    ),
    Spin.L: SpinDefinition(cycle4, *_L, True),
    Spin.L2: SpinDefinition(cycle2, *_L),
    Spin.L3: SpinDefinition(cycle4, (C.UFL, C.ULB, C.DBL, C.DLF), (E.UL, E.BL, E.DL, E.FL), True),
    Spin.R: SpinDefinition(cycle4, *_R, True),
    Spin.R2: SpinDefinition(cycle2, *_R),
    Spin.R3: SpinDefinition(cycle4, (C.UBR, C.URF, C.DFR, C.DRB), (E.UR, E.FR, E.DR, E.BR), True),
}


class SpinManager:
    """Applies spins to cube states using a table of spin definitions."""

    def __init__(self, table: Mapping[Spin, SpinDefinition] | None = None) -> None:
        self._table = dict(SPIN_TABLE if table is None else table)

    def apply_move(self, state: CubeState, spin) -> None:
        """Apply one spin (a :class:`Spin` or its number) to ``state`` in place."""
        try:
            key = Spin(spin)
        except ValueError:
            raise ValueError(f"Invalid spin {spin!r}") from None
        definition = self._table.get(key)
        if definition is None:
            raise ValueError(f"No spin definition for {key.notation()}")
        definition.apply(state)

    def apply_sequence(self, state: CubeState, spins: Iterable) -> None:
        """Apply each spin of ``spins`` to ``state`` in order."""
        for spin in spins:
            self.apply_move(state, spin)