"""Text rendering of a cube state with ANSI colours."""

from __future__ import annotations

from dataclasses import dataclass

from .cube import (
    CORNER_COUNT,
    EDGE_COUNT,
    CubeState,
    get_corner_orientation,
    get_edge_orientation,
    get_piece,
)
from .moves import Color, Corner, Edge

YELLOW = "\x1b[43m"
WHITE = "\x1b[47m"
RED = "\x1b[41m"
ORANGE = "\x1b[48;5;208m"
GREEN = "\x1b[48;5;34m"
BLUE = "\x1b[44m"
RESET = "\x1b[0m"

_ESCAPES = {
    Color.YELLOW: YELLOW,
    Color.BLUE: BLUE,
    Color.RED: RED,
    Color.GREEN: GREEN,
    Color.ORANGE: ORANGE,
    Color.WHITE: WHITE,
}

_CENTER_LETTERS = {
    Color.YELLOW: "U",
    Color.BLUE: "L",
    Color.RED: "F",
    Color.GREEN: "R",
    Color.ORANGE: "B",
    Color.WHITE: "D",
}

_PADDING = " " * 23
_SMALL_SPACE = "  "


@dataclass(frozen=True)
class CornerPiece:
    """A corner piece: its three sticker colours and its identity."""

    colors: tuple[Color, Color, Color]
    piece: int

    def color(self, index: int) -> Color:
        """Colour of sticker ``index`` (0 to 2)."""
        if not 0 <= index < 3:
            raise IndexError(f"Invalid index for corner piece color{index}")
        return self.colors[index]

    @property
    def name(self) -> str:
        """Name of the piece, e.g. ``URF``."""
        try:
            return Corner(self.piece).name
        except ValueError:
            return f"Unknown {self.piece}"


@dataclass(frozen=True)
class EdgePiece:
    """An edge piece: its two sticker colours and its identity."""

    colors: tuple[Color, Color]
    piece: int

    def color(self, index: int) -> Color:
        """Colour of sticker ``index`` (0 or 1)."""
        if not 0 <= index < 2:
            raise IndexError(f"Invalid index for edge piece color{index}")
        return self.colors[index]

    @property
    def name(self) -> str:
        """Name of the piece, e.g. ``UF``."""
        try:
            return Edge(self.piece).name
        except ValueError:
            return f"Unknown {self.piece}"


Y, B_, R_, G, O, W = (Color.YELLOW, Color.BLUE, Color.RED,
                      Color.GREEN, Color.ORANGE, Color.WHITE)

CORNER_PIECES: tuple[CornerPiece, ...] = (
    CornerPiece((Y, G, R_), Corner.URF),
    CornerPiece((Y, R_, B_), Corner.UFL),
    CornerPiece((Y, B_, O), Corner.ULB),
    CornerPiece((Y, O, G), Corner.UBR),
    CornerPiece((W, R_, G), Corner.DFR),
    CornerPiece((W, B_, R_), Corner.DLF),
    CornerPiece((W, O, B_), Corner.DBL),
    CornerPiece((W, G, O), Corner.DRB),
)

EDGE_PIECES: tuple[EdgePiece, ...] = (
    EdgePiece((Y, G), Edge.UR),
    EdgePiece((Y, R_), Edge.UF),
    EdgePiece((Y, B_), Edge.UL),
    EdgePiece((Y, O), Edge.UB),
    EdgePiece((W, G), Edge.DR),
    EdgePiece((W, R_), Edge.DF),
    EdgePiece((W, B_), Edge.DL),
    EdgePiece((W, O), Edge.DB),
    EdgePiece((R_, G), Edge.FR),
    EdgePiece((R_, B_), Edge.FL),
    EdgePiece((O, B_), Edge.BL),
    EdgePiece((O, G), Edge.BR),
)

# Each face is a 3x3 grid of (slot, sticker offset); corners sit at the
# grid corners, edges between them, and the centre entry is unused.
_UP = ((Corner.ULB, 0), (Edge.UB, 0), (Corner.UBR, 0),
       (Edge.UL, 0), (0, 0), (Edge.UR, 0),
       (Corner.UFL, 0), (Edge.UF, 0), (Corner.URF, 0))
_DOWN = ((Corner.DLF, 0), (Edge.DF, 0), (Corner.DFR, 0),
         (Edge.DL, 0), (0, 0), (Edge.DR, 0),
         (Corner.DBL, 0), (Edge.DB, 0), (Corner.DRB, 0))
_FRONT = ((Corner.UFL, 1), (Edge.UF, 1), (Corner.URF, 2),
          (Edge.FL, 0), (0, 0), (Edge.FR, 0),
          (Corner.DLF, 2), (Edge.DF, 1), (Corner.DFR, 1))
_LEFT = ((Corner.ULB, 1), (Edge.UL, 1), (Corner.UFL, 2),
         (Edge.BL, 1), (0, 0), (Edge.FL, 1),
         (Corner.DBL, 2), (Edge.DL, 1), (Corner.DLF, 1))
_RIGHT = ((Corner.URF, 1), (Edge.UR, 1), (Corner.UBR, 2),
          (Edge.FR, 1), (0, 0), (Edge.BR, 1),
          (Corner.DFR, 2), (Edge.DR, 1), (Corner.DRB, 1))
_BACK = ((Corner.UBR, 1), (Edge.UB, 1), (Corner.ULB, 2),
         (Edge.BR, 0), (0, 0), (Edge.BL, 0),
         (Corner.DRB, 2), (Edge.DB, 1), (Corner.DBL, 1))

_BELT = ((_LEFT, Color.BLUE), (_FRONT, Color.RED),
         (_RIGHT, Color.GREEN), (_BACK, Color.ORANGE))


def _sticker(color: Color, label: str) -> str:
    return _ESCAPES[Color(color)] + label[:5].ljust(5) + RESET


def _center(color: Color) -> str:
    return _ESCAPES[color] + f"  {_CENTER_LETTERS[color]}  " + RESET + "  "


class CubeRenderer:
    """Renders the live state of a cube as coloured text."""

    def __init__(self, cube: CubeState) -> None:
        self.cube = cube

    def _corner_cell(self, slot: int, offset: int) -> str:
        piece = CORNER_PIECES[get_piece(self.cube.corners, slot)]
        index = (offset + get_corner_orientation(self.cube.corners, slot)) % 3
        return _sticker(piece.color(index), f"{piece.name}.{index}") + "  "

    def _edge_cell(self, slot: int, offset: int) -> str:
        piece = EDGE_PIECES[get_piece(self.cube.edges, slot)]
        index = (offset + get_edge_orientation(self.cube.edges, slot)) % 2
        return _sticker(piece.color(index), f"{piece.name}.{index}") + "  "

    def _cell(self, face, position: int) -> str:
        slot, offset = face[position]
        if position % 2 == 0:
            return self._corner_cell(slot, offset)
        return self._edge_cell(slot, offset)

    def _row(self, face, color: Color, row: int, center_prefix: str = "") -> str:
        start = row * 3
        middle = (center_prefix + _center(color)) if row == 1 else self._cell(face, start + 1)
        return self._cell(face, start) + middle + self._cell(face, start + 2)

    def _face(self, face, color: Color) -> str:
        rows = (_PADDING + self._row(face, color, row) + "\n\n" for row in range(3))
        return "".join(rows) + "\n"

    def render_state(self) -> str:
        """Raw permutation and orientation numbers of every piece."""
        corners = self.cube.corners
        edges = self.cube.edges
        lines = [
            "___ Cube State: ___",
            "Corners:             "
            + "".join(f"{get_piece(corners, i)} " for i in range(CORNER_COUNT)),
            "Corners Orientation: "
            + "".join(f"{get_corner_orientation(corners, i)} " for i in range(CORNER_COUNT)),
            "Edge:                "
            + "".join(f"{get_piece(edges, i)} " for i in range(EDGE_COUNT)),
            "Edge Orientation:    "
            + "".join(f"{get_edge_orientation(edges, i)} " for i in range(EDGE_COUNT)),
            "____________________",
        ]
        return "\n".join(lines) + "\n"

    def render(self) -> str:
        """The unfolded cube: up face, the four side faces, down face."""
        parts = [self._face(_UP, Color.YELLOW)]
        for row in range(3):
            cells = (
                self._row(face, color, row, BLUE if color is Color.BLUE else "")
                for face, color in _BELT
            )
            parts.append(_SMALL_SPACE.join(cells) + "\n\n")
        parts.append(self._face(_DOWN, Color.WHITE))
        parts.append("\n")
        return "".join(parts)

    def print_state(self) -> None:
        """Write :meth:`render_state` to standard output."""
        print(self.render_state(), end="")

    def print(self) -> None:
        """Write :meth:`render` to standard output."""
        print(self.render(), end="")