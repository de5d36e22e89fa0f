"""Coordinates parsing, shuffling, display and solving of a cube."""

from __future__ import annotations

import sys

from .cube import CubeState
from .display import CubeRenderer
from .moves import Spin, spin_to_str
from .parser import ParseError, Parser
from .spins import SpinManager
from .verify import invert_sequence

DEFAULT_RANDOM_COUNT = 5


class RubikController:
    """Owns a cube state and drives the parser, spin manager and renderer."""

    def __init__(self, shuffle_mode: bool = True) -> None:
        self.shuffle_mode = shuffle_mode
        self.state = CubeState()
        self._parser = Parser()
        self._spin_manager = SpinManager()
        self._renderer = CubeRenderer(self.state)
        self._applied: list[Spin] = []

    @property
    def results(self) -> tuple[Spin, ...]:
        """The spins waiting to be applied by :meth:`apply_shuffle`."""
        return self._parser.results

    def parse(self, text: str) -> list[Spin]:
        """Read the shuffle from ``text``, or draw a random one when not in shuffle mode.

        Raises :class:`ParseError` when ``text`` holds no valid moves.
        """
        if self.shuffle_mode:
            return self._parser.parse(text)
        return self.random_shuffle(DEFAULT_RANDOM_COUNT)

    def random_shuffle(self, count: int) -> list[Spin]:
        """Draw ``count`` random spins, announce them and keep them as the shuffle."""
        if count <= 0:
            raise ValueError("Count must be greater than 0")
        self._parser.clear_results()
        spins = self._parser.generate_random(count)
        print("Generated random spins: " + "".join(f"{spin_to_str(s)} " for s in spins))
        self._parser.set_results(spins)
        return spins

    def apply_shuffle(self) -> None:
        """Apply the stored shuffle to the cube."""
        spins = self._parser.results
        if not spins:
            raise ValueError("No moves found in input")
        self._spin_manager.apply_sequence(self.state, spins)
        self._applied.extend(spins)

    def print(self) -> None:
        """Write the cube to standard output."""
        self._renderer.print()

    def solve(self) -> list[Spin]:
        """Undo every spin applied so far and return the spins used."""
        solution = invert_sequence(self._applied)
        self._spin_manager.apply_sequence(self.state, solution)
        self._applied.clear()
        return solution

    def reset(self) -> None:
        """Return to a solved cube with no pending shuffle."""
        self.state = CubeState()
        self._parser.clear_results()
        self._applied.clear()
        self._renderer = CubeRenderer(self.state)


def _error(message: str) -> int:
    print(f"Error: {message}", file=sys.stderr)
    return 1


def main(argv=None) -> int:
    """Command entry point: shuffle the cube with the given moves and show it."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        return _error('Usage: rubik " ALL SPIN " ')

    controller = RubikController()
    try:
        controller.parse(args[0])
        controller.apply_shuffle()
    except (ParseError, ValueError) as exc:
        return _error(str(exc))
    controller.print()
    controller.solve()
    return 0


if __name__ == "__main__":
    sys.exit(main())