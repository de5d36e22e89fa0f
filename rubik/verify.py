"""Self-check: a random scramble followed by its inverse must give back the solved cube."""

from __future__ import annotations

import random
from typing import Iterable

from .cube import CubeState
from .display import CubeRenderer
from .moves import Spin
from .spins import SpinManager

_SEPARATOR = "-" * 40


def generate_random_spins(count: int) -> list[Spin]:
    """Return ``count`` spins drawn uniformly from all eighteen face turns."""
    choices = list(Spin)
    return [random.choice(choices) for _ in range(max(count, 0))]


def invert_sequence(sequence: Iterable) -> list[Spin]:
    """Return the sequence of spins that undoes ``sequence``."""
    return [Spin(spin).inverse() for spin in reversed(list(sequence))]


def _apply_and_show(
    manager: SpinManager, state: CubeState, renderer: CubeRenderer, spins: Iterable[Spin]
) -> None:
    for spin in spins:
        manager.apply_move(state, spin)
        renderer.print_state()
        renderer.print()
        print(_SEPARATOR)


def check_shuffle_reverse(count: int) -> bool:
    """Scramble a cube with ``count`` random spins, then undo them.

    Every intermediate state is printed. Returns True when the cube is
    solved again at the end.
    """
    state = CubeState()
    manager = SpinManager()
    renderer = CubeRenderer(state)

    spins = generate_random_spins(count)
    inverted = invert_sequence(spins)

    print(_SEPARATOR)
    print("Applying random moves: ")
    _apply_and_show(manager, state, renderer, spins)

    print(_SEPARATOR)
    print("Applying inverted moves: ")
    _apply_and_show(manager, state, renderer, inverted)

    return state.is_solved()