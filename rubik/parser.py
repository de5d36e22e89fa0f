"""Parsing of move strings such as ``"U R' D2"`` into spins."""

from __future__ import annotations

import random
from typing import Iterable

from .moves import Spin

_SPIN_BY_TOKEN: dict[str, Spin] = {spin.notation(): spin for spin in Spin}


class ParseError(ValueError):
    """Raised when a move string cannot be turned into spins."""


def parse_token(token: str) -> Spin:
    """Return the spin written as ``token`` (e.g. ``R``, ``R'`` or ``R2``)."""
    try:
        return _SPIN_BY_TOKEN[token]
    except KeyError:
        raise ParseError(f"Invalid spin token: [{token}]") from None


class Parser:
    """Turns move strings into sequences of spins and keeps the last result."""

    def __init__(self) -> None:
        self._results: list[Spin] = []

    @property
    def results(self) -> tuple[Spin, ...]:
        """Spins from the last successful parse, setting or random draw."""
        return tuple(self._results)

    def parse(self, text: str) -> list[Spin]:
        """Parse space-separated moves, store them and return them.

        Raises :class:`ParseError` for empty input, input without moves
        and unknown tokens; the stored results are then left empty.
        """
        self._results = []
        if not text:
            raise ParseError("Input string is empty")
        tokens = [token for token in text.split(" ") if token]
        if not tokens:
            raise ParseError("No moves found in input")
        spins = [parse_token(token) for token in tokens]
        self._results = spins
        return list(spins)

    def clear_results(self) -> None:
        """Forget the stored spins."""
        self._results = []

    def set_results(self, results: Iterable) -> None:
        """Store ``results`` (spins or their numbers) as the current spins."""
        self._results = [Spin(spin) for spin in results]

    def generate_random(self, count: int) -> list[Spin]:
        """Store and return ``count`` uniformly drawn random spins."""
        spins = list(Spin)
        self._results = [random.choice(spins) for _ in range(max(count, 0))]
        return list(self._results)