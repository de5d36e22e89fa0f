"""Rubik's Cube state, moves, parsing, rendering, self-check and pruning tables."""

__version__ = "0.1.0"

__all__ = ["moves", "cube", "spins", "parser", "display", "verify", "controller", "pruning"]