import random

import pytest

from rubik.cube import CubeState
from rubik.moves import Edge, Spin
from rubik.spins import SPIN_TABLE, SpinManager


@pytest.fixture
def manager():
    return SpinManager()


def _random_sequence(seed, length=200):
    rng = random.Random(seed)
    return [rng.choice(list(Spin)) for _ in range(length)]


def test_table_covers_every_spin():
    assert set(SPIN_TABLE) == set(Spin)
    manager = SpinManager()
    for spin in Spin:
        state = CubeState()
        manager.apply_move(state, spin)
        assert not state.is_solved()


@pytest.mark.parametrize("spin", list(Spin))
def test_four_turns_restore_solved(manager, spin):
    state = CubeState()
    for _ in range(4):
        manager.apply_move(state, spin)
    assert state.is_solved()


@pytest.mark.parametrize("spin", list(Spin))
def test_spin_then_inverse_restores_solved(manager, spin):
    state = CubeState()
    manager.apply_move(state, spin)
    assert not state.is_solved()
    manager.apply_move(state, spin.inverse())
    assert state.is_solved()


@pytest.mark.parametrize("face", "UDFBLR")
def test_half_turn_equals_two_quarter_turns(manager, face):
    scramble = _random_sequence(7, 30)
    half = CubeState()
    quarter = CubeState()
    manager.apply_sequence(half, scramble)
    manager.apply_sequence(quarter, scramble)
    manager.apply_move(half, Spin[face + "2"])
    manager.apply_sequence(quarter, [Spin[face], Spin[face]])
    assert half == quarter


def test_u_on_solved_cube(manager):
    state = CubeState()
    manager.apply_move(state, Spin.U)
    assert state.corner_permutation() == (3, 0, 1, 2, 4, 5, 6, 7)
    assert set(state.corner_orientations()) == {0}


def test_f_flips_front_edges(manager):
    state = CubeState()
    manager.apply_move(state, Spin.F)
    flipped = {i for i, o in enumerate(state.edge_orientations()) if o}
    assert flipped == {Edge.UF, Edge.FR, Edge.DF, Edge.FL}


@pytest.mark.parametrize("seed", range(5))
def test_random_sequence_keeps_invariants(manager, seed):
    state = CubeState()
    manager.apply_sequence(state, _random_sequence(seed))
    assert sorted(state.corner_permutation()) == list(range(8))
    assert sorted(state.edge_permutation()) == list(range(12))
    assert sum(state.corner_orientations()) % 3 == 0
    assert sum(state.edge_orientations()) % 2 == 0


@pytest.mark.parametrize("seed", range(5))
def test_inverted_sequence_restores_solved(manager, seed):
    sequence = _random_sequence(seed)
    state = CubeState()
    manager.apply_sequence(state, sequence)
    manager.apply_sequence(state, [s.inverse() for s in reversed(sequence)])
    assert state.is_solved()


def test_apply_sequence_matches_single_moves(manager):
    sequence = _random_sequence(42, 50)
    one = CubeState()
    other = CubeState()
    manager.apply_sequence(one, sequence)
    for spin in sequence:
        manager.apply_move(other, spin)
    assert one == other


def test_apply_move_accepts_numbers(manager):
    by_enum = CubeState()
    by_int = CubeState()
    manager.apply_move(by_enum, Spin.R3)
    manager.apply_move(by_int, int(Spin.R3))
    assert by_enum == by_int


@pytest.mark.parametrize("bad", [18, -1])
def test_invalid_spin_raises(manager, bad):
    with pytest.raises(ValueError):
        manager.apply_move(CubeState(), bad)


def test_missing_definition_raises():
    partial = SpinManager({Spin.U: SPIN_TABLE[Spin.U]})
    with pytest.raises(ValueError):
        partial.apply_move(CubeState(), Spin.D)