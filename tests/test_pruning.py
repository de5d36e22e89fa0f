import pytest

from rubik.cube import CubeState
from rubik.moves import Spin
from rubik.pruning import (
    CORNER_ORIENTATION_COUNT,
    EDGE_ORIENTATION_COUNT,
    EDGE_SLICE_COUNT,
    SLICE_EDGES,
    UNVISITED,
    PruningTable,
    corner_orientation_coordinate,
    decode_corner_orientation,
    decode_edge_orientation,
    decode_edge_slice,
    edge_orientation_coordinate,
    edge_slice_coordinate,
    encode_corner_orientation,
    encode_edge_orientation,
    encode_edge_slice,
    n_choose_r,
)
from rubik.spins import SpinManager


@pytest.fixture(scope="module")
def corner_table():
    return PruningTable.corner_orientation()


@pytest.fixture(scope="module")
def edge_table():
    return PruningTable.edge_orientation()


@pytest.fixture(scope="module")
def slice_table():
    return PruningTable.edge_slice()


def test_n_choose_r_matches_table_sizes():
    assert n_choose_r(12, 4) == EDGE_SLICE_COUNT
    assert n_choose_r(3, 4) == 0
    assert n_choose_r(5, 0) == 1


def test_n_choose_r_rejects_negative():
    with pytest.raises(ValueError):
        n_choose_r(-1, 2)


def test_corner_orientation_round_trip_all_indices():
    for index in range(CORNER_ORIENTATION_COUNT):
        decoded = decode_corner_orientation(index)
        assert len(decoded) == 8
        assert sum(decoded) % 3 == 0
        assert encode_corner_orientation(decoded) == index


def test_edge_orientation_round_trip_all_indices():
    for index in range(EDGE_ORIENTATION_COUNT):
        decoded = decode_edge_orientation(index)
        assert len(decoded) == 12
        assert sum(decoded) % 2 == 0
        assert encode_edge_orientation(decoded) == index


def test_edge_slice_round_trip_all_indices():
    for index in range(EDGE_SLICE_COUNT):
        decoded = decode_edge_slice(index)
        assert sorted(decoded) == list(range(12))
        assert encode_edge_slice(decoded) == index


def test_decode_edge_slice_keeps_slice_pieces_in_order():
    for index in range(EDGE_SLICE_COUNT):
        decoded = decode_edge_slice(index)
        slice_pieces = [p for p in decoded if p in SLICE_EDGES]
        others = [p for p in decoded if p not in SLICE_EDGES]
        assert slice_pieces == sorted(slice_pieces)
        assert others == sorted(others)


def test_solved_coordinates():
    state = CubeState()
    assert corner_orientation_coordinate(state) == 0
    assert edge_orientation_coordinate(state) == 0
    assert edge_slice_coordinate(state) == EDGE_SLICE_COUNT - 1


def test_decode_rejects_out_of_range():
    with pytest.raises(ValueError):
        decode_corner_orientation(CORNER_ORIENTATION_COUNT)
    with pytest.raises(ValueError):
        decode_edge_orientation(-1)
    with pytest.raises(ValueError):
        decode_edge_slice(EDGE_SLICE_COUNT)


def test_encode_rejects_short_input():
    with pytest.raises(ValueError):
        encode_corner_orientation([0, 0, 0])
    with pytest.raises(ValueError):
        encode_edge_orientation([0] * 5)
    with pytest.raises(ValueError):
        encode_edge_slice([0] * 11)


@pytest.mark.parametrize(
    "fixture_name,coordinate",
    [
        ("corner_table", corner_orientation_coordinate),
        ("edge_table", edge_orientation_coordinate),
        ("slice_table", edge_slice_coordinate),
    ],
)
def test_tables_fully_reached_with_single_zero(request, fixture_name, coordinate):
    table = request.getfixturevalue(fixture_name)
    entries = list(table)
    assert UNVISITED not in entries
    assert entries.count(0) == 1
    assert table[coordinate(CubeState())] == 0
    assert table.max_depth() == max(entries)


@pytest.mark.parametrize(
    "fixture_name,coordinate",
    [
        ("corner_table", corner_orientation_coordinate),
        ("edge_table", edge_orientation_coordinate),
        ("slice_table", edge_slice_coordinate),
    ],
)
def test_one_move_changes_depth_by_at_most_one(request, fixture_name, coordinate):
    table = request.getfixturevalue(fixture_name)
    manager = SpinManager()
    scramble = [Spin.R, Spin.U, Spin.F3, Spin.L2, Spin.B, Spin.D3]
    state = CubeState()
    for spin in scramble:
        before = table[coordinate(state)]
        manager.apply_move(state, spin)
        after = table[coordinate(state)]
        assert abs(after - before) <= 1


def test_single_moves_are_within_depth_one(corner_table, edge_table):
    manager = SpinManager()
    for spin in Spin:
        state = CubeState()
        manager.apply_move(state, spin)
        assert corner_table[corner_orientation_coordinate(state)] <= 1
        assert edge_table[edge_orientation_coordinate(state)] <= 1


def test_half_turns_keep_orientation_solved(corner_table, edge_table):
    manager = SpinManager()
    state = CubeState()
    manager.apply_sequence(state, [Spin.R2, Spin.F2, Spin.U2])
    assert corner_table[corner_orientation_coordinate(state)] == 0
    assert edge_table[edge_orientation_coordinate(state)] == 0


def test_write_read_round_trip(tmp_path, corner_table):
    path = tmp_path / "corners.bin"
    corner_table.write(path)
    assert path.stat().st_size == CORNER_ORIENTATION_COUNT
    loaded = PruningTable(CORNER_ORIENTATION_COUNT)
    loaded.read(path)
    assert list(loaded) == list(corner_table)
    assert loaded.max_depth() == corner_table.max_depth()


def test_new_table_is_unvisited():
    table = PruningTable(10)
    assert len(table) == 10
    assert table.max_depth() == UNVISITED


def test_read_short_file_raises(tmp_path):
    path = tmp_path / "short.bin"
    path.write_bytes(b"\x00" * 5)
    table = PruningTable(10)
    with pytest.raises(ValueError):
        table.read(path)
    assert list(table) == [UNVISITED] * 10


def test_read_missing_file_raises(tmp_path):
    table = PruningTable(10)
    with pytest.raises(OSError):
        table.read(tmp_path / "absent.bin")


def test_invalid_size_raises():
    with pytest.raises(ValueError):
        PruningTable(0)