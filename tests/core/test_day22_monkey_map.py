"""Day 22 tests - walking the board flat and folded into a cube."""

import pytest

from aoc2022.core.day22_monkey_map import (
    parse_board, fold_cube, cube_wrap, flat_wrap, walk, password,
    solve_part_one, solve_part_two,
)
from aoc2022.core.errors import PuzzleParseError

EXAMPLE = "\n".join([
    "        ...#",
    "        .#..",
    "        #...",
    "        ....",
    "...#.......#",
    "........#...",
    "..#....#....",
    "..........#.",
    "        ...#....",
    "        .....#..",
    "        .#......",
    "        ......#.",
    "",
    "10R5L5R10L4R5L5",
])


def test_parse_board_start_and_path():
    board = parse_board(EXAMPLE)
    assert board.start == (0, 8)
    assert board.path[:3] == [10, "R", 5]
    assert board.row_bounds[4] == (0, 11)
    assert board.col_bounds[0] == (4, 7)


def test_password_is_one_based():
    assert password((5, 7), 0) == 6032


def test_part_one_example():
    assert solve_part_one(EXAMPLE) == 6032


def test_part_two_example():
    assert solve_part_two(EXAMPLE) == 5031


def test_fold_cube_gives_six_distinct_faces():
    size, faces = fold_cube(parse_board(EXAMPLE))
    assert size == 4
    assert len({face.normal for face in faces.values()}) == 6


def test_cube_wrap_edge_transition():
    board = parse_board(EXAMPLE)
    wrap = cube_wrap(board)
    # Leaving the right edge of row 6 lands on the top edge of the bottom-right face
    assert wrap((5, 11), 0) == ((8, 14), 1)


def test_flat_wrap_row_and_column():
    board = parse_board(EXAMPLE)
    wrap = flat_wrap(board)
    assert wrap((4, 11), 0) == ((4, 0), 0)
    assert wrap((4, 0), 3) == ((7, 0), 3)


def test_wrapping_into_a_wall_stops_the_move():
    board = parse_board("...#\n....\n\nL1")
    # facing up from (0,0) wraps to the bottom of column 0
    assert walk(board, flat_wrap(board)) == ((1, 0), 3)
    blocked = parse_board("...\n#..\n\nL1")
    assert walk(blocked, flat_wrap(blocked)) == ((0, 0), 3)


def test_missing_path_raises_parse_error():
    with pytest.raises(PuzzleParseError):
        parse_board("...#\n....")


@pytest.mark.parametrize("net", [
    ". . . . . .",   # six faces, none touching
    "......",        # a strip wraps onto itself
])
def test_map_that_does_not_fold_raises_parse_error(net):
    with pytest.raises(PuzzleParseError):
        fold_cube(parse_board(net + "\n\n1"))
