"""Day 22: Monkey Map - follow a path across a wrapping board, flat and as a cube.

Invariants:
    - Facing is 0 right, 1 down, 2 left, 3 up; password = 1000 row + 4 col + facing
      with 1-based row and column
    - Walking into a wall stops the current move; wrapping into a wall does too
    - The cube net may be any of the 11 nets; the face size is inferred from the
      number of tiles

Design Decisions:
    - Both parts share one walker and differ only in the wrap function
    - Cube wrapping folds the net in 3D: each face gets an outward normal and
      the 3D directions of its right/down axes, found by walking the net from
      the first face. Leaving a face in direction v lands on the face whose
      normal is v, moving along minus the old normal. No per-input edge tables
"""

import math
import re
from collections import deque
from dataclasses import dataclass, field

from aoc2022.core.errors import PuzzleParseError

OPEN = "."
WALL = "#"

# (row, col) deltas indexed by facing
_DELTAS = ((0, 1), (1, 0), (0, -1), (-1, 0))

Position = tuple[int, int]
Vector = tuple[int, int, int]
Step = int | str  # tiles to walk, or "L" / "R"


def _neg(v: Vector) -> Vector:
    return -v[0], -v[1], -v[2]


@dataclass
class Board:
    tiles: dict[Position, str]
    path: list[Step]
    row_bounds: dict[int, tuple[int, int]] = field(default_factory=dict)
    col_bounds: dict[int, tuple[int, int]] = field(default_factory=dict)

    def __post_init__(self):
        for r, c in self.tiles:
            lo, hi = self.row_bounds.get(r, (c, c))
            self.row_bounds[r] = (min(lo, c), max(hi, c))
            lo, hi = self.col_bounds.get(c, (r, r))
            self.col_bounds[c] = (min(lo, r), max(hi, r))

    @property
    def start(self) -> Position:
        top = min(r for r, _ in self.tiles)
        col = min(c for r, c in self.tiles if r == top and self.tiles[(r, c)] == OPEN)
        return top, col


def parse_board(text: str) -> Board:
    lines = text.rstrip().split("\n")
    if len(lines) < 3 or lines[-2].strip():
        raise PuzzleParseError("Expected the map, a blank line and the path")
    tiles = {}
    for r, line in enumerate(lines[:-2]):
        for c, char in enumerate(line.rstrip("\r")):
            if char in (OPEN, WALL):
                tiles[(r, c)] = char
            elif char != " ":
                raise PuzzleParseError("Unknown map tile", line)
    path_line = lines[-1].strip()
    if not re.fullmatch(r"(\d+|[LR])+", path_line):
        raise PuzzleParseError("Malformed path", path_line)
    path: list[Step] = [
        int(token) if token.isdigit() else token
        for token in re.findall(r"\d+|[LR]", path_line)
    ]
    if not tiles:
        raise PuzzleParseError("Empty map")
    return Board(tiles, path)


def flat_wrap(board: Board):
    """Wrap to the opposite end of the current row or column."""
    def wrap(pos: Position, facing: int) -> tuple[Position, int]:
        r, c = pos
        if facing == 0:
            return (r, board.row_bounds[r][0]), facing
        if facing == 2:
            return (r, board.row_bounds[r][1]), facing
        if facing == 1:
            return (board.col_bounds[c][0], c), facing
        return (board.col_bounds[c][1], c), facing
    return wrap


@dataclass(frozen=True)
class Face:
    normal: Vector
    right: Vector
    down: Vector


def fold_cube(board: Board) -> tuple[int, dict[Position, Face]]:
    """Face size and the 3D frame of every face, keyed by (face_row, face_col)."""
    size = math.isqrt(len(board.tiles) // 6)
    if size == 0 or 6 * size * size != len(board.tiles):
        raise PuzzleParseError(f"{len(board.tiles)} tiles cannot form a cube")
    cells = {(r // size, c // size) for r, c in board.tiles}
    if len(cells) != 6:
        raise PuzzleParseError("The map is not a cube net")
    first = min(cells)
    faces = {first: Face(normal=(0, 0, 1), right=(1, 0, 0), down=(0, 1, 0))}
    queue = deque([first])
    while queue:
        cell = queue.popleft()
        f = faces[cell]
        neighbours = {
            (cell[0], cell[1] + 1): Face(f.right, _neg(f.normal), f.down),
            (cell[0] + 1, cell[1]): Face(f.down, f.right, _neg(f.normal)),
            (cell[0], cell[1] - 1): Face(_neg(f.right), f.normal, f.down),
            (cell[0] - 1, cell[1]): Face(_neg(f.down), f.right, f.normal),
        }
        for nxt, frame in neighbours.items():
            if nxt in cells and nxt not in faces:
                faces[nxt] = frame
                queue.append(nxt)
    if len(faces) != 6 or len({face.normal for face in faces.values()}) != 6:
        raise PuzzleParseError("The map does not fold into a cube")
    return size, faces


def cube_wrap(board: Board):
    size, faces = fold_cube(board)
    by_normal = {face.normal: cell for cell, face in faces.items()}

    def wrap(pos: Position, facing: int) -> tuple[Position, int]:
        cell = (pos[0] // size, pos[1] // size)
        face = faces[cell]
        r, c = pos[0] % size, pos[1] % size
        # Direction of travel, axis along the crossed edge and offset on it
        travel, along, offset = {
            0: (face.right, face.down, r),
            1: (face.down, face.right, c),
            2: (_neg(face.right), face.down, r),
            3: (_neg(face.down), face.right, c),
        }[facing]
        target_cell = by_normal[travel]
        target = faces[target_cell]
        heading = _neg(face.normal)
        new_facing = [target.right, target.down, _neg(target.right), _neg(target.down)].index(heading)
        if new_facing in (0, 2):
            nr = offset if along == target.down else size - 1 - offset
            nc = 0 if new_facing == 0 else size - 1
        else:
            nc = offset if along == target.right else size - 1 - offset
            nr = 0 if new_facing == 1 else size - 1
        return (target_cell[0] * size + nr, target_cell[1] * size + nc), new_facing

    return wrap


def walk(board: Board, wrap) -> tuple[Position, int]:
    pos, facing = board.start, 0
    for step in board.path:
        if step == "R":
            facing = (facing + 1) % 4
            continue
        if step == "L":
            facing = (facing - 1) % 4
            continue
        for _ in range(step):
            dr, dc = _DELTAS[facing]
            nxt, nxt_facing = (pos[0] + dr, pos[1] + dc), facing
            if nxt not in board.tiles:
                nxt, nxt_facing = wrap(pos, facing)
            if board.tiles[nxt] == WALL:
                break
            pos, facing = nxt, nxt_facing
    return pos, facing


def password(pos: Position, facing: int) -> int:
    return 1000 * (pos[0] + 1) + 4 * (pos[1] + 1) + facing


def solve_part_one(text: str) -> int:
    board = parse_board(text)
    return password(*walk(board, flat_wrap(board)))


def solve_part_two(text: str) -> int:
    board = parse_board(text)
    return password(*walk(board, cube_wrap(board)))
