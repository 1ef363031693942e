"""Day 8: Treetop Tree House - visibility and scenic scores over a height grid."""

from aoc2022.core.errors import PuzzleParseError

_DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def parse_grid(text: str) -> list[list[int]]:
    grid = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        if not line.isdigit():
            raise PuzzleParseError("Expected a row of digits", line)
        grid.append([int(c) for c in line])
    if not grid:
        raise PuzzleParseError("Empty tree grid")
    if any(len(row) != len(grid[0]) for row in grid):
        raise PuzzleParseError("Rows have different lengths")
    return grid


def _line_of_sight(grid: list[list[int]], row: int, col: int, dr: int, dc: int):
    """Heights from the tree outwards (exclusive) until the edge."""
    r, c = row + dr, col + dc
    while 0 <= r < len(grid) and 0 <= c < len(grid[0]):
        yield grid[r][c]
        r, c = r + dr, c + dc


def is_visible(grid: list[list[int]], row: int, col: int) -> bool:
    height = grid[row][col]
    return any(
        all(h < height for h in _line_of_sight(grid, row, col, dr, dc))
        for dr, dc in _DIRECTIONS
    )


def scenic_score(grid: list[list[int]], row: int, col: int) -> int:
    height = grid[row][col]
    score = 1
    for dr, dc in _DIRECTIONS:
        seen = 0
        for h in _line_of_sight(grid, row, col, dr, dc):
            seen += 1
            if h >= height:
                break
        score *= seen
    return score


def solve_part_one(text: str) -> int:
    grid = parse_grid(text)
    return sum(
        is_visible(grid, r, c)
        for r in range(len(grid)) for c in range(len(grid[0]))
    )


def solve_part_two(text: str) -> int:
    grid = parse_grid(text)
    return max(
        scenic_score(grid, r, c)
        for r in range(len(grid)) for c in range(len(grid[0]))
    )
