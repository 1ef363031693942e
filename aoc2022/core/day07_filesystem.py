"""Day 7: No Space Left On Device - rebuild a directory tree from a shell log.

Invariants:
    - A directory size includes every file below it, recursively
    - "$ cd /" returns to the root from anywhere; "$ cd .." at the root stays there
    - Listing the same directory twice does not double-count files

Design Decisions:
    - Directories as a dataclass tree with parent links: sizes are computed once,
      bottom-up, after the whole log is replayed
"""

from dataclasses import dataclass, field

from aoc2022.core.errors import PuzzleParseError, NoSolutionError

DISK_SIZE = 70_000_000
UPDATE_SIZE = 30_000_000
SMALL_DIR_LIMIT = 100_000


@dataclass
class Directory:
    name: str
    parent: "Directory | None" = None
    dirs: dict[str, "Directory"] = field(default_factory=dict)
    files: dict[str, int] = field(default_factory=dict)

    def size(self) -> int:
        return sum(self.files.values()) + sum(d.size() for d in self.dirs.values())

    def walk(self):
        """Yield this directory and every descendant."""
        yield self
        for child in self.dirs.values():
            yield from child.walk()


def parse_terminal(text: str) -> Directory:
    root = Directory("/")
    cwd = root
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        parts = line.split()
        if parts[0] == "$":
            if parts[1:2] == ["ls"]:
                continue
            if parts[1:2] != ["cd"] or len(parts) != 3:
                raise PuzzleParseError("Unknown command", line)
            target = parts[2]
            if target == "/":
                cwd = root
            elif target == "..":
                cwd = cwd.parent or root
            else:
                cwd = cwd.dirs.setdefault(target, Directory(target, cwd))
        elif parts[0] == "dir" and len(parts) == 2:
            cwd.dirs.setdefault(parts[1], Directory(parts[1], cwd))
        elif parts[0].isdigit() and len(parts) == 2:
            cwd.files[parts[1]] = int(parts[0])
        else:
            raise PuzzleParseError("Unknown listing entry", line)
    return root


def directory_sizes(root: Directory) -> list[int]:
    return [d.size() for d in root.walk()]


def solve_part_one(text: str, limit: int = SMALL_DIR_LIMIT) -> int:
    return sum(s for s in directory_sizes(parse_terminal(text)) if s <= limit)


def solve_part_two(
    text: str, disk_size: int = DISK_SIZE, update_size: int = UPDATE_SIZE,
) -> int:
    sizes = directory_sizes(parse_terminal(text))
    used = sizes[0]
    required = update_size - (disk_size - used)
    candidates = [s for s in sizes if s >= required]
    if not candidates:
        raise NoSolutionError("No directory frees enough space for the update")
    return min(candidates)
