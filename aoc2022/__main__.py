"""Allow `python -m aoc2022`."""

from aoc2022.main import main

if __name__ == "__main__":
    raise SystemExit(main())
