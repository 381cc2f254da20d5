"""Repeatedly parse a file of user agent strings, for timing."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

from .parser import UserAgentParser


def _read_lines(path: str) -> list[str]:
    try:
        with open(path, encoding="utf-8", errors="surrogateescape", newline="") as f:
            return [line.removesuffix("\n") for line in f]
    except OSError:
        return []


def _count(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Parse every line of the input file the given number of times."""
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) != 3:
        prog = os.path.basename(sys.argv[0]) if sys.argv else "uaparse-bench"
        print(f"Usage: {prog} <regexes.yaml> <input file> <times to repeat>")
        return -1

    regexes_path, input_path, times = argv
    user_agents = _read_lines(input_path)
    parser = UserAgentParser(regexes_path)

    for _ in range(_count(times)):
        for user_agent in user_agents:
            parser.parse(user_agent)
    return 0


if __name__ == "__main__":
    sys.exit(main())