"""Search the game's random stream for a given value."""

from __future__ import annotations

import re
import sys

from .rngs import MODULUS, RandomStreams

_SCALE = 1_000_000_000


def find_target(seed: int, target: int) -> int:
    """Draw from stream 1 until a scaled draw equals ``target``.

    Returns the number of draws taken. Raises ValueError when the target
    cannot occur or is not met within one period of the generator.
    """
    if not 0 <= target < _SCALE:
        raise ValueError(f"target {target} is outside [0, {_SCALE})")
    rng = RandomStreams()
    rng.select_stream(1)
    rng.put_seed(seed)
    for draws in range(1, MODULUS):
        if int(rng.random() * _SCALE) == target:
            return draws
    raise ValueError(f"target {target} never occurs for seed {seed}")


def _leading_int(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def main(argv: list[str] | None = None) -> int:
    """Look for a target value given a seed: ``rt SEED TARGET``."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) < 2:
        sys.stdout.write("Not enough inputs:  seed target\n")
        return 1
    try:
        find_target(_leading_int(args[0]), _leading_int(args[1]))
    except ValueError as error:
        sys.stderr.write(f"{error}\n")
        return 1
    sys.stdout.write("Found the bug!\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())