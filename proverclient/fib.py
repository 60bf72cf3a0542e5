"""Fibonacci-style guest program reading its inputs from standard input."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable

_U32_MASK = 0xFFFFFFFF
_DEFAULT_INIT = 1


def _parse_u32(text: str) -> int:
    digits = text.strip()
    body = digits[1:] if digits.startswith("+") else digits
    if not body or not body.isascii() or not body.isdigit():
        raise ValueError("invalid digit found in string" if body else "cannot parse integer from empty string")
    value = int(body)
    if value > _U32_MASK:
        raise ValueError("number too large to fit in target type")
    return value


def fibonacci(n: int, init_a: int = _DEFAULT_INIT, init_b: int = _DEFAULT_INIT) -> int:
    """Advance the sequence n steps from (init_a, init_b) with 32-bit wrapping."""
    for value in (n, init_a, init_b):
        if not 0 <= value <= _U32_MASK:
            raise ValueError(f"value out of u32 range: {value}")
    prev, curr = init_a, init_b
    for _ in range(n):
        prev, curr = curr, (prev + curr) & _U32_MASK
    return curr


def read_inputs(lines: Iterable[str]) -> tuple[int, int, int]:
    """Parse (n, init_a, init_b); the initial values default to 1."""
    it = iter(lines)
    first = next(it, None)
    if first is None:
        raise ValueError("No first input provided")
    try:
        n = _parse_u32(first)
    except ValueError as exc:
        raise ValueError(f"Failed to parse first input as u32: {exc}") from exc

    def optional(line: str | None) -> int:
        if line is None:
            return _DEFAULT_INIT
        try:
            return _parse_u32(line)
        except ValueError:
            return _DEFAULT_INIT

    init_a = optional(next(it, None))
    init_b = optional(next(it, None))
    return n, init_a, init_b


def main(argv: list[str] | None = None) -> int:
    """Read inputs from stdin and print the resulting value."""
    parser = argparse.ArgumentParser(
        description="Read n, init_a and init_b from stdin, one per line, and print the result."
    )
    parser.parse_args(argv)
    try:
        n, init_a, init_b = read_inputs(sys.stdin)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(fibonacci(n, init_a, init_b))
    return 0


if __name__ == "__main__":
    sys.exit(main())