"""Enumeration of fixed-length lower-case passwords."""

from __future__ import annotations

import argparse
import itertools
import string
from typing import Iterator, Optional, Sequence


def lowercase_candidates(length: int) -> Iterator[str]:
    """Yield every string of ``length`` letters a-z in lexicographic order."""
    if length < 0:
        raise ValueError("length must not be negative")
    for letters in itertools.product(string.ascii_lowercase, repeat=length):
        yield "".join(letters)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Enumerate lower-case candidates.")
    parser.add_argument("--length", type=int, default=12)
    args = parser.parse_args(argv)
    try:
        count = sum(1 for _ in lowercase_candidates(args.length))
    except ValueError as exc:
        parser.error(str(exc))
    print(count)
    return 0