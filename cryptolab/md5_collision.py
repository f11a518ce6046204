"""Search for MD5 digest collisions among hexadecimal counter strings."""

from __future__ import annotations

import argparse
import hashlib
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

from cryptolab.timing import Stopwatch

DIGEST_SIZE = 16


@dataclass(frozen=True)
class Collision:
    """Two counter values whose (possibly truncated) MD5 digests agree."""

    earlier: int
    later: int
    digest: bytes


def md5_of_counter(value: int) -> bytes:
    """MD5 digest of the lower-case hexadecimal text of ``value``."""
    if value < 0:
        raise ValueError("counter value must not be negative")
    return hashlib.md5(format(value, "x").encode("ascii")).digest()


def find_md5_collisions(limit: int, digest_bytes: int = DIGEST_SIZE) -> Iterator[Collision]:
    """Hash the counters 1..limit and yield every digest clash found.

    Only the first ``digest_bytes`` bytes of each digest are compared. After a
    clash the table remembers the newer value for that digest.
    """
    if limit < 0:
        raise ValueError("limit must not be negative")
    if not 1 <= digest_bytes <= DIGEST_SIZE:
        raise ValueError(f"digest_bytes must be between 1 and {DIGEST_SIZE}")
    seen: dict[bytes, int] = {}
    for value in range(1, limit + 1):
        digest = md5_of_counter(value)[:digest_bytes]
        earlier = seen.get(digest)
        if earlier is not None:
            yield Collision(earlier, value, digest)
        seen[digest] = value


def _hexdump(data: bytes) -> str:
    lines = []
    for offset in range(0, len(data), 16):
        chunk = data[offset:offset + 16]
        cells = []
        for position in range(16):
            if position < len(chunk):
                separator = "-" if position == 7 else " "
                cells.append(f"{chunk[position]:02x}{separator}")
            else:
                cells.append("   ")
        text = "".join(chr(b) if 32 <= b < 127 else "." for b in chunk)
        lines.append(f"{offset:04x} - {''.join(cells)}  {text}")
    return "\n".join(lines) + ("\n" if lines else "")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Look for MD5 collisions among counter values.")
    parser.add_argument("--limit", type=int, default=2 ** 31)
    parser.add_argument("--digest-bytes", type=int, default=DIGEST_SIZE)
    args = parser.parse_args(argv)
    try:
        with Stopwatch():
            print(f"Building colission table...! of size {args.limit}")
            for clash in find_md5_collisions(args.limit, args.digest_bytes):
                print(f"Collision detected for data:{clash.earlier:x}")
                print(f"{clash.later:x}")
                print("MD5 hash:")
                print(_hexdump(clash.digest), end="")
                print()
            print(f"Finish building colission table...! of size {args.limit}")
    except ValueError as exc:
        parser.error(str(exc))
    return 0