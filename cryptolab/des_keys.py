"""56-bit DES key counters stored as eight bytes with odd parity in the top bit."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from cryptolab.md5_collision import _hexdump

KEY_SIZE = 8
KEY_BITS = 56
KEY_SPACE = 2 ** KEY_BITS
_LOW_BITS = 0x7F


def _check_byte(byte: int) -> None:
    if not 0 <= byte <= 0xFF:
        raise ValueError("byte must lie in the range 0..255")


def set_odd_parity(byte: int) -> int:
    """Keep the low seven bits of ``byte`` and set bit 7 so the number of ones is odd."""
    _check_byte(byte)
    low = byte & _LOW_BITS
    parity = (bin(low).count("1") + 1) & 1
    return low | (parity << 7)


def carry_after_increment(byte: int) -> int:
    """1 if the low seven bits of ``byte`` are all set, so that adding one carries out."""
    _check_byte(byte)
    return 1 if byte & _LOW_BITS == _LOW_BITS else 0


def _key_value(key: bytes) -> int:
    value = 0
    for byte in key:
        value = (value << 7) | (byte & _LOW_BITS)
    return value


def key_from_index(index: int) -> bytes:
    """Spread ``index`` over the low seven bits of eight bytes, most significant first.

    Every byte gets odd parity in its top bit. Bits of ``index`` above the
    56th are dropped.
    """
    if index < 0:
        raise ValueError("index must not be negative")
    groups = [(index >> (7 * shift)) & _LOW_BITS for shift in reversed(range(KEY_SIZE))]
    return bytes(set_odd_parity(group) for group in groups)


def increment_key(key: bytes, repeat: int = 1) -> bytes:
    """Add ``repeat`` to the 56-bit counter held in ``key`` and return the new key.

    The counter wraps around after 2^56 steps and every byte of the result
    carries odd parity. With ``repeat`` zero the key is returned unchanged.
    """
    key = bytes(key)
    if len(key) != KEY_SIZE:
        raise ValueError(f"key must be {KEY_SIZE} bytes long")
    if repeat < 0:
        raise ValueError("repeat must not be negative")
    if repeat == 0:
        return key
    return key_from_index((_key_value(key) + repeat) % KEY_SPACE)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Show the DES key for a counter value.")
    parser.add_argument("--index", type=int, default=KEY_SPACE - 1,
                        help="counter value, decimal")
    args = parser.parse_args(argv)
    try:
        key = key_from_index(args.index)
    except ValueError as exc:
        parser.error(str(exc))
    print(_hexdump(key), end="")
    return 0