"""Discrete logarithms modulo a prime by brute force and meet-in-the-middle."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence, Tuple

from cryptolab.timing import Stopwatch

DEFAULT_P = int(
    "e7e94db309dc10540a75e38be90c32141ecb958802ae172e09de549156e028f443ea6f78"
    "8074e1fec332703352b376170006f6ef4f4a2fb1d0d943d0bed9",
    16,
)
DEFAULT_G = int(
    "2F26760E85950864D1F24421F2AB599A2DE6A4379B86AD5972CA348938B2B25ED6ABF80D"
    "03E9BC7C9F54CFDC670B15EC33DDA88CBFFC53F725D779247813",
    16,
)
DEFAULT_H = int(
    "9A00CCF93DCB972C96FD19C7663D0FAA05604C16EA75BB4056F7B3B7A688CD3C8CEE1038"
    "A9949CCDC6626DFBF6894496E56672E973D2DA101F7EBB233260",
    16,
)
DEFAULT_BOUND = 2 ** 31
DEFAULT_UPPER = 2 ** 56


def _check_modulus(p: int) -> None:
    if p < 2:
        raise ValueError("modulus must be at least 2")


def brute_force_dlog(g: int, h: int, p: int, upper: int) -> int:
    """Find x with g^x = h (mod p), trying x = upper - 1 down to 0.

    The largest solution below ``upper`` is returned. Raises ValueError if
    there is none.
    """
    _check_modulus(p)
    if upper < 1:
        raise ValueError("upper must be positive")
    target = h % p
    for x in range(upper - 1, -1, -1):
        if pow(g, x, p) == target:
            return x
    raise ValueError(f"no discrete logarithm below {upper}")


def _split_mitm(g: int, h: int, p: int, bound: int) -> Tuple[int, int]:
    """Return (x1 * bound, x2) with g^(x1 * bound + x2) = h (mod p)."""
    _check_modulus(p)
    if bound < 1:
        raise ValueError("bound must be positive")
    try:
        g_inverse = pow(g, -1, p)
    except ValueError:
        raise ValueError(f"g has no inverse modulo {p}") from None

    table: dict[int, int] = {}
    value = h % p
    for x2 in range(bound):
        table.setdefault(value, x2)
        value = value * g_inverse % p

    step = pow(g, bound, p)
    left = 1 % p
    for x1 in range(bound):
        x2 = table.get(left)
        if x2 is not None:
            return x1 * bound, x2
        left = left * step % p
    raise ValueError(f"no discrete logarithm below {bound * bound}")


def meet_in_the_middle_dlog(g: int, h: int, p: int, bound: int) -> int:
    """Find x < bound^2 with g^x = h (mod p) by matching h * g^-x2 against g^(bound * x1).

    Raises ValueError if no solution of that size exists.
    """
    high, low = _split_mitm(g, h, p, bound)
    return high + low


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Solve h = g^x mod p for x.")
    hexint = lambda s: int(s, 16)  # noqa: E731
    parser.add_argument("--p", type=hexint, default=DEFAULT_P, help="prime, hexadecimal")
    parser.add_argument("--g", type=hexint, default=DEFAULT_G, help="generator, hexadecimal")
    parser.add_argument("--h", type=hexint, default=DEFAULT_H, help="target, hexadecimal")
    parser.add_argument("--method", choices=("mitm", "brute"), default="mitm")
    parser.add_argument("--bound", type=int, default=DEFAULT_BOUND,
                        help="table size for the meet-in-the-middle search")
    parser.add_argument("--upper", type=int, default=DEFAULT_UPPER,
                        help="exclusive upper limit for the brute-force search")
    args = parser.parse_args(argv)
    try:
        if args.method == "brute":
            print(f"Matching all possible values x = 0 to {args.upper}")
            with Stopwatch():
                x = brute_force_dlog(args.g, args.h, args.p, args.upper)
            print()
            print("Discrete logarithm(DLog) x found using brute-force method "
                  f"[such that h = (g^x) mod p] = {x}")
        else:
            print(f"Building h table...! of size {args.bound}")
            with Stopwatch():
                high, low = _split_mitm(args.g, args.h, args.p, args.bound)
            x = high + low
            print(f"{x}={high}+{low}")
            print()
            print("Discrete logarithm(DLog) x found using Meet-In-The-Middle attack "
                  f"[such that h = (g^x) mod p] = {x}")
    except ValueError as exc:
        parser.error(str(exc))
    return 0