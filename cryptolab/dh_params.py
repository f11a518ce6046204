"""Computation of a Diffie-Hellman public value h = g^x mod p."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

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
DEFAULT_X = 59810694624132513


def dh_public_value(g: int, x: int, p: int) -> int:
    """Return g raised to x modulo p."""
    if p <= 0:
        raise ValueError("modulus must be positive")
    return pow(g, x, p)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Compute h = g^x mod p.")
    parser.add_argument("--p", type=lambda s: int(s, 16), default=DEFAULT_P, help="prime, hexadecimal")
    parser.add_argument("--g", type=lambda s: int(s, 16), default=DEFAULT_G, help="generator, hexadecimal")
    parser.add_argument("--x", type=int, default=DEFAULT_X, help="secret exponent, decimal")
    args = parser.parse_args(argv)
    try:
        h = dh_public_value(args.g, args.x, args.p)
    except ValueError as exc:
        parser.error(str(exc))
    print(f"1. {args.p:x}")
    print(f"2. {args.g:x}")
    print(f"3. {args.x}")
    print(f"4. {h}")
    return 0