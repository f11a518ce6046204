"""Meet-in-the-middle key search against three-key triple DES (EDE) in ECB mode."""

from __future__ import annotations

import argparse
from bisect import bisect_left
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from Crypto.Cipher import DES
from Crypto.Util.Padding import pad, unpad

from cryptolab.des_keys import KEY_SIZE, KEY_SPACE, key_from_index
from cryptolab.md5_collision import _hexdump
from cryptolab.timing import Stopwatch

BLOCK_SIZE = 8

DEFAULT_PLAINTEXT = "Hello"
DEFAULT_CIPHERTEXT = "df2bfb051639dca6"
DEFAULT_CHECK_PLAINTEXT = "Over"
DEFAULT_CHECK_CIPHERTEXT = "024423d82b3c0d17"

TableEntry = Tuple[bytes, bytes]


@dataclass(frozen=True)
class TripleDesMatch:
    """Three single-DES keys with E_K3(D_K2(E_K1(plain))) equal to the cipher text."""

    key1: bytes
    key2: bytes
    key3: bytes

    @property
    def key(self) -> bytes:
        """The 24-byte triple-DES key K1 || K2 || K3."""
        return self.key1 + self.key2 + self.key3


def _des(key: bytes):
    return DES.new(bytes(key), DES.MODE_ECB)


def _check_block(ciphertext: bytes) -> bytes:
    block = bytes(ciphertext)
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"cipher text must be exactly {BLOCK_SIZE} bytes long")
    return block


def _check_count(key_count: int) -> None:
    if not 0 <= key_count <= KEY_SPACE:
        raise ValueError(f"key_count must lie in the range 0..{KEY_SPACE}")


def _plaintext_block(plaintext: bytes) -> bytes:
    data = bytes(plaintext)
    if len(data) >= BLOCK_SIZE:
        raise ValueError(f"plain text must be shorter than {BLOCK_SIZE} bytes")
    # The terminating NUL is part of what was encrypted.
    return pad(data + b"\0", BLOCK_SIZE)[:BLOCK_SIZE]


def build_table(ciphertext: bytes, key_count: int) -> List[TableEntry]:
    """Decrypt ``ciphertext`` under the first ``key_count`` keys.

    Returns ``(decrypted block, key)`` pairs sorted by decrypted block, then key.
    """
    block = _check_block(ciphertext)
    _check_count(key_count)
    table = []
    for index in range(key_count):
        key = key_from_index(index)
        table.append((_des(key).decrypt(block), key))
    table.sort()
    return table


def _lookup(table: Sequence[TableEntry], middle: bytes) -> Optional[bytes]:
    position = bisect_left(table, (middle,))
    if position < len(table) and table[position][0] == middle:
        return table[position][1]
    return None


def mitm_triple_des(plaintext: bytes, ciphertext: bytes, key_count: int) -> Optional[TripleDesMatch]:
    """Search the first ``key_count`` keys for K1, K2 and K3.

    The candidates satisfy D_K3(ciphertext) = D_K2(E_K1(plaintext + NUL, padded)).
    Returns None if no combination matches.
    """
    block = _plaintext_block(plaintext)
    table = build_table(ciphertext, key_count)
    if not table:
        return None
    second_keys = [key_from_index(index) for index in range(key_count)]
    second_ciphers = [_des(key) for key in second_keys]
    for index1 in range(key_count):
        key1 = key_from_index(index1)
        encrypted = _des(key1).encrypt(block)
        for key2, cipher2 in zip(second_keys, second_ciphers):
            key3 = _lookup(table, cipher2.decrypt(encrypted))
            if key3 is not None:
                return TripleDesMatch(key1=key1, key2=key2, key3=key3)
    return None


def verify_key(key: bytes, ciphertext: bytes, plaintext: bytes) -> bool:
    """True if the 24-byte EDE key decrypts ``ciphertext`` to ``plaintext``.

    The decryption has its padding removed and is read up to its first NUL.
    """
    key = bytes(key)
    if len(key) != 3 * KEY_SIZE:
        raise ValueError(f"key must be {3 * KEY_SIZE} bytes long")
    block = _check_block(ciphertext)
    key1, key2, key3 = key[:8], key[8:16], key[16:]
    decrypted = _des(key1).decrypt(_des(key2).encrypt(_des(key3).decrypt(block)))
    try:
        text = unpad(decrypted, BLOCK_SIZE)
    except ValueError:
        return False
    return text.split(b"\0", 1)[0] == bytes(plaintext)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Recover a triple-DES key by meet-in-the-middle.")
    parser.add_argument("--plaintext", default=DEFAULT_PLAINTEXT)
    parser.add_argument("--ciphertext", default=DEFAULT_CIPHERTEXT, help="hexadecimal")
    parser.add_argument("--check-plaintext", default=DEFAULT_CHECK_PLAINTEXT)
    parser.add_argument("--check-ciphertext", default=DEFAULT_CHECK_CIPHERTEXT, help="hexadecimal")
    parser.add_argument("--key-count", type=int, default=KEY_SPACE)
    args = parser.parse_args(argv)
    try:
        ciphertext = bytes.fromhex(args.ciphertext)
        check_ciphertext = bytes.fromhex(args.check_ciphertext)
        plaintext = args.plaintext.encode("utf-8")
        with Stopwatch():
            print(f"Building h table...! of size {args.key_count}")
            table = build_table(ciphertext, args.key_count)
            print(f"Finish building h table...! of size {args.key_count}")
        _plaintext_block(plaintext)
        with Stopwatch():
            print("Search h table using g...!")
            match = None
            if table:
                match = mitm_triple_des(plaintext, ciphertext, args.key_count)
        if match is not None and verify_key(
            match.key, check_ciphertext, args.check_plaintext.encode("utf-8")
        ):
            print("The Key is :")
            print(_hexdump(match.key), end="")
    except ValueError as exc:
        parser.error(str(exc))
    return 0