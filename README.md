# cryptolab

A set of small, self-contained experiments in classical cryptanalysis.
Each module covers one idea and can be used as a library or run as a
command.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Topic |
| --- | --- |
| `cryptolab.timing` | `Stopwatch`, a context manager that times a block of work |
| `cryptolab.md5_collision` | Hashing hexadecimal counters with MD5 and finding (prefix) collisions |
| `cryptolab.freq` | Byte frequency statistics of a file (`FrequencyReport`) |
| `cryptolab.keyspace` | Enumerating lower-case password candidates of a given length |
| `cryptolab.dh_params` | Computing a Diffie–Hellman public value `g^x mod p` |
| `cryptolab.dlog` | Discrete logarithms by brute force and by meet-in-the-middle |
| `cryptolab.des_keys` | 56-bit DES key counters with an odd parity bit in every byte |
| `cryptolab.mitm3des` | Meet-in-the-middle key search against three-key triple DES (EDE, ECB) |

## Using it as a library

Discrete logarithms, solving `h = g^x mod p`:

```python
from cryptolab.dlog import brute_force_dlog, meet_in_the_middle_dlog

brute_force_dlog(2, 5, 1019, 100)        # 10, the largest solution below 100
meet_in_the_middle_dlog(2, 5, 1019, 10)  # 10, searching x < 10 * 10
```

Both raise `ValueError` when there is no solution in the searched range.

A Diffie–Hellman public value:

```python
from cryptolab.dh_params import dh_public_value

dh_public_value(g, x, p)   # pow(g, x, p)
```

MD5 collisions among the counters `1..limit`, comparing only the first
`digest_bytes` bytes of each digest:

```python
from cryptolab.md5_collision import find_md5_collisions, md5_of_counter

md5_of_counter(255)               # MD5 of the text "ff"
for clash in find_md5_collisions(100_000, 3):
    print(clash.earlier, clash.later, clash.digest.hex())
```

Character frequencies (ASCII letters are counted as lower case; the
probabilities are taken over printable characters):

```python
from cryptolab.freq import character_frequencies, format_report

report = character_frequencies(b"Hello, World")
report.total, report.printable, report.entries
print(format_report(report))
```

Lower-case candidates, in lexicographic order:

```python
from cryptolab.keyspace import lowercase_candidates

list(lowercase_candidates(2))[:3]   # ["aa", "ab", "ac"]
```

DES keys carry an odd parity bit in the top bit of every byte:

```python
from cryptolab.des_keys import key_from_index, increment_key, set_odd_parity, carry_after_increment

key_from_index(0)                    # b"\x80" * 8
increment_key(key_from_index(0), 5)  # same as key_from_index(5)
```

Meet-in-the-middle search over the first `key_count` DES keys for each of
the three triple-DES keys:

```python
from cryptolab.mitm3des import build_table, mitm_triple_des, verify_key

match = mitm_triple_des(b"Hello", ciphertext, key_count)
if match is not None:
    verify_key(match.key, other_ciphertext, b"Over")
```

`mitm_triple_des` returns a `TripleDesMatch` (`key1`, `key2`, `key3` and the
24-byte `key`) or `None`.

Timing a piece of work:

```python
from cryptolab.timing import Stopwatch

with Stopwatch(report=False) as watch:
    ...
watch.elapsed()
```

With the default `report=True` a line `Operation Finished. It took: ...
seconds !!!` is written to standard output when the block ends.

## Commands

| Command | Options |
| --- | --- |
| `cryptolab-md5-collision` | `--limit` (default 2^31), `--digest-bytes` (default 16) |
| `cryptolab-freq` | `path` (default `ptext.txt`) |
| `cryptolab-keyspace` | `--length` (default 12); prints the number of candidates |
| `cryptolab-dh-params` | `--p`, `--g` (hexadecimal), `--x` (decimal) |
| `cryptolab-dlog` | `--p`, `--g`, `--h` (hexadecimal), `--method mitm\|brute`, `--bound`, `--upper` |
| `cryptolab-des-keys` | `--index` (default 2^56 - 1); prints a hex dump of the key |
| `cryptolab-mitm3des` | `--plaintext`, `--ciphertext`, `--check-plaintext`, `--check-ciphertext`, `--key-count` (default 2^56) |

The defaults of the search commands cover the full search spaces and will
not finish in any reasonable time; start with small bounds, for example:

```
cryptolab-dlog --method mitm --bound 65536
cryptolab-md5-collision --limit 100000 --digest-bytes 3
cryptolab-keyspace --length 3
cryptolab-mitm3des --key-count 4
```

## What it does not do

The package does not generate, encrypt with or break RSA keys, does not
factor integers, and does not test primality or search for primitive
roots. The prime, generator and target values used by `cryptolab-dh-params`
and `cryptolab-dlog` are supplied as fixed defaults or on the command line.

## Caution

These are teaching experiments. Single DES and MD5 are broken, and small
discrete-logarithm exponents are easy to recover; do not use any of this to
protect real data.