"""Small experiments in classical cryptanalysis: discrete logs, DES keys, MD5 collisions and more."""

__version__ = "0.1.0"

__all__ = [
    "des_keys",
    "dh_params",
    "dlog",
    "freq",
    "keyspace",
    "md5_collision",
    "mitm3des",
    "timing",
]