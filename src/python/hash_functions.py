"""
32-bit string hash functions for the Bloom filter.

Copyright (c) 2025 John Byrd
https://github.com/johnwbyrd/bloomer

SPDX-License-Identifier: BSD-3-Clause
"""
import hashlib
from typing import Callable, Dict, Iterable, List

MASK_32 = 0xFFFFFFFF

MURMUR2_SEED = 0xc58f1a7b
MURMUR2_M = 0x5bd1e995
MURMUR2_R = 24

FNV1A_OFFSET = 2166136261
FNV1A_PRIME = 16777619


def fnv1a(data: bytes) -> int:
    """FNV-1a hash function."""
    hash_val = FNV1A_OFFSET
    for byte in data:
        hash_val ^= byte
        hash_val = (hash_val * FNV1A_PRIME) & MASK_32
    return hash_val


def murmur2(data: bytes, seed: int = MURMUR2_SEED) -> int:
    """MurmurHash2, 32-bit variant."""
    length = len(data)
    if length == 0:
        return 0

    m = MURMUR2_M
    h = (seed ^ length) & MASK_32
    index = 0
    remaining = length

    while remaining >= 4:
        k = int.from_bytes(data[index:index + 4], 'little')
        k = (k * m) & MASK_32
        k ^= k >> MURMUR2_R
        k = (k * m) & MASK_32

        h = (h * m) & MASK_32
        h ^= k
        index += 4
        remaining -= 4

    if remaining == 3:
        h ^= int.from_bytes(data[index:index + 2], 'little')
        h ^= data[index + 2] << 16
        h = (h * m) & MASK_32
    elif remaining == 2:
        h ^= int.from_bytes(data[index:index + 2], 'little')
        h = (h * m) & MASK_32
    elif remaining == 1:
        h ^= data[index]
        h = (h * m) & MASK_32

    # Final mix so the last few bytes are well incorporated
    h ^= h >> 13
    h = (h * m) & MASK_32
    h ^= h >> 15
    return h


def super_fast_hash(data: bytes) -> int:
    """Paul Hsieh's SuperFastHash."""
    length = len(data)
    if length == 0:
        return 0

    hash_val = length
    remaining = length & 3
    index = 0

    for _ in range(length >> 2):
        hash_val = (hash_val + int.from_bytes(data[index:index + 2], 'little')) & MASK_32
        tmp = (int.from_bytes(data[index + 2:index + 4], 'little') << 11) ^ hash_val
        hash_val = ((hash_val << 16) & MASK_32) ^ tmp
        hash_val = (hash_val + (hash_val >> 11)) & MASK_32
        index += 4

    if remaining == 3:
        hash_val = (hash_val + int.from_bytes(data[index:index + 2], 'little')) & MASK_32
        hash_val ^= (hash_val << 16) & MASK_32
        hash_val ^= (data[index + 2] << 18) & MASK_32
        hash_val = (hash_val + (hash_val >> 11)) & MASK_32
    elif remaining == 2:
        hash_val = (hash_val + int.from_bytes(data[index:index + 2], 'little')) & MASK_32
        hash_val ^= (hash_val << 11) & MASK_32
        hash_val = (hash_val + (hash_val >> 17)) & MASK_32
    elif remaining == 1:
        hash_val = (hash_val + data[index]) & MASK_32
        hash_val ^= (hash_val << 10) & MASK_32
        hash_val = (hash_val + (hash_val >> 1)) & MASK_32

    # Force avalanching of the final bits
    hash_val ^= (hash_val << 3) & MASK_32
    hash_val = (hash_val + (hash_val >> 5)) & MASK_32
    hash_val ^= (hash_val << 4) & MASK_32
    hash_val = (hash_val + (hash_val >> 17)) & MASK_32
    hash_val ^= (hash_val << 25) & MASK_32
    hash_val = (hash_val + (hash_val >> 6)) & MASK_32
    return hash_val


class StringHash:
    """Maps a string to an unsigned 32-bit integer.

    Subclasses implement ``hash``. Instances are stateless apart from
    injected dependencies and can be shared between filters.
    """

    def hash(self, text: str) -> int:
        raise NotImplementedError

    def __call__(self, text: str) -> int:
        return self.hash(text)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class StandardHash(StringHash):
    """General-purpose baseline hash.

    Python's built-in ``hash()`` is salted per process, so FNV-1a over the
    UTF-8 bytes stands in for it.
    """

    def hash(self, text: str) -> int:
        return fnv1a(text.encode('utf-8', errors='surrogatepass'))


class MurmurHash2Simple(StringHash):
    """MurmurHash2 over the UTF-8 bytes of the string."""

    def hash(self, text: str) -> int:
        return murmur2(text.encode('utf-8', errors='surrogatepass'))


class SuperFastHashSimple(StringHash):
    """SuperFastHash over the UTF-8 bytes of the string."""

    def hash(self, text: str) -> int:
        return super_fast_hash(text.encode('utf-8', errors='surrogatepass'))


class CryptographicHash(StringHash):
    """Digest of the ASCII-encoded string, folded to 32 bits with MurmurHash2.

    ``algorithm`` is a digest constructor such as ``hashlib.md5``: calling it
    with bytes must return an object with a ``digest()`` method.
    """

    def __init__(self, algorithm: Callable):
        self.algorithm = algorithm

    def hash(self, text: str) -> int:
        input_bytes = text.encode('ascii', errors='replace')
        digest = self.algorithm(input_bytes).digest()
        return murmur2(digest)

    def __repr__(self) -> str:
        name = getattr(self.algorithm, '__name__', repr(self.algorithm))
        return f"CryptographicHash({name})"


HASH_FUNCTIONS: Dict[str, Callable[[], StringHash]] = {
    'standard': StandardHash,
    'murmur2': MurmurHash2Simple,
    'superfast': SuperFastHashSimple,
    'md5': lambda: CryptographicHash(hashlib.md5),
    'sha1': lambda: CryptographicHash(hashlib.sha1),
    'sha256': lambda: CryptographicHash(hashlib.sha256),
    'blake2b': lambda: CryptographicHash(hashlib.blake2b),
}

DEFAULT_HASH_NAMES = ['standard', 'murmur2', 'superfast']


def create_hash_functions(names: Iterable[str]) -> List[StringHash]:
    """Instantiate hash functions by registry name, preserving order."""
    functions = []
    for name in names:
        if name not in HASH_FUNCTIONS:
            raise ValueError(f"Unknown hash function: {name!r} "
                             f"(choose from {', '.join(sorted(HASH_FUNCTIONS))})")
        functions.append(HASH_FUNCTIONS[name]())
    return functions
