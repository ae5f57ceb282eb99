"""
Bloom filter implementation.

Copyright (c) 2025 John Byrd
https://github.com/johnwbyrd/bloomer

SPDX-License-Identifier: BSD-3-Clause
"""
from typing import Iterable, List, Tuple
from hash_functions import StringHash

MAX_SIZE_BITS = 1 << 32


class BloomFilter:
    """Bloom filter for efficient set membership testing.

    Bits are only ever set, so a word that has been added is always found
    again. Lookups of words never added may return a false positive.
    """

    def __init__(self, size: int, hash_functions: Iterable[StringHash]):
        if size <= 0:
            raise ValueError(f"size must be positive, got {size}")
        if size > MAX_SIZE_BITS:
            raise ValueError(f"size must fit in 32 bits, got {size}")
        self._hash_functions: Tuple[StringHash, ...] = tuple(hash_functions)
        if not self._hash_functions:
            raise ValueError("at least one hash function is required")
        self._size = size
        self.data = bytearray((size + 7) // 8)

    @property
    def size(self) -> int:
        """Number of bits in the table."""
        return self._size

    @property
    def hash_functions(self) -> Tuple[StringHash, ...]:
        return self._hash_functions

    @property
    def num_hash_functions(self) -> int:
        return len(self._hash_functions)

    def bit_positions(self, word: str) -> List[int]:
        """Calculate bit positions for a word using all hash functions."""
        return [hash_func(word) % self._size for hash_func in self._hash_functions]

    def add(self, word: str):
        """Add a word to the Bloom filter."""
        for bit_pos in self.bit_positions(word):
            self.data[bit_pos >> 3] |= (1 << (bit_pos & 7))

    def lookup(self, word: str) -> bool:
        """Check if a word might be in the filter."""
        for hash_func in self._hash_functions:
            bit_pos = hash_func(word) % self._size
            if (self.data[bit_pos >> 3] & (1 << (bit_pos & 7))) == 0:
                return False
        return True

    def __contains__(self, word: str) -> bool:
        return self.lookup(word)

    def build_from_words(self, words: List[str], progress_interval: int = 10000):
        """Build filter from word list with optional progress display."""
        print(f"Building Bloom filter ({self._size:,} bits, "
              f"{self.num_hash_functions} hash functions)...")

        for idx, word in enumerate(words):
            if progress_interval and idx % progress_interval == 0:
                print(f"  Processing word {idx}/{len(words)}...")
            self.add(word)

        print("Bloom filter built successfully")

    @property
    def bits_set(self) -> int:
        """Count number of bits set in the filter."""
        return sum(bin(byte).count('1') for byte in self.data)

    def occupancy(self) -> float:
        """Proportion of bits set, between 0 and 1."""
        return self.bits_set / self._size

    def __repr__(self) -> str:
        names = ', '.join(repr(h) for h in self._hash_functions)
        return f"BloomFilter(size={self._size}, hash_functions=[{names}])"
