"""Bloom filter configuration."""
import math
from dataclasses import dataclass, field
from typing import List, Optional
from bloom_filter import MAX_SIZE_BITS, BloomFilter
from hash_functions import (DEFAULT_HASH_NAMES, HASH_FUNCTIONS, StringHash,
                            create_hash_functions)

DEFAULT_SIZE_BITS = 1000003


@dataclass
class BloomConfig:
    """Bloom filter configuration: table size and ordered hash function names."""

    size_bits: int = DEFAULT_SIZE_BITS
    hash_names: List[str] = field(default_factory=lambda: list(DEFAULT_HASH_NAMES))

    def __post_init__(self):
        if self.size_bits <= 0:
            raise ValueError(f"size_bits must be positive, got {self.size_bits}")
        if self.size_bits > MAX_SIZE_BITS:
            raise ValueError(f"size_bits must fit in 32 bits, got {self.size_bits}")
        if not self.hash_names:
            raise ValueError("hash_names must name at least one hash function")
        unknown = [name for name in self.hash_names if name not in HASH_FUNCTIONS]
        if unknown:
            raise ValueError(f"Unknown hash functions: {', '.join(unknown)}")

    @classmethod
    def for_capacity(cls, expected_items: int, target_fpr: float,
                     hash_names: Optional[List[str]] = None) -> "BloomConfig":
        """Size the table for an expected item count and false positive rate."""
        if expected_items <= 0:
            raise ValueError("expected_items must be positive")
        if not 0 < target_fpr < 1:
            raise ValueError("target_fpr must be in (0, 1)")
        size = math.ceil(-expected_items * math.log(target_fpr) / (math.log(2) ** 2))
        if hash_names is None:
            hash_names = list(DEFAULT_HASH_NAMES)
        return cls(size_bits=size, hash_names=list(hash_names))

    @property
    def num_hash_functions(self) -> int:
        """Number of hash functions (k)."""
        return len(self.hash_names)

    def hash_functions(self) -> List[StringHash]:
        """Instantiate the configured hash functions."""
        return create_hash_functions(self.hash_names)

    def create_filter(self) -> BloomFilter:
        """Build an empty Bloom filter from this configuration."""
        return BloomFilter(self.size_bits, self.hash_functions())

    def optimal_k(self, expected_words: int) -> float:
        """Calculate optimal number of hash functions for given word count."""
        return (self.size_bits / expected_words) * math.log(2)

    def print_summary(self, expected_words: int):
        """Print configuration summary."""
        print("=" * 80)
        print("BLOOM FILTER CONFIGURATION")
        print("=" * 80)
        print(f"Table size: {self.size_bits:,} bits "
              f"({self.size_bits / 8 / 1024:.2f} KB)")
        print(f"Hash functions: {self.num_hash_functions} "
              f"({', '.join(self.hash_names)})")
        if expected_words > 0:
            optimal = self.optimal_k(expected_words)
            print(f"Optimal k for ~{expected_words:,} words: "
                  f"(m/n) × ln(2) = {optimal:.2f}")
        print("=" * 80)
        print()
