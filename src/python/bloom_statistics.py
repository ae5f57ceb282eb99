"""Bloom filter statistics calculation and display."""
import math
from bloom_filter import BloomFilter


class BloomStatistics:
    """Calculate and display Bloom filter statistics."""

    def __init__(self, bloom_filter: BloomFilter, word_count: int):
        self.filter = bloom_filter
        self.word_count = word_count

    def theoretical_fill_rate(self) -> float:
        """Calculate theoretical fill rate: 1 - e^(-kn/m)."""
        k = self.filter.num_hash_functions
        n = self.word_count
        m = self.filter.size
        return 1 - math.exp(-k * n / m)

    def false_positive_rate(self) -> float:
        """Calculate false positive rate: (1 - e^(-kn/m))^k."""
        return self.theoretical_fill_rate() ** self.filter.num_hash_functions

    def optimal_k(self) -> float:
        """Calculate optimal k for minimum FP rate."""
        if self.word_count == 0:
            return 0.0
        return (self.filter.size / self.word_count) * math.log(2)

    def optimal_fp_rate(self) -> float:
        """Calculate FP rate if using optimal k."""
        k_opt = max(1, round(self.optimal_k()))
        m = self.filter.size
        n = self.word_count
        fill = 1 - math.exp(-k_opt * n / m)
        return fill ** k_opt

    def print_statistics(self):
        """Print comprehensive statistics."""
        n = self.word_count
        k = self.filter.num_hash_functions
        m = self.filter.size

        actual_fill = self.filter.occupancy()
        theoretical_fill = self.theoretical_fill_rate()
        fp_rate = self.false_positive_rate()

        print("\n=== BLOOM FILTER STATISTICS ===")
        print(f"Words inserted (n): {n:,}")
        print(f"Bits in filter (m): {m:,}")
        print(f"Hash functions (k): {k}")
        if n:
            print(f"Bits per word (m/n): {m/n:.2f}")
        print(f"\nActual bits set: {self.filter.bits_set:,} / {m:,} "
              f"({actual_fill * 100:.2f}%)")
        print(f"Theoretical fill rate: {theoretical_fill * 100:.2f}%")
        print(f"Difference: {abs(actual_fill - theoretical_fill) * 100:.2f}%")
        if fp_rate > 0:
            print(f"\nFalse positive rate: {fp_rate * 100:.4f}% "
                  f"(1 in {1/fp_rate:.0f})")
        else:
            print("\nFalse positive rate: 0%")
        print(f"Formula: (1 - e^(-{k}×{n}/{m}))^{k} = {fp_rate:.6g}")

        optimal_k = self.optimal_k()
        if n:
            print(f"\nOptimal k for minimum FP rate: {optimal_k:.2f}")
        if n and abs(optimal_k - k) > 1:
            k_opt_int = max(1, round(optimal_k))
            opt_fp = self.optimal_fp_rate()
            print(f"With k={k_opt_int}: FP rate would be {opt_fp * 100:.4g}%")
