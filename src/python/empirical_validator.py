"""Empirical validation of Bloom filter false negatives and false positives."""
import random
import string
from typing import List, Optional, Sequence, Tuple
from bloom_filter import BloomFilter


class FalseNegativeError(RuntimeError):
    """An added word was not found, so the filter lost a set bit."""

    def __init__(self, word: str):
        super().__init__(f"false negative for added word {word!r}")
        self.word = word


def split_alternating(words: Sequence[str]) -> Tuple[List[str], List[str]]:
    """Split words into (positive, negative) by alternating between them."""
    return list(words[0::2]), list(words[1::2])


class EmpiricalValidator:
    """Measure Bloom filter accuracy against known inserted and absent words."""

    def __init__(self, bloom_filter: BloomFilter):
        self.filter = bloom_filter

    def verify_no_false_negatives(self, words: Sequence[str]):
        """Raise FalseNegativeError for the first added word not found."""
        for word in words:
            if not self.filter.lookup(word):
                raise FalseNegativeError(word)

    def count_false_positives(self, words: Sequence[str]) -> int:
        """Number of words (never added) that the filter accepts."""
        return sum(1 for word in words if self.filter.lookup(word))

    def false_positive_rate(self, words: Sequence[str]) -> float:
        """Fraction of words (never added) that the filter accepts."""
        if not words:
            return 0.0
        return self.count_false_positives(words) / len(words)

    def run_validation(self, positive: Sequence[str],
                       negative: Sequence[str]) -> dict:
        """Add the positive words, then check both sets and return results."""
        for word in positive:
            self.filter.add(word)

        occupancy = self.filter.occupancy()
        self.verify_no_false_negatives(positive)

        false_positives = self.count_false_positives(negative)

        return {
            'inserted': len(positive),
            'occupancy': occupancy,
            'false_positives': false_positives,
            'tested': len(negative),
            'empirical_rate': self.false_positive_rate(negative),
        }

    def run_random_validation(self, dictionary_words: Sequence[str],
                              num_samples: int = 100000,
                              rng: Optional[random.Random] = None) -> dict:
        """Check random non-words against the filter and return results."""
        rng = rng or random.Random()
        word_set = set(dictionary_words)
        false_positives = 0
        tested = 0

        for _ in range(num_samples):
            random_str = self._generate_random_word(rng)

            # Skip if it happens to be a real word
            if random_str in word_set:
                continue

            tested += 1
            if self.filter.lookup(random_str):
                false_positives += 1

        return {
            'samples': num_samples,
            'tested': tested,
            'false_positives': false_positives,
            'empirical_rate': false_positives / tested if tested else 0.0,
        }

    def _generate_random_word(self, rng: random.Random,
                              min_len: int = 3, max_len: int = 15) -> str:
        """Generate a random uppercase string."""
        length = rng.randint(min_len, max_len)
        return ''.join(rng.choices(string.ascii_uppercase, k=length))

    def print_validation(self, results: dict, theoretical_fp_rate: float):
        """Print validation results next to the theoretical rate."""
        print("\n" + "=" * 80)
        print("EMPIRICAL VALIDATION")
        print("=" * 80)
        print(f"Words tested: {results['tested']:,}")
        print(f"False positives: {results['false_positives']:,}")
        print(f"Empirical FP rate: {results['empirical_rate'] * 100:.4f}%")
        print(f"Theoretical FP rate: {theoretical_fp_rate * 100:.4f}%")

        diff = abs(results['empirical_rate'] - theoretical_fp_rate)
        print(f"Difference: {diff * 100:.4f}%")

        if diff < 0.002:
            print("✓ Empirical rate matches theory!")
        else:
            print("⚠ Empirical rate differs from theory "
                  "(expected due to sampling)")

        print("=" * 80)
