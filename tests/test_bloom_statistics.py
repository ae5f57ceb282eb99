import math

import pytest

from bloom_config import BloomConfig
from bloom_statistics import BloomStatistics


def build_filter(size, words):
    bloom = BloomConfig(size_bits=size).create_filter()
    for word in words:
        bloom.add(word)
    return bloom


class TestBloomStatistics:
    def test_theoretical_fill_rate(self):
        stats = BloomStatistics(build_filter(1000, []), 100)
        assert stats.theoretical_fill_rate() == pytest.approx(1 - math.exp(-0.3))

    def test_false_positive_rate(self):
        stats = BloomStatistics(build_filter(1000, []), 100)
        assert stats.false_positive_rate() == pytest.approx((1 - math.exp(-0.3)) ** 3)

    def test_empty_filter(self):
        stats = BloomStatistics(build_filter(1000, []), 0)
        assert stats.theoretical_fill_rate() == 0.0
        assert stats.false_positive_rate() == 0.0
        assert stats.optimal_k() == 0.0

    def test_optimal_k_and_rate(self):
        stats = BloomStatistics(build_filter(1000, []), 100)
        assert stats.optimal_k() == pytest.approx(10 * math.log(2))
        assert stats.optimal_fp_rate() <= stats.false_positive_rate()

    def test_actual_fill_tracks_theory(self):
        words = [f"word{i}" for i in range(2000)]
        bloom = build_filter(20011, words)
        stats = BloomStatistics(bloom, len(words))
        assert bloom.occupancy() == pytest.approx(stats.theoretical_fill_rate(), abs=0.02)

    def test_print_statistics(self, capsys):
        words = [f"word{i}" for i in range(50)]
        BloomStatistics(build_filter(1000, words), len(words)).print_statistics()
        out = capsys.readouterr().out
        assert "Words inserted (n): 50" in out
        assert "Hash functions (k): 3" in out
        assert "Optimal k" in out

    def test_print_statistics_empty(self, capsys):
        BloomStatistics(build_filter(1000, []), 0).print_statistics()
        assert "False positive rate: 0%" in capsys.readouterr().out
