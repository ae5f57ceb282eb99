import math

import pytest

from bloom_config import DEFAULT_SIZE_BITS, BloomConfig
from bloom_filter import BloomFilter
from hash_functions import MurmurHash2Simple, StandardHash, SuperFastHashSimple


class TestBloomConfig:
    def test_defaults(self):
        config = BloomConfig()
        assert config.size_bits == DEFAULT_SIZE_BITS == 1000003
        assert config.hash_names == ['standard', 'murmur2', 'superfast']
        assert config.num_hash_functions == 3

    def test_default_names_are_not_shared(self):
        first = BloomConfig()
        first.hash_names.append('md5')
        assert BloomConfig().hash_names == ['standard', 'murmur2', 'superfast']

    def test_create_filter(self):
        bloom = BloomConfig(size_bits=5000).create_filter()
        assert isinstance(bloom, BloomFilter)
        assert bloom.size == 5000
        assert [type(h) for h in bloom.hash_functions] == [
            StandardHash, MurmurHash2Simple, SuperFastHashSimple]

    @pytest.mark.parametrize("size", [0, -5])
    def test_invalid_size(self, size):
        with pytest.raises(ValueError):
            BloomConfig(size_bits=size)

    def test_empty_hash_names(self):
        with pytest.raises(ValueError):
            BloomConfig(hash_names=[])

    def test_unknown_hash_name(self):
        with pytest.raises(ValueError, match="whirlpool"):
            BloomConfig(hash_names=['murmur2', 'whirlpool'])

    def test_optimal_k(self):
        config = BloomConfig(size_bits=1000)
        assert config.optimal_k(100) == pytest.approx(10 * math.log(2))

    def test_for_capacity(self):
        config = BloomConfig.for_capacity(1000, 0.01)
        assert config.size_bits == math.ceil(-1000 * math.log(0.01) / math.log(2) ** 2)
        assert config.hash_names == ['standard', 'murmur2', 'superfast']

    def test_for_capacity_custom_hashes(self):
        config = BloomConfig.for_capacity(10, 0.1, hash_names=['md5', 'sha1'])
        assert config.num_hash_functions == 2

    @pytest.mark.parametrize("items,fpr", [(0, 0.1), (10, 0.0), (10, 1.0)])
    def test_for_capacity_rejects_bad_input(self, items, fpr):
        with pytest.raises(ValueError):
            BloomConfig.for_capacity(items, fpr)

    def test_print_summary(self, capsys):
        BloomConfig().print_summary(1000)
        out = capsys.readouterr().out
        assert "1,000,003 bits" in out
        assert "standard, murmur2, superfast" in out

    def test_size_beyond_32_bits_rejected_at_configuration(self):
        with pytest.raises(ValueError, match="32 bits"):
            BloomConfig(size_bits=2 ** 33)

    def test_size_of_exactly_32_bits_accepted(self):
        assert BloomConfig(size_bits=2 ** 32).size_bits == 2 ** 32

    def test_for_capacity_rejects_oversized_table(self):
        with pytest.raises(ValueError, match="32 bits"):
            BloomConfig.for_capacity(10 ** 10, 0.01)
