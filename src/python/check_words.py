#!/usr/bin/env python3
"""
Check a Bloom filter against a word list.

Every other word is added to the filter. All added words must be found
again, and the remaining words measure the false positive rate.

Usage: check_words.py [word_list]
"""
import sys
from pathlib import Path

from bloom_config import BloomConfig
from bloom_statistics import BloomStatistics
from empirical_validator import (EmpiricalValidator, FalseNegativeError,
                                 split_alternating)
from word_list_downloader import WordListDownloader
from word_list_parser import WordListParser

WORD_LIST_PATH = Path('/usr/share/dict/words')

BUILD_DIR = Path('build')
CACHE_DIR = BUILD_DIR / 'cache'
WORD_LIST_CACHE = CACHE_DIR / 'scowl_wordlist.txt'


def resolve_default_word_list() -> Path:
    """Use the system word list, or a downloaded SCOWL list when it is absent."""
    if WORD_LIST_PATH.exists():
        return WORD_LIST_PATH
    print(f"Word list {WORD_LIST_PATH} not found")
    return WordListDownloader().fetch(WORD_LIST_CACHE)


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) > 1:
        print("Usage: check_words.py [word_list]")
        return 2

    if argv:
        word_list = Path(argv[0])
        if not word_list.is_file():
            print(f"Error: word list {word_list} not found")
            return 2
    else:
        word_list = resolve_default_word_list()

    words = WordListParser(unique=True).parse(word_list)
    positive, negative = split_alternating(words)

    config = BloomConfig()
    config.print_summary(len(positive))
    bloom = config.create_filter()
    validator = EmpiricalValidator(bloom)

    try:
        results = validator.run_validation(positive, negative)
    except FalseNegativeError as e:
        print(f"error! {e}")
        return 1

    print(f"occupancy for {results['inserted']} words: {results['occupancy']}")
    print(f"false positives: {results['empirical_rate']}")

    stats = BloomStatistics(bloom, results['inserted'])
    stats.print_statistics()
    validator.print_validation(results, stats.false_positive_rate())
    return 0


if __name__ == '__main__':
    sys.exit(main())
