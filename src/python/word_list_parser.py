"""
Line-oriented word list reader.

Copyright (c) 2025 John Byrd
https://github.com/johnwbyrd/bloomer

SPDX-License-Identifier: BSD-3-Clause
"""
from pathlib import Path
from typing import Iterator, List


class WordListParser:
    """Read one word per line, optionally dropping repeated words.

    SCOWL lists start with a description block ended by a ``---`` line. The
    block is skipped when the separator shows up within the first
    HEADER_SCAN_LINES non-blank lines; otherwise every line is a word.
    """

    SEPARATOR = "---"
    HEADER_SCAN_LINES = 100

    def __init__(self, unique: bool = False):
        self.unique = unique

    def iter_words(self, file_path: Path) -> Iterator[str]:
        """Yield stripped, non-blank words in file order."""
        seen = set()
        for word in self._body_lines(file_path):
            if self.unique:
                if word in seen:
                    continue
                seen.add(word)
            yield word

    def parse(self, file_path: Path) -> List[str]:
        """Load all words from file_path."""
        words = list(self.iter_words(file_path))
        print(f"Loaded {len(words)} words from {file_path}")
        return words

    def _body_lines(self, file_path: Path) -> Iterator[str]:
        pending: List[str] = []
        scanning = True
        with open(file_path, 'r', encoding='utf-8') as f:
            for line in f:
                word = line.strip()
                if not word:
                    continue
                if not scanning:
                    yield word
                elif word == self.SEPARATOR:
                    pending.clear()
                    scanning = False
                else:
                    pending.append(word)
                    if len(pending) > self.HEADER_SCAN_LINES:
                        scanning = False
                        yield from pending
                        pending.clear()
        yield from pending
