"""
Word corpus loading.

The corpus is read once at startup and passed around as an immutable value.
"""

import os
from typing import Iterator, Sequence, Tuple

import numpy as np

from utils import ALPHABET, preprocess_word


class CorpusExhausted(ValueError):
    """Raised when a word list yields no usable words."""


class WordCorpus:
    """
    Immutable, bounded collection of candidate words.
    """

    def __init__(self, words: Sequence[str]):
        self._words: Tuple[str, ...] = tuple(words)

    @classmethod
    def from_file(cls, path: str, word_count: int) -> 'WordCorpus':
        """
        Load at most `word_count` words from a plain-text word list.
        
        Lines that are blank or contain anything other than a-z letters are skipped.
        
        Args:
            path: Path to the word list (one word per line)
            word_count: Maximum number of words to keep
            
        Returns:
            The loaded corpus
            
        Raises:
            FileNotFoundError: If the word list doesn't exist
            CorpusExhausted: If the word list contains no words
        """
        if not os.path.exists(path):
            raise FileNotFoundError(f"ERROR: {path} not found - please provide a word list")

        words = []
        with open(path, 'r', encoding='utf-8') as f:
            for line in f:
                if len(words) >= word_count:
                    break
                word = preprocess_word(line)
                # Only keep words made of a-z letters
                if word and all(letter in ALPHABET for letter in word):
                    words.append(word)

        if not words:
            raise CorpusExhausted(f"ERROR: {path} is empty or contains no words")

        if len(words) < word_count:
            print(f"Warning: requested {word_count} words but {path} only has {len(words)}")

        print(f"{len(words)} words loaded")
        return cls(words)

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    def sample(self, rng: np.random.Generator) -> str:
        """Return a word drawn uniformly at random."""
        return self._words[rng.integers(len(self._words))]

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._words
