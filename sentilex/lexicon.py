"""
Lexicon: Learned mapping from word to signed polarity accumulator.

A word that is absent from the lexicon scores 0. The lexicon is written only
while training and is frozen before it is used for prediction.
"""

from collections import Counter
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union
import numpy as np

from .text_buffer import TextBuffer


Word = Union[str, TextBuffer]


def _key(word: Word) -> str:
    if isinstance(word, TextBuffer):
        return str(word)
    return word


class Lexicon:
    """
    Word -> polarity score table.

    Scores are the number of positive minus negative training occurrences
    of each word.
    """

    def __init__(self, scores: Optional[Mapping[str, int]] = None):
        self._scores: Counter = Counter()
        self._frozen = False
        if scores:
            for word, value in scores.items():
                self._scores[_key(word)] += int(value)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self):
        """Make the lexicon read-only."""
        self._frozen = True

    def _check_writable(self):
        if self._frozen:
            raise RuntimeError("Lexicon is frozen; it can no longer be updated")

    def update(self, tokens: Iterable[Word], polarity: int):
        """
        Add polarity once for every token occurrence.

        Args:
            tokens: Tokens of one record (duplicates count every time)
            polarity: +1 for a positive record, -1 for a negative one
        """
        self._check_writable()
        for token in tokens:
            self._scores[_key(token)] += polarity

    def merge(self, other: Union['Lexicon', Mapping[str, int]]):
        """Add another lexicon's (or partial count table's) scores into this one."""
        self._check_writable()
        scores = other._scores if isinstance(other, Lexicon) else other
        for word, value in scores.items():
            self._scores[_key(word)] += value

    def get(self, word: Word) -> int:
        """Score of a word, 0 if it was never seen."""
        return self._scores.get(_key(word), 0)

    def __getitem__(self, word: Word) -> int:
        return self.get(word)

    def score(self, tokens: Iterable[Word]) -> int:
        """Sum the scores of all tokens; unknown tokens contribute 0."""
        return sum(self.get(token) for token in tokens)

    def __contains__(self, word: Word) -> bool:
        return _key(word) in self._scores

    def __len__(self) -> int:
        return len(self._scores)

    def __iter__(self) -> Iterator[str]:
        return iter(self._scores)

    def items(self):
        return self._scores.items()

    def to_dict(self) -> Dict[str, int]:
        return dict(self._scores)

    def most_polar(self, n: int = 10) -> Tuple[List[Tuple[str, int]], List[Tuple[str, int]]]:
        """
        Get the n most positive and the n most negative words.

        Ties are broken alphabetically so the result is deterministic.

        Returns:
            Tuple of (positive_words, negative_words), each a list of
            (word, score) pairs ordered from strongest to weakest
        """
        positive = sorted(
            ((w, s) for w, s in self._scores.items() if s > 0),
            key=lambda item: (-item[1], item[0]))
        negative = sorted(
            ((w, s) for w, s in self._scores.items() if s < 0),
            key=lambda item: (item[1], item[0]))
        return positive[:n], negative[:n]

    def statistics(self) -> Dict:
        """
        Compute summary statistics about the learned scores.

        Returns:
            Dictionary with vocabulary size, polarity split and score spread
        """
        stats = {
            'vocabulary_size': len(self._scores),
            'positive_words': sum(1 for s in self._scores.values() if s > 0),
            'negative_words': sum(1 for s in self._scores.values() if s < 0),
            'neutral_words': sum(1 for s in self._scores.values() if s == 0),
        }

        if self._scores:
            values = np.fromiter(self._scores.values(), dtype=np.int64)
            stats['score'] = {
                'mean': float(np.mean(values)),
                'median': float(np.median(values)),
                'min': int(np.min(values)),
                'max': int(np.max(values)),
                'std': float(np.std(values)),
            }

        return stats

    def __eq__(self, other) -> bool:
        if isinstance(other, Lexicon):
            return dict(self._scores) == dict(other._scores)
        if isinstance(other, Mapping):
            return dict(self._scores) == dict(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"Lexicon(words={len(self._scores)}, frozen={self._frozen})"
