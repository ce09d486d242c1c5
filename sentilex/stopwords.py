"""
StopWordSet: Words excluded from sentiment scoring.

Words come from a line-delimited file, the built-in minimal list or the
NLTK English stop-word corpus.
"""

import string
from pathlib import Path
from typing import Iterable, Iterator, Set, Union
import nltk


BUILTIN_STOP_WORDS = (
    'a', 'an', 'and', 'are', 'as', 'at', 'be', 'but', 'by', 'for',
    'if', 'in', 'into', 'is', 'it', 'no', 'not', 'of', 'on', 'or',
    'such', 'that', 'the', 'their', 'then', 'there', 'these', 'they',
    'this', 'to', 'was', 'will', 'with',
)

_PUNCTUATION_TABLE = str.maketrans('', '', string.punctuation)


def normalize_word(word: str) -> str:
    """Strip punctuation and lowercase a single word."""
    return word.translate(_PUNCTUATION_TABLE).lower().strip()


class StopWordSet:
    """
    Read-only set of lowercase stop words.

    Entries are normalized (punctuation stripped, lowercased) before they are
    inserted. There is no removal operation.
    """

    SOURCES = ('builtin', 'nltk')

    def __init__(self, words: Iterable[str] = ()):
        self._words: Set[str] = set()
        self._add_all(words)

    @classmethod
    def from_source(cls, source: Union[str, Path]) -> 'StopWordSet':
        """
        Build a stop-word set from a named source or a file path.

        Args:
            source: 'builtin', 'nltk' or a path to a word list file
        """
        stop_words = cls()
        stop_words.load(source)
        return stop_words

    def load(self, source: Union[str, Path]):
        """
        Load stop words into the set.

        Calling this again re-reads the source; entries already present
        are not duplicated.

        Raises:
            FileNotFoundError: If source is a path that does not exist
        """
        if isinstance(source, str) and source in self.SOURCES:
            if source == 'builtin':
                self._add_all(BUILTIN_STOP_WORDS)
            else:
                self._add_all(self._nltk_words())
            return

        path = Path(source)
        if not path.is_file():
            raise FileNotFoundError(f"Stop words file not found: {path}")

        with open(path, 'r', encoding='utf-8', errors='replace') as f:
            self._add_all(line for line in f)

    @staticmethod
    def _nltk_words() -> Iterable[str]:
        try:
            nltk.data.find('corpora/stopwords')
        except LookupError:
            nltk.download('stopwords', quiet=True)

        from nltk.corpus import stopwords
        return stopwords.words('english')

    def _add_all(self, words: Iterable[str]):
        for word in words:
            normalized = normalize_word(word)
            if normalized:
                self._words.add(normalized)

    def contains(self, token: str) -> bool:
        return token in self._words

    def __contains__(self, token: str) -> bool:
        return self.contains(token)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __repr__(self) -> str:
        return f"StopWordSet(words={len(self._words)})"
