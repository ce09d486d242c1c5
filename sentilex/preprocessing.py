"""
Preprocessing: Text normalization and tokenization.

Provides a configurable pipeline of text-level and token-level steps and the
Tokenizer that turns raw record text into scoring tokens.
"""

import string
from typing import Callable, Dict, List, Optional
from abc import ABC, abstractmethod

from .stopwords import StopWordSet


class PreprocessingStep(ABC):
    """Abstract base class for steps applied to the whole text."""

    @abstractmethod
    def process(self, text: str) -> str:
        """Process the text and return the result."""
        pass


class TokenStep(ABC):
    """Abstract base class for steps applied to each whitespace-split piece."""

    @abstractmethod
    def process_token(self, token: str) -> Optional[str]:
        """Return the transformed token, or None to drop it."""
        pass


class LowercaseConverter(PreprocessingStep):
    """Converts text to lowercase."""

    def process(self, text: str) -> str:
        return text.lower()


class PunctuationStripper(TokenStep):
    """Removes every punctuation character from a token."""

    def __init__(self, keep_chars: str = ''):
        self.punctuation = ''.join(
            [c for c in string.punctuation if c not in keep_chars])
        self._translator = str.maketrans('', '', self.punctuation)

    def process_token(self, token: str) -> Optional[str]:
        return token.translate(self._translator)


class IdentityStemmer(TokenStep):
    """Stemming hook. Returns the word unchanged."""

    def process_token(self, token: str) -> Optional[str]:
        return token


class StopwordFilter(TokenStep):
    """Drops tokens found in a stop-word set."""

    def __init__(self, stop_words: StopWordSet):
        self.stop_words = stop_words

    def process_token(self, token: str) -> Optional[str]:
        if token in self.stop_words:
            return None
        return token


class PreprocessingPipeline:
    """
    Ordered list of text-level preprocessing steps.

    Steps are looked up by name in STEP_REGISTRY, so pipelines can be
    described in configuration.
    """

    STEP_REGISTRY: Dict[str, Callable[[], PreprocessingStep]] = {
        'lowercase': lambda: LowercaseConverter(),
    }

    def __init__(self, steps: Optional[List[str]] = None):
        """
        Initialize preprocessing pipeline.

        Args:
            steps: List of step names to execute in order.
                   If None, only lowercasing is applied.
        """
        if steps is None:
            steps = ['lowercase']

        self.step_names = list(steps)
        self.steps: List[PreprocessingStep] = []

        for step_name in self.step_names:
            if step_name not in self.STEP_REGISTRY:
                raise ValueError(f"Unknown preprocessing step: {step_name}")
            self.steps.append(self.STEP_REGISTRY[step_name]())

    def process(self, text: str) -> str:
        for step in self.steps:
            text = step.process(text)
        return text

    def __repr__(self) -> str:
        return f"PreprocessingPipeline(steps={self.step_names})"


class Tokenizer:
    """
    Splits record text into scoring tokens.

    The text is lowercased, split on whitespace runs, and every piece is
    stripped of punctuation and passed through the stemming hook. Empty
    pieces are dropped, and so are stop words when filtering happens at
    tokenization time. Order and multiplicity of tokens are preserved.
    """

    def __init__(
        self,
        stop_words: Optional[StopWordSet] = None,
        pipeline: Optional[PreprocessingPipeline] = None
    ):
        """
        Initialize the tokenizer.

        Args:
            stop_words: If given, stop words are removed while tokenizing
            pipeline: Text-level preprocessing (defaults to lowercasing)
        """
        self.pipeline = pipeline or PreprocessingPipeline()
        self.stop_words = stop_words

        self.token_steps: List[TokenStep] = [
            PunctuationStripper(), IdentityStemmer()]
        if stop_words is not None:
            self.token_steps.append(StopwordFilter(stop_words))

    @property
    def filters_stop_words(self) -> bool:
        return self.stop_words is not None

    def tokenize(self, text: Optional[str]) -> List[str]:
        """
        Tokenize a piece of text.

        Args:
            text: Raw record text (None is treated as empty)

        Returns:
            List of non-empty tokens in order of appearance
        """
        if not text:
            return []

        tokens = []
        for piece in self.pipeline.process(text).split():
            for step in self.token_steps:
                piece = step.process_token(piece)
                if not piece:
                    break
            else:
                tokens.append(piece)

        return tokens

    def __call__(self, text: Optional[str]) -> List[str]:
        return self.tokenize(text)

    def __repr__(self) -> str:
        return (f"Tokenizer(pipeline={self.pipeline.step_names}, "
                f"filters_stop_words={self.filters_stop_words})")
