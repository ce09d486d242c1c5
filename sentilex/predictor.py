"""
Predictor: Scores unlabeled records against a trained Lexicon.
"""

from typing import Iterable, List, NamedTuple, Optional
from tqdm import autonotebook

from .document import NEGATIVE, POSITIVE, Record
from .lexicon import Lexicon
from .preprocessing import Tokenizer
from .stopwords import StopWordSet


class Prediction(NamedTuple):
    """Predicted label for one record."""
    label: int
    record_id: str


def decide(score: int) -> int:
    """Map a summed score to a label. Ties go to positive."""
    return POSITIVE if score >= 0 else NEGATIVE


class Predictor:
    """
    Labels records by summing the lexicon scores of their tokens.

    Must be built with the same tokenizer and stop-word stage that were used
    to train the lexicon.
    """

    def __init__(
        self,
        lexicon: Lexicon,
        tokenizer: Tokenizer,
        score_stop_words: Optional[StopWordSet] = None,
        show_progress: bool = False
    ):
        self.lexicon = lexicon
        self.tokenizer = tokenizer
        self.score_stop_words = score_stop_words
        self.show_progress = show_progress

    def tokens(self, text: Optional[str]) -> List[str]:
        tokens = self.tokenizer.tokenize(text)
        if self.score_stop_words is not None:
            tokens = [t for t in tokens if t not in self.score_stop_words]
        return tokens

    def score(self, text: Optional[str]) -> int:
        """Summed lexicon score of a text."""
        return self.lexicon.score(self.tokens(text))

    def predict(self, record: Record) -> Prediction:
        return Prediction(decide(self.score(record.text)), record.record_id)

    def predict_batch(self, records: Iterable[Record]) -> List[Prediction]:
        """
        Predict every record, keeping input order.

        Args:
            records: Records to label

        Returns:
            One prediction per record
        """
        if self.show_progress:
            records = autonotebook.tqdm(records, desc="Predicting")
        return [self.predict(record) for record in records]

    def __repr__(self) -> str:
        return f"Predictor(lexicon={self.lexicon!r})"
