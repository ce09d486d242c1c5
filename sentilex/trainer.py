"""
LexiconTrainer: Builds a Lexicon from labeled records.

Records are independent, so training can be split across worker processes:
each partition is counted into its own local table and the tables are
merged additively at the end. No entry is ever shared between workers.
"""

from collections import Counter
from typing import Iterable, List, Optional, Sequence, Tuple
from multiprocessing import Pool
from tqdm import autonotebook

from .document import Record
from .lexicon import Lexicon
from .preprocessing import Tokenizer
from .stopwords import StopWordSet


def _count_partition(args: Tuple[Tokenizer, Optional[StopWordSet], Sequence[Record]]) -> Tuple[Counter, int, int]:
    """
    Accumulate polarity counts for one partition of records.

    Returns:
        Tuple of (counts, records_used, records_skipped)
    """
    tokenizer, stop_words, records = args
    counts: Counter = Counter()
    used = skipped = 0

    for record in records:
        if not record.is_trainable:
            skipped += 1
            continue

        polarity = record.polarity
        for token in tokenizer.tokenize(record.text):
            if stop_words is not None and token in stop_words:
                continue
            counts[token] += polarity
        used += 1

    return counts, used, skipped


def partition(records: Sequence[Record], n_parts: int) -> List[Sequence[Record]]:
    """Split records into at most n_parts contiguous, non-empty chunks."""
    if not records:
        return []
    n_parts = max(1, min(n_parts, len(records)))
    size, remainder = divmod(len(records), n_parts)

    chunks = []
    start = 0
    for i in range(n_parts):
        end = start + size + (1 if i < remainder else 0)
        chunks.append(records[start:end])
        start = end
    return chunks


class LexiconTrainer:
    """
    Trains a Lexicon from labeled records.

    Only records labeled exactly 0 or 4 are used: every token of a positive
    record adds +1 to its word, every token of a negative record adds -1.
    Other records are skipped without error.
    """

    def __init__(
        self,
        tokenizer: Tokenizer,
        score_stop_words: Optional[StopWordSet] = None,
        n_jobs: int = 1,
        show_progress: bool = False,
        verbose: bool = True
    ):
        """
        Initialize the trainer.

        Args:
            tokenizer: Tokenizer shared with prediction
            score_stop_words: Stop words to drop after tokenizing, when the
                              tokenizer itself does not filter them
            n_jobs: Number of worker processes (1 for sequential)
            show_progress: Whether to show a progress bar
            verbose: Whether to print a training summary
        """
        if n_jobs < 1:
            raise ValueError(f"n_jobs must be at least 1, got {n_jobs}")

        self.tokenizer = tokenizer
        self.score_stop_words = score_stop_words
        self.n_jobs = n_jobs
        self.show_progress = show_progress
        self.verbose = verbose

        self.records_used = 0
        self.records_skipped = 0

    def train(self, records: Iterable[Record], lexicon: Optional[Lexicon] = None) -> Lexicon:
        """
        Accumulate polarity scores and freeze the resulting lexicon.

        Args:
            records: Training records
            lexicon: Lexicon to update (a new empty one if None)

        Returns:
            The frozen lexicon
        """
        records = list(records)
        lexicon = lexicon if lexicon is not None else Lexicon()

        self.records_used = 0
        self.records_skipped = 0

        if self.n_jobs == 1 or len(records) < 2:
            results = [self._train_sequential(records)]
        else:
            results = self._train_parallel(records)

        for counts, used, skipped in results:
            lexicon.merge(counts)
            self.records_used += used
            self.records_skipped += skipped

        lexicon.freeze()

        if self.verbose:
            print(f"Training completed. Vocabulary size: {len(lexicon)} "
                  f"({self.records_used} records used, "
                  f"{self.records_skipped} skipped)")

        return lexicon

    def _train_sequential(self, records: List[Record]) -> Tuple[Counter, int, int]:
        if self.show_progress:
            records = autonotebook.tqdm(records, desc="Training")
        return _count_partition((self.tokenizer, self.score_stop_words, records))

    def _train_parallel(self, records: List[Record]) -> List[Tuple[Counter, int, int]]:
        # Several partitions per worker keeps the progress bar moving
        chunks = partition(records, self.n_jobs * 4)
        tasks = [(self.tokenizer, self.score_stop_words, chunk) for chunk in chunks]

        with Pool(processes=self.n_jobs) as pool:
            results = pool.imap(_count_partition, tasks)
            if self.show_progress:
                results = autonotebook.tqdm(
                    results, total=len(tasks), desc="Training")
            return list(results)

    def __repr__(self) -> str:
        return f"LexiconTrainer(n_jobs={self.n_jobs})"
