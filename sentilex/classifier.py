"""
SentimentClassifier: Main entry point for a train -> predict -> evaluate run.

Wires the reader, tokenizer, trainer, predictor, evaluator and results store
together according to a ClassifierConfig.
"""

from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from .document import Record
from .evaluation import EvaluationReport, Evaluator, ReportFormat
from .lexicon import Lexicon
from .persistence import ResultsStore
from .predictor import Prediction, Predictor
from .preprocessing import Tokenizer
from .reader import RecordReader
from .stopwords import StopWordSet
from .trainer import LexiconTrainer


class ClassifierConfig:
    """
    Deployment settings of a classifier.

    Attributes:
        header_present: Whether input CSV files start with a header row
        stop_words_source: 'builtin', 'nltk' or a path to a word list file
        filter_stage: 'tokenize' to drop stop words inside the tokenizer,
                      'score' to drop them after tokenizing
        accuracy_scale: 'fraction' or 'percent'
        include_predicted: Whether mismatch lines show the predicted label
        n_jobs: Worker processes used for training
        show_progress: Whether to show progress bars
        verbose: Whether to print run summaries
    """

    FILTER_STAGES = ('tokenize', 'score')

    def __init__(
        self,
        header_present: bool = True,
        stop_words_source: Union[str, Path] = 'builtin',
        filter_stage: str = 'tokenize',
        accuracy_scale: str = 'fraction',
        include_predicted: bool = True,
        n_jobs: int = 1,
        show_progress: bool = False,
        verbose: bool = True
    ):
        if filter_stage not in self.FILTER_STAGES:
            raise ValueError(
                f"Unknown filter stage: {filter_stage}. Use one of {self.FILTER_STAGES}")
        if n_jobs < 1:
            raise ValueError(f"n_jobs must be at least 1, got {n_jobs}")

        self.header_present = header_present
        self.stop_words_source = stop_words_source
        self.filter_stage = filter_stage
        self.n_jobs = n_jobs
        self.show_progress = show_progress
        self.verbose = verbose
        self.report_format = ReportFormat(
            scale=accuracy_scale, include_predicted=include_predicted)

    @property
    def accuracy_scale(self) -> str:
        return self.report_format.scale

    @property
    def include_predicted(self) -> bool:
        return self.report_format.include_predicted

    def __repr__(self) -> str:
        return (f"ClassifierConfig(header_present={self.header_present}, "
                f"stop_words_source={self.stop_words_source!r}, "
                f"filter_stage='{self.filter_stage}', "
                f"accuracy_scale='{self.accuracy_scale}')")


class SentimentClassifier:
    """
    Bag-of-words lexicon classifier.

    Learns one polarity score per word from labeled records, labels new
    records by the sign of their summed score and reports accuracy against
    ground truth.
    """

    def __init__(self, config: Optional[ClassifierConfig] = None):
        self.config = config or ClassifierConfig()
        self.stop_words: Optional[StopWordSet] = None
        self.tokenizer: Optional[Tokenizer] = None
        self.lexicon: Optional[Lexicon] = None

        self._reader = RecordReader(has_header=self.config.header_present)
        self._store = ResultsStore(verbose=self.config.verbose)
        self._evaluator = Evaluator()

    def load_stop_words(self, source: Optional[Union[str, Path]] = None) -> StopWordSet:
        """
        Load the stop-word set and build the tokenizer around it.

        Args:
            source: Overrides config.stop_words_source when given
        """
        source = source if source is not None else self.config.stop_words_source

        if self.stop_words is None:
            self.stop_words = StopWordSet()
        self.stop_words.load(source)

        if self.config.filter_stage == 'tokenize':
            self.tokenizer = Tokenizer(stop_words=self.stop_words)
        else:
            self.tokenizer = Tokenizer()

        return self.stop_words

    @property
    def _score_stop_words(self) -> Optional[StopWordSet]:
        if self.config.filter_stage == 'score':
            return self.stop_words
        return None

    def _ensure_tokenizer(self):
        if self.tokenizer is None:
            self.load_stop_words()

    def _require_lexicon(self) -> Lexicon:
        if self.lexicon is None:
            raise RuntimeError("Classifier is not trained. Call train() first.")
        return self.lexicon

    def train_records(self, records: Iterable[Record]) -> Lexicon:
        """Train the lexicon from already decoded records."""
        self._ensure_tokenizer()
        trainer = LexiconTrainer(
            self.tokenizer,
            score_stop_words=self._score_stop_words,
            n_jobs=self.config.n_jobs,
            show_progress=self.config.show_progress,
            verbose=self.config.verbose,
        )
        self.lexicon = trainer.train(records)
        return self.lexicon

    def train(self, training_path: Union[str, Path]) -> Lexicon:
        """
        Train the lexicon from a training CSV file.

        Raises:
            FileNotFoundError: If the training file does not exist
        """
        self._ensure_tokenizer()
        records = self._reader.read_training_records(training_path)
        if self.config.verbose and self._reader.skipped_rows:
            print(f"Skipped {self._reader.skipped_rows} incomplete training rows")
        return self.train_records(records)

    def predictor(self) -> Predictor:
        return Predictor(
            self._require_lexicon(),
            self.tokenizer,
            score_stop_words=self._score_stop_words,
            show_progress=self.config.show_progress,
        )

    def predict_records(self, records: Iterable[Record]) -> List[Prediction]:
        return self.predictor().predict_batch(records)

    def predict(
        self,
        testing_path: Union[str, Path],
        results_path: Optional[Union[str, Path]] = None
    ) -> List[Prediction]:
        """
        Label every record of a testing CSV file.

        Args:
            testing_path: Testing CSV path
            results_path: Where to write the results file (not written if None)

        Returns:
            Predictions in input order
        """
        predictor = self.predictor()
        records = self._reader.read_testing_records(testing_path)
        predictions = predictor.predict_batch(records)

        if results_path is not None:
            self._store.save_predictions(predictions, results_path)
        return predictions

    def evaluate_predictions(
        self,
        predictions: Iterable[Prediction],
        ground_truth: Dict[str, int]
    ) -> EvaluationReport:
        return self._evaluator.evaluate(predictions, ground_truth)

    def evaluate(
        self,
        ground_truth_path: Union[str, Path],
        results_path: Union[str, Path],
        accuracy_path: Optional[Union[str, Path]] = None
    ) -> EvaluationReport:
        """
        Evaluate a results file against a ground-truth CSV file.

        Args:
            ground_truth_path: Ground-truth CSV path
            results_path: Results file written by predict()
            accuracy_path: Where to write the accuracy report (not written if None)

        Returns:
            The evaluation report
        """
        ground_truth = self._reader.read_ground_truth(ground_truth_path)
        predictions = self._store.load_predictions(results_path)
        report = self.evaluate_predictions(predictions, ground_truth)

        if accuracy_path is not None:
            self._store.save_report(report, accuracy_path, self.config.report_format)
        if self.config.verbose:
            print(f"Accuracy: {report.accuracy:.3f} "
                  f"({report.correct}/{report.total} correct, "
                  f"{report.unmatched} without ground truth)")
        return report

    def run(
        self,
        training_path: Union[str, Path],
        testing_path: Union[str, Path],
        ground_truth_path: Union[str, Path],
        results_path: Union[str, Path],
        accuracy_path: Union[str, Path]
    ) -> EvaluationReport:
        """Full pipeline: train, predict to results_path, evaluate to accuracy_path."""
        self.train(training_path)
        self.predict(testing_path, results_path)
        return self.evaluate(ground_truth_path, results_path, accuracy_path)

    def __repr__(self) -> str:
        size = len(self.lexicon) if self.lexicon is not None else 0
        return f"SentimentClassifier(words={size}, config={self.config!r})"
