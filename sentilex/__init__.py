"""
Sentiment Lexicon Classifier

Learns per-word polarity scores from labeled text records, labels unlabeled
records by summing those scores and measures accuracy against ground truth.
"""

from .text_buffer import TextBuffer
from .stopwords import StopWordSet, BUILTIN_STOP_WORDS
from .preprocessing import PreprocessingPipeline, Tokenizer
from .document import Record, NEGATIVE, POSITIVE
from .reader import RecordReader
from .lexicon import Lexicon
from .trainer import LexiconTrainer
from .predictor import Prediction, Predictor
from .evaluation import EvaluationReport, Evaluator, Misclassification, ReportFormat
from .persistence import ResultsStore
from .classifier import ClassifierConfig, SentimentClassifier

__version__ = "1.0.0"
__all__ = [
    "TextBuffer",
    "StopWordSet",
    "BUILTIN_STOP_WORDS",
    "PreprocessingPipeline",
    "Tokenizer",
    "Record",
    "NEGATIVE",
    "POSITIVE",
    "RecordReader",
    "Lexicon",
    "LexiconTrainer",
    "Prediction",
    "Predictor",
    "EvaluationReport",
    "Evaluator",
    "Misclassification",
    "ReportFormat",
    "ResultsStore",
    "ClassifierConfig",
    "SentimentClassifier",
]
