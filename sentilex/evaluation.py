"""
Evaluator: Measures prediction accuracy against ground truth.

Predictions are joined to the reference labels by identifier. Predictions
whose identifier has no reference label are left out of the totals.
"""

from typing import Dict, Iterable, List, NamedTuple, Optional
import numpy as np
from sklearn.metrics import confusion_matrix

from .document import VALID_LABELS
from .predictor import Prediction


class Misclassification(NamedTuple):
    """A prediction that disagrees with the reference label."""
    actual: int
    predicted: int
    record_id: str


class ReportFormat:
    """
    Layout of the accuracy report.

    Attributes:
        scale: 'fraction' for an accuracy in [0, 1], 'percent' for [0, 100]
        include_predicted: Whether misclassification lines carry the
                           predicted label (3 fields) or not (2 fields)
        precision: Number of decimals of the accuracy value
    """

    SCALES = ('fraction', 'percent')

    def __init__(self, scale: str = 'fraction', include_predicted: bool = True, precision: int = 3):
        if scale not in self.SCALES:
            raise ValueError(
                f"Unknown accuracy scale: {scale}. Use one of {self.SCALES}")
        self.scale = scale
        self.include_predicted = include_predicted
        self.precision = precision

    def format_accuracy(self, accuracy: float) -> str:
        value = accuracy * 100 if self.scale == 'percent' else accuracy
        return f"Overall Accuracy: {value:.{self.precision}f}"

    def format_misclassification(self, miss: Misclassification) -> str:
        if self.include_predicted:
            return f"ID: {miss.record_id}, Actual: {miss.actual}, Predicted: {miss.predicted}"
        return f"ID: {miss.record_id}, Actual: {miss.actual}"

    def __repr__(self) -> str:
        return (f"ReportFormat(scale='{self.scale}', "
                f"include_predicted={self.include_predicted})")


class EvaluationReport:
    """Outcome of one evaluation run."""

    def __init__(
        self,
        correct: int,
        total: int,
        misclassifications: List[Misclassification],
        confusion: Optional[np.ndarray] = None,
        unmatched: int = 0
    ):
        self.correct = correct
        self.total = total
        self.misclassifications = misclassifications
        self.unmatched = unmatched
        if confusion is None:
            confusion = np.zeros((len(VALID_LABELS), len(VALID_LABELS)), dtype=int)
        self.confusion_matrix = confusion

    @property
    def accuracy(self) -> float:
        """Fraction of matched predictions that were correct (0 if none matched)."""
        if self.total == 0:
            return 0.0
        return self.correct / self.total

    def to_lines(self, report_format: Optional[ReportFormat] = None) -> List[str]:
        """Render the report: accuracy first, then one misclassification per line."""
        report_format = report_format or ReportFormat()
        lines = [report_format.format_accuracy(self.accuracy)]
        lines.extend(report_format.format_misclassification(miss)
                     for miss in self.misclassifications)
        return lines

    def __repr__(self) -> str:
        return (f"EvaluationReport(accuracy={self.accuracy:.3f}, "
                f"correct={self.correct}, total={self.total})")


class Evaluator:
    """Joins predictions with ground truth and scores them."""

    def evaluate(
        self,
        predictions: Iterable[Prediction],
        ground_truth: Dict[str, int]
    ) -> EvaluationReport:
        """
        Compare predictions with reference labels.

        Args:
            predictions: Predictions in output order
            ground_truth: Mapping from identifier to reference label

        Returns:
            EvaluationReport with misclassifications in prediction order
        """
        correct = total = unmatched = 0
        misclassifications: List[Misclassification] = []
        y_true: List[int] = []
        y_pred: List[int] = []

        for prediction in predictions:
            actual = ground_truth.get(prediction.record_id)
            if actual is None:
                unmatched += 1
                continue

            total += 1
            if actual in VALID_LABELS:
                y_true.append(actual)
                y_pred.append(prediction.label)

            if prediction.label == actual:
                correct += 1
            else:
                misclassifications.append(
                    Misclassification(actual, prediction.label, prediction.record_id))

        confusion = None
        if y_true:
            # Rows are actual labels, columns predicted, both ordered (0, 4)
            confusion = confusion_matrix(y_true, y_pred, labels=list(VALID_LABELS))

        return EvaluationReport(correct, total, misclassifications,
                                confusion=confusion, unmatched=unmatched)
