"""
ResultsStore: Manages the output files of a run.

Writes the results file (one "label, identifier" line per prediction) and
the accuracy report, and reads results files back for evaluation.
"""

from pathlib import Path
from typing import Iterable, List, Optional, Union

from .document import parse_label
from .evaluation import EvaluationReport, ReportFormat
from .predictor import Prediction
from .reader import read_fields


class ResultsStore:
    """
    Reads and writes run artifacts.

    Relative paths are resolved against base_path when one is given.
    """

    def __init__(self, base_path: Optional[Union[str, Path]] = None, verbose: bool = True):
        """
        Initialize the results store.

        Args:
            base_path: Directory for relative paths (current directory if None)
            verbose: Whether to print where files were written
        """
        self.base_path = Path(base_path) if base_path is not None else None
        self.verbose = verbose

    def resolve(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        if self.base_path is not None and not path.is_absolute():
            path = self.base_path / path
        return path

    def save_predictions(self, predictions: Iterable[Prediction], path: Union[str, Path]) -> Path:
        """
        Write predictions in input order, one "label, identifier" line each.

        Returns:
            The path written
        """
        path = self.resolve(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        count = 0
        with open(path, 'w', encoding='utf-8') as f:
            for prediction in predictions:
                f.write(f"{prediction.label}, {prediction.record_id}\n")
                count += 1

        if self.verbose:
            print(f"Prediction completed. Saved {count} results to {path}")
        return path

    def load_predictions(self, path: Union[str, Path]) -> List[Prediction]:
        """
        Read a results file written by save_predictions.

        Lines without an identifier or an integer label are skipped.

        Raises:
            FileNotFoundError: If the file does not exist
        """
        path = self.resolve(path)
        if not path.is_file():
            raise FileNotFoundError(f"Results file not found: {path}")

        df = read_fields(path, ['label', 'id'], has_header=False)

        predictions = []
        for label_field, id_field in df.iter_rows():
            label = parse_label(label_field)
            record_id = id_field.strip() if id_field is not None else ''
            if label is None or not record_id:
                continue
            predictions.append(Prediction(label, record_id))

        return predictions

    def save_report(
        self,
        report: EvaluationReport,
        path: Union[str, Path],
        report_format: Optional[ReportFormat] = None
    ) -> Path:
        """
        Write the accuracy report: accuracy line first, then mismatches.

        Returns:
            The path written
        """
        path = self.resolve(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w', encoding='utf-8') as f:
            for line in report.to_lines(report_format):
                f.write(line + '\n')

        if self.verbose:
            print(f"Evaluation completed. Accuracy saved to {path}")
        return path

    def __repr__(self) -> str:
        return f"ResultsStore(base_path={self.base_path})"
