"""
RecordReader: Handles loading of input rows from the file system.

Decodes the training, testing and ground-truth CSV files into Records
using Polars. Files are read completely before any processing begins.

Each line is split on its first len(columns) - 1 commas, so the last
column (the text) keeps the rest of the line, commas included. A field
wrapped in double quotes is unquoted, with "" turned back into ".
"""

from pathlib import Path
from typing import Dict, List, Optional, Union
import polars as pl

from .document import Record, parse_label


TRAINING_COLUMNS = ['label', 'id', 'date', 'query', 'user', 'text']
TESTING_COLUMNS = ['id', 'date', 'query', 'user', 'text']
GROUND_TRUTH_COLUMNS = ['label', 'id', 'rest']

METADATA_COLUMNS = ('date', 'query', 'user')


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _unquote(column: str) -> pl.Expr:
    field = pl.col(column)
    return (
        pl.when(field.str.contains(r'^".*"$'))
        .then(field.str.replace(r'^"(.*)"$', '${1}')
              .str.replace_all('""', '"', literal=True))
        .otherwise(field)
        .alias(column)
    )


def read_fields(path: Union[str, Path], columns: List[str], has_header: bool) -> pl.DataFrame:
    """
    Split every non-blank line of a file into len(columns) string fields.

    Lines with fewer fields get nulls in the missing columns. No line can
    make decoding fail.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Input file not found: {path}")

    with open(path, 'r', encoding='utf-8', errors='replace') as f:
        lines = [line.rstrip('\r\n') for line in f]

    if has_header:
        lines = lines[1:]
    lines = [line for line in lines if line.strip()]

    frame = pl.DataFrame({'line': pl.Series('line', lines, dtype=pl.Utf8)})
    return (
        frame
        .select(pl.col('line').str.splitn(',', len(columns)).struct.rename_fields(columns))
        .unnest('line')
        .with_columns([_unquote(name) for name in columns])
    )


class RecordReader:
    """
    Reads CSV input files into Records.

    Whether the files start with a header row is configuration, never
    inferred from the data. Rows that cannot form a record (missing
    identifier or too few fields) are skipped and counted in skipped_rows.
    """

    def __init__(self, has_header: bool = True):
        """
        Initialize the reader.

        Args:
            has_header: Whether input files start with a header row to skip
        """
        self.has_header = has_header
        self.skipped_rows = 0

    def _read_frame(self, path: Union[str, Path], columns: List[str]) -> pl.DataFrame:
        return read_fields(path, columns, self.has_header)

    def read_training_records(self, path: Union[str, Path]) -> List[Record]:
        """
        Load labeled rows: label,identifier,date,query,user,text.

        Labels are parsed but not validated here; records with labels
        outside {0, 4} are left for the trainer to skip.

        Args:
            path: Training CSV path

        Returns:
            List of records in file order
        """
        return self._read_records(path, TRAINING_COLUMNS)

    def read_testing_records(self, path: Union[str, Path]) -> List[Record]:
        """
        Load unlabeled rows: identifier,date,query,user,text.

        Rows whose text field is present but empty are kept with empty text.
        """
        return self._read_records(path, TESTING_COLUMNS)

    def _read_records(self, path: Union[str, Path], columns: List[str]) -> List[Record]:
        df = self._read_frame(path, columns)
        labeled = 'label' in columns

        self.skipped_rows = 0
        records = []

        for row in df.iter_rows(named=True):
            record_id = _clean(row['id'])
            text = row['text']

            if record_id is None or text is None:
                self.skipped_rows += 1
                continue

            records.append(Record(
                record_id=record_id,
                text=text,
                label=parse_label(row['label']) if labeled else None,
                metadata={key: row[key] for key in METADATA_COLUMNS},
            ))

        return records

    def read_ground_truth(self, path: Union[str, Path]) -> Dict[str, int]:
        """
        Load reference labels: label,identifier,...

        Only the first two fields of each row are used. Rows without an
        identifier or with a non-integer label are skipped; when an
        identifier repeats, the last row wins.

        Returns:
            Mapping from identifier to label
        """
        df = self._read_frame(path, GROUND_TRUTH_COLUMNS)

        self.skipped_rows = 0
        truth: Dict[str, int] = {}

        for row in df.iter_rows(named=True):
            record_id = _clean(row['id'])
            label = parse_label(row['label'])
            if record_id is None or label is None:
                self.skipped_rows += 1
                continue
            truth[record_id] = label

        return truth

    def __repr__(self) -> str:
        return f"RecordReader(has_header={self.has_header})"
