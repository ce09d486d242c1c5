"""
Record: Data structure representing a single decoded input row.

A record carries an optional polarity label, an identifier that is kept
verbatim through the pipeline, the raw text and any remaining fields.
"""

import re
from typing import Any, Dict, Optional


NEGATIVE = 0
POSITIVE = 4
VALID_LABELS = (NEGATIVE, POSITIVE)

LABEL_PATTERN = re.compile(r'[+-]?[0-9]+\Z')


def parse_label(value: Any) -> Optional[int]:
    """
    Parse a polarity label field.

    Only an optional sign followed by ASCII digits is accepted.

    Returns:
        The integer label, or None when the value is missing or not an
        integer
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if not LABEL_PATTERN.match(text):
        return None
    return int(text)


class Record:
    """
    Represents one input row.

    Records are built once by the reader and only read afterwards.
    """

    __slots__ = ('label', 'record_id', 'text', 'metadata')

    def __init__(
        self,
        record_id: str,
        text: str,
        label: Optional[int] = None,
        metadata: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize a record.

        Args:
            record_id: Row identifier, preserved verbatim
            text: Raw text of the row
            label: Polarity code (0 negative, 4 positive) if known
            metadata: Remaining fields (date, query, user)
        """
        self.record_id = record_id
        self.text = text
        self.label = label
        self.metadata = metadata or {}

    @property
    def is_trainable(self) -> bool:
        """Whether the record has a label in the valid set."""
        return self.label in VALID_LABELS

    @property
    def polarity(self) -> int:
        """+1 for positive records, -1 for negative ones, 0 otherwise."""
        if self.label == POSITIVE:
            return 1
        if self.label == NEGATIVE:
            return -1
        return 0

    @property
    def user(self) -> Optional[str]:
        return self.metadata.get('user')

    @property
    def date(self) -> Optional[str]:
        return self.metadata.get('date')

    def __eq__(self, other) -> bool:
        if not isinstance(other, Record):
            return NotImplemented
        return (self.record_id == other.record_id and self.text == other.text
                and self.label == other.label and self.metadata == other.metadata)

    def __repr__(self) -> str:
        return f"Record(id={self.record_id}, label={self.label})"

    def __len__(self) -> int:
        return len(self.text)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'label': self.label,
            'record_id': self.record_id,
            'text': self.text,
            'metadata': self.metadata,
        }
