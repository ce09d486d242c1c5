"""
TextBuffer: Owned byte sequence with value semantics.

Used as the substrate for words and record text. Every operation returns a
new buffer; a buffer is never mutated except through clear().
"""

from typing import Optional, Union


# Polynomial rolling hash parameters
HASH_BASE = 31
HASH_MODULUS = (1 << 61) - 1


class TextBuffer:
    """
    Byte sequence with explicit length, mutable only through clear().

    Supports byte-wise equality and ordering, concatenation, bounds-checked
    indexing and substring extraction, forward search and a content hash
    that depends only on the bytes.
    """

    __slots__ = ('_data',)

    def __init__(self, source: Optional[Union[bytes, bytearray, str, 'TextBuffer']] = None):
        """
        Initialize a buffer by copying the given source.

        Args:
            source: Raw bytes, a str (encoded as UTF-8), another buffer,
                    or None for an empty buffer
        """
        if source is None:
            self._data = b''
        elif isinstance(source, TextBuffer):
            self._data = source._data
        elif isinstance(source, str):
            self._data = source.encode('utf-8')
        elif isinstance(source, (bytes, bytearray)):
            self._data = bytes(source)
        else:
            raise TypeError(
                f"Cannot build TextBuffer from {type(source).__name__}")

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def __eq__(self, other) -> bool:
        if isinstance(other, TextBuffer):
            return self._data == other._data
        return NotImplemented

    def __ne__(self, other) -> bool:
        if isinstance(other, TextBuffer):
            return self._data != other._data
        return NotImplemented

    def __lt__(self, other: 'TextBuffer') -> bool:
        if isinstance(other, TextBuffer):
            return self._data < other._data
        return NotImplemented

    def __le__(self, other: 'TextBuffer') -> bool:
        if isinstance(other, TextBuffer):
            return self._data <= other._data
        return NotImplemented

    def __gt__(self, other: 'TextBuffer') -> bool:
        if isinstance(other, TextBuffer):
            return self._data > other._data
        return NotImplemented

    def __ge__(self, other: 'TextBuffer') -> bool:
        if isinstance(other, TextBuffer):
            return self._data >= other._data
        return NotImplemented

    def __add__(self, other: 'TextBuffer') -> 'TextBuffer':
        """Concatenate two buffers into a new one."""
        if not isinstance(other, TextBuffer):
            return NotImplemented
        return TextBuffer(self._data + other._data)

    def __getitem__(self, index: int) -> int:
        """
        Return the byte value at the given position.

        Raises:
            IndexError: If index is negative or >= length
        """
        if not isinstance(index, int):
            raise TypeError("TextBuffer indices must be integers")
        if index < 0 or index >= len(self._data):
            raise IndexError(
                f"Index {index} out of range for buffer of length {len(self._data)}")
        return self._data[index]

    def __hash__(self) -> int:
        value = 0
        for byte in self._data:
            value = (value * HASH_BASE + byte) % HASH_MODULUS
        return value

    def substr(self, start: int, length: int) -> 'TextBuffer':
        """
        Extract a substring.

        Args:
            start: Start position, must be inside the buffer
            length: Requested length, clamped to the remaining bytes

        Returns:
            New buffer with the extracted bytes

        Raises:
            IndexError: If start is negative or >= length of the buffer
        """
        if start < 0 or start >= len(self._data):
            raise IndexError(
                f"Start index {start} out of range for buffer of length {len(self._data)}")
        length = max(length, 0)
        return TextBuffer(self._data[start:start + length])

    def find(self, needle: 'TextBuffer') -> int:
        """Return the first position of needle, or -1 if not found."""
        if not self._data or not needle:
            return -1
        return self._data.find(needle._data)

    def clear(self):
        """
        Reset the buffer to empty.

        The hash changes with the content, so a buffer used as a dict or
        set key must not be cleared while it is stored there.
        """
        self._data = b''

    def to_bytes(self) -> bytes:
        return self._data

    def __str__(self) -> str:
        return self._data.decode('utf-8', errors='replace')

    def __repr__(self) -> str:
        return f"TextBuffer({self._data!r})"
