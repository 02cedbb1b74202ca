"""Custom exceptions for the CoNLL-U text model."""

from typing import Optional


class ConlluError(Exception):
    """Base class for every error raised by the CoNLL-U text model."""


class EmptyDocumentError(ConlluError):
    """Raised when the input text is empty or contains only whitespace."""


class MalformedLineError(ConlluError):
    """Raised when a token line does not split into exactly ten fields.

    Attributes:
        line_number: 1-based line number in the source text, if known
        line: The offending raw line
        field_count: Number of tab-separated fields found
    """

    def __init__(
        self, line: str, field_count: int, line_number: Optional[int] = None
    ):
        self.line = line
        self.field_count = field_count
        self.line_number = line_number
        where = f"line {line_number}: " if line_number is not None else ""
        super().__init__(
            f"{where}expected 10 tab-separated fields, found {field_count}"
        )


class IndexOutOfRangeError(ConlluError, IndexError):
    """Raised when a field index falls outside 1..10."""

    def __init__(self, index: int):
        self.index = index
        super().__init__(f"Field index {index} is outside 1..10")


class InvalidPositionError(ConlluError, IndexError):
    """Raised when a line position is outside the bounds of a sentence."""

    def __init__(self, position: int, length: int):
        self.position = position
        self.length = length
        super().__init__(
            f"Position {position} is out of bounds for a sentence of {length} lines"
        )


class DanglingHeadReferenceError(ConlluError):
    """Raised when a HEAD value names an ID absent from the sentence."""

    def __init__(self, head: str, token_id: str):
        self.head = head
        self.token_id = token_id
        super().__init__(
            f"Token {token_id} has HEAD {head}, but no token in the sentence has that ID"
        )
