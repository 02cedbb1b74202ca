"""Read and replace operations on token fields and sentence lines."""

from typing import Tuple

from conlluedit.domain.exceptions import IndexOutOfRangeError, InvalidPositionError
from conlluedit.domain.models import EMPTY, FIELD_COUNT, Line, Sentence, TokenLine


def _check_index(index: int) -> None:
    if not 1 <= index <= FIELD_COUNT:
        raise IndexOutOfRangeError(index)


def get_field(line: TokenLine, index: int) -> str:
    """Return the value of the 1-based field index."""
    _check_index(index)
    return line.fields[index - 1]


def set_field(line: TokenLine, index: int, value: str) -> TokenLine:
    """Return a copy of line with the field at index replaced by value.

    Raises:
        IndexOutOfRangeError: If index is outside 1..10
        ValueError: If value contains a tab or a line break
    """
    _check_index(index)
    if "\t" in value or "\n" in value or "\r" in value:
        raise ValueError(f"Field value may not contain tabs or newlines: {value!r}")
    fields = list(line.fields)
    fields[index - 1] = value
    return TokenLine(tuple(fields))


def clear_field(line: TokenLine, index: int) -> Tuple[TokenLine, str]:
    """Set the field to '_' and return the new line with the previous value."""
    old_value = get_field(line, index)
    return set_field(line, index, EMPTY), old_value


def field_span(line: TokenLine, index: int) -> Tuple[int, int]:
    """Return the (start, end) character span of a field in line.text."""
    _check_index(index)
    start = sum(len(value) + 1 for value in line.fields[: index - 1])
    return start, start + len(line.fields[index - 1])


def insert_token_lines(sentence: Sentence, position: int, count: int = 1) -> Sentence:
    """Insert count blank token lines before sentence.lines[position].

    Position 0 inserts before the first line and len(sentence) appends.
    """
    if position < 0 or position > len(sentence.lines):
        raise InvalidPositionError(position, len(sentence.lines))
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")

    new_lines = (TokenLine.blank(),) * count
    lines = sentence.lines[:position] + new_lines + sentence.lines[position:]
    return Sentence(lines, start_line=sentence.start_line)


def replace_line(sentence: Sentence, line_offset: int, line: Line) -> Sentence:
    """Return a copy of sentence with the line at line_offset replaced."""
    if line_offset < 0 or line_offset >= len(sentence.lines):
        raise InvalidPositionError(line_offset, len(sentence.lines))
    lines = list(sentence.lines)
    lines[line_offset] = line
    return Sentence(tuple(lines), start_line=sentence.start_line)


def delete_line(sentence: Sentence, line_offset: int) -> Sentence:
    """Return a copy of sentence without the line at line_offset.

    A sentence always keeps at least one line.
    """
    if line_offset < 0 or line_offset >= len(sentence.lines) or len(sentence.lines) == 1:
        raise InvalidPositionError(line_offset, len(sentence.lines))
    lines = sentence.lines[:line_offset] + sentence.lines[line_offset + 1 :]
    return Sentence(lines, start_line=sentence.start_line)
