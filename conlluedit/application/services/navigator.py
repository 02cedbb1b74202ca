"""Offset-based navigation over sentences, fields and HEAD references.

Three kinds of offsets are used:

* document offsets are 0-based line numbers in the document text,
* line offsets are 0-based indexes into ``Sentence.lines``,
* character offsets are 0-based positions in a line's text.
"""

from typing import Optional, Tuple, Union

from conlluedit.domain.exceptions import DanglingHeadReferenceError, IndexOutOfRangeError
from conlluedit.domain.models import (
    EMPTY,
    FIELD_COUNT,
    ROOT,
    Document,
    RootMarker,
    Sentence,
    TokenLine,
)

FieldPosition = Tuple[int, int]


def sentence_at(doc: Document, offset: int) -> Optional[Sentence]:
    """Return the sentence containing the document offset, if any."""
    for sentence in doc.sentences:
        if sentence.start_line <= offset <= sentence.end_line:
            return sentence
    return None


def next_sentence(doc: Document, from_offset: int) -> Optional[Sentence]:
    """Return the first sentence starting after from_offset."""
    for sentence in doc.sentences:
        if sentence.start_line > from_offset:
            return sentence
    return None


def previous_sentence(doc: Document, from_offset: int) -> Optional[Sentence]:
    """Return the last sentence ending before from_offset."""
    for sentence in reversed(doc.sentences):
        if sentence.end_line < from_offset:
            return sentence
    return None


def resolve_head(
    sentence: Sentence, token_line: TokenLine
) -> Union[TokenLine, RootMarker, None]:
    """Look up the governor of token_line within sentence.

    Returns:
        ROOT when HEAD is 0, None when HEAD is '_', otherwise the token line
        whose ID equals HEAD. Multiword ranges and empty nodes are never
        governors.

    Raises:
        DanglingHeadReferenceError: If no word in the sentence has that ID
    """
    head = token_line.head
    if head == "0":
        return ROOT
    if head == EMPTY:
        return None

    for line in sentence.token_lines:
        if line.id == head and not (line.is_multiword or line.is_empty_node):
            return line
    raise DanglingHeadReferenceError(head, token_line.id)


def head_line_offset(sentence: Sentence, token_line: TokenLine) -> Optional[int]:
    """Return the line offset of token_line's governor, for jump-to-head."""
    governor = resolve_head(sentence, token_line)
    if not isinstance(governor, TokenLine):
        return None
    for offset, line in enumerate(sentence.lines):
        if line is governor:
            return offset
    return None


def field_at_offset(
    sentence: Sentence, line_offset: int, char_offset: int
) -> Optional[Tuple[TokenLine, int]]:
    """Map a character position on a line to the enclosing field index.

    A position on a tab belongs to the field before it, and the end of the
    line belongs to the last field.
    """
    if line_offset < 0 or line_offset >= len(sentence.lines):
        return None
    line = sentence.lines[line_offset]
    if not isinstance(line, TokenLine):
        return None
    if char_offset < 0 or char_offset > len(line.text):
        return None

    start = 0
    for index, value in enumerate(line.fields, start=1):
        end = start + len(value)
        if char_offset <= end:
            return line, index
        start = end + 1
    return None


def _token_offsets(sentence: Sentence):
    return [
        offset
        for offset, line in enumerate(sentence.lines)
        if isinstance(line, TokenLine)
    ]


def next_field(
    sentence: Sentence, line_offset: int, index: int
) -> Optional[FieldPosition]:
    """Return the position of the field after (line_offset, index).

    Moves to the first field of the following token line after the last
    field, skipping comments; None past the last token line.
    """
    if not 1 <= index <= FIELD_COUNT:
        raise IndexOutOfRangeError(index)
    on_token = 0 <= line_offset < len(sentence.lines) and isinstance(
        sentence.lines[line_offset], TokenLine
    )
    if on_token and index < FIELD_COUNT:
        return line_offset, index + 1
    for offset in _token_offsets(sentence):
        if offset > line_offset:
            return offset, 1
    return None


def previous_field(
    sentence: Sentence, line_offset: int, index: int
) -> Optional[FieldPosition]:
    """Return the position of the field before (line_offset, index)."""
    if not 1 <= index <= FIELD_COUNT:
        raise IndexOutOfRangeError(index)
    on_token = 0 <= line_offset < len(sentence.lines) and isinstance(
        sentence.lines[line_offset], TokenLine
    )
    if on_token and index > 1:
        return line_offset, index - 1
    for offset in reversed(_token_offsets(sentence)):
        if offset < line_offset:
            return offset, FIELD_COUNT
    return None
