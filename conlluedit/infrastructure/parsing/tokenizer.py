"""Tokenizer splitting raw CoNLL-U text into sentences, lines and fields."""

import re
from typing import Iterator, List, Optional, Tuple

from conlluedit.domain.exceptions import EmptyDocumentError, MalformedLineError
from conlluedit.domain.models import (
    FIELD_COUNT,
    CommentLine,
    Document,
    Line,
    Sentence,
    TokenLine,
)

_NEWLINE_RE = re.compile(r"\r?\n")
_BOM = "\ufeff"


def strip_bom(text: str) -> str:
    """Drop a leading UTF-8 byte order mark."""
    if text.startswith(_BOM):
        return text[len(_BOM):]
    return text


class ConlluTokenizer:
    """
    Builds a Document from raw CoNLL-U text.
    """

    @classmethod
    def iter_blocks(cls, text: str) -> Iterator[Tuple[int, List[str]]]:
        """
        Yield (start_line, raw_lines) for every sentence block.

        A block ends at one or more whitespace-only lines; start_line is the
        0-based line number of the block's first line.
        """
        block: List[str] = []
        start = 0
        for number, raw in enumerate(_NEWLINE_RE.split(strip_bom(text))):
            if not raw.strip():
                if block:
                    yield start, block
                    block = []
                continue
            if not block:
                start = number
            block.append(raw)

        if block:
            yield start, block

    @classmethod
    def parse_line(cls, raw: str, line_number: Optional[int] = None) -> Line:
        """
        Classify one raw line as a comment or a token line.

        Args:
            raw: The line without its trailing newline
            line_number: Optional 1-based line number used in error messages
        """
        if raw.startswith("#"):
            return CommentLine(raw)

        fields = raw.split("\t")
        if len(fields) != FIELD_COUNT:
            raise MalformedLineError(raw, len(fields), line_number)
        return TokenLine(tuple(fields))

    @classmethod
    def parse_block(cls, start_line: int, raw_lines: List[str]) -> Sentence:
        lines = [
            cls.parse_line(raw, start_line + offset + 1)
            for offset, raw in enumerate(raw_lines)
        ]
        return Sentence(tuple(lines), start_line=start_line)

    @classmethod
    def parse(cls, text: str) -> Document:
        """
        Parse raw CoNLL-U text into a Document.

        Raises:
            EmptyDocumentError: If the text is empty or whitespace-only
            MalformedLineError: If a token line does not have ten fields
        """
        text = strip_bom(text)
        if not text.strip():
            raise EmptyDocumentError("CoNLL-U input is empty")

        sentences = [
            cls.parse_block(start, raw_lines)
            for start, raw_lines in cls.iter_blocks(text)
        ]
        return Document(tuple(sentences))


def parse(text: str) -> Document:
    """Parse raw CoNLL-U text into a Document."""
    return ConlluTokenizer.parse(text)
