"""Service for checking whole CoNLL-U documents."""

import logging
from pathlib import Path
from typing import List, Union

from conlluedit.application.services.navigator import resolve_head
from conlluedit.domain.exceptions import DanglingHeadReferenceError, MalformedLineError
from conlluedit.domain.models import Sentence, TokenLine
from conlluedit.infrastructure.parsing.tokenizer import ConlluTokenizer, strip_bom

EMPTY_DOCUMENT = "empty-document"
MALFORMED_LINE = "malformed-line"
DANGLING_HEAD = "dangling-head"
DUPLICATE_ID = "duplicate-id"


class Diagnostic:
    """A single problem found in a document.

    Attributes:
        line_number: 1-based line number in the source text (0 for the whole file)
        code: Short identifier of the kind of problem
        message: Human readable description
    """

    def __init__(self, line_number: int, code: str, message: str):
        self.line_number = line_number
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"{self.line_number}: {self.code}: {self.message}"

    def __repr__(self) -> str:
        return (
            f"Diagnostic(line_number={self.line_number}, code='{self.code}', "
            f"message='{self.message}')"
        )


class ValidationReport:
    """Every diagnostic collected for one document."""

    def __init__(self, errors: List[Diagnostic]):
        self.errors = errors

    @property
    def is_valid(self) -> bool:
        return not self.errors


class ValidationService:
    """Collects diagnostics for a document instead of stopping at the first one.

    Each sentence block is checked on its own so that one malformed line does
    not hide problems elsewhere in the file.
    """

    def __init__(self, check_heads: bool = True):
        """Initialize the validation service.

        Args:
            check_heads: Whether to report HEAD values that name a missing ID
        """
        self.check_heads = check_heads
        self.logger = logging.getLogger(__name__)

    def validate_file(self, path: Union[str, Path]) -> ValidationReport:
        """Read a UTF-8 file and validate its contents."""
        text = Path(path).read_text(encoding="utf-8-sig")
        self.logger.debug(f"Validating {path}")
        return self.validate_text(text)

    def validate_text(self, text: str) -> ValidationReport:
        """Validate raw CoNLL-U text.

        Returns:
            A report listing every diagnostic in source order
        """
        text = strip_bom(text)
        if not text.strip():
            self.logger.info("Document is empty")
            return ValidationReport(
                [Diagnostic(0, EMPTY_DOCUMENT, "CoNLL-U input is empty")]
            )

        errors: List[Diagnostic] = []
        blocks = 0
        for start, raw_lines in ConlluTokenizer.iter_blocks(text):
            blocks += 1
            errors.extend(self._validate_block(start, raw_lines))

        errors.sort(key=lambda diagnostic: diagnostic.line_number)
        self.logger.info(f"Checked {blocks} sentences, found {len(errors)} problems")
        return ValidationReport(errors)

    def _validate_block(self, start: int, raw_lines: List[str]) -> List[Diagnostic]:
        errors: List[Diagnostic] = []
        parsed = []
        # first field of every malformed line; HEADs naming one are not checked
        unparsed_ids = set()
        for offset, raw in enumerate(raw_lines):
            line_number = start + offset + 1
            try:
                line = ConlluTokenizer.parse_line(raw, line_number)
            except MalformedLineError as e:
                errors.append(Diagnostic(line_number, MALFORMED_LINE, str(e)))
                unparsed_ids.add(raw.split("\t", 1)[0])
                continue
            if isinstance(line, TokenLine):
                parsed.append((line_number, line))

        seen = {}
        for line_number, line in parsed:
            if line.id in seen:
                errors.append(
                    Diagnostic(
                        line_number,
                        DUPLICATE_ID,
                        f"ID {line.id} already used on line {seen[line.id]}",
                    )
                )
            else:
                seen[line.id] = line_number

        if self.check_heads and parsed:
            sentence = Sentence(tuple(line for _, line in parsed), start_line=start)
            for line_number, line in parsed:
                if line.head in unparsed_ids:
                    continue
                try:
                    resolve_head(sentence, line)
                except DanglingHeadReferenceError as e:
                    errors.append(Diagnostic(line_number, DANGLING_HEAD, str(e)))

        return errors
