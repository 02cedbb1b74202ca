"""Column alignment of token lines for display."""

from typing import List

from conlluedit.domain.models import FIELD_COUNT, Sentence, TokenLine


def column_widths(sentence: Sentence) -> List[int]:
    """Return the widest value of each field across the token lines."""
    widths = [0] * FIELD_COUNT
    for line in sentence.token_lines:
        for i, value in enumerate(line.fields):
            widths[i] = max(widths[i], len(value))
    return widths


def align_sentence(sentence: Sentence, padding: int = 0) -> Sentence:
    """Pad fields with trailing spaces so columns line up.

    The last field is never padded. Aligned sentences are meant for display;
    run unalign_sentence before looking up IDs or HEADs.
    """
    if padding < 0:
        raise ValueError(f"padding must not be negative, got {padding}")
    widths = column_widths(sentence)
    lines = []
    for line in sentence.lines:
        if isinstance(line, TokenLine):
            fields = [
                value.ljust(widths[i] + padding) for i, value in enumerate(line.fields[:-1])
            ]
            fields.append(line.fields[-1])
            line = TokenLine(tuple(fields))
        lines.append(line)
    return Sentence(tuple(lines), start_line=sentence.start_line)


def unalign_sentence(sentence: Sentence) -> Sentence:
    """Strip trailing spaces from every field of every token line."""
    lines = [
        TokenLine(tuple(value.rstrip(" ") for value in line.fields))
        if isinstance(line, TokenLine)
        else line
        for line in sentence.lines
    ]
    return Sentence(tuple(lines), start_line=sentence.start_line)
