"""Rendering of Documents back into CoNLL-U text."""

from conlluedit.domain.models import Document, Line, Sentence


def serialize_line(line: Line) -> str:
    return line.text


def serialize_sentence(sentence: Sentence) -> str:
    """Render a sentence without its trailing blank line."""
    return "\n".join(serialize_line(line) for line in sentence.lines)


def serialize(document: Document) -> str:
    """
    Render a document as CoNLL-U text.

    Every sentence, including the last, is followed by a single blank line.
    """
    return "".join(
        serialize_sentence(sentence) + "\n\n" for sentence in document.sentences
    )
