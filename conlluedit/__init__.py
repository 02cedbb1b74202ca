"""
conlluedit: a text model for reading, navigating and editing CoNLL-U files.
"""

from conlluedit.domain.models import (
    ROOT,
    CommentLine,
    Document,
    Sentence,
    TokenLine,
)
from conlluedit.domain.exceptions import (
    ConlluError,
    DanglingHeadReferenceError,
    EmptyDocumentError,
    IndexOutOfRangeError,
    InvalidPositionError,
    MalformedLineError,
)
from conlluedit.infrastructure.parsing.tokenizer import parse
from conlluedit.infrastructure.parsing.serializer import serialize
from conlluedit.config import Settings, get_settings

__version__ = "0.1.0"

__all__ = [
    "ROOT",
    "CommentLine",
    "Document",
    "Sentence",
    "TokenLine",
    "ConlluError",
    "DanglingHeadReferenceError",
    "EmptyDocumentError",
    "IndexOutOfRangeError",
    "InvalidPositionError",
    "MalformedLineError",
    "parse",
    "serialize",
    "Settings",
    "get_settings",
]
