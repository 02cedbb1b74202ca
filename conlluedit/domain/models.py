"""Core domain models for CoNLL-U documents.

All models are immutable snapshots: operations that change a line, sentence
or document return a new value and leave their input untouched.
"""

import re
from dataclasses import dataclass, field, replace
from typing import Dict, Iterator, Optional, Tuple, Union

from conlluedit.domain.exceptions import MalformedLineError

FIELD_NAMES = (
    "ID",
    "FORM",
    "LEMMA",
    "UPOS",
    "XPOS",
    "FEATS",
    "HEAD",
    "DEPREL",
    "DEPS",
    "MISC",
)
FIELD_COUNT = len(FIELD_NAMES)
EMPTY = "_"

# 1-based field indexes
ID, FORM, LEMMA, UPOS, XPOS, FEATS, HEAD, DEPREL, DEPS, MISC = range(1, 11)

_METADATA_RE = re.compile(r"^#\s*([^=]+?)\s*=\s?(.*)$")
_MULTIWORD_RE = re.compile(r"^\d+-\d+$")
_EMPTY_NODE_RE = re.compile(r"^\d+\.\d+$")


class RootMarker:
    """Marker returned when a token's HEAD is 0."""

    _instance: Optional["RootMarker"] = None

    def __new__(cls) -> "RootMarker":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ROOT"


ROOT = RootMarker()


@dataclass(frozen=True)
class CommentLine:
    """A comment line, including its leading '#'."""

    text: str

    def __post_init__(self):
        if not self.text.startswith("#"):
            raise ValueError(f"Comment lines must start with '#': {self.text!r}")
        if "\n" in self.text:
            raise ValueError(f"Comment lines may not contain newlines: {self.text!r}")

    @property
    def key(self) -> Optional[str]:
        """Key of a '# key = value' comment, or None."""
        match = _METADATA_RE.match(self.text)
        return match.group(1) if match else None

    @property
    def value(self) -> Optional[str]:
        """Value of a '# key = value' comment, or None."""
        match = _METADATA_RE.match(self.text)
        return match.group(2).strip() if match else None


@dataclass(frozen=True)
class TokenLine:
    """A token line holding exactly ten fields."""

    fields: Tuple[str, ...]

    def __post_init__(self):
        object.__setattr__(self, "fields", tuple(self.fields))
        if len(self.fields) != FIELD_COUNT:
            raise MalformedLineError("\t".join(self.fields), len(self.fields))
        for value in self.fields:
            if "\t" in value or "\n" in value:
                raise ValueError(
                    f"Field value may not contain tabs or newlines: {value!r}"
                )

    @classmethod
    def blank(cls) -> "TokenLine":
        """Build a token line whose fields are all '_'."""
        return cls((EMPTY,) * FIELD_COUNT)

    @property
    def text(self) -> str:
        return "\t".join(self.fields)

    @property
    def id(self) -> str:
        return self.fields[ID - 1]

    @property
    def form(self) -> str:
        return self.fields[FORM - 1]

    @property
    def lemma(self) -> str:
        return self.fields[LEMMA - 1]

    @property
    def upos(self) -> str:
        return self.fields[UPOS - 1]

    @property
    def xpos(self) -> str:
        return self.fields[XPOS - 1]

    @property
    def feats(self) -> str:
        return self.fields[FEATS - 1]

    @property
    def head(self) -> str:
        return self.fields[HEAD - 1]

    @property
    def deprel(self) -> str:
        return self.fields[DEPREL - 1]

    @property
    def deps(self) -> str:
        return self.fields[DEPS - 1]

    @property
    def misc(self) -> str:
        return self.fields[MISC - 1]

    @property
    def is_multiword(self) -> bool:
        """True for multiword token ranges such as '1-2'."""
        return bool(_MULTIWORD_RE.match(self.id))

    @property
    def is_empty_node(self) -> bool:
        """True for empty nodes such as '8.1'."""
        return bool(_EMPTY_NODE_RE.match(self.id))


Line = Union[CommentLine, TokenLine]


@dataclass(frozen=True)
class Sentence:
    """A block of lines bounded by blank lines.

    Args:
        lines: Comment and token lines in source order
        start_line: 0-based line number of the first line in the document text
    """

    lines: Tuple[Line, ...]
    start_line: int = 0

    def __post_init__(self):
        object.__setattr__(self, "lines", tuple(self.lines))

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self.lines)

    @property
    def end_line(self) -> int:
        """0-based line number of the last line in the document text."""
        return self.start_line + len(self.lines) - 1

    @property
    def token_lines(self) -> Tuple[TokenLine, ...]:
        return tuple(line for line in self.lines if isinstance(line, TokenLine))

    @property
    def comments(self) -> Tuple[CommentLine, ...]:
        return tuple(line for line in self.lines if isinstance(line, CommentLine))

    @property
    def metadata(self) -> Dict[str, str]:
        """Map of '# key = value' comments; later keys win."""
        result: Dict[str, str] = {}
        for comment in self.comments:
            if comment.key is not None:
                result[comment.key] = comment.value
        return result

    @property
    def sent_id(self) -> Optional[str]:
        return self.metadata.get("sent_id")

    @property
    def text(self) -> Optional[str]:
        return self.metadata.get("text")

    def find_token(self, token_id: str) -> Optional[TokenLine]:
        """Return the first token line whose ID equals token_id."""
        for line in self.token_lines:
            if line.id == token_id:
                return line
        return None


@dataclass(frozen=True)
class Document:
    """An ordered sequence of sentences."""

    sentences: Tuple[Sentence, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "sentences", tuple(self.sentences))

    def __len__(self) -> int:
        return len(self.sentences)

    def __iter__(self) -> Iterator[Sentence]:
        return iter(self.sentences)

    def __getitem__(self, index: int) -> Sentence:
        return self.sentences[index]

    def replace_sentence(self, index: int, sentence: Sentence) -> "Document":
        """Return a new document with the sentence at index replaced.

        The new sentence keeps the start line of the one it replaces, and
        every later sentence is shifted by the change in line count.
        """
        index = range(len(self.sentences))[index]
        old = self.sentences[index]
        delta = len(sentence.lines) - len(old.lines)
        sentences = list(self.sentences)
        sentences[index] = replace(sentence, start_line=old.start_line)
        for i in range(index + 1, len(sentences)):
            later = sentences[i]
            sentences[i] = replace(later, start_line=later.start_line + delta)
        return Document(tuple(sentences))
