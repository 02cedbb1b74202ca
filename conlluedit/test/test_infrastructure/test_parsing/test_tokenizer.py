import pytest
from conlluedit.domain.exceptions import EmptyDocumentError, MalformedLineError
from conlluedit.domain.models import CommentLine, TokenLine
from conlluedit.infrastructure.parsing.tokenizer import ConlluTokenizer, parse


def test_parse_end_to_end_example():
    text = (
        "# text = They buy and sell books.\n"
        "1\tThey\tthey\tPRON\t_\t_\t2\tnsubj\t_\t_\n"
        "2\tbuy\tbuy\tVERB\t_\t_\t0\troot\t_\t_\n"
    )
    doc = parse(text)
    assert len(doc) == 1
    sentence = doc[0]
    assert isinstance(sentence.lines[0], CommentLine)
    assert isinstance(sentence.lines[1], TokenLine)
    assert isinstance(sentence.lines[2], TokenLine)
    assert sentence.lines[1].form == "They"


def test_parse_sample_sentences(sample_text):
    doc = parse(sample_text)
    assert len(doc) == 3
    assert [s.sent_id for s in doc] == ["1", "2", "3"]
    assert [s.start_line for s in doc] == [0, 9, 19]
    assert [s.end_line for s in doc] == [7, 17, 21]
    for sentence in doc:
        for line in sentence.token_lines:
            assert len(line.fields) == 10


@pytest.mark.parametrize("text", ["", "   ", "\n\n\t\n"])
def test_parse_empty_input(text):
    with pytest.raises(EmptyDocumentError):
        parse(text)


def test_parse_wrong_field_count_reports_line_number():
    text = (
        "# sent_id = 1\n"
        "1\tThey\tthey\tPRON\t_\t_\t2\tnsubj\t_\t_\n"
        "2\tbuy\tbuy\tVERB\t_\t_\t0\troot\t_\n"
    )
    with pytest.raises(MalformedLineError) as exc_info:
        parse(text)
    assert exc_info.value.line_number == 3
    assert exc_info.value.field_count == 9


def test_parse_rejects_space_separated_line():
    with pytest.raises(MalformedLineError):
        parse("1 They they PRON _ _ 2 nsubj _ _\n")


def test_parse_preserves_empty_fields():
    doc = parse("1\tThey\t\tPRON\t_\t_\t0\troot\t_\t\n")
    line = doc[0].lines[0]
    assert line.lemma == ""
    assert line.misc == ""
    assert line.xpos == "_"


def test_parse_ignores_surrounding_and_repeated_blank_lines():
    text = (
        "\n\n"
        "1\ta\ta\tX\t_\t_\t0\troot\t_\t_\n"
        "\n   \n\n"
        "1\tb\tb\tX\t_\t_\t0\troot\t_\t_\n"
        "\n\n"
    )
    doc = parse(text)
    assert len(doc) == 2
    assert doc[0].start_line == 2
    assert doc[1].start_line == 6


def test_parse_crlf_line_endings():
    text = "# c\r\n1\ta\ta\tX\t_\t_\t0\troot\t_\t_\r\n\r\n1\tb\tb\tX\t_\t_\t0\troot\t_\t_\r\n"
    doc = parse(text)
    assert len(doc) == 2
    assert doc[0].lines[0].text == "# c"
    assert doc[0].lines[1].misc == "_"


def test_iter_blocks_yields_raw_lines():
    blocks = list(ConlluTokenizer.iter_blocks("a\nb\n\nc\n"))
    assert blocks == [(0, ["a", "b"]), (3, ["c"])]


def test_parse_line_classifies_comments():
    assert isinstance(ConlluTokenizer.parse_line("#no space"), CommentLine)
    assert isinstance(ConlluTokenizer.parse_line("\t".join(["_"] * 10)), TokenLine)


def test_parse_ignores_byte_order_mark(sample_text):
    doc = parse("\ufeff" + sample_text)
    assert doc[0].lines[0] == CommentLine("# sent_id = 1")
    assert doc[0].start_line == 0
    assert len(doc) == 3


def test_parse_byte_order_mark_only_is_empty():
    with pytest.raises(EmptyDocumentError):
        parse("\ufeff\n")
