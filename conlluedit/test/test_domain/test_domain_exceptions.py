from conlluedit.domain.exceptions import (
    ConlluError,
    DanglingHeadReferenceError,
    EmptyDocumentError,
    IndexOutOfRangeError,
    InvalidPositionError,
    MalformedLineError,
)


def test_all_errors_share_a_base_class():
    for error in (
        EmptyDocumentError("empty"),
        MalformedLineError("a\tb", 2, 3),
        IndexOutOfRangeError(11),
        InvalidPositionError(5, 2),
        DanglingHeadReferenceError("7", "1"),
    ):
        assert isinstance(error, ConlluError)


def test_index_errors_are_index_errors():
    assert isinstance(IndexOutOfRangeError(0), IndexError)
    assert isinstance(InvalidPositionError(-1, 3), IndexError)


def test_malformed_line_message_includes_line_number():
    error = MalformedLineError("a\tb", 2, 3)
    assert error.line_number == 3
    assert error.field_count == 2
    assert "line 3" in str(error)
    assert "found 2" in str(error)


def test_dangling_head_attributes():
    error = DanglingHeadReferenceError("7", "1")
    assert error.head == "7"
    assert error.token_id == "1"
    assert "HEAD 7" in str(error)
