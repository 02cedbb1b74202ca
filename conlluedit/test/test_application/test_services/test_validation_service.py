from pathlib import Path
from conlluedit.application.services.validation_service import (
    DANGLING_HEAD,
    DUPLICATE_ID,
    EMPTY_DOCUMENT,
    MALFORMED_LINE,
    ValidationService,
)

BROKEN = (
    "# sent_id = 1\n"
    "1\tThey\tthey\tPRON\t_\t_\t2\tnsubj\t_\t_\n"
    "2\tbuy\tbuy\tVERB\t_\t_\t0\troot\n"
    "3\tbooks\tbook\tNOUN\t_\t_\t9\tobj\t_\t_\n"
    "\n"
    "1\tGo\tgo\tVERB\t_\t_\t0\troot\t_\t_\n"
    "1\tnow\tnow\tADV\t_\t_\t1\tadvmod\t_\t_\n"
)


def test_valid_document(sample_text):
    report = ValidationService().validate_text(sample_text)
    assert report.is_valid
    assert report.errors == []


def test_empty_document():
    report = ValidationService().validate_text("\n  \n")
    assert not report.is_valid
    assert [d.code for d in report.errors] == [EMPTY_DOCUMENT]


def test_collects_every_problem():
    report = ValidationService().validate_text(BROKEN)
    found = [(d.line_number, d.code) for d in report.errors]
    # line 2 names the ID of the malformed line 3, which is not reported as dangling
    assert found == [
        (3, MALFORMED_LINE),
        (4, DANGLING_HEAD),
        (7, DUPLICATE_ID),
    ]


def test_head_checks_can_be_disabled():
    report = ValidationService(check_heads=False).validate_text(BROKEN)
    assert [d.code for d in report.errors] == [MALFORMED_LINE, DUPLICATE_ID]


def test_diagnostic_str():
    report = ValidationService().validate_text(BROKEN)
    assert str(report.errors[0]).startswith("3: malformed-line: line 3:")


def test_validate_file(tmp_path: Path, sample_text):
    path = tmp_path / "sample.conllu"
    path.write_text(sample_text, encoding="utf-8")
    assert ValidationService().validate_file(path).is_valid


def test_head_naming_a_malformed_line_is_not_dangling():
    text = (
        "1\tThey\tthey\tPRON\t_\t_\t2\tnsubj\t_\t_\n"
        "2\tbuy\tbuy\tVERB\t_\t_\t0\troot\n"
    )
    report = ValidationService().validate_text(text)
    assert [(d.line_number, d.code) for d in report.errors] == [(2, MALFORMED_LINE)]


def test_head_naming_a_multiword_range_is_dangling():
    text = (
        "1-2\tdel\t_\t_\t_\t_\t_\t_\t_\t_\n"
        "1\tde\tde\tADP\t_\t_\t0\troot\t_\t_\n"
        "2\tel\tel\tDET\t_\t_\t1-2\tdet\t_\t_\n"
    )
    report = ValidationService().validate_text(text)
    assert [(d.line_number, d.code) for d in report.errors] == [(3, DANGLING_HEAD)]


def test_byte_order_mark_is_ignored(tmp_path: Path, sample_text):
    assert ValidationService().validate_text("\ufeff" + sample_text).is_valid

    path = tmp_path / "bom.conllu"
    path.write_bytes(b"\xef\xbb\xbf" + sample_text.encode("utf-8"))
    assert ValidationService().validate_file(path).is_valid
