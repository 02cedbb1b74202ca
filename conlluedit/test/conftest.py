"""Shared fixtures for conlluedit tests."""

import pytest
from conlluedit.domain.models import Document
from conlluedit.infrastructure.parsing.tokenizer import parse

SAMPLE = (
    "# sent_id = 1\n"
    "# text = They buy and sell books.\n"
    "1\tThey\tthey\tPRON\t_\t_\t2\tnsubj\t_\t_\n"
    "2\tbuy\tbuy\tVERB\t_\t_\t0\troot\t_\t_\n"
    "3\tand\tand\tCCONJ\t_\t_\t4\tcc\t_\t_\n"
    "4\tsell\tsell\tVERB\t_\t_\t2\tconj\t_\t_\n"
    "5\tbooks\tbook\tNOUN\t_\t_\t2\tobj\t_\tSpaceAfter=No\n"
    "6\t.\t.\tPUNCT\t_\t_\t2\tpunct\t_\t_\n"
    "\n"
    "# sent_id = 2\n"
    "# text = I haven't a clue.\n"
    "1\tI\tI\tPRON\t_\t_\t2\tnsubj\t_\t_\n"
    "2-3\thaven't\t_\t_\t_\t_\t_\t_\t_\t_\n"
    "2\thave\thave\tVERB\t_\t_\t0\troot\t_\t_\n"
    "3\tn't\tnot\tPART\t_\t_\t2\tadvmod\t_\t_\n"
    "4\ta\ta\tDET\t_\t_\t5\tdet\t_\t_\n"
    "5\tclue\tclue\tNOUN\t_\t_\t2\tobj\t_\tSpaceAfter=No\n"
    "6\t.\t.\tPUNCT\t_\t_\t2\tpunct\t_\t_\n"
    "\n"
    "# sent_id = 3\n"
    "1\tGo\tgo\tVERB\t_\t_\t0\troot\t_\t_\n"
    "2\t!\t!\tPUNCT\t_\t_\t_\t_\t_\t_\n"
    "\n"
)


@pytest.fixture
def sample_text() -> str:
    """Three sentences covering comments, a multiword token and an unset HEAD."""
    return SAMPLE


@pytest.fixture
def sample_doc() -> Document:
    return parse(SAMPLE)
