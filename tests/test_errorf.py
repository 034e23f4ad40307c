from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from printlog.core.exceptions import PrintError
from printlog.core.printer import PrintLogger


@pytest.fixture
def printer():
    printer = PrintLogger(stream=io.StringIO(), colorize=False)
    yield printer
    printer.close()


def test_errorf_prefixes_caller_location(printer):
    line = sys._getframe().f_lineno + 1
    error = printer.errorf("x=%d", 5)
    assert isinstance(error, PrintError)
    assert str(error) == f"[!tests/test_errorf.py:{line}]: x=5"
    assert error.message == str(error)


def test_errorf_does_not_print(printer):
    printer.errorf("quiet")
    assert printer._get_stream().getvalue() == ""


def test_errorf_without_location(printer):
    scope = {"printer": printer}
    exec(compile("error = printer.errorf('x=%d', 5)", "<string>", "exec"), scope)
    assert str(scope["error"]) == ": x=5"


def test_errorf_has_no_cause_by_default(printer):
    error = printer.errorf("plain")
    assert error.__cause__ is None


def test_errorf_optional_cause(printer):
    cause = ValueError("bad input")
    error = printer.errorf("wrapped %s", "call", cause=cause)
    assert error.__cause__ is cause
    assert str(error).endswith(": wrapped call")


def test_errorf_value_can_be_raised(printer):
    with pytest.raises(PrintError, match=r": boom$"):
        raise printer.errorf("boom")
