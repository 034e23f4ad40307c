from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest
from loguru import logger as host_logger

sys.path.append(str(Path(__file__).resolve().parents[1]))

from printlog.core.levels import Level
from printlog.core.printer import PrintLogger


@pytest.fixture
def printer(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    stream = io.StringIO()
    printer = PrintLogger(level=Level.DEBUG, stream=stream, colorize=False)
    yield printer, stream
    printer.close()


def test_host_remove_keeps_printlog_sinks(printer):
    logger, stream = printer
    path = logger.set_log_file("run")
    host_logger.remove()
    try:
        logger.infoln("info")
        logger.debugln("debug")
        logger.warnln("warn")
    finally:
        host_logger.add(sys.stderr)
    logger.close()
    console = stream.getvalue()
    assert "[+] info\n" in console
    assert "] debug\n" in console
    assert console.endswith("warn\n")
    assert path.read_text(encoding="utf-8").endswith("] debug\n")


def test_host_handlers_do_not_receive_printlog_lines(printer):
    logger, stream = printer
    received = []
    handler_id = host_logger.add(received.append, format="HOST {level} {message}")
    try:
        logger.infoln("mine")
        logger.warnln("mine too")
    finally:
        host_logger.remove(handler_id)
    assert received == []
    assert stream.getvalue() == "[+] mine\nmine too\n"


def test_host_handlers_keep_working(printer):
    received = []
    handler_id = host_logger.add(received.append, format="{message}")
    try:
        PrintLogger(stream=io.StringIO(), colorize=False).close()
        host_logger.info("host line")
    finally:
        host_logger.remove(handler_id)
    assert received == ["host line\n"]
