import io

import pytest

from xraykit import logger
from xraykit.logger import DefaultLogger, LogLevel


@pytest.fixture
def restore_logger():
    old = logger.get_logger()
    yield
    logger.set_logger(old)


def test_filters_by_level(restore_logger):
    buf = io.StringIO()
    logger.set_logger(DefaultLogger(buf, LogLevel.WARN))

    logger.debug("debug")
    logger.info("info")
    logger.warn("warn")
    logger.error("error")

    lines = buf.getvalue().strip().split("\n")
    assert len(lines) == 2
    assert "[WARN] warn" in lines[0]
    assert "[ERROR] error" in lines[1]


def test_deferred_debug(restore_logger):
    buf = io.StringIO()
    logger.set_logger(DefaultLogger(buf, LogLevel.INFO))
    calls = []

    def produce():
        calls.append(True)
        return "deferred"

    logger.debug_deferred(produce)
    assert calls == []
    assert buf.getvalue() == ""

    logger.set_logger(DefaultLogger(buf, LogLevel.DEBUG))
    logger.debug_deferred(produce)
    assert calls == [True]
    assert "[DEBUG] deferred" in buf.getvalue()


def test_format_arguments(restore_logger):
    buf = io.StringIO()
    logger.set_logger(DefaultLogger(buf, LogLevel.DEBUG))
    logger.info("using %s at %d", "host", 2000)
    assert "[INFO] using host at 2000" in buf.getvalue()


def test_set_and_get_logger(restore_logger):
    custom = DefaultLogger(io.StringIO(), LogLevel.ERROR)
    logger.set_logger(custom)
    assert logger.get_logger() is custom


def test_direct_log_respects_level():
    buf = io.StringIO()
    log = DefaultLogger(buf, LogLevel.ERROR)
    log.log(LogLevel.WARN, "dropped")
    log.log(LogLevel.ERROR, "kept")
    assert "dropped" not in buf.getvalue()
    assert "[ERROR] kept" in buf.getvalue()