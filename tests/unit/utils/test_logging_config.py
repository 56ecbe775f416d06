import logging

import pytest

from knowledge_galaxy.utils.logging_config import (
    RequestIDFilter,
    bind_request_id,
    current_request_id,
    reset_request_id,
    setup_logging,
)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


def _record() -> logging.LogRecord:
    return logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)


def test_request_id_filter_defaults_outside_a_request() -> None:
    record = _record()
    assert RequestIDFilter().filter(record)
    assert record.request_id == "-"


def test_request_id_filter_keeps_explicit_extra() -> None:
    record = _record()
    record.request_id = "abc"
    token = bind_request_id("bound")
    try:
        RequestIDFilter().filter(record)
    finally:
        reset_request_id(token)
    assert record.request_id == "abc"


def test_bound_request_id_is_stamped_and_reset() -> None:
    token = bind_request_id("req-42")
    try:
        record = _record()
        RequestIDFilter().filter(record)
        assert record.request_id == "req-42"
        assert current_request_id() == "req-42"
    finally:
        reset_request_id(token)

    assert current_request_id() == "-"


def test_setup_logging_writes_request_aware_lines(capsys, restore_root_logger) -> None:
    setup_logging(level="debug")
    logging.getLogger("knowledge_galaxy.test").debug("hello galaxy")

    out = capsys.readouterr().out
    assert "hello galaxy" in out
    assert "[-]" in out
    assert logging.getLogger("httpx").level == logging.WARNING


def test_setup_logging_plain_format(capsys, restore_root_logger) -> None:
    setup_logging(level="INFO", include_request_id=False)
    logging.getLogger("knowledge_galaxy.test").info("plain line")

    out = capsys.readouterr().out
    assert "plain line" in out
    assert "[-]" not in out
