# topmark:header:start
#
#   project      : structcheck
#   file         : test_logging.py
#   file_relpath : tests/core/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the TRACE-capable logging helpers."""

from __future__ import annotations

import logging

import pytest

from structcheck import string
from structcheck.core.logging import (
    LOG_LEVEL_ENV_VAR,
    TRACE_LEVEL,
    ChalkFormatter,
    StructcheckLogger,
    get_logger,
    resolve_env_log_level,
    setup_logging,
)
from tests.conftest import parametrize


@parametrize(
    "raw, expected",
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", logging.DEBUG),
        (" warn ", logging.WARNING),
        ("10", 10),
        ("bogus", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: int | None
) -> None:
    """STRUCTCHECK_LOG_LEVEL accepts names, aliases and numbers."""
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, raw)
    assert resolve_env_log_level() == expected


def test_resolve_env_log_level_unset() -> None:
    """No environment variable means no level."""
    assert resolve_env_log_level() is None


def test_get_logger_returns_trace_capable_logger() -> None:
    """Loggers built by get_logger() expose trace()."""
    logger = get_logger("structcheck.tests.logging")
    assert isinstance(logger, StructcheckLogger)
    assert logging.getLevelName(TRACE_LEVEL) == "TRACE"


def test_checker_construction_is_traced(structcheck_caplog: pytest.LogCaptureFixture) -> None:
    """Building a checker emits a TRACE record."""
    caplog = structcheck_caplog
    caplog.set_level(TRACE_LEVEL, logger="structcheck")
    string()
    assert any(
        r.levelno == TRACE_LEVEL and r.getMessage() == "Built checker string()"
        for r in caplog.records
    )


def test_setup_logging_uses_env_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """setup_logging() falls back to the environment, then to CRITICAL."""
    pkg_logger = logging.getLogger("structcheck")
    try:
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "INFO")
        setup_logging()
        assert pkg_logger.level == logging.INFO
        assert len(pkg_logger.handlers) == 1
        assert pkg_logger.propagate is False

        monkeypatch.delenv(LOG_LEVEL_ENV_VAR)
        setup_logging()
        assert pkg_logger.level == logging.CRITICAL
        assert len(pkg_logger.handlers) == 1
    finally:
        setup_logging(level=TRACE_LEVEL)


def test_chalk_formatter_keeps_message_text() -> None:
    """Colored output still contains the formatted message."""
    record = logging.LogRecord("structcheck", logging.WARNING, __file__, 1, "hello %s", ("x",), None)
    out: str = ChalkFormatter("%(message)s").format(record)
    assert "hello x" in out


def test_setup_logging_stops_propagation(caplog: pytest.LogCaptureFixture) -> None:
    """Records from structcheck loggers do not reach root-level handlers."""
    caplog.set_level(TRACE_LEVEL)
    get_logger("structcheck.tests.logging").warning("kept local")
    assert not any(r.getMessage() == "kept local" for r in caplog.records)
