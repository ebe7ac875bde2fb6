"""Unit tests for the structlog ConsoleAdapter.

Tests cover:
- JSON output with event, level, timestamp and context fields
- Level filtering
- Exception fields and traceback for error/critical
- bind() returns a new adapter and leaves the original unchanged
- Protocol compliance
"""

import json

import pytest

from folio.domain.protocols import LoggerProtocol
from folio.infrastructure.logging import ConsoleAdapter


def _lines(capsys) -> list[dict]:
    out = capsys.readouterr().out
    return [json.loads(line) for line in out.splitlines() if line.strip()]


@pytest.mark.unit
class TestConsoleAdapter:
    """Test ConsoleAdapter JSON output."""

    def test_info_emits_json_line(self, capsys):
        logger = ConsoleAdapter(use_json=True, level="INFO")

        logger.info("purchase_completed", transaction_id="abc")

        [line] = _lines(capsys)
        assert line["event"] == "purchase_completed"
        assert line["level"] == "info"
        assert line["transaction_id"] == "abc"
        assert "timestamp" in line

    def test_level_filtering(self, capsys):
        logger = ConsoleAdapter(use_json=True, level="WARNING")

        logger.debug("hidden")
        logger.info("hidden")
        logger.warning("purchase_rejected", reason="insufficient_balance")

        lines = _lines(capsys)
        assert [line["event"] for line in lines] == ["purchase_rejected"]

    def test_error_flattens_exception(self, capsys):
        logger = ConsoleAdapter(use_json=True)

        logger.error("purchase_failed", error=RuntimeError("disk full"))

        [line] = _lines(capsys)
        assert line["level"] == "error"
        assert line["error_type"] == "RuntimeError"
        assert line["error_message"] == "disk full"

    def test_error_keeps_traceback(self, capsys):
        logger = ConsoleAdapter(use_json=True)

        try:
            raise RuntimeError("disk full")
        except RuntimeError as exc:
            logger.error("purchase_failed", error=exc)

        [line] = _lines(capsys)
        assert "Traceback (most recent call last)" in line["exception"]
        assert "RuntimeError: disk full" in line["exception"]
        assert "exc_info" not in line

    def test_critical_without_exception(self, capsys):
        logger = ConsoleAdapter(use_json=True)

        logger.critical("database_unreachable")

        [line] = _lines(capsys)
        assert line["level"] == "critical"
        assert "error_type" not in line

    def test_bind_adds_context_without_mutating(self, capsys):
        logger = ConsoleAdapter(use_json=True)
        bound = logger.bind(account_id="acc-1")

        bound.info("with_context")
        logger.info("without_context")

        with_ctx, without_ctx = _lines(capsys)
        assert with_ctx["account_id"] == "acc-1"
        assert "account_id" not in without_ctx
        assert bound is not logger

    def test_satisfies_logger_protocol(self):
        logger: LoggerProtocol = ConsoleAdapter(use_json=True)

        for method in ("debug", "info", "warning", "error", "critical", "bind"):
            assert callable(getattr(logger, method))
