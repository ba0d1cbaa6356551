"""Tests for structlog-based logging setup."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from docassembly.core.config import ObservabilityConfig
from docassembly.core.logging_config import setup_logging

pytestmark = pytest.mark.usefixtures("restore_root_logging")


class TestSetupLogging:
    def test_single_root_handler(self) -> None:
        setup_logging(ObservabilityConfig(json_logs=True))
        setup_logging(ObservabilityConfig(json_logs=True))
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    def test_level_applied(self) -> None:
        setup_logging(ObservabilityConfig(log_level="warning", json_logs=True))
        assert logging.getLogger().level == logging.WARNING
        assert logging.getLogger("docassembly").level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self) -> None:
        setup_logging(ObservabilityConfig(log_level="LOUD", json_logs=True))
        assert logging.getLogger().level == logging.INFO

    def test_stdlib_records_rendered_as_json(self, capsys) -> None:
        setup_logging(ObservabilityConfig(json_logs=True))
        logging.getLogger("docassembly.assembly").info("Assembled %s", "invoice")
        line = capsys.readouterr().err.strip().splitlines()[-1]
        event = json.loads(line)
        assert event["event"] == "Assembled invoice"
        assert event["level"] == "info"
        assert event["logger"] == "docassembly.assembly"
        assert "timestamp" in event

    def test_console_renderer(self, capsys) -> None:
        setup_logging(ObservabilityConfig(json_logs=False))
        logging.getLogger("docassembly.cli").warning("heads up")
        assert "heads up" in capsys.readouterr().err
