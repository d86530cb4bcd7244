"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
import threading
from collections.abc import Generator

import pytest
import structlog

import sdkwire
from sdkwire.log import configure_logging


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None, None, None]:
    """Restore root logger and structlog state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    sdk = logging.getLogger("sdkwire")
    sdk_level = sdk.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    sdk.setLevel(sdk_level)
    structlog.reset_defaults()


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("sdkwire").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("sdkwire").level == logging.WARNING

    def test_human_mode_output(self) -> None:
        configure_logging(verbose=True, log_json=False)
        log = structlog.get_logger("sdkwire.test")
        log.warning("hello world", key="val")

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("sdkwire.test")
        log.warning("json test", answer=42)
        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "sdkwire.test"
        assert "timestamp" in parsed

    def test_dispatcher_debug_records(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)

        with sdkwire.Dispatcher(max_workers=1, name="logged") as dispatcher:
            dispatcher.submit(lambda: None).result(5)

        captured = capfd.readouterr()
        records = [json.loads(line) for line in captured.err.splitlines() if line.strip()]
        events = [record["event"] for record in records if record.get("dispatcher") == "logged"]
        assert "operation submitted" in events
        assert all(record["logger"] == "sdkwire.dispatch" for record in records)

    def test_quiet_by_default(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)

        logging.getLogger("sdkwire.dispatch").debug("dispatch noise")
        logging.getLogger("concurrent.futures").debug("executor noise")

        captured = capfd.readouterr()
        assert captured.err == ""

    def test_idempotent_calls(self) -> None:
        """Multiple configure_logging calls don't stack handlers."""
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        root = logging.getLogger()
        assert len(root.handlers) == 1

    def test_drain_timeout_warns(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)

        dispatcher = sdkwire.Dispatcher(max_workers=1, name="draining")
        started = threading.Event()
        release = threading.Event()

        def block() -> None:
            started.set()
            release.wait(10)

        running = dispatcher.submit(block)
        assert started.wait(5)
        dispatcher.submit(lambda: None)
        dispatcher.submit(lambda: None)

        assert dispatcher.drain(0.05) is False
        release.set()
        running.result(5)

        captured = capfd.readouterr()
        records = [json.loads(line) for line in captured.err.splitlines() if line.strip()]
        warnings = [record for record in records if record["event"] == "abandoning unstarted operations"]
        assert len(warnings) == 1
        assert warnings[0]["count"] == 2
        assert warnings[0]["dispatcher"] == "draining"
        assert warnings[0]["level"] == "warning"

    def test_client_applies_configuration(
        self, transport: object, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configuration = sdkwire.config.Configuration(
            filename="/nonexistent/client.json",
            environ={"SDKWIRE_VERBOSE": "true", "SDKWIRE_LOG_JSON": "true"},
        )

        with sdkwire.Client(transport, configuration=configuration):
            pass

        assert logging.getLogger("sdkwire").level == logging.DEBUG

        structlog.get_logger("sdkwire.test").debug("configured", answer=42)
        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip().splitlines()[-1])
        assert parsed["event"] == "configured"
        assert parsed["answer"] == 42

    def test_client_defaults_leave_logging_alone(self, transport: object) -> None:
        root = logging.getLogger()
        handlers = root.handlers[:]
        configuration = sdkwire.config.Configuration(filename="/nonexistent/client.json", environ={})

        with sdkwire.Client(transport, configuration=configuration):
            pass

        assert root.handlers == handlers
