from __future__ import annotations

import json

from infrastructure.logging.console_logger import ConsoleLogger


def _payload(line: str, event: str) -> dict:
    marker = f"{event} "
    assert marker in line
    return json.loads(line.split(marker, 1)[1])


def test_console_logger_emits_type_field(capsys) -> None:
    logger = ConsoleLogger()

    logger.info("step.start", step="com")

    captured = capsys.readouterr()
    payload = _payload(captured.out.strip(), "step.start")
    assert payload["type"] == "step.start"
    assert payload["step"] == "com"


def test_console_logger_bind_merges_fields(capsys) -> None:
    logger = ConsoleLogger().bind(run_id="run-1")

    logger.debug("hook.init", hook="test_bridge")

    payload = _payload(capsys.readouterr().out.strip(), "hook.init")
    assert payload["run_id"] == "run-1"
    assert payload["hook"] == "test_bridge"


def test_console_logger_errors_go_to_stderr(capsys) -> None:
    logger = ConsoleLogger()

    logger.error("step.failed", step="com", error="boom")

    captured = capsys.readouterr()
    assert "step.failed" not in captured.out
    payload = _payload(captured.err.strip(), "step.failed")
    assert payload["error"] == "boom"
