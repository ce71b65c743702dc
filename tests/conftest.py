from __future__ import annotations

import pytest

from infrastructure.logging.log_setup import setup_console_logging


@pytest.fixture(autouse=True)
def console_logging() -> None:
    # sinks resolve sys.stdout/sys.stderr per message, so capsys sees them
    setup_console_logging(level="DEBUG")
