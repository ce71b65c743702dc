# infrastructure/logging/log_setup.py
import sys

from loguru import logger

LOG_FORMAT = "{time:HH:mm:ss.SSS} | {level: <7} | {message}"


def setup_console_logging(level: str = "INFO") -> None:
    """Send records below ERROR to stdout and ERROR and above to stderr."""
    logger.remove()
    error_no = logger.level("ERROR").no
    logger.add(
        lambda msg: print(msg, end=""),
        level=level,
        format=LOG_FORMAT,
        filter=lambda record: record["level"].no < error_no,
    )
    logger.add(
        lambda msg: print(msg, end="", file=sys.stderr),
        level="ERROR",
        format=LOG_FORMAT,
    )
