"""
Shared loguru setup for the context loggers.

Scripts call a context's setup_*_logger(), which lands here. Library code
never configures sinks.
"""

import sys
from pathlib import Path

from loguru import logger

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: dict = None,
    console=sys.stdout,
) -> Path:
    """
    Replace loguru's sinks with a DEBUG log file and an INFO console stream.

    Args:
        context_name: "intake", "template" or "render"; names the log file
        log_dir: Directory for this run's logs (created if missing)
        extra_provenance: Extra key-value pairs for the run header
        console: Console stream; stderr keeps stdout free for data output

    Returns:
        Path to <log_dir>/<context_name>.log
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(console, format=CONSOLE_FORMAT, level="INFO", colorize=True)

    log_provenance(extra_provenance)
    return log_file


def log_provenance(extra_context: dict = None) -> None:
    """Write a run header: command line, working directory, interpreter, extras."""
    rule = "=" * 80
    logger.info(rule)
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]}")
    for key, value in (extra_context or {}).items():
        logger.info(f"{key}: {value}")
    logger.info(rule)
