"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

import sys
from pathlib import Path

from loguru import logger

from versa.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, version_key: str = None, console=sys.stdout) -> Path:
    """
    Setup logger for rendering context.

    Args:
        log_dir: Directory for this rendering session
        version_key: Requested version, recorded in the provenance header
        console: Stream for console output

    Returns:
        Path to log file

    Example:
        from versa.contexts.rendering.logger import setup_rendering_logger

        log_file = setup_rendering_logger(log_dir, version_key="ai")
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={"Version": version_key} if version_key else None,
        console=console,
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_session_ready(session) -> None:
    """Log a freshly built session with its loading stats."""
    stats = session.model.stats()
    _log_success(
        f"Session ready on {session.current_version} "
        f"({stats['versions']} versions, {stats['projects']} projects, "
        f"{stats['publications']} publications, {stats['skills']} skills)"
    )


def log_version_switch(previous: str, current: str, theme_class: str) -> None:
    """Log a version switch and the theme class the renderer should apply."""
    _log_info(f"Switched version {previous} -> {current} (theme class: {theme_class})")
