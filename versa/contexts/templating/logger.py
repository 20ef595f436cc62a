"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from utils.logger directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[template]"


# Wrapper functions with automatic [template] prefix


def _log_info(message: str) -> None:
    """Log info message with [template] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [template] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [template] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [template] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level templating-specific logging helpers


def log_merge_result(model) -> None:
    """
    Log the outcome of merge().

    Args:
        model: MergedModel returned by merge()
    """
    keys = model.version_keys()
    _log_success(f"Merged {len(keys)} version(s): {', '.join(keys)}")
    _log_info(f"  Default version: {model.default_version_key}")
    for warning in model.warnings:
        _log_warning(f"  {warning}")


def log_projection(version_key: str, render_model) -> None:
    """Log a successful projection at debug level."""
    _log_debug(
        f"Projected {version_key}: sections={render_model.sections_order}, "
        f"projects={len(render_model.projects)}, skill groups={len(render_model.skills)}"
    )
