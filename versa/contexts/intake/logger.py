"""
Intake context logger.

Provides logging interface for intake context with automatic [intake] prefix.
All intake modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from versa.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[intake]"


def setup_intake_logger(log_dir: Path, source: str = None) -> Path:
    """
    Setup logger for intake context.

    Args:
        log_dir: Directory for this intake session
        source: Document directory or base URL, recorded in the provenance header

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="intake",
        log_dir=log_dir,
        extra_provenance={"Source": source} if source else None,
    )


# Wrapper functions with automatic [intake] prefix


def _log_info(message: str) -> None:
    """Log info message with [intake] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [intake] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [intake] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [intake] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [intake] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level intake-specific logging helpers


def log_load_result(documents) -> None:
    """Log which document structure was loaded and from where."""
    _log_success(f"Loaded {documents.structure} data structure from {documents.source}")


def log_validation_result(result) -> None:
    """
    Log validation outcome with every error and warning.

    Args:
        result: ValidationResult from validate()
    """
    for error in result.errors:
        _log_error(f"  - {error}")
    for warning in result.warnings:
        _log_warning(f"  - {warning}")

    if result.is_valid:
        _log_success(f"Resume data validation passed ({len(result.warnings)} warning(s))")
    else:
        _log_error(
            f"Resume data validation failed ({len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s))"
        )
