#!/usr/bin/env python3
"""
logging_manager.py
--------------------
Structured logging for VidPOD.

One ``VidpodLogger`` per component (``database``, ``cli``, ...) writes
every record to ``<component>.log`` and duplicates errors into
``errors.log``. Warnings and errors also reach the console so that a
CSV upload that goes wrong is visible in the server output.

Details are JSON-encoded after the message:

    OPERATION - story_import_complete: {"imported": 4, "failed": 1}

Code that may run without a logger calls ``safe_logger(logger)`` and
gets a ``NullLogger`` back instead of checking for None.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
import logging
import sys
import traceback
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

# --- Third party imports ---
import click

MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 5

_FILE_FORMAT = logging.Formatter(
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
_CONSOLE_FORMAT = logging.Formatter(
    "%(asctime)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"
)


def _encode(label: str, message: str, details: Optional[Dict[str, Any]]) -> str:
    if details:
        return f"{label} - {message}: {json.dumps(details, default=str)}"
    return f"{label} - {message}"


def format_cli_error(error: Exception, show_traceback: bool = False) -> str:
    """Short terminal message for a failed command."""
    message = f"❌ {type(error).__name__}: {error}"
    if show_traceback:
        return f"{message}\n\n{traceback.format_exc()}"
    return message


class VidpodLogger:
    """
    File and console logging for one component.

    Attributes:
        log_dir: Directory holding ``<component>.log`` and ``errors.log``
        component_name: Logger namespace and log file stem
        main_logger: Receives every record
        error_logger: Receives errors only
    """

    def __init__(self, log_dir: Path, component_name: str = "vidpod") -> None:
        self.log_dir = Path(log_dir)
        self.component_name = component_name
        self.log_dir.mkdir(parents=True, exist_ok=True)

        self.main_logger = self._fresh_logger("operations", logging.DEBUG)
        self.main_logger.addHandler(
            self._rotating_handler(f"{component_name}.log", logging.DEBUG)
        )
        console = logging.StreamHandler()
        console.setLevel(logging.WARNING)
        console.setFormatter(_CONSOLE_FORMAT)
        self.main_logger.addHandler(console)

        self.error_logger = self._fresh_logger("errors", logging.ERROR)
        self.error_logger.addHandler(self._rotating_handler("errors.log", logging.ERROR))

    def _fresh_logger(self, suffix: str, level: int) -> logging.Logger:
        """Named logger with this instance's handlers only."""
        logger = logging.getLogger(f"{self.component_name}.{suffix}")
        logger.setLevel(level)
        logger.handlers = []
        logger.propagate = False
        return logger

    def _rotating_handler(self, filename: str, level: int) -> RotatingFileHandler:
        handler = RotatingFileHandler(
            self.log_dir / filename,
            maxBytes=MAX_LOG_BYTES,
            backupCount=LOG_BACKUPS,
            encoding="utf-8",
        )
        handler.setLevel(level)
        handler.setFormatter(_FILE_FORMAT)
        return handler

    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        """Record a completed step (an upload, a row, a migration)."""
        self.main_logger.info(_encode("OPERATION", operation, details))

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.main_logger.debug(_encode("DEBUG", message, details))

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.main_logger.info(_encode("INFO", message, details))

    def log_warning(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.main_logger.warning(_encode("WARNING", message, details))

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        """
        Write an exception to ``errors.log``.

        The context is rendered as ``key=value`` pairs; a traceback is
        added when the exception is being handled.
        """
        lines = [f"ERROR - {type(error).__name__}: {error}"]
        if context:
            lines.append("Context: " + ", ".join(f"{k}={v}" for k, v in context.items()))
        if sys.exc_info()[0] is not None:
            lines.append(f"Traceback:\n{traceback.format_exc()}")
        self.error_logger.error("\n".join(lines))

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        """Log a failed command and return the message for the terminal."""
        self.log_error(error, context or {"source": "cli"})
        return format_cli_error(error, show_traceback)


class NullLogger:
    """Stands in for VidpodLogger when no logger is configured."""

    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_warning(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        return format_cli_error(error, show_traceback)


_null_logger = NullLogger()


def safe_logger(logger: Optional[VidpodLogger]) -> VidpodLogger:
    """
    Return ``logger``, or the shared NullLogger when it is None.

    Usage:
        safe_logger(self.logger).log_info("csv_upload_received")
    """
    return logger if logger is not None else _null_logger  # type: ignore[return-value]


def handle_cli_error(
    ctx: click.Context,
    error: Exception,
    operation: str,
    additional_context: Optional[Dict[str, Any]] = None,
    exit_code: int = 1,
) -> None:
    """
    Log a failed command through the context logger, print it and exit.

    ``ctx.obj`` supplies ``logger`` and ``verbose``; verbose runs print
    the traceback too. Never returns.
    """
    context = {"operation": operation}
    if additional_context:
        context.update(additional_context)

    message = safe_logger(ctx.obj.get("logger")).log_cli_error(
        error, context, show_traceback=ctx.obj.get("verbose", False)
    )
    click.echo(message, err=True)
    sys.exit(exit_code)
