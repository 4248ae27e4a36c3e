#!/usr/bin/env python3
"""
logging_manager.py
--------------------
Logging for curation runs, database access and CLI commands.

Each component gets two rotating log files under its log directory:

    <component>.log   every operation, DEBUG and up
    errors.log        errors only, with context and traceback

Warnings and errors are echoed to the console as well. Details are
serialised as JSON so runs can be grepped and compared afterwards.
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

FILE_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s:%(lineno)d] - %(message)s"
)
CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _format_cli_error(error: Exception) -> str:
    return f"❌ {type(error).__name__}: {error}"


class TheatricalLogger:
    """
    Rotating-file logger shared by a component's operations.

    Attributes:
        log_dir: Directory for log files
        component_name: Name of the component using this logger
        main_logger: Logger for every operation of the component
        error_logger: Logger writing errors.log only
    """

    def __init__(
        self,
        log_dir: Path,
        component_name: str = "theatrical",
        max_bytes: int = 10 * 1024 * 1024,
        backup_count: int = 5,
    ) -> None:
        """
        Set up the component's loggers and log files.

        Args:
            log_dir: Directory for log files (created if missing)
            component_name: Name for the component logger
                (e.g. 'database', 'curation')
            max_bytes: Log file size that triggers rotation (default: 10MB)
            backup_count: Rotated files to keep (default: 5)
        """
        self.log_dir = Path(log_dir)
        self.component_name = component_name
        self.max_bytes = max_bytes
        self.backup_count = backup_count

        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.main_logger = self._build_logger(
            "operations", f"{component_name}.log", logging.DEBUG
        )
        self.error_logger = self._build_logger("errors", "errors.log", logging.ERROR)

        console = logging.StreamHandler()
        console.setLevel(logging.WARNING)
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
        self.main_logger.addHandler(console)

    def _build_logger(self, suffix: str, filename: str, level: int) -> logging.Logger:
        """
        Get a named logger writing to one rotating file.

        Handlers left over from an earlier instance with the same
        component name are replaced, never stacked.
        """
        logger = logging.getLogger(f"{self.component_name}.{suffix}")
        logger.setLevel(level)
        logger.handlers = []

        handler = RotatingFileHandler(
            self.log_dir / filename,
            maxBytes=self.max_bytes,
            backupCount=self.backup_count,
            encoding="utf-8",
        )
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
        return logger

    def _emit(
        self, level: int, label: str, message: str, details: Optional[Dict[str, Any]]
    ) -> None:
        if details:
            message = f"{message}: {json.dumps(details, default=str)}"
        self.main_logger.log(level, f"{label} - {message}")

    def log_operation(
        self, operation: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log a completed operation with its counts.

        Args:
            operation: Name of the operation (e.g. 'consolidate_roles')
            details: Optional details dictionary
        """
        self.main_logger.info(
            f"OPERATION - {operation}: {json.dumps(details or {}, default=str)}"
        )

    def log_error(
        self, error: Exception, context: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log an error with its context and the current traceback.

        Args:
            error: Exception that occurred
            context: Optional context (operation, kind, ...)
        """
        self.error_logger.error(f"ERROR - {type(error).__name__}: {error}")
        if context:
            context_str = ", ".join(f"{k}={v}" for k, v in context.items())
            self.error_logger.error(f"Context: {context_str}")
        self.error_logger.error(f"Traceback:\n{traceback.format_exc()}")

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        """Log debug information."""
        self._emit(logging.DEBUG, "DEBUG", message, details)

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        """Log general information."""
        self._emit(logging.INFO, "INFO", message, details)

    def log_warning(
        self, message: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        """Log a warning."""
        self._emit(logging.WARNING, "WARNING", message, details)

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        """
        Log an error raised by a command and format it for the terminal.

        Args:
            error: Exception to log
            context: Where the error occurred (defaults to {"source": "cli"})
            show_traceback: Append the traceback to the returned message

        Returns:
            One-line message, plus traceback when requested

        Examples:
            >>> logger.log_cli_error(DatabaseError("Connection failed"))
            '❌ DatabaseError: Connection failed'
        """
        self.log_error(error, context or {"source": "cli"})
        message = _format_cli_error(error)
        if show_traceback:
            return f"{message}\n\n{traceback.format_exc()}"
        return message


def handle_cli_error(
    ctx: "click.Context",
    error: Exception,
    operation: str,
    additional_context: Optional[Dict[str, Any]] = None,
    exit_code: int = 1,
) -> None:
    """
    Report a failed command and exit.

    Uses the logger and verbose flag stored on the click context by the
    command group.

    Args:
        ctx: Click context object containing logger and verbose flag
        error: Exception that occurred
        operation: Name of the command that failed (e.g. 'clean', 'roles')
        additional_context: Optional extra context (kind, dry run, ...)
        exit_code: Exit code for sys.exit() (default: 1)
    """
    logger: Optional[TheatricalLogger] = ctx.obj.get("logger")
    verbose: bool = ctx.obj.get("verbose", False)

    context = {"operation": operation, **(additional_context or {})}
    message = safe_logger(logger).log_cli_error(error, context, show_traceback=verbose)

    click.echo(message, err=True)
    sys.exit(exit_code)


class NullLogger:
    """
    Logger with the TheatricalLogger interface that records nothing.
    """

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
        return _format_cli_error(error)


_null_logger = NullLogger()


def safe_logger(logger: Optional[TheatricalLogger]) -> TheatricalLogger:
    """
    Return the provided logger, or a shared NullLogger for None.

    Use:
        safe_logger(self.logger).log_debug("Records sanitized", {...})
    """
    return logger if logger is not None else _null_logger  # type: ignore[return-value]
