#!/usr/bin/env python3
"""
cli.py
------
Shared CLI utilities for Theatrical commands.

Functions:
    setup_logger: Initialize TheatricalLogger for CLI operations

Usage:
    from theatrical.core.cli import setup_logger

    logger = setup_logger(log_dir, "curation")
    logger.log_info("Starting curation run...")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path

# --- Local imports ---
from theatrical.core.logging_manager import TheatricalLogger


def setup_logger(log_dir: Path, component_name: str) -> TheatricalLogger:
    """
    Setup logging for CLI operations.

    Creates the operations log directory if it doesn't exist and initializes
    a TheatricalLogger instance for the specified component.

    Args:
        log_dir: Base log directory (typically from paths.LOG_DIR)
        component_name: Component identifier for logging (e.g., 'curation')

    Returns:
        Configured TheatricalLogger instance
    """
    operations_log_dir = Path(log_dir) / "operations"
    operations_log_dir.mkdir(parents=True, exist_ok=True)
    return TheatricalLogger(operations_log_dir, component_name=component_name)
