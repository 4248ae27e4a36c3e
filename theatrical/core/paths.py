#!/usr/bin/env python3
"""
paths.py
-------------------
Path constants and configuration for the Theatrical project.

The project structure:
    ROOT/
    ├── theatrical/    # Source package
    ├── data/          # Database and curation reports
    └── logs/          # Application logs

All paths are resolved at import time relative to the project root.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path


def _get_project_root() -> Path:
    """
    Determine project root directory.

    Assumes this file is at ROOT/theatrical/core/paths.py and navigates up
    the directory tree to find ROOT.

    Returns:
        Path object for project root
    """
    # Navigate up: paths.py -> core/ -> theatrical/ -> ROOT/
    return Path(__file__).resolve().parent.parent.parent


# ----- Project directory -----
ROOT: Path = _get_project_root()
DATA_DIR = ROOT / "data"

# --- Database ---
DB_PATH = DATA_DIR / "theatrical.db"

# --- Curation ---
REPORT_DIR = DATA_DIR / "curation"

# --- Logs ---
LOG_DIR = ROOT / "logs"
