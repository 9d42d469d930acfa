"""Centralized defaults for job tracking and report rendering.

Defines immutable defaults for the progress indicator, report layout and
labels so that the CLI and library callers behave identically.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Config:
    """Immutable configuration defaults for the project."""

    # Labels
    DEFAULT_TITLE: str = "Job Report:"
    DEFAULT_PROGRESS_TEXT: str = "Processing"

    # Progress indicator
    SPINNER_ENABLED: bool = True
    SPINNER_INTERVAL: float = 0.08
    SPINNER_FRAMES: tuple[str, ...] = ("⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏")

    # Report layout
    REPORT_INDENT: int = 2
    ELAPSED_UNIT: str = "s"


# Convenience re-exports
DEFAULT_PROGRESS_TEXT: str = Config.DEFAULT_PROGRESS_TEXT
REPORT_INDENT: int = Config.REPORT_INDENT


_CONFIG_SINGLETON: Optional[Config] = None


def get_config() -> Config:
    """Return a singleton `Config` instance."""

    global _CONFIG_SINGLETON
    if _CONFIG_SINGLETON is None:
        _CONFIG_SINGLETON = Config()
    return _CONFIG_SINGLETON
