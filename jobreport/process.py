"""Process-level side effects used by :class:`jobreport.job.Job`.

The job never terminates the interpreter directly; it asks a
:class:`ProcessController`. Tests substitute :class:`RecordingProcessController`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import NoReturn
import sys


class ProcessController(ABC):
    """Capability to terminate the current process with an exit code."""

    @abstractmethod
    def exit(self, code: int) -> NoReturn:
        """Terminate with ``code``."""


class SystemProcessController(ProcessController):
    """Terminates via :func:`sys.exit`, i.e. by raising ``SystemExit``."""

    def exit(self, code: int) -> NoReturn:
        sys.exit(code)


class RecordingProcessController(ProcessController):
    """Records requested exit codes instead of terminating."""

    def __init__(self) -> None:
        self.codes: list[int] = []

    def exit(self, code: int) -> NoReturn:  # type: ignore[misc]
        self.codes.append(code)

    @property
    def last_code(self) -> int | None:
        return self.codes[-1] if self.codes else None


__all__ = [
    "ProcessController",
    "RecordingProcessController",
    "SystemProcessController",
]
