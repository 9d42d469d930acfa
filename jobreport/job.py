"""Single-use tracker for a unit of console work.

A :class:`Job` starts timing and its progress indicator as soon as it is
constructed, collects caller supplied errors while the work runs and renders a
short report once :meth:`Job.finish` has been called.

Example
-------
```python
job = Job(progress="Resolving")
for step in steps:
    job.progress(f"Running {step}")
    try:
        step.run()
    except Exception as exc:
        job.add_error(exc)
job.finish().summary(f"{len(steps)} steps").write_to()
job.exit()
```
"""

from __future__ import annotations

from datetime import datetime, timedelta
from enum import Enum
from typing import Any, Callable, NoReturn, Optional, TextIO
import logging
import sys

import click

from jobreport.config import get_config
from jobreport.process import ProcessController, SystemProcessController
from jobreport.term import FRAME_PLACEHOLDER, Spinner, style, table
from jobreport.utils import indent, pad_zeros, should_use_color


_LOGGER = logging.getLogger(__name__)


class JobState(str, Enum):
    RUNNING = "running"
    FINISHED = "finished"


def default_stream() -> TextIO:
    """Return the stream jobs write to when none is given (standard error)."""

    return sys.stderr


def _format_seconds(seconds: float) -> str:
    if float(seconds).is_integer():
        return str(int(seconds))
    return str(seconds)


class Job:
    """Times a unit of work, shows progress and reports the outcome.

    Parameters
    ----------
    stream:
        Sink for the progress indicator and for :meth:`write_to`
        (default: :func:`default_stream`).
    spinner:
        Whether to animate the progress indicator.
    progress:
        Initial progress label.
    title:
        Display label of the job. Used in log records only; the report
        layout does not show it.
    color:
        Force styled (True) or plain (False) output. Detected from
        ``stream`` when omitted.
    clock:
        Callable returning the current time.
    process:
        Controller used by :meth:`exit`.
    """

    def __init__(
        self,
        *,
        stream: Optional[TextIO] = None,
        spinner: Optional[bool] = None,
        progress: Optional[str] = None,
        title: Optional[str] = None,
        color: Optional[bool] = None,
        clock: Optional[Callable[[], datetime]] = None,
        process: Optional[ProcessController] = None,
    ) -> None:
        cfg = get_config()
        self._cfg = cfg
        self._stream: TextIO = stream if stream is not None else default_stream()
        self._spinner_enabled: bool = cfg.SPINNER_ENABLED if spinner is None else spinner
        self._title: str = title or cfg.DEFAULT_TITLE
        self._color: bool = should_use_color(self._stream) if color is None else color
        self._clock: Callable[[], datetime] = clock or datetime.now
        self._process: ProcessController = process or SystemProcessController()

        self._progress_label: str = progress or cfg.DEFAULT_PROGRESS_TEXT
        self._errors: list[Any] = []
        self._summary: str = ""
        self._finish: Optional[datetime] = None
        self._spinner = Spinner(self._stream, self._get_progress_text(self._progress_label))
        self._start()

    # Lifecycle ----------------------------------------------------------------
    def _start(self) -> None:
        self._started: datetime = self._clock()
        if self._spinner_enabled:
            self._spinner.start()
        _LOGGER.debug("Job %r started at %s", self._title, self._started.isoformat())

    def finish(self) -> "Job":
        """Stop the progress indicator and freeze the elapsed time.

        Only the first call records a finish time.
        """

        if self._finish is not None:
            _LOGGER.debug("Job %r already finished; ignoring finish()", self._title)
            return self
        self._spinner.stop()
        # never earlier than the start, even if the wall clock moved back
        self._finish = max(self._clock(), self._started)
        _LOGGER.debug(
            "Job %r finished in %d ms with %d error(s)",
            self._title,
            self.get_elapsed_milliseconds(),
            len(self._errors),
        )
        return self

    @property
    def state(self) -> JobState:
        return JobState.FINISHED if self._finish is not None else JobState.RUNNING

    def is_finished(self) -> bool:
        return self._finish is not None

    # Mutators -----------------------------------------------------------------
    def progress(self, text: str) -> "Job":
        self._progress_label = text
        self._spinner.set_text(self._get_progress_text(text))
        _LOGGER.debug("Job %r progress: %s", self._title, text)
        return self

    def add_error(self, err: Any) -> "Job":
        self._errors.append(err)
        _LOGGER.debug("Job %r recorded error #%d: %r", self._title, len(self._errors), err)
        return self

    def summary(self, text: str) -> "Job":
        self._summary = text
        return self

    # Accessors ----------------------------------------------------------------
    @property
    def title(self) -> str:
        return self._title

    @property
    def progress_label(self) -> str:
        return self._progress_label

    @property
    def summary_text(self) -> str:
        return self._summary

    @property
    def spinner_enabled(self) -> bool:
        return self._spinner_enabled

    @property
    def stream(self) -> TextIO:
        return self._stream

    @property
    def color(self) -> bool:
        return self._color

    @property
    def start_timestamp(self) -> datetime:
        return self._started

    @property
    def finish_timestamp(self) -> Optional[datetime]:
        return self._finish

    def get_errors(self) -> list[Any]:
        return list(self._errors)

    def has_errors(self) -> bool:
        return len(self._errors) > 0

    def get_elapsed_milliseconds(self) -> int:
        """Milliseconds between start and finish; 0 while still running."""

        if self._finish is None:
            return 0
        return (self._finish - self._started) // timedelta(milliseconds=1)

    def get_elapsed_seconds(self) -> float:
        return self.get_elapsed_milliseconds() / 1000

    def get_elapsed_text(self) -> str:
        return _format_seconds(self.get_elapsed_seconds()) + self._cfg.ELAPSED_UNIT

    def get_finish_time(self) -> Optional[datetime]:
        return self._finish

    def get_finish_time_text(self) -> str:
        """Format the finish time as ``HH:MM:SSam``/``pm``.

        The hour is taken modulo 12 without mapping 0 to 12, and ``pm`` is
        used only for hours strictly greater than 12, so both midnight and
        noon render as ``00:..:..am``. Consumers match on this exact text.
        Before :meth:`finish` the start time is formatted.
        """

        moment = self._finish if self._finish is not None else self._started
        hrs = moment.hour % 12
        ampm = "pm" if moment.hour > 12 else "am"
        return (
            pad_zeros(hrs, 2)
            + ":"
            + pad_zeros(moment.minute, 2)
            + ":"
            + pad_zeros(moment.second, 2)
            + ampm
        )

    def get_status_text(self) -> str:
        return "Error" if self.has_errors() else "Ok"

    def exit_code(self) -> int:
        return 1 if self.has_errors() else 0

    # Output -------------------------------------------------------------------
    def get_report_text(self) -> str:
        color = self._color
        status_role = "error" if self.has_errors() else "success"
        rows = [
            (style("Elapsed:", "label", color=color), style(self.get_elapsed_text(), "subtle", color=color)),
            (style("Time:", "label", color=color), style(self.get_finish_time_text(), "subtle", color=color)),
            (style("Status:", "label", color=color), style(self.get_status_text(), status_role, color=color)),
        ]

        result = "\n"
        result += table(rows, self._cfg.REPORT_INDENT)
        result += "\n"

        if len(self._summary) > 0:
            result += "\n"
            result += indent(self._summary.rstrip("\n"), self._cfg.REPORT_INDENT)
            result += "\n"

        return result

    def write_to(self, stream: Optional[TextIO] = None) -> "Job":
        """Write :meth:`get_report_text` to ``stream`` (default: the job's stream)."""

        target = stream if stream is not None else self._stream
        # already styled for self._color; click must not strip anything
        click.echo(self.get_report_text(), file=target, nl=False, color=True)
        return self

    def exit(self) -> NoReturn:
        code = self.exit_code()
        _LOGGER.debug("Job %r exiting with code %d", self._title, code)
        self._process.exit(code)

    def _get_progress_text(self, value: str) -> str:
        return style(f"  {FRAME_PLACEHOLDER} ", "progress", color=self._color) + " " + value

    def __repr__(self) -> str:
        return f"<Job title={self._title!r} state={self.state.value} errors={len(self._errors)}>"


__all__ = [
    "Job",
    "JobState",
    "default_stream",
]
