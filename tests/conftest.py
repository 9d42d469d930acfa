from __future__ import annotations

from datetime import datetime
from io import StringIO
from typing import Callable, Iterable

import pytest

from jobreport.job import Job
from jobreport.process import RecordingProcessController


class FakeClock:
    """Returns the given datetimes in order, repeating the last one."""

    def __init__(self, moments: Iterable[datetime]) -> None:
        self._moments = list(moments)
        self.calls = 0

    def __call__(self) -> datetime:
        moment = self._moments[min(self.calls, len(self._moments) - 1)]
        self.calls += 1
        return moment


@pytest.fixture()
def stream() -> StringIO:
    return StringIO()


@pytest.fixture()
def process() -> RecordingProcessController:
    return RecordingProcessController()


@pytest.fixture()
def make_job(stream: StringIO, process: RecordingProcessController) -> Callable[..., Job]:
    def _make(*moments: datetime, **kwargs) -> Job:
        if not moments:
            moments = (datetime(2024, 5, 1, 13, 5, 7, 500000), datetime(2024, 5, 1, 13, 5, 9))
        kwargs.setdefault("stream", stream)
        kwargs.setdefault("spinner", False)
        kwargs.setdefault("color", False)
        kwargs.setdefault("process", process)
        return Job(clock=FakeClock(moments), **kwargs)

    return _make
