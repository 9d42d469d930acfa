"""Terminal primitives: named text styles, aligned tables and a spinner.

Styling is delegated to :func:`click.style`; the spinner renders through a
``tqdm`` bar whose format is reduced to its description, so tqdm takes care of
clearing and redrawing the line on the target stream.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Sequence
import logging
import threading

import click
from tqdm import tqdm

from jobreport.config import get_config


_LOGGER = logging.getLogger(__name__)


# role -> keyword arguments for click.style
STYLE_ROLES: dict[str, dict[str, Any]] = {
    "title": {"bold": True},
    "label": {"fg": "bright_black"},
    "subtle": {"dim": True},
    "success": {"fg": "green", "bold": True},
    "error": {"fg": "red", "bold": True},
    "progress": {"fg": "green"},
}

FRAME_PLACEHOLDER = "{frame}"


def style(text: str, role: str, *, color: bool = True) -> str:
    """Apply the named visual ``role`` to ``text``.

    When ``color`` is False the text is returned untouched, so callers can
    render for sinks that do not understand ANSI escapes.
    """

    try:
        kwargs = STYLE_ROLES[role]
    except KeyError:
        raise ValueError(f"Unknown style role: {role!r}") from None
    if not color:
        return text
    return click.style(text, **kwargs)


def visible_width(text: str) -> int:
    """Return the printable width of ``text`` ignoring ANSI escapes."""

    return len(click.unstyle(text))


def table(rows: Iterable[Sequence[str]], indent: int = 0, *, gap: int = 1) -> str:
    """Lay out ``rows`` into left-aligned columns.

    Every line is prefixed by ``indent`` spaces and columns are separated by
    ``gap`` spaces. The last cell of a row is not padded. Lines are joined by
    newlines without a trailing one.
    """

    materialized = [list(row) for row in rows]
    if not materialized:
        return ""

    n_cols = max(len(row) for row in materialized)
    widths = [
        max((visible_width(row[i]) for row in materialized if i < len(row)), default=0)
        for i in range(n_cols)
    ]

    prefix = " " * indent
    sep = " " * gap
    lines: list[str] = []
    for row in materialized:
        cells: list[str] = []
        for i, cell in enumerate(row):
            if i == len(row) - 1:
                cells.append(cell)
            else:
                cells.append(cell + " " * (widths[i] - visible_width(cell)))
        lines.append(prefix + sep.join(cells))
    return "\n".join(lines)


class Spinner:
    """Animated single-line progress indicator.

    ``text`` may contain ``{frame}``, which is replaced by the current
    animation frame on every tick. Ticks run on a daemon thread until
    :meth:`stop` is called; :meth:`stop` is safe on a spinner that was never
    started.
    """

    def __init__(
        self,
        stream: Any,
        text: str = FRAME_PLACEHOLDER,
        *,
        frames: Optional[Sequence[str]] = None,
        interval: Optional[float] = None,
    ) -> None:
        cfg = get_config()
        self._stream = stream
        self._text = text
        self._frames = tuple(frames) if frames else cfg.SPINNER_FRAMES
        self._interval = cfg.SPINNER_INTERVAL if interval is None else interval
        self._index = 0
        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._bar: Optional[tqdm] = None

    @property
    def text(self) -> str:
        return self._text

    @property
    def is_running(self) -> bool:
        return self._thread is not None

    def render(self) -> str:
        """Return the text with the current frame substituted."""

        frame = self._frames[self._index % len(self._frames)]
        return self._text.replace(FRAME_PLACEHOLDER, frame)

    def start(self) -> None:
        with self._lock:
            if self._thread is not None:
                return
            self._stop_event.clear()
            self._bar = tqdm(
                total=None,
                file=self._stream,
                bar_format="{desc}",
                desc=self.render(),
                leave=False,
            )
            self._thread = threading.Thread(target=self._animate, name="jobreport-spinner", daemon=True)
            self._thread.start()
        _LOGGER.debug("Spinner started")

    def set_text(self, text: str) -> None:
        with self._lock:
            self._text = text
            if self._bar is not None:
                self._bar.set_description_str(self.render(), refresh=True)

    def stop(self) -> None:
        with self._lock:
            thread, self._thread = self._thread, None
            if thread is None:
                return
            self._stop_event.set()
        thread.join()
        with self._lock:
            if self._bar is not None:
                self._bar.close()
                self._bar = None
        _LOGGER.debug("Spinner stopped")

    def _animate(self) -> None:
        while not self._stop_event.wait(self._interval):
            with self._lock:
                if self._bar is None:
                    return
                self._index += 1
                self._bar.set_description_str(self.render(), refresh=True)


__all__ = [
    "STYLE_ROLES",
    "Spinner",
    "style",
    "table",
    "visible_width",
]
