"""Options shared by the job-running subcommands."""

from __future__ import annotations

from typing import Any, Callable, Optional
import logging

import click

from jobreport.config import Config


_COLOR_MODES: dict[str, Optional[bool]] = {"auto": None, "always": True, "never": False}


def job_options(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the options every job-running command accepts."""

    decorators = [
        click.option("title", "--title", type=str, default=Config.DEFAULT_TITLE, show_default=True, help="Job title used in log records"),
        click.option("summary", "--summary", type=str, default=None, help="Summary text printed below the report"),
        click.option("spinner", "--spinner/--no-spinner", default=Config.SPINNER_ENABLED, show_default=True, help="Show the animated progress indicator"),
        click.option("color", "--color", type=click.Choice(list(_COLOR_MODES), case_sensitive=False), default="auto", show_default=True, help="Styled output: detect the terminal, always or never"),
        click.option("verbose", "--verbose", "-v", is_flag=True, help="Log debug records to stderr"),
    ]
    for decorator in reversed(decorators):
        fn = decorator(fn)
    return fn


def resolve_color(mode: str) -> Optional[bool]:
    """Map a ``--color`` choice to the ``color`` argument of :class:`~jobreport.job.Job`."""

    return _COLOR_MODES[mode.lower()]


def configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
