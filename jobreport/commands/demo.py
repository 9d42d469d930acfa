from __future__ import annotations

from typing import Optional
import time

import click

from jobreport.commands.options import configure_logging, job_options, resolve_color
from jobreport.job import Job


@click.command(name="demo")
@click.option("steps", "--steps", type=click.IntRange(min=0), default=5, show_default=True, help="Number of simulated steps")
@click.option("delay", "--delay", type=click.FloatRange(min=0.0), default=0.3, show_default=True, help="Seconds spent on each step")
@click.option("fail_steps", "--fail-step", type=int, multiple=True, help="Step number (1-based) that records an error; repeatable")
@job_options
def demo(
    steps: int,
    delay: float,
    fail_steps: tuple[int, ...],
    title: str,
    summary: Optional[str],
    spinner: bool,
    color: str,
    verbose: bool,
) -> None:
    """Simulate a multi-step job to preview the progress and report output.

    Examples:
      jobreport demo
      jobreport demo --steps 10 --delay 0.1 --fail-step 3 --fail-step 7
    """

    configure_logging(verbose)
    failing = set(fail_steps)
    job = Job(spinner=spinner, title=title, color=resolve_color(color))

    for i in range(1, steps + 1):
        job.progress(f"Step {i}/{steps}")
        time.sleep(delay)
        if i in failing:
            job.add_error(f"Step {i} failed")

    job.finish()
    if summary is None:
        summary = f"{steps} step(s), {len(job.get_errors())} failed"
    job.summary(summary).write_to()
    job.exit()
