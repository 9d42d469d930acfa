from __future__ import annotations

from typing import Optional
import shlex
import subprocess

import click

from jobreport.commands.options import configure_logging, job_options, resolve_color
from jobreport.job import Job


@click.command(name="run", context_settings={"ignore_unknown_options": True})
@click.option("progress", "--progress", type=str, default=None, help="Progress label (default: 'Running <command>')")
@job_options
@click.argument("command", nargs=-1, required=True, type=click.UNPROCESSED)
def run(
    command: tuple[str, ...],
    progress: Optional[str],
    title: str,
    summary: Optional[str],
    spinner: bool,
    color: str,
    verbose: bool,
) -> None:
    """Run COMMAND under a job and report elapsed time and status.

    The command's stdout and stderr are captured while the progress indicator
    runs and echoed to stdout and stderr once it has finished, whatever the
    outcome. Exits 1 if the command could not be started
    or returned a non-zero status.

    Examples:
      jobreport run -- make test
      jobreport run --summary "nightly build" -- ./build.sh --release
      jobreport run --no-spinner --color never -- pytest -q
    """

    configure_logging(verbose)
    argv = list(command)
    display = shlex.join(argv)

    job = Job(
        spinner=spinner,
        progress=progress or f"Running {display}",
        title=title,
        color=resolve_color(color),
    )

    completed: Optional[subprocess.CompletedProcess[str]] = None
    try:
        try:
            completed = subprocess.run(argv, capture_output=True, text=True)
        except (OSError, ValueError) as e:
            # missing executable, permissions, or an argv the OS cannot take
            job.add_error(e)
        else:
            if completed.returncode != 0:
                job.add_error(
                    subprocess.CalledProcessError(completed.returncode, argv, completed.stdout, completed.stderr)
                )
    except Exception as e:
        job.finish()
        click.secho(f"Error: {e}", fg="red", err=True)
        raise SystemExit(1)
    job.finish()

    if completed is not None:
        if completed.stdout:
            click.echo(completed.stdout, nl=False)
        if completed.stderr:
            click.echo(completed.stderr, nl=False, err=True)

    if summary is None and job.has_errors():
        summary = "\n".join(str(e) for e in job.get_errors())
    job.summary(summary or "")
    job.write_to()
    job.exit()
