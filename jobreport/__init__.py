"""
jobreport: console job tracking with a live progress indicator.

Times a unit of work, animates a spinner while it runs, collects errors and
prints a short report with elapsed time, finish time and status.
"""

__all__ = [
    "Config",
    "Job",
    "JobState",
    "ProcessController",
    "RecordingProcessController",
    "Spinner",
    "SystemProcessController",
    "__version__",
    "default_stream",
    "get_config",
]

__version__ = "0.1.0"

from jobreport.config import Config, get_config
from jobreport.job import Job, JobState, default_stream
from jobreport.process import ProcessController, RecordingProcessController, SystemProcessController
from jobreport.term import Spinner
