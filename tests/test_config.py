import dataclasses

import pytest

from jobreport.config import Config, DEFAULT_PROGRESS_TEXT, REPORT_INDENT, get_config


def test_config_singleton():
    """get_config should return the same singleton instance across calls."""

    c1 = get_config()
    c2 = get_config()
    assert c1 is c2
    assert isinstance(c1, Config)


def test_defaults():
    assert DEFAULT_PROGRESS_TEXT == "Processing"
    assert REPORT_INDENT == 2
    assert Config.DEFAULT_TITLE == "Job Report:"
    assert Config.SPINNER_ENABLED is True
    assert Config.ELAPSED_UNIT == "s"


def test_config_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        get_config().REPORT_INDENT = 4  # type: ignore[misc]


def test_spinner_frames_non_empty():
    assert len(Config.SPINNER_FRAMES) > 0
    assert Config.SPINNER_INTERVAL > 0
