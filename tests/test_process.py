import pytest

from jobreport.process import RecordingProcessController, SystemProcessController


def test_system_controller_raises_system_exit():
    with pytest.raises(SystemExit) as excinfo:
        SystemProcessController().exit(3)
    assert excinfo.value.code == 3


def test_recording_controller_records_codes():
    ctl = RecordingProcessController()
    assert ctl.last_code is None
    ctl.exit(0)
    ctl.exit(1)
    assert ctl.codes == [0, 1]
    assert ctl.last_code == 1
