import pytest


class RecordingLogger:
    """Stands in for a session logger, keeps the messages it is given."""
    def __init__(self):
        self.messages = []

    def info(self, msg):
        self.messages.append(('info', msg))

    def warning(self, msg):
        self.messages.append(('warning', msg))

    def error(self, msg):
        self.messages.append(('error', msg))


@pytest.fixture(scope="function")
def recording_logger():
    return RecordingLogger()


@pytest.fixture(scope="function")
def unit_cube():
    """Grid with corners at the 8 combinations of 0 and 1 on each axis."""
    from volslice import GridData
    return GridData((1, 1, 1), name='unit cube')


@pytest.fixture(scope="function")
def config_dir(tmp_path):
    return str(tmp_path / "config")


@pytest.fixture(scope="function")
def slice_settings(config_dir, recording_logger):
    from volslice.settings import SliceRangeSettings
    return SliceRangeSettings(config_dir, logger=recording_logger)
