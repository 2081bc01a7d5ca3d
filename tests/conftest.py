import pytest

from padder.reporting import SilentReporter, set_reporter


@pytest.fixture(autouse=True)
def _quiet_reporter():
    set_reporter(SilentReporter())
    yield
    set_reporter(SilentReporter())
