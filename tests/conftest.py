import pytest

from depthalert.hardware.mock import MockAnnouncer, MockHaptics
from tests.helpers import FakeClock


@pytest.fixture
def announcer():
    return MockAnnouncer()


@pytest.fixture
def haptics():
    return MockHaptics()


@pytest.fixture
def clock():
    return FakeClock()
