# type: ignore
import pytest

from temu.runtime.display import BufferedDisplay
from temu.runtime.controls import TextSource, FixedRate
from temu.runtime.scheduler import Scheduler


@pytest.fixture
def display():
    yield BufferedDisplay()


@pytest.fixture
def source():
    yield TextSource()


@pytest.fixture
def rate():
    yield FixedRate(1)


@pytest.fixture
def scheduler(source, rate, display):
    yield Scheduler(source, rate, display)
