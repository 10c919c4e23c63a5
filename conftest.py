import logging

import pytest

from observable.testing import Recorder, TeardownCounter
from tests.helpers import EventHistory

logging.basicConfig(level=logging.DEBUG)


@pytest.fixture(scope="function")
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture(scope="function")
def teardown() -> TeardownCounter:
    return TeardownCounter()


@pytest.fixture(scope="function")
def event_history() -> EventHistory:
    return EventHistory()
