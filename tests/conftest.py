import pytest
from unittest.mock import AsyncMock, MagicMock

from lifecycle.task_registry import TaskRegistry
from models.frame import Frame, Led


@pytest.fixture(autouse=True)
def fresh_task_registry():
    """Every test starts with an empty task registry."""
    TaskRegistry.reset()
    yield
    TaskRegistry.reset()


class RecordingGenerator:
    """Deterministic generator: every LED gets (phase, i, led_count)."""

    def __init__(self):
        self.calls = []

    def generate(self, led_count: int, phase: int) -> Frame:
        self.calls.append((led_count, phase))
        return Frame(tuple(Led(phase, i, led_count) for i in range(led_count)))


@pytest.fixture
def generator():
    return RecordingGenerator()


@pytest.fixture
def transport():
    """Stand-in packet sink; records every send()."""
    sink = MagicMock()
    sink.send = MagicMock()
    sink.close = MagicMock()
    return sink


@pytest.fixture
def wled_client():
    """Mocked WLED JSON API client (device reports OFF by default)."""
    client = MagicMock()
    client.get_info = AsyncMock(return_value={"name": "WLED", "ver": "0.14.0"})
    client.get_state = AsyncMock(return_value={"on": False, "bri": 128})
    client.set_state = AsyncMock(return_value={"success": True})
    client.aclose = AsyncMock()
    return client
