import asyncio
from unittest.mock import AsyncMock

import pytest

from device.errors import DeviceSessionError
from device.session import DeviceSession
from main_asyncio import LedAnimationApp
from models.config import AppConfig
from models.enums import SchedulerState
from protocol.ddp import parse_header


@pytest.fixture
def config():
    return AppConfig(host="127.0.0.1", led_count=5, update_interval=10)


@pytest.fixture
def session(wled_client):
    return DeviceSession(wled_client, auto_turn_on=True)


@pytest.mark.asyncio
async def test_start_streams_frames_of_configured_length(config, session, transport):
    app = LedAnimationApp(config, session=session, transport=transport)

    app.start()
    await asyncio.sleep(0.06)
    app.stop()

    assert transport.send.call_count >= 1
    packet = transport.send.call_args.args[0]
    assert parse_header(packet).length == 15
    transport.close.assert_called_once()


@pytest.mark.asyncio
async def test_device_startup_runs_alongside_scheduler(config, session, wled_client, transport):
    app = LedAnimationApp(config, session=session, transport=transport)

    app.start()
    assert app.scheduler.state is SchedulerState.RUNNING
    await app.session_task

    wled_client.set_state.assert_awaited_once_with({"on": True})
    app.stop()


@pytest.mark.asyncio
async def test_unreachable_device_does_not_stop_streaming(config, session, wled_client, transport):
    wled_client.get_info.side_effect = DeviceSessionError("unreachable")
    app = LedAnimationApp(config, session=session, transport=transport)

    app.start()
    await app.session_task
    await asyncio.sleep(0.05)

    assert app.scheduler.is_running
    assert transport.send.call_count >= 1
    app.stop()


@pytest.mark.asyncio
async def test_run_shuts_down_on_request(config, session, wled_client, transport):
    app = LedAnimationApp(config, session=session, transport=transport)

    runner = asyncio.create_task(app.run())
    await asyncio.sleep(0.05)
    app.coordinator.request_shutdown("test")
    await asyncio.wait_for(runner, timeout=2.0)

    assert app.scheduler.state is SchedulerState.STOPPED
    wled_client.aclose.assert_awaited_once()
    transport.close.assert_called()


@pytest.mark.asyncio
async def test_stop_is_idempotent(config, session, transport):
    app = LedAnimationApp(config, session=session, transport=transport)

    app.start()
    app.stop()
    app.stop()

    assert app.scheduler.state is SchedulerState.STOPPED


@pytest.mark.asyncio
async def test_cancelled_run_still_releases_device_session(config, session, wled_client, transport):
    app = LedAnimationApp(config, session=session, transport=transport)
    app.aclose = AsyncMock(wraps=app.aclose)

    runner = asyncio.create_task(app.run())
    await asyncio.sleep(0.05)
    runner.cancel()
    with pytest.raises(asyncio.CancelledError):
        await runner

    app.aclose.assert_awaited_once()
    wled_client.aclose.assert_awaited_once()
    transport.close.assert_called()
    assert app.scheduler.state is SchedulerState.STOPPED
    assert app.session_task.done()


@pytest.mark.asyncio
async def test_aclose_cancels_pending_device_startup(config, session, wled_client, transport):
    async def hang():
        await asyncio.sleep(10)

    wled_client.get_info.side_effect = hang
    app = LedAnimationApp(config, session=session, transport=transport)

    app.start()
    await asyncio.sleep(0.01)
    await app.aclose()
    await app.aclose()

    assert app.session_task.cancelled()
    wled_client.aclose.assert_awaited_once()
    transport.close.assert_called()
