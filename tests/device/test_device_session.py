import pytest

from device.errors import BrightnessOutOfRangeError, DeviceSessionError
from device.session import DeviceSession


@pytest.mark.asyncio
@pytest.mark.parametrize("value", [-1, 256, 1000])
async def test_set_brightness_out_of_range_rejected_before_call(wled_client, value):
    session = DeviceSession(wled_client)

    with pytest.raises(BrightnessOutOfRangeError):
        await session.set_brightness(value)

    wled_client.set_state.assert_not_awaited()


@pytest.mark.asyncio
async def test_brightness_error_is_a_value_error(wled_client):
    session = DeviceSession(wled_client)

    with pytest.raises(ValueError, match="between 0 and 255"):
        await session.set_brightness(300)


@pytest.mark.asyncio
async def test_set_brightness_in_range_calls_api_once(wled_client):
    session = DeviceSession(wled_client)

    await session.set_brightness(128)

    wled_client.set_state.assert_awaited_once_with({"bri": 128})


@pytest.mark.asyncio
@pytest.mark.parametrize("value", [0, 255])
async def test_set_brightness_bounds_are_inclusive(wled_client, value):
    session = DeviceSession(wled_client)

    await session.set_brightness(value)

    wled_client.set_state.assert_awaited_once_with({"bri": value})


@pytest.mark.asyncio
async def test_query_power(wled_client):
    session = DeviceSession(wled_client)

    assert await session.query_power() is False

    wled_client.get_state.return_value = {"on": True}
    assert await session.query_power() is True


@pytest.mark.asyncio
async def test_initialize_turns_on_when_off(wled_client):
    session = DeviceSession(wled_client, auto_turn_on=True)

    await session.initialize()

    assert session.initially_off is True
    assert session.ready is True
    wled_client.set_state.assert_awaited_once_with({"on": True})


@pytest.mark.asyncio
async def test_initialize_leaves_device_off_without_auto_turn_on(wled_client):
    session = DeviceSession(wled_client, auto_turn_on=False)

    await session.initialize()

    assert session.initially_off is True
    wled_client.set_state.assert_not_awaited()


@pytest.mark.asyncio
async def test_initialize_does_not_turn_on_when_already_on(wled_client):
    wled_client.get_state.return_value = {"on": True, "bri": 200}
    session = DeviceSession(wled_client, auto_turn_on=True)

    await session.initialize()

    assert session.initially_off is False
    wled_client.set_state.assert_not_awaited()


@pytest.mark.asyncio
async def test_initialize_propagates_unreachable_device(wled_client):
    wled_client.get_info.side_effect = DeviceSessionError("unreachable")
    session = DeviceSession(wled_client)

    with pytest.raises(DeviceSessionError):
        await session.initialize()

    assert session.ready is False


@pytest.mark.asyncio
async def test_close_closes_client(wled_client):
    await DeviceSession(wled_client).close()
    wled_client.aclose.assert_awaited_once()


@pytest.mark.asyncio
async def test_close_twice_closes_client_once(wled_client):
    session = DeviceSession(wled_client)

    await session.close()
    await session.close()

    wled_client.aclose.assert_awaited_once()
