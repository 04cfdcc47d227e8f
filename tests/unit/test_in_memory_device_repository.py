"""
Unit tests for InMemoryDeviceRepository.
"""
from datetime import datetime, timedelta, timezone

import pytest
from device_service.domain.models.device import Device
from device_service.domain.models.device_state import DeviceState
from device_service.infrastructure.db.in_memory_device_repository import InMemoryDeviceRepository


CREATED_AT = datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


def _make_device(device_id: str, brand: str = "Apple", state: DeviceState = DeviceState.AVAILABLE) -> Device:
    return Device(id=device_id, name="Phone", brand=brand, state=state, creation_time=CREATED_AT)


@pytest.fixture
def repo():
    return InMemoryDeviceRepository()


class TestInMemoryDeviceRepository:

    @pytest.mark.asyncio
    async def test_save_and_find(self, repo):
        saved = await repo.save(_make_device("dev-1"))
        found = await repo.find_by_id("dev-1")
        assert found == saved
        assert found.creation_time == CREATED_AT

    @pytest.mark.asyncio
    async def test_find_missing_returns_none(self, repo):
        assert await repo.find_by_id("missing") is None

    @pytest.mark.asyncio
    async def test_returned_copies_are_detached(self, repo):
        await repo.save(_make_device("dev-1"))
        found = await repo.find_by_id("dev-1")
        found.name = "Changed"
        again = await repo.find_by_id("dev-1")
        assert again.name == "Phone"

    @pytest.mark.asyncio
    async def test_save_keeps_first_creation_time(self, repo):
        await repo.save(_make_device("dev-1"))
        later = _make_device("dev-1")
        later.creation_time = CREATED_AT + timedelta(days=1)
        later.state = DeviceState.IN_USE

        saved = await repo.save(later)

        assert saved.creation_time == CREATED_AT
        assert saved.state is DeviceState.IN_USE

    @pytest.mark.asyncio
    async def test_find_by_brand_is_case_sensitive(self, repo):
        await repo.save(_make_device("dev-1", brand="Apple"))
        await repo.save(_make_device("dev-2", brand="apple"))
        await repo.save(_make_device("dev-3", brand="Samsung"))

        result = await repo.find_by_brand("Apple")

        assert [device.id for device in result] == ["dev-1"]

    @pytest.mark.asyncio
    async def test_find_by_state(self, repo):
        await repo.save(_make_device("dev-1", state=DeviceState.IN_USE))
        await repo.save(_make_device("dev-2", state=DeviceState.AVAILABLE))

        result = await repo.find_by_state(DeviceState.IN_USE)

        assert [device.id for device in result] == ["dev-1"]

    @pytest.mark.asyncio
    async def test_find_all_and_delete(self, repo):
        await repo.save(_make_device("dev-1"))
        await repo.save(_make_device("dev-2"))
        assert len(await repo.find_all()) == 2

        await repo.delete_by_id("dev-1")

        assert not await repo.exists_by_id("dev-1")
        assert await repo.exists_by_id("dev-2")
        assert [device.id for device in await repo.find_all()] == ["dev-2"]

    @pytest.mark.asyncio
    async def test_delete_missing_is_noop(self, repo):
        await repo.delete_by_id("missing")
        assert await repo.find_all() == []
