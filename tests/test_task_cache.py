import pytest

from proverclient.task_cache import TaskCache


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


@pytest.mark.asyncio
async def test_insert_then_contains():
    cache = TaskCache(3)
    await cache.insert("a")
    found_a = await cache.contains("a")
    found_b = await cache.contains("b")
    assert found_a is True
    assert found_b is False
    assert len(cache) == 1


@pytest.mark.asyncio
async def test_evicts_oldest_when_full():
    cache = TaskCache(2)
    for task_id in ("a", "b", "c"):
        await cache.insert(task_id)
    found = [await cache.contains(task_id) for task_id in ("a", "b", "c")]
    assert found == [False, True, True]
    assert len(cache) == 2


@pytest.mark.asyncio
async def test_duplicate_insert_does_not_evict():
    cache = TaskCache(2)
    await cache.insert("a")
    await cache.insert("b")
    await cache.insert("a")
    found = [await cache.contains(task_id) for task_id in ("a", "b")]
    assert found == [True, True]
    assert len(cache) == 2


@pytest.mark.asyncio
async def test_entries_expire():
    clock = FakeClock()
    cache = TaskCache(5, expiration=10.0, clock=clock)
    await cache.insert("a")
    clock.now = 5.0
    await cache.insert("b")
    clock.now = 10.0
    found_a = await cache.contains("a")
    found_b = await cache.contains("b")
    assert found_a is False
    assert found_b is True
    clock.now = 20.0
    found_b_later = await cache.contains("b")
    assert found_b_later is False
    assert len(cache) == 0


@pytest.mark.asyncio
async def test_expired_entry_can_be_reinserted():
    clock = FakeClock()
    cache = TaskCache(1, expiration=1.0, clock=clock)
    await cache.insert("a")
    clock.now = 2.0
    await cache.insert("a")
    found = await cache.contains("a")
    assert found is True
    assert len(cache) == 1