import asyncio

import pytest

from libindex_api.service.keyed_lock import KeyedLock


@pytest.mark.asyncio
async def test_same_key_is_serialized_and_entry_released():
    locks = KeyedLock()
    active = 0
    peak = 0

    async def critical() -> None:
        nonlocal active, peak
        async with locks.hold(("release", "g", "a", "1")):
            active += 1
            peak = max(peak, active)
            await asyncio.sleep(0.01)
            active -= 1

    await asyncio.gather(*(critical() for _ in range(5)))

    assert peak == 1
    assert len(locks) == 0


@pytest.mark.asyncio
async def test_distinct_keys_do_not_block_each_other():
    locks = KeyedLock()
    entered = asyncio.Event()

    async def first() -> None:
        async with locks.hold("a"):
            await asyncio.wait_for(entered.wait(), timeout=1)

    async def second() -> None:
        async with locks.hold("b"):
            assert locks.locked("a")
            entered.set()

    await asyncio.gather(first(), second())
    assert not locks.locked("a")


@pytest.mark.asyncio
async def test_entry_released_when_body_raises():
    locks = KeyedLock()

    with pytest.raises(RuntimeError):
        async with locks.hold("k"):
            raise RuntimeError("boom")

    assert len(locks) == 0
