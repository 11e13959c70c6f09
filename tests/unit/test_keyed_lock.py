"""Unit tests for the per-key asyncio lock registry."""

import asyncio

import pytest

from multifinance.infrastructure.locking import KeyedLock


class TestKeyedLock:

    @pytest.mark.asyncio
    async def test_same_key_is_exclusive(self):
        locks = KeyedLock()
        order = []

        async def worker(name: str):
            async with locks.hold("3201010101900001"):
                order.append(f"{name}-in")
                await asyncio.sleep(0.01)
                order.append(f"{name}-out")

        await asyncio.gather(worker("a"), worker("b"))

        assert order == ["a-in", "a-out", "b-in", "b-out"]

    @pytest.mark.asyncio
    async def test_different_keys_do_not_block(self):
        locks = KeyedLock()

        async with locks.hold("a"):
            async with locks.hold("b"):
                assert locks.locked("a")
                assert locks.locked("b")

    @pytest.mark.asyncio
    async def test_entries_dropped_when_idle(self):
        locks = KeyedLock()

        async with locks.hold("a"):
            assert len(locks) == 1

        assert len(locks) == 0
        assert not locks.locked("a")

    @pytest.mark.asyncio
    async def test_cancelled_waiter_cleans_up(self):
        locks = KeyedLock()

        async def wait_for_key():
            async with locks.hold("a"):
                pass

        async with locks.hold("a"):
            with pytest.raises(asyncio.TimeoutError):
                await asyncio.wait_for(wait_for_key(), timeout=0.01)
            assert len(locks) == 1

        assert len(locks) == 0
