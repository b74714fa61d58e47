"""Debouncer 테스트."""

import asyncio

import pytest

from catalog_search.utils import Debouncer


@pytest.mark.asyncio
async def test_last_call_wins():
    calls = []
    debouncer = Debouncer(calls.append, delay_s=0.01)

    debouncer.call("ali")
    debouncer.call("alic")
    debouncer.call("alice")
    await asyncio.sleep(0.05)

    assert calls == ["alice"]
    assert debouncer.pending is False


@pytest.mark.asyncio
async def test_cancel():
    calls = []
    debouncer = Debouncer(calls.append, delay_s=0.01)

    debouncer.call("x")
    assert debouncer.pending is True
    assert debouncer.cancel() is True
    await asyncio.sleep(0.05)

    assert calls == []
    assert debouncer.cancel() is False


@pytest.mark.asyncio
async def test_flush_runs_immediately():
    debouncer = Debouncer(lambda value: value.upper(), delay_s=10)

    debouncer.call("mouse")

    assert debouncer.flush() == "MOUSE"
    assert debouncer.pending is False
    assert debouncer.flush() is None


@pytest.mark.asyncio
async def test_async_function_creates_task():
    results = []

    async def check(value):
        results.append(value)
        return value

    debouncer = Debouncer(check, delay_s=0.01)
    debouncer.call("keyboard")
    await asyncio.sleep(0.05)

    assert isinstance(debouncer.last_task, asyncio.Task)
    assert await debouncer.last_task == "keyboard"
    assert results == ["keyboard"]


@pytest.mark.asyncio
async def test_callback_error_is_logged(caplog):
    def boom(_):
        raise RuntimeError("boom")

    debouncer = Debouncer(boom, delay_s=0)
    debouncer.call("x")
    await asyncio.sleep(0.02)

    assert debouncer.pending is False
    assert "Debounced call failed" in caplog.text


def test_call_requires_running_loop():
    with pytest.raises(RuntimeError):
        Debouncer(print).call("x")


def test_negative_delay():
    with pytest.raises(ValueError):
        Debouncer(print, delay_s=-1)
