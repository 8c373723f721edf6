"""Shared pytest wiring for the analytics suite."""

from __future__ import annotations

import asyncio
import inspect
import os

import pytest

from wealth_engine.config import get_settings


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "asyncio: coroutine test driven by the local event-loop runner")


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch):
    """Isolate every test from the caller's ``WEALTH_ENGINE_*`` environment and the settings cache."""

    for name in [key for key in os.environ if key.startswith("WEALTH_ENGINE_")]:
        monkeypatch.delenv(name)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.hookimpl(tryfirst=True)
def pytest_pyfunc_call(pyfuncitem: pytest.Function) -> bool | None:
    """Run ``async def`` tests (API tests) on a fresh event loop."""

    test_function = pyfuncitem.obj
    if not inspect.iscoroutinefunction(test_function):
        return None
    wanted = inspect.signature(test_function).parameters
    kwargs = {name: value for name, value in pyfuncitem.funcargs.items() if name in wanted}
    asyncio.run(test_function(**kwargs))
    return True
