"""Shared test fixtures for all test groups."""

import asyncio

import pytest

from synthdata.generation.fake import GeneratorFake
from synthdata.sessions.manager import SessionManager


@pytest.fixture
def generator_fake():
    """Fresh GeneratorFake with happy_path scenario (default)."""
    return GeneratorFake(scenario="happy_path")


@pytest.fixture
def generator_fake_failing():
    """GeneratorFake with llm_failure scenario."""
    return GeneratorFake(scenario="llm_failure")


@pytest.fixture
def gate():
    """Event that holds gated GeneratorFake calls open until set."""
    return asyncio.Event()


@pytest.fixture
def generator_fake_gated(gate):
    """happy_path GeneratorFake that blocks until the gate is set."""
    return GeneratorFake(scenario="happy_path", gate=gate)


@pytest.fixture
def manager(generator_fake):
    """Empty SessionManager backed by the happy_path fake."""
    return SessionManager(generator=generator_fake)


@pytest.fixture
def wait_until_generating():
    """Helper that yields to the event loop until a generation is in flight."""

    async def _wait(manager: SessionManager) -> None:
        for _ in range(1000):
            if manager.is_generating:
                return
            await asyncio.sleep(0)
        raise AssertionError("generation never started")

    return _wait
