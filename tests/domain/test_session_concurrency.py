"""Tests for single-flight generation and operations during an in-flight generation.

A gated GeneratorFake holds generate() open so the test can act while the
session is in the Generating state.
"""

import asyncio

import pytest

from synthdata.core.exceptions import GenerationBusyError, GenerationFailedError
from synthdata.generation.fake import GeneratorFake
from synthdata.sessions.manager import SessionManager

pytestmark = pytest.mark.unit


async def test_second_generate_while_in_flight_is_busy(generator_fake_gated, gate, wait_until_generating):
    """generate('x') pending -> generate('y') is Busy; only 'x' produces an artifact."""
    manager = SessionManager(generator=generator_fake_gated)

    first = asyncio.create_task(manager.generate("x"))
    await wait_until_generating(manager)

    with pytest.raises(GenerationBusyError) as exc_info:
        await manager.generate("y")
    assert exc_info.value.code == "BUSY"

    gate.set()
    result = await first

    assert generator_fake_gated.calls == ["x"]
    assert len(manager.artifacts) == 1
    assert manager.active_id == result.artifact_id
    assert 'task_description: "x"' in manager.artifacts[0].content


async def test_busy_rejection_does_not_touch_state(generator_fake_gated, gate, wait_until_generating):
    manager = SessionManager(generator=generator_fake_gated)
    gate.set()
    existing = await manager.generate("existing")
    gate.clear()

    pending = asyncio.create_task(manager.generate("x"))
    await wait_until_generating(manager)
    before = manager.snapshot()

    with pytest.raises(GenerationBusyError):
        await manager.generate("y")

    assert manager.snapshot() == before
    assert manager.active_id == existing.artifact_id
    assert manager.is_generating is True

    gate.set()
    await pending
    assert manager.is_generating is False


async def test_busy_check_precedes_description_validation(generator_fake_gated, gate, wait_until_generating):
    manager = SessionManager(generator=generator_fake_gated)

    pending = asyncio.create_task(manager.generate("x"))
    await wait_until_generating(manager)

    with pytest.raises(GenerationBusyError):
        await manager.generate("   ")

    gate.set()
    await pending


async def test_flag_is_set_only_while_generating(generator_fake_gated, gate, wait_until_generating):
    manager = SessionManager(generator=generator_fake_gated)
    assert manager.is_generating is False

    pending = asyncio.create_task(manager.generate("x"))
    await wait_until_generating(manager)
    assert manager.snapshot().is_generating is True

    gate.set()
    await pending
    assert manager.is_generating is False


async def test_flag_clears_after_failed_generation(gate, wait_until_generating):
    generator = GeneratorFake(scenario="llm_failure", gate=gate)
    manager = SessionManager(generator=generator)

    pending = asyncio.create_task(manager.generate("x"))
    await wait_until_generating(manager)
    gate.set()

    with pytest.raises(GenerationFailedError):
        await pending

    assert manager.is_generating is False
    assert manager.artifacts == ()


async def test_select_and_export_work_during_generation(generator_fake_gated, gate, wait_until_generating):
    manager = SessionManager(generator=generator_fake_gated)
    gate.set()
    a = await manager.generate("a")
    b = await manager.generate("b")
    gate.clear()

    pending = asyncio.create_task(manager.generate("c"))
    await wait_until_generating(manager)

    manager.select(a.artifact_id)
    assert manager.active_id == a.artifact_id
    assert [p.filename for p in manager.export_all()] == [
        "Training Data 1.yaml",
        "Training Data 2.yaml",
    ]
    assert manager.export(b.artifact_id).filename == "Training Data 2.yaml"
    assert manager.is_generating is True

    gate.set()
    c = await pending

    assert manager.active_id == c.artifact_id
    assert c.name == "Training Data 3"


async def test_delete_during_generation_affects_new_name(generator_fake_gated, gate, wait_until_generating):
    """The default name is computed when the artifact is appended."""
    manager = SessionManager(generator=generator_fake_gated)
    gate.set()
    a = await manager.generate("a")
    await manager.generate("b")
    gate.clear()

    pending = asyncio.create_task(manager.generate("c"))
    await wait_until_generating(manager)
    manager.delete(a.artifact_id)

    gate.set()
    c = await pending

    assert c.name == "Training Data 2"
    assert len(manager.artifacts) == 2
    assert manager.active_id == c.artifact_id


async def test_sequential_generations_are_not_busy(manager):
    await manager.generate("a")
    await manager.generate("b")

    assert len(manager.artifacts) == 2


async def test_cancelled_generation_clears_flag_and_appends_nothing(generator_fake_gated, gate, wait_until_generating):
    manager = SessionManager(generator=generator_fake_gated)

    pending = asyncio.create_task(manager.generate("x"))
    await wait_until_generating(manager)
    pending.cancel()

    with pytest.raises(asyncio.CancelledError):
        await pending

    assert manager.is_generating is False
    assert manager.artifacts == ()
    assert manager.active_id is None

    gate.set()
    result = await manager.generate("y")
    assert manager.active_id == result.artifact_id
    assert result.name == "Training Data 1"
