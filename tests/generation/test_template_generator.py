"""Tests for TemplateGenerator and TrainingDataRenderer output."""

import asyncio
import json

import pytest

from synthdata.generation.renderer import TrainingDataRenderer
from synthdata.generation.service import GenerationService
from synthdata.generation.template import TemplateGenerator
from synthdata.schemas.artifacts import SeedExample, TrainingDataDocument

pytestmark = pytest.mark.unit


@pytest.fixture
def generator():
    return TemplateGenerator()


def test_template_generator_satisfies_protocol(generator):
    assert isinstance(generator, GenerationService)


async def test_generated_document_has_expected_layout(generator):
    content = await generator.generate("photosynthesis")

    assert content == "\n".join(
        [
            'created_by: "AI Generator"',
            "version: 1",
            'task_description: "photosynthesis"',
            "seed_examples:",
            '  - question: "What is the main concept of photosynthesis?"',
            '    answer: "The main concept involves..."',
            '    context: "In the field of photosynthesis, experts often..."',
            '  - question: "How is photosynthesis applied in real-world scenarios?"',
            '    answer: "Real-world applications include..."',
            '    context: "Practitioners of photosynthesis frequently encounter..."',
        ]
    )


async def test_author_is_configurable():
    generator = TemplateGenerator(author="Docs Team")

    content = await generator.generate("photosynthesis")

    assert content.startswith('created_by: "Docs Team"')


async def test_special_characters_stay_on_one_line(generator):
    description = 'YAML "quoting": key: value\nsecond line'

    content = await generator.generate(description)

    task_line = next(line for line in content.splitlines() if line.startswith("task_description:"))
    assert json.loads(task_line.removeprefix("task_description: ")) == description
    assert len(content.splitlines()) == 10


async def test_apostrophes_ampersands_and_brackets_are_not_html_escaped(generator):
    description = "Newton's laws & <forces>"

    content = await generator.generate(description)

    assert 'task_description: "Newton\'s laws & <forces>"' in content
    assert "\\u0027" not in content
    assert "\\u0026" not in content
    assert '    context: "In the field of Newton\'s laws & <forces>, experts often..."' in content


def test_renderer_keeps_markup_characters_in_seed_examples():
    document = TrainingDataDocument(
        task_description="HTML",
        seed_examples=[
            SeedExample(
                question="What does <b> do?",
                answer="It's bold & strong",
                context="Tags like <i> & <u>",
            )
        ],
    )

    content = TrainingDataRenderer().render(document)

    assert '  - question: "What does <b> do?"' in content
    assert '    answer: "It\'s bold & strong"' in content
    assert '    context: "Tags like <i> & <u>"' in content


async def test_non_ascii_is_kept_readable(generator):
    content = await generator.generate("Photosynthèse")

    assert 'task_description: "Photosynthèse"' in content


def test_build_document_has_two_seed_examples(generator):
    document = generator.build_document("genetics")

    assert document.task_description == "genetics"
    assert len(document.seed_examples) == 2
    assert all("genetics" in example.question for example in document.seed_examples)


async def test_latency_is_awaited(monkeypatch):
    delays = []

    async def fake_sleep(seconds):
        delays.append(seconds)

    monkeypatch.setattr(asyncio, "sleep", fake_sleep)
    generator = TemplateGenerator(latency_seconds=2.0)

    await generator.generate("photosynthesis")

    assert delays == [2.0]


async def test_no_latency_by_default(monkeypatch, generator):
    delays = []

    async def fake_sleep(seconds):
        delays.append(seconds)

    monkeypatch.setattr(asyncio, "sleep", fake_sleep)

    await generator.generate("photosynthesis")

    assert delays == []


def test_renderer_emits_every_seed_example():
    document = TrainingDataDocument(
        task_description="chemistry",
        seed_examples=[
            SeedExample(question=f"Q{i}", answer=f"A{i}", context=f"C{i}") for i in range(4)
        ],
    )

    content = TrainingDataRenderer().render(document)

    assert content.count("  - question:") == 4
    assert '    context: "C3"' in content
    assert not content.endswith("\n")
