"""GeneratorFake: Scenario-based test double for the GenerationService protocol.

Provides deterministic, instant responses for named scenarios:
- happy_path: Renders the template document for the description
- llm_failure: Upstream API failure
- rate_limited: Quota exhausted
- malformed: Returns a non-text payload

An optional asyncio.Event gate holds every call open until it is set, which
lets tests observe the session while a generation is in flight.
"""

import asyncio

from synthdata.generation.template import TemplateGenerator


class GeneratorFake:
    """Scenario-based test double for GenerationService."""

    VALID_SCENARIOS = {"happy_path", "llm_failure", "rate_limited", "malformed"}

    def __init__(self, scenario: str = "happy_path", gate: asyncio.Event | None = None):
        """Initialize GeneratorFake with a named scenario.

        Args:
            scenario: One of 'happy_path', 'llm_failure', 'rate_limited', 'malformed'
            gate: If given, every call waits for this event before responding

        Raises:
            ValueError: If scenario is not recognized
        """
        if scenario not in self.VALID_SCENARIOS:
            raise ValueError(
                f"Unknown scenario: {scenario}. Valid scenarios: {self.VALID_SCENARIOS}"
            )
        self.scenario = scenario
        self.gate = gate
        self.calls: list[str] = []
        self._template = TemplateGenerator()

    async def generate(self, description: str):
        self.calls.append(description)

        if self.gate is not None:
            await self.gate.wait()

        if self.scenario == "llm_failure":
            raise RuntimeError("Anthropic API rate limit exceeded. Retry after 60 seconds.")

        if self.scenario == "rate_limited":
            raise RuntimeError("Daily generation quota exhausted.")

        if self.scenario == "malformed":
            return {"seed_examples": []}

        return await self._template.generate(description)
