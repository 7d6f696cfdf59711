"""AnthropicGenerator: LLM-backed seed example generation.

Asks Claude for seed examples as JSON, validates them against the
SeedExample schema, and renders the final YAML document locally so the
document layout never depends on the model's formatting.
"""

import json

import structlog
from pydantic import ValidationError

from synthdata.core.exceptions import GenerationServiceError
from synthdata.generation.llm_helpers import _invoke_with_retry, _parse_json_response
from synthdata.generation.prompts import TRAINING_DATA_SYSTEM_PROMPT
from synthdata.generation.renderer import TrainingDataRenderer
from synthdata.schemas.artifacts import SeedExample, TrainingDataDocument

logger = structlog.get_logger(__name__)


class AnthropicGenerator:
    """Generate training data documents with the Anthropic Messages API.

    Args:
        client: AsyncAnthropic client (or a compatible mock in tests)
        model: Model name passed to messages.create()
        max_tokens: Response token ceiling
        example_count: Number of seed examples requested from the model
        author: Value for the document's created_by field
        renderer: YAML renderer (a fresh TrainingDataRenderer by default)
    """

    def __init__(
        self,
        client,
        model: str,
        max_tokens: int = 4096,
        example_count: int = 5,
        author: str = "AI Generator",
        renderer: TrainingDataRenderer | None = None,
    ) -> None:
        self.client = client
        self.model = model
        self.max_tokens = max_tokens
        self.example_count = example_count
        self.author = author
        self.renderer = renderer or TrainingDataRenderer()

    async def generate(self, description: str) -> str:
        """Generate a document for the description.

        Raises:
            GenerationServiceError: If the model output is not valid JSON or
                does not contain usable seed examples
            anthropic.APIError: If the API call fails after retries
        """
        system = TRAINING_DATA_SYSTEM_PROMPT.format(example_count=self.example_count)
        raw = await _invoke_with_retry(
            self.client,
            self.model,
            system,
            [{"role": "user", "content": description}],
            max_tokens=self.max_tokens,
        )

        examples = self._parse_examples(raw)
        logger.info("llm_seed_examples_parsed", model=self.model, example_count=len(examples))

        document = TrainingDataDocument(
            created_by=self.author,
            version=1,
            task_description=description,
            seed_examples=examples,
        )
        return self.renderer.render(document)

    def _parse_examples(self, raw: str) -> list[SeedExample]:
        try:
            payload = _parse_json_response(raw)
        except json.JSONDecodeError as e:
            raise GenerationServiceError(f"Model returned invalid JSON: {e}") from e

        if not isinstance(payload, dict) or not isinstance(payload.get("seed_examples"), list):
            raise GenerationServiceError("Model response has no 'seed_examples' list")

        try:
            examples = [SeedExample.model_validate(item) for item in payload["seed_examples"]]
        except ValidationError as e:
            raise GenerationServiceError(f"Model returned malformed seed examples: {e}") from e

        if not examples:
            raise GenerationServiceError("Model returned no seed examples")
        return examples
