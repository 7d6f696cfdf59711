"""TemplateGenerator: deterministic document generation without an LLM.

Produces two seed examples phrased around the description. Used as the
default backend and in demos where no API key is configured.
"""

import asyncio

import structlog

from synthdata.generation.renderer import TrainingDataRenderer
from synthdata.schemas.artifacts import SeedExample, TrainingDataDocument

logger = structlog.get_logger(__name__)


class TemplateGenerator:
    """Fill a fixed seed-example template with the user's description.

    Args:
        author: Value for the document's created_by field
        latency_seconds: Optional artificial delay before returning, for demos
            that want to show the in-progress state. Not part of the contract.
        renderer: YAML renderer (a fresh TrainingDataRenderer by default)
    """

    def __init__(
        self,
        author: str = "AI Generator",
        latency_seconds: float = 0.0,
        renderer: TrainingDataRenderer | None = None,
    ) -> None:
        self.author = author
        self.latency_seconds = latency_seconds
        self.renderer = renderer or TrainingDataRenderer()

    def build_document(self, description: str) -> TrainingDataDocument:
        return TrainingDataDocument(
            created_by=self.author,
            version=1,
            task_description=description,
            seed_examples=[
                SeedExample(
                    question=f"What is the main concept of {description}?",
                    answer="The main concept involves...",
                    context=f"In the field of {description}, experts often...",
                ),
                SeedExample(
                    question=f"How is {description} applied in real-world scenarios?",
                    answer="Real-world applications include...",
                    context=f"Practitioners of {description} frequently encounter...",
                ),
            ],
        )

    async def generate(self, description: str) -> str:
        if self.latency_seconds > 0:
            await asyncio.sleep(self.latency_seconds)

        content = self.renderer.render(self.build_document(description))
        logger.debug("template_document_rendered", chars=len(content))
        return content
