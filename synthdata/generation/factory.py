"""Select a GenerationService implementation from settings."""

import structlog
from anthropic import AsyncAnthropic

from synthdata.core.config import Settings
from synthdata.core.exceptions import ConfigurationError
from synthdata.generation.anthropic_generator import AnthropicGenerator
from synthdata.generation.service import GenerationService
from synthdata.generation.template import TemplateGenerator

logger = structlog.get_logger(__name__)


def build_generator(settings: Settings) -> GenerationService:
    """Build the generation backend named by settings.generator_backend.

    Raises:
        ConfigurationError: If the anthropic backend is selected without an API key
    """
    if settings.generator_backend == "anthropic":
        if not settings.anthropic_api_key:
            raise ConfigurationError(
                "SYNTHDATA_ANTHROPIC_API_KEY is not set. Export it or define it in a .env "
                "file, or use SYNTHDATA_GENERATOR_BACKEND=template."
            )
        logger.info("generator_selected", backend="anthropic", model=settings.generation_model)
        return AnthropicGenerator(
            client=AsyncAnthropic(api_key=settings.anthropic_api_key),
            model=settings.generation_model,
            max_tokens=settings.generation_max_tokens,
            example_count=settings.seed_example_count,
            author=settings.document_author,
        )

    logger.info("generator_selected", backend="template")
    return TemplateGenerator(
        author=settings.document_author,
        latency_seconds=settings.template_latency_seconds,
    )
