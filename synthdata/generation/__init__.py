"""Training data generation package.

Provides:
- GenerationService: Protocol every backend satisfies
- TemplateGenerator: Deterministic template-based backend
- AnthropicGenerator: LLM-backed backend
- build_generator: Backend selection from settings
"""

from synthdata.generation.anthropic_generator import AnthropicGenerator
from synthdata.generation.factory import build_generator
from synthdata.generation.service import GenerationService
from synthdata.generation.template import TemplateGenerator

__all__ = ["AnthropicGenerator", "GenerationService", "TemplateGenerator", "build_generator"]
