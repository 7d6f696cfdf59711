"""GenerationService protocol: the contract every content backend satisfies.

The session manager depends only on this protocol, so the deterministic
template backend, the Anthropic backend and the test fake are
interchangeable.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class GenerationService(Protocol):
    """Produces a training-data document body from a skill description."""

    async def generate(self, description: str) -> str:
        """Generate document content for a description.

        Args:
            description: Non-empty, already-trimmed skill or knowledge description

        Returns:
            Document text (a YAML training-data document). The caller stores
            it opaquely and does not validate its structure.

        Raises:
            Exception: Any failure (network, quota, malformed output). The
                session manager collapses every kind into GenerationFailedError.
        """
        ...
