"""SessionManager: owns the generated documents of one interactive session.

State (artifacts, active selection, in-flight flag) is private to the
manager; callers read it through properties or snapshot() and change it only
through the operations below.

State machine:
    Idle --generate()--> Generating --success|failure--> Idle

generate() while Generating is rejected with GenerationBusyError and is not a
transition. select/delete/export/export_all are synchronous and never touch
the in-flight flag, so they stay usable while a generation is suspended.
"""

import uuid

import structlog

from synthdata.artifacts.exporter import YamlExporter
from synthdata.core.exceptions import (
    ArtifactNotFoundError,
    EmptyDescriptionError,
    GenerationBusyError,
    GenerationFailedError,
)
from synthdata.generation.service import GenerationService
from synthdata.schemas.artifacts import Artifact, ExportPayload, GenerateResult, SessionSnapshot

logger = structlog.get_logger(__name__)


class SessionManager:
    """Manages the artifact collection, selection and single-flight generation.

    Args:
        generator: Backend that turns a description into document content
        exporter: Payload builder (a fresh YamlExporter by default)
        name_prefix: Default artifact names are "<prefix> N"
    """

    def __init__(
        self,
        generator: GenerationService,
        exporter: YamlExporter | None = None,
        name_prefix: str = "Training Data",
    ) -> None:
        self.generator = generator
        self.exporter = exporter or YamlExporter()
        self.name_prefix = name_prefix
        self.session_id = uuid.uuid4().hex

        self._artifacts: list[Artifact] = []
        self._active_id: str | None = None
        self._generating = False
        # Every id ever issued, including deleted ones
        self._issued_ids: set[str] = set()

        self.logger = logger.bind(session_id=self.session_id)

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def artifacts(self) -> tuple[Artifact, ...]:
        return tuple(self._artifacts)

    @property
    def active_id(self) -> str | None:
        return self._active_id

    @property
    def is_generating(self) -> bool:
        return self._generating

    @property
    def active_artifact(self) -> Artifact | None:
        if self._active_id is None:
            return None
        return self._find(self._active_id)

    def get(self, artifact_id: str) -> Artifact:
        """Return the artifact with this id.

        Raises:
            ArtifactNotFoundError: If no artifact has this id
        """
        artifact = self._find(artifact_id)
        if artifact is None:
            raise ArtifactNotFoundError(artifact_id)
        return artifact

    def snapshot(self) -> SessionSnapshot:
        """Return a read-only projection of the current session state."""
        return SessionSnapshot(
            session_id=self.session_id,
            artifacts=list(self._artifacts),
            active_id=self._active_id,
            is_generating=self._generating,
        )

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def generate(self, description: str) -> GenerateResult:
        """Generate a new artifact from a description and make it active.

        Either a complete artifact is appended and selected, or the session
        is left exactly as it was. The in-flight flag is cleared on every
        exit path.

        Args:
            description: Free-text skill description; trimmed before use

        Returns:
            GenerateResult with the new artifact id and a cleared description

        Raises:
            GenerationBusyError: Another generation is in flight
            EmptyDescriptionError: Description is empty after trimming
            GenerationFailedError: The generation service failed
        """
        # No await between the check and the set: this is the single-flight gate.
        if self._generating:
            self.logger.info("generation_rejected_busy")
            raise GenerationBusyError()

        text = (description or "").strip()
        if not text:
            raise EmptyDescriptionError()

        self._generating = True
        try:
            try:
                content = await self.generator.generate(text)
            except Exception as e:
                self.logger.warning(
                    "generation_failed",
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise GenerationFailedError(str(e) or type(e).__name__) from e

            if not isinstance(content, str):
                self.logger.warning("generation_failed", error_type="non_text_content")
                raise GenerationFailedError(
                    f"Generation service returned {type(content).__name__}, expected text"
                )

            artifact = Artifact(
                id=self._mint_id(),
                name=f"{self.name_prefix} {len(self._artifacts) + 1}",
                content=content,
            )
            self._artifacts.append(artifact)
            self._active_id = artifact.id
        finally:
            self._generating = False

        self.logger.info(
            "artifact_generated",
            artifact_id=artifact.id,
            name=artifact.name,
            artifact_count=len(self._artifacts),
        )
        return GenerateResult(artifact_id=artifact.id, name=artifact.name)

    def select(self, artifact_id: str) -> None:
        """Make an existing artifact the active one.

        Raises:
            ArtifactNotFoundError: If no artifact has this id (state unchanged)
        """
        self.get(artifact_id)
        self._active_id = artifact_id
        self.logger.debug("artifact_selected", artifact_id=artifact_id)

    def delete(self, artifact_id: str) -> None:
        """Remove an artifact.

        If it was active, the first remaining artifact in current order
        becomes active, or None when the session is now empty.

        Raises:
            ArtifactNotFoundError: If no artifact has this id (state unchanged)
        """
        index = self._index_of(artifact_id)
        if index is None:
            raise ArtifactNotFoundError(artifact_id)

        del self._artifacts[index]

        if self._active_id == artifact_id:
            self._active_id = self._artifacts[0].id if self._artifacts else None

        self.logger.info(
            "artifact_deleted",
            artifact_id=artifact_id,
            active_id=self._active_id,
            artifact_count=len(self._artifacts),
        )

    def export(self, artifact_id: str) -> ExportPayload:
        """Build the download payload for one artifact. Does not mutate state.

        Raises:
            ArtifactNotFoundError: If no artifact has this id
        """
        return self.exporter.export(self.get(artifact_id))

    def export_all(self) -> list[ExportPayload]:
        """Build download payloads for every artifact in order. Never raises."""
        return self.exporter.export_all(self._artifacts)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _mint_id(self) -> str:
        artifact_id = uuid.uuid4().hex
        while artifact_id in self._issued_ids:
            artifact_id = uuid.uuid4().hex
        self._issued_ids.add(artifact_id)
        return artifact_id

    def _find(self, artifact_id: str) -> Artifact | None:
        for artifact in self._artifacts:
            if artifact.id == artifact_id:
                return artifact
        return None

    def _index_of(self, artifact_id: str) -> int | None:
        for idx, artifact in enumerate(self._artifacts):
            if artifact.id == artifact_id:
                return idx
        return None
