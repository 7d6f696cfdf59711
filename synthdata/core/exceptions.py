class SynthDataError(Exception):
    """Base exception for the synthetic data generator."""

    pass


class ConfigurationError(SynthDataError):
    """Raised when settings cannot produce a working component."""

    pass


class GenerationServiceError(SynthDataError):
    """Raised by a generation backend when upstream output is unusable."""

    pass


class SessionError(SynthDataError):
    """Base exception for recoverable session operation results."""

    code = "SESSION_ERROR"


class GenerationBusyError(SessionError):
    """Raised when generate() is called while another generation is in flight."""

    code = "BUSY"

    def __init__(self):
        super().__init__("A generation is already in progress")


class EmptyDescriptionError(SessionError):
    """Raised when the skill description is empty after trimming."""

    code = "EMPTY_DESCRIPTION"

    def __init__(self):
        super().__init__("Description must not be empty")


class ArtifactNotFoundError(SessionError):
    """Raised when an operation references an artifact id not in the session."""

    code = "NOT_FOUND"

    def __init__(self, artifact_id: str):
        self.artifact_id = artifact_id
        super().__init__(f"Artifact '{artifact_id}' not found")


class GenerationFailedError(SessionError):
    """Raised when the generation service could not produce content."""

    code = "GENERATION_FAILED"

    def __init__(self, cause: str):
        self.cause = cause
        super().__init__(f"Generation failed: {cause}")
