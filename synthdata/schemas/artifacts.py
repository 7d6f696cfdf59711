"""Pydantic schemas for training-data artifacts and session projections.

Defines:
- SeedExample / TrainingDataDocument: structure of a generated document body
- Artifact: one generated document held by a session
- ExportPayload: filename / MIME type / bytes triple for download
- SessionSnapshot: read-only view of a session for the presentation shell
- Request and response bodies for the HTTP shell
"""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field

# ==================== DOCUMENT CONTENT SCHEMAS ====================


class SeedExample(BaseModel):
    """One question/answer pair with the context it is grounded in."""

    question: str = Field(..., min_length=1, description="Question a learner might ask")
    answer: str = Field(..., min_length=1, description="Reference answer")
    context: str = Field(..., min_length=1, description="Passage the answer is drawn from")


class TrainingDataDocument(BaseModel):
    """Structured body of a training-data file (InstructLab qna.yaml layout)."""

    created_by: str = "AI Generator"
    version: int = 1
    task_description: str = Field(..., min_length=1)
    seed_examples: list[SeedExample] = Field(..., min_length=1)


# ==================== SESSION SCHEMAS ====================


class Artifact(BaseModel):
    """A named, content-bearing document with a stable identity.

    The content is opaque to the session: it is stored and exported as-is.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    content: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class ExportPayload(BaseModel):
    """A file ready for client-side download."""

    model_config = ConfigDict(frozen=True)

    filename: str
    mime_type: str
    data: bytes


class SessionSnapshot(BaseModel):
    """Read-only projection of session state, refreshed after every operation."""

    session_id: str
    artifacts: list[Artifact]
    active_id: str | None
    is_generating: bool


class GenerateResult(BaseModel):
    """Outcome of a successful generate() call.

    ``description`` is the value the shell should put back in its input
    field; it is always cleared.
    """

    artifact_id: str
    name: str
    description: str = ""


# ==================== REQUEST SCHEMAS ====================


class GenerateRequest(BaseModel):
    """Request to generate a training-data document from a skill description."""

    description: str = Field(..., description="Free-text description of the skill or knowledge area")
