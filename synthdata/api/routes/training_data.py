"""Training data API routes: generate, select, delete, download.

The shell holds one in-process SessionManager (app.state.session_manager) and
returns the refreshed session snapshot after every mutating call.
"""

from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import Response

from synthdata.core.exceptions import (
    ArtifactNotFoundError,
    EmptyDescriptionError,
    GenerationBusyError,
    GenerationFailedError,
)
from synthdata.schemas.artifacts import GenerateRequest, GenerateResult, SessionSnapshot
from synthdata.sessions.manager import SessionManager

router = APIRouter()

BUNDLE_FILENAME = "training-data.zip"


def get_session_manager(request: Request) -> SessionManager:
    """Dependency that provides the application's SessionManager.

    Override this dependency in tests via app.dependency_overrides, or pass a
    manager to create_app().
    """
    return request.app.state.session_manager


def _attachment(filename: str) -> dict[str, str]:
    """Content-Disposition for a download, safe for any artifact name.

    Header values must be latin-1, so the plain ``filename`` carries an ASCII
    fallback and ``filename*`` (RFC 6266) carries the real UTF-8 name.
    """
    fallback = filename.encode("ascii", "replace").decode("ascii").replace("?", "_")
    fallback = fallback.replace('"', "_").replace("\\", "_")
    encoded = quote(filename, safe="")
    return {"Content-Disposition": f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{encoded}"}


@router.get("", response_model=SessionSnapshot)
async def get_session(manager: SessionManager = Depends(get_session_manager)):
    """Return the current session state."""
    return manager.snapshot()


@router.post("/generate", status_code=201, response_model=GenerateResult)
async def generate_training_data(
    request: GenerateRequest,
    manager: SessionManager = Depends(get_session_manager),
):
    """Generate a training data document from a skill description.

    Returns 409 while another generation is running, 422 for an empty
    description and 502 when the generation backend fails.
    """
    try:
        return await manager.generate(request.description)
    except GenerationBusyError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except EmptyDescriptionError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except GenerationFailedError as e:
        raise HTTPException(status_code=502, detail=str(e))


@router.get("/download")
async def download_all(manager: SessionManager = Depends(get_session_manager)):
    """Download every document as one zip archive, in session order."""
    exporter = manager.exporter
    archive = exporter.bundle(manager.export_all())
    return Response(
        content=archive,
        media_type=exporter.BUNDLE_MIME_TYPE,
        headers=_attachment(BUNDLE_FILENAME),
    )


@router.post("/{artifact_id}/select", response_model=SessionSnapshot)
async def select_artifact(artifact_id: str, manager: SessionManager = Depends(get_session_manager)):
    """Make a document the active one."""
    try:
        manager.select(artifact_id)
    except ArtifactNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return manager.snapshot()


@router.delete("/{artifact_id}", response_model=SessionSnapshot)
async def delete_artifact(artifact_id: str, manager: SessionManager = Depends(get_session_manager)):
    """Delete a document; the first remaining one becomes active if needed."""
    try:
        manager.delete(artifact_id)
    except ArtifactNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return manager.snapshot()


@router.get("/{artifact_id}/download")
async def download_artifact(artifact_id: str, manager: SessionManager = Depends(get_session_manager)):
    """Download one document as `<name>.yaml`."""
    try:
        payload = manager.export(artifact_id)
    except ArtifactNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return Response(
        content=payload.data,
        media_type=payload.mime_type,
        headers=_attachment(payload.filename),
    )
