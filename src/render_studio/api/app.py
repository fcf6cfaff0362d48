"""FastAPI application factory."""

import base64
import binascii
import logging
from typing import Literal
from uuid import UUID

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, Response

from render_studio.api.models import (
    ImageUpload,
    PromptUpdate,
    RecordView,
    SelectionUpdate,
    SessionView,
)
from render_studio.api.ui import router as ui_router
from render_studio.app_logging import configure_logging
from render_studio.catalogs import CATALOGS
from render_studio.containers import AppContainer
from render_studio.domain.images import ImagePayload
from render_studio.domain.rendering import ResultRecord
from render_studio.domain.selection import Axis
from render_studio.domain.sessions import StudioSession
from render_studio.errors import (
    NotFoundError,
    PromptGenerationError,
    RenderError,
    RenderInProgressError,
    RenderStudioError,
    ValidationError,
)
from render_studio.services.downloads import build_download_filename

_ERROR_STATUS: dict[type[RenderStudioError], int] = {
    ValidationError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    RenderInProgressError: status.HTTP_409_CONFLICT,
    RenderError: status.HTTP_502_BAD_GATEWAY,
    PromptGenerationError: status.HTTP_502_BAD_GATEWAY,
}


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Render Studio")
    app.state.container = container

    app.include_router(ui_router)

    @app.exception_handler(RenderStudioError)
    async def handle_studio_error(
        request: Request, exc: RenderStudioError
    ) -> JSONResponse:
        status_code = _status_for(exc)
        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.warning("Request %s failed: %s", request.url.path, exc)
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/options")
    async def options() -> dict[str, list[dict[str, str]]]:
        """Return the option catalogs for every axis."""
        return {
            axis.value: [
                {"label": entry.label, "fragment": entry.fragment}
                for entry in entries
            ]
            for axis, entries in CATALOGS.items()
        }

    @app.post("/sessions", status_code=status.HTTP_201_CREATED)
    async def create_session(request: Request) -> SessionView:
        """Start a new studio session."""
        state_container: AppContainer = request.app.state.container
        session = state_container.session_service.create_session()
        return _session_view(session)

    @app.get("/sessions/{session_id}")
    async def get_session(session_id: UUID, request: Request) -> SessionView:
        """Return the session state."""
        state_container: AppContainer = request.app.state.container
        session = state_container.session_service.get_session(session_id)
        return _session_view(session)

    @app.put("/sessions/{session_id}/image")
    async def upload_image(
        session_id: UUID, upload: ImageUpload, request: Request
    ) -> SessionView:
        """Set the source image from a base64 upload."""
        state_container: AppContainer = request.app.state.container
        image = ImagePayload(
            data=_decode_image(upload.data),
            mime_type=upload.mime_type,
            name=upload.name,
        )
        session = state_container.session_service.upload_image(session_id, image)
        return _session_view(session)

    @app.patch("/sessions/{session_id}/selection")
    async def update_selection(
        session_id: UUID, update: SelectionUpdate, request: Request
    ) -> SessionView:
        """Change option axes; the prompt is re-derived from the selection."""
        state_container: AppContainer = request.app.state.container
        changes = {
            Axis(name): value
            for name, value in update.model_dump(exclude_none=True).items()
        }
        session = state_container.session_service.update_selection(
            session_id, changes
        )
        return _session_view(session)

    @app.put("/sessions/{session_id}/prompt")
    async def set_prompt(
        session_id: UUID, update: PromptUpdate, request: Request
    ) -> SessionView:
        """Store a manual prompt edit."""
        state_container: AppContainer = request.app.state.container
        session = state_container.session_service.set_prompt(
            session_id, update.prompt
        )
        return _session_view(session)

    @app.post("/sessions/{session_id}/prompt/suggest")
    async def suggest_prompt(session_id: UUID, request: Request) -> SessionView:
        """Replace the prompt with an automatic suggestion."""
        state_container: AppContainer = request.app.state.container
        session = await state_container.session_service.suggest_prompt(session_id)
        return _session_view(session)

    @app.post("/sessions/{session_id}/render")
    async def render(session_id: UUID, request: Request) -> RecordView:
        """Render the session and return the new current record."""
        state_container: AppContainer = request.app.state.container
        record = await state_container.session_service.render(session_id)
        session = state_container.session_service.get_session(session_id)
        return _record_view(session, record)

    @app.get("/sessions/{session_id}/progress")
    async def progress(session_id: UUID, request: Request) -> dict[str, object]:
        """Return the progress label of the running render."""
        state_container: AppContainer = request.app.state.container
        session = state_container.session_service.get_session(session_id)
        return {"is_rendering": session.is_rendering, "progress": session.progress}

    @app.post("/sessions/{session_id}/style-lock/{record_id}")
    async def toggle_style_lock(
        session_id: UUID, record_id: str, request: Request
    ) -> SessionView:
        """Lock a record's style, or unlock it when already locked."""
        state_container: AppContainer = request.app.state.container
        service = state_container.session_service
        service.toggle_style_lock(session_id, record_id)
        return _session_view(service.get_session(session_id))

    @app.delete("/sessions/{session_id}/style-lock")
    async def unlock_style(session_id: UUID, request: Request) -> SessionView:
        """Clear the style lock."""
        state_container: AppContainer = request.app.state.container
        service = state_container.session_service
        service.unlock_style(session_id)
        return _session_view(service.get_session(session_id))

    @app.get("/sessions/{session_id}/gallery")
    async def list_gallery(
        session_id: UUID, request: Request
    ) -> dict[str, list[RecordView]]:
        """Return saved records, newest first."""
        state_container: AppContainer = request.app.state.container
        session = state_container.session_service.get_session(session_id)
        return {
            "records": [
                _record_view(session, record) for record in session.gallery.records
            ]
        }

    @app.post("/sessions/{session_id}/gallery/delete/confirm")
    async def confirm_delete(session_id: UUID, request: Request) -> dict[str, bool]:
        """Delete the record awaiting confirmation."""
        state_container: AppContainer = request.app.state.container
        removed = state_container.session_service.confirm_delete(session_id)
        return {"deleted": removed}

    @app.post("/sessions/{session_id}/gallery/delete/cancel")
    async def cancel_delete(session_id: UUID, request: Request) -> dict[str, str]:
        """Drop the pending deletion."""
        state_container: AppContainer = request.app.state.container
        state_container.session_service.cancel_delete(session_id)
        return {"status": "ok"}

    @app.post("/sessions/{session_id}/gallery/{record_id}")
    async def save_to_gallery(
        session_id: UUID, record_id: str, request: Request
    ) -> dict[str, bool]:
        """Save a record to the gallery."""
        state_container: AppContainer = request.app.state.container
        saved = state_container.session_service.save_to_gallery(session_id, record_id)
        return {"saved": saved}

    @app.post("/sessions/{session_id}/gallery/{record_id}/select")
    async def select_from_gallery(
        session_id: UUID, record_id: str, request: Request
    ) -> SessionView:
        """Make a saved record current."""
        state_container: AppContainer = request.app.state.container
        service = state_container.session_service
        service.select_from_gallery(session_id, record_id)
        return _session_view(service.get_session(session_id))

    @app.delete("/sessions/{session_id}/gallery/{record_id}")
    async def request_delete(
        session_id: UUID, record_id: str, request: Request
    ) -> dict[str, str]:
        """Ask for confirmation before deleting a saved record."""
        state_container: AppContainer = request.app.state.container
        state_container.session_service.request_delete(session_id, record_id)
        return {"status": "confirmation_required", "record_id": record_id}

    @app.get("/sessions/{session_id}/records/{record_id}/images/{kind}")
    async def record_image(
        session_id: UUID,
        record_id: str,
        kind: Literal["sketch", "final"],
        request: Request,
    ) -> Response:
        """Return the raw sketch or final image of a record."""
        state_container: AppContainer = request.app.state.container
        session = state_container.session_service.get_session(session_id)
        record = session.find_record(record_id)
        image = record.sketch_image if kind == "sketch" else record.final_image
        return Response(content=image.data, media_type=image.mime_type)

    @app.get("/sessions/{session_id}/records/{record_id}/download")
    async def download(
        session_id: UUID,
        record_id: str,
        request: Request,
        kind: Literal["sketch", "final"] = "final",
    ) -> Response:
        """Return the final image, or the sketch, as an attachment."""
        state_container: AppContainer = request.app.state.container
        session = state_container.session_service.get_session(session_id)
        record = session.find_record(record_id)
        image = record.sketch_image if kind == "sketch" else record.final_image
        filename = build_download_filename(record)
        return Response(
            content=image.data,
            media_type=image.mime_type,
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )

    return app


def _status_for(exc: RenderStudioError) -> int:
    for error_type, status_code in _ERROR_STATUS.items():
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _decode_image(data: str) -> bytes:
    """Decode base64 image data, stripping a data-URL prefix if present."""
    _, _, encoded = data.rpartition(",")
    try:
        return base64.b64decode(encoded, validate=True)
    except binascii.Error as exc:
        raise ValidationError("Image data is not valid base64.") from exc


def _record_view(session: StudioSession, record: ResultRecord) -> RecordView:
    prefix = f"/sessions/{session.id}/records/{record.id}"
    return RecordView(
        id=record.id,
        prompt_text=record.prompt_text,
        selection=record.selection.as_dict(),
        sketch_url=f"{prefix}/images/sketch",
        final_url=f"{prefix}/images/final",
        download_url=f"{prefix}/download",
        is_saved=session.gallery.contains(record.id),
        is_locked=session.style_lock is not None
        and session.style_lock.id == record.id,
    )


def _session_view(session: StudioSession) -> SessionView:
    return SessionView(
        id=str(session.id),
        selection=session.selection.as_dict(),
        prompt=session.prompt,
        image_name=session.source_image.name if session.source_image else None,
        current=_record_view(session, session.current) if session.current else None,
        style_lock=(
            _record_view(session, session.style_lock) if session.style_lock else None
        ),
        gallery=[_record_view(session, record) for record in session.gallery.records],
        pending_delete_id=session.pending_delete_id,
        is_rendering=session.is_rendering,
        progress=session.progress,
    )
