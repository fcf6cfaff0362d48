"""Session coordination for the render studio."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from render_studio.catalogs import resolve_option
from render_studio.domain.images import ImagePayload
from render_studio.domain.rendering import ResultRecord
from render_studio.domain.selection import Axis
from render_studio.domain.sessions import StudioSession
from render_studio.errors import (
    NotFoundError,
    RenderInProgressError,
    SessionNotFoundError,
    ValidationError,
)
from render_studio.services.prompt_suggestions import PromptSuggestionService
from render_studio.services.rendering import MISSING_IMAGE_MESSAGE, RenderService
from render_studio.services.style_lock import toggle_style_lock, unlock_style

logger = logging.getLogger(__name__)


class SessionRepository(Protocol):
    """Storage interface for studio sessions."""

    def create_session(self) -> StudioSession:
        """Create a new empty session and return it."""

    def get_session(self, session_id: UUID) -> StudioSession | None:
        """Return a session by id, if present."""


@dataclass
class SessionService:
    """Apply user actions to a studio session."""

    repository: SessionRepository
    render_service: RenderService
    suggestion_service: PromptSuggestionService

    def create_session(self) -> StudioSession:
        """Start a new session."""
        session = self.repository.create_session()
        logger.info("Created session %s", session.id)
        return session

    def get_session(self, session_id: UUID) -> StudioSession:
        """Return a session or raise when it is unknown."""
        session = self.repository.get_session(session_id)
        if session is None:
            raise SessionNotFoundError(f"Session {session_id} not found")
        return session

    def upload_image(self, session_id: UUID, image: ImagePayload) -> StudioSession:
        """Set the session's source image."""
        if not image.mime_type.startswith("image/"):
            raise ValidationError("Only image uploads are supported.")
        if not image.data:
            raise ValidationError("The uploaded image is empty.")
        session = self.get_session(session_id)
        session.source_image = image
        return session

    def update_selection(
        self, session_id: UUID, changes: Mapping[Axis, str]
    ) -> StudioSession:
        """Set one or more axes; the free-text prompt is re-derived."""
        session = self.get_session(session_id)
        selection = session.selection
        for axis, value in changes.items():
            selection = selection.with_value(axis, resolve_option(axis, value))
        session.apply_selection(selection)
        return session

    def set_prompt(self, session_id: UUID, prompt: str) -> StudioSession:
        """Store a manual edit of the free-text prompt."""
        session = self.get_session(session_id)
        session.prompt = prompt
        return session

    async def suggest_prompt(self, session_id: UUID) -> StudioSession:
        """Replace the free-text prompt with an automatic suggestion."""
        session = self.get_session(session_id)
        session.prompt = await self.suggestion_service.suggest(
            session.prompt, session.selection
        )
        return session

    async def render(self, session_id: UUID) -> ResultRecord:
        """Render the session's current state and make it the current result."""
        session = self.get_session(session_id)
        if session.source_image is None:
            raise ValidationError(MISSING_IMAGE_MESSAGE)
        if session.is_rendering:
            raise RenderInProgressError("A render is already in progress.")
        session.is_rendering = True
        session.current = None

        def on_progress(step: str) -> None:
            session.progress = step

        try:
            record = await self.render_service.render(
                selection=session.selection,
                free_text=session.prompt,
                source_image=session.source_image,
                style_lock=session.style_lock,
                on_progress=on_progress,
            )
        finally:
            session.is_rendering = False
            session.progress = ""
        session.current = record
        return record

    def toggle_style_lock(
        self, session_id: UUID, record_id: str
    ) -> ResultRecord | None:
        """Lock or unlock a record as the style reference."""
        session = self.get_session(session_id)
        record = session.find_record(record_id)
        return toggle_style_lock(session, record)

    def unlock_style(self, session_id: UUID) -> None:
        """Clear the session's style lock."""
        unlock_style(self.get_session(session_id))

    def save_to_gallery(self, session_id: UUID, record_id: str) -> bool:
        """Save a known record to the gallery; returns False if already saved."""
        session = self.get_session(session_id)
        return session.gallery.save(session.find_record(record_id))

    def select_from_gallery(self, session_id: UUID, record_id: str) -> ResultRecord:
        """Make a saved record current and restore its selection."""
        session = self.get_session(session_id)
        record = session.gallery.select(record_id)
        session.current = record
        session.apply_selection(record.selection)
        return record

    def request_delete(self, session_id: UUID, record_id: str) -> None:
        """Mark a saved record for deletion pending confirmation."""
        session = self.get_session(session_id)
        if not session.gallery.contains(record_id):
            raise NotFoundError(f"Gallery record {record_id} not found")
        session.pending_delete_id = record_id

    def confirm_delete(self, session_id: UUID) -> bool:
        """Delete the record awaiting confirmation, if any."""
        session = self.get_session(session_id)
        if session.pending_delete_id is None:
            return False
        removed = session.gallery.delete(session.pending_delete_id)
        session.pending_delete_id = None
        return removed

    def cancel_delete(self, session_id: UUID) -> None:
        """Drop a pending deletion."""
        self.get_session(session_id).pending_delete_id = None
