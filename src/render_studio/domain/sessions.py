"""Domain models for studio sessions."""

from dataclasses import dataclass, field
from uuid import UUID

from render_studio.domain.gallery import Gallery
from render_studio.domain.images import ImagePayload
from render_studio.domain.rendering import ResultRecord
from render_studio.domain.selection import Selection, derive_prompt
from render_studio.errors import NotFoundError


@dataclass
class StudioSession:
    """Mutable state of one browser tab."""

    id: UUID
    selection: Selection = field(default_factory=Selection)
    prompt: str = ""
    source_image: ImagePayload | None = None
    current: ResultRecord | None = None
    style_lock: ResultRecord | None = None
    gallery: Gallery = field(default_factory=Gallery)
    pending_delete_id: str | None = None
    is_rendering: bool = False
    progress: str = ""

    def find_record(self, record_id: str) -> ResultRecord:
        """Return a record known to the session by id."""
        if self.current is not None and self.current.id == record_id:
            return self.current
        if self.gallery.contains(record_id):
            return self.gallery.select(record_id)
        if self.style_lock is not None and self.style_lock.id == record_id:
            return self.style_lock
        raise NotFoundError(f"Record {record_id} not found")

    def apply_selection(self, selection: Selection) -> None:
        """Replace the selection; the free-text prompt is re-derived from it."""
        self.selection = selection
        self.prompt = derive_prompt(selection)
