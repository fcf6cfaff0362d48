"""Pydantic request and response models for the HTTP API."""

from pydantic import BaseModel, Field


class ImageUpload(BaseModel):
    """Base64-encoded image upload; data URLs are accepted."""

    data: str = Field(min_length=1)
    mime_type: str
    name: str = "upload.png"


class SelectionUpdate(BaseModel):
    """Axis changes; a label or fragment selects, an empty string clears."""

    style: str | None = None
    building_type: str | None = None
    context: str | None = None
    lighting: str | None = None
    weather_or_time: str | None = None
    view: str | None = None


class PromptUpdate(BaseModel):
    """Manual edit of the free-text prompt."""

    prompt: str


class RecordView(BaseModel):
    """Result record metadata with links to its images."""

    id: str
    prompt_text: str
    selection: dict[str, str]
    sketch_url: str
    final_url: str
    download_url: str
    is_saved: bool
    is_locked: bool


class SessionView(BaseModel):
    """Snapshot of a studio session."""

    id: str
    selection: dict[str, str]
    prompt: str
    image_name: str | None
    current: RecordView | None
    style_lock: RecordView | None
    gallery: list[RecordView]
    pending_delete_id: str | None
    is_rendering: bool
    progress: str
