"""Domain models for render results."""

from dataclasses import dataclass
from enum import StrEnum

from render_studio.domain.images import ImagePayload
from render_studio.domain.selection import Selection


class RenderStrategy(StrEnum):
    """Generation strategy chosen for a render request."""

    STYLE_LOCKED_TRANSFER = "style_locked_transfer"
    REFINEMENT_ONLY = "refinement_only"
    FULL_RENDER = "full_render"


@dataclass(frozen=True)
class ResultRecord:
    """Completed generation: inputs, outputs and the selection snapshot."""

    id: str
    sketch_image: ImagePayload
    final_image: ImagePayload
    prompt_text: str
    selection: Selection
