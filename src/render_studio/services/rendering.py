"""Render orchestration over a remote generation client."""

import logging
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, replace
from datetime import UTC, datetime
from typing import Protocol

from render_studio.domain.images import ImagePayload
from render_studio.domain.rendering import RenderStrategy, ResultRecord
from render_studio.domain.selection import Selection
from render_studio.errors import GenerationError, RenderError, ValidationError
from render_studio.services.prompts import (
    compose_full_render,
    compose_refinement,
    compose_style_transfer,
    select_strategy,
)

logger = logging.getLogger(__name__)

SKETCH_INSTRUCTION = (
    "Convert this architectural photo into a clean, black and white line art "
    "sketch. Focus on the main structural lines and contours. Remove all color, "
    "textures, and background elements like sky or trees. The output should be "
    "a simple and clear architectural drawing."
)

STEP_DERIVING_SKETCH = "Deriving sketch..."
STEP_RENDERING_IMAGE = "Rendering image..."
STEP_REFINING_ENVIRONMENT = "Refining environment..."

RENDER_FAILED_MESSAGE = "An error occurred during rendering."
MISSING_IMAGE_MESSAGE = "Please upload an image."

ProgressCallback = Callable[[str], None]


class GenerationClient(Protocol):
    """Interface for the remote generative-image service."""

    async def describe_prompt(self, free_text: str, selection: Selection) -> str:
        """Return a detailed prompt suggestion for the request."""

    async def derive_sketch(self, image: ImagePayload) -> ImagePayload:
        """Return a black-and-white line-art derivative of the image."""

    async def synthesize(
        self, references: Sequence[ImagePayload], instruction: str
    ) -> ImagePayload:
        """Return one image generated from the references and instruction."""


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


def _ignore_progress(_: str) -> None:
    return None


@dataclass(frozen=True)
class _RenderInputs:
    selection: Selection
    free_text: str
    source_image: ImagePayload
    style_lock: ResultRecord | None
    on_progress: ProgressCallback


@dataclass
class RenderService:
    """Choose a render strategy and sequence its remote calls."""

    client: GenerationClient
    clock: Callable[[], datetime] = _utc_now

    async def render(  # noqa: PLR0913
        self,
        *,
        selection: Selection,
        free_text: str,
        source_image: ImagePayload | None,
        style_lock: ResultRecord | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> ResultRecord:
        """Run one render request and return the completed record."""
        if source_image is None:
            raise ValidationError(MISSING_IMAGE_MESSAGE)
        strategy = select_strategy(selection, style_locked=style_lock is not None)
        inputs = _RenderInputs(
            selection=selection,
            free_text=free_text,
            source_image=source_image,
            style_lock=style_lock,
            on_progress=on_progress or _ignore_progress,
        )
        handlers: dict[
            RenderStrategy,
            Callable[[_RenderInputs], Awaitable[tuple[ImagePayload, ImagePayload]]],
        ] = {
            RenderStrategy.STYLE_LOCKED_TRANSFER: self._style_transfer,
            RenderStrategy.REFINEMENT_ONLY: self._refine,
            RenderStrategy.FULL_RENDER: self._full_render,
        }
        logger.info("Starting render with strategy %s", strategy.value)
        try:
            sketch, final = await handlers[strategy](inputs)
        except GenerationError as exc:
            logger.exception("Render failed with strategy %s", strategy.value)
            raise RenderError(RENDER_FAILED_MESSAGE) from exc
        return ResultRecord(
            id=self.clock().isoformat(),
            sketch_image=sketch,
            final_image=final,
            prompt_text=free_text,
            selection=selection,
        )

    async def _style_transfer(
        self, inputs: _RenderInputs
    ) -> tuple[ImagePayload, ImagePayload]:
        style_lock = inputs.style_lock
        if style_lock is None:
            raise ValidationError("No style is locked.")
        sketch = await self._derive_sketch(inputs)
        inputs.on_progress(STEP_RENDERING_IMAGE)
        reference = replace(style_lock.final_image, name="reference.png")
        instruction = compose_style_transfer(
            inputs.selection, inputs.free_text, style_lock.prompt_text
        )
        final = await self.client.synthesize([reference, sketch], instruction)
        return sketch, final

    async def _refine(self, inputs: _RenderInputs) -> tuple[ImagePayload, ImagePayload]:
        inputs.on_progress(STEP_REFINING_ENVIRONMENT)
        instruction = compose_refinement(inputs.selection, inputs.free_text)
        final = await self.client.synthesize([inputs.source_image], instruction)
        return inputs.source_image, final

    async def _full_render(
        self, inputs: _RenderInputs
    ) -> tuple[ImagePayload, ImagePayload]:
        sketch = await self._derive_sketch(inputs)
        inputs.on_progress(STEP_RENDERING_IMAGE)
        instruction = compose_full_render(inputs.selection, inputs.free_text)
        final = await self.client.synthesize([sketch], instruction)
        return sketch, final

    async def _derive_sketch(self, inputs: _RenderInputs) -> ImagePayload:
        inputs.on_progress(STEP_DERIVING_SKETCH)
        sketch = await self.client.derive_sketch(inputs.source_image)
        return replace(sketch, name="sketch.png")
