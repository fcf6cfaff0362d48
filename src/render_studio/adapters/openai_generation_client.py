"""OpenAI API client for prompt suggestions and image generation."""

import base64
import binascii
from collections.abc import Sequence
from dataclasses import dataclass

from openai import AsyncOpenAI, OpenAIError

from render_studio.domain.images import ImagePayload, detect_mime_type
from render_studio.domain.selection import Selection
from render_studio.errors import GenerationError, PromptGenerationError
from render_studio.services.prompt_suggestions import build_suggestion_request
from render_studio.services.rendering import SKETCH_INSTRUCTION, GenerationClient


@dataclass
class OpenAIGenerationClient(GenerationClient):
    """Generation client backed by the OpenAI Responses and Images APIs."""

    client: AsyncOpenAI
    text_model: str = "gpt-5.2"
    image_model: str = "gpt-image-1"
    language: str = "English"

    @classmethod
    def create(  # noqa: PLR0913
        cls,
        api_key: str,
        *,
        text_model: str,
        image_model: str,
        language: str,
        timeout_seconds: int,
    ) -> "OpenAIGenerationClient":
        """Create an OpenAI generation client."""
        return cls(
            client=AsyncOpenAI(api_key=api_key, timeout=timeout_seconds),
            text_model=text_model,
            image_model=image_model,
            language=language,
        )

    async def describe_prompt(self, free_text: str, selection: Selection) -> str:
        """Call the Responses API to expand the prompt."""
        request = build_suggestion_request(free_text, selection, self.language)
        try:
            response = await self.client.responses.create(
                model=self.text_model, input=request
            )
        except OpenAIError as exc:
            raise PromptGenerationError("OpenAI prompt request failed") from exc
        output_text = response.output_text
        if not output_text:
            raise PromptGenerationError("OpenAI returned an empty response")
        return output_text

    async def derive_sketch(self, image: ImagePayload) -> ImagePayload:
        """Convert a photo into line art with the image model."""
        return await self.synthesize([image], SKETCH_INSTRUCTION)

    async def synthesize(
        self, references: Sequence[ImagePayload], instruction: str
    ) -> ImagePayload:
        """Edit the reference images into one generated image."""
        files = [(image.name, image.data, image.mime_type) for image in references]
        try:
            response = await self.client.images.edit(
                model=self.image_model, image=files, prompt=instruction
            )
        except OpenAIError as exc:
            raise GenerationError("OpenAI image request failed") from exc
        encoded = response.data[0].b64_json if response.data else None
        if not encoded:
            raise GenerationError("No image data returned from OpenAI")
        try:
            data = base64.b64decode(encoded, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise GenerationError("OpenAI returned malformed image data") from exc
        return ImagePayload(data=data, mime_type=detect_mime_type(data))
