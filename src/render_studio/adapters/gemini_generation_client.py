"""Gemini API client for prompt suggestions and image generation."""

from collections.abc import Sequence
from dataclasses import dataclass

import httpx
from google import genai
from google.genai import errors, types

from render_studio.domain.images import ImagePayload, detect_mime_type
from render_studio.domain.selection import Selection
from render_studio.errors import GenerationError, PromptGenerationError
from render_studio.services.prompt_suggestions import build_suggestion_request
from render_studio.services.rendering import SKETCH_INSTRUCTION, GenerationClient


@dataclass
class GeminiGenerationClient(GenerationClient):
    """Generation client backed by the Gemini API."""

    client: genai.Client
    text_model: str = "gemini-2.5-flash"
    image_model: str = "gemini-2.5-flash-image"
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
    ) -> "GeminiGenerationClient":
        """Create a Gemini generation client."""
        client = genai.Client(
            api_key=api_key,
            http_options=types.HttpOptions(timeout=timeout_seconds * 1000),
        )
        return cls(
            client=client,
            text_model=text_model,
            image_model=image_model,
            language=language,
        )

    async def describe_prompt(self, free_text: str, selection: Selection) -> str:
        """Ask the text model to expand the prompt."""
        request = build_suggestion_request(free_text, selection, self.language)
        try:
            response = await self.client.aio.models.generate_content(
                model=self.text_model, contents=request
            )
        except (errors.APIError, httpx.HTTPError) as exc:
            raise PromptGenerationError("Gemini prompt request failed") from exc
        text = response.text
        if not text:
            raise PromptGenerationError("Gemini returned an empty prompt")
        return text

    async def derive_sketch(self, image: ImagePayload) -> ImagePayload:
        """Convert a photo into line art with the image model."""
        return await self.synthesize([image], SKETCH_INSTRUCTION)

    async def synthesize(
        self, references: Sequence[ImagePayload], instruction: str
    ) -> ImagePayload:
        """Generate one image from reference images and an instruction."""
        parts: list[types.Part] = [
            types.Part.from_bytes(data=image.data, mime_type=image.mime_type)
            for image in references
        ]
        parts.append(types.Part.from_text(text=instruction))
        try:
            response = await self.client.aio.models.generate_content(
                model=self.image_model,
                contents=parts,
                config=types.GenerateContentConfig(
                    response_modalities=[types.Modality.IMAGE],
                ),
            )
        except (errors.APIError, httpx.HTTPError) as exc:
            raise GenerationError("Gemini image request failed") from exc
        image = _first_inline_image(response)
        if image is None:
            raise GenerationError("No image data returned from Gemini")
        return image


def _first_inline_image(response: types.GenerateContentResponse) -> ImagePayload | None:
    """Return the first inline image part of a response, if any."""
    candidates = response.candidates or []
    if not candidates or candidates[0].content is None:
        return None
    for part in candidates[0].content.parts or []:
        inline = part.inline_data
        if inline is not None and inline.data:
            mime_type = inline.mime_type or detect_mime_type(inline.data)
            return ImagePayload(data=inline.data, mime_type=mime_type)
    return None
