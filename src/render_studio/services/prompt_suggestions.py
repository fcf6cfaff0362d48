"""Automatic prompt suggestions via the generation client."""

import json
import logging
from dataclasses import dataclass

from render_studio.domain.selection import Selection
from render_studio.errors import PromptGenerationError
from render_studio.services.rendering import GenerationClient

logger = logging.getLogger(__name__)

SUGGESTION_FAILED_MESSAGE = "Could not generate prompt automatically."


def build_suggestion_request(
    free_text: str, selection: Selection, language: str = "English"
) -> str:
    """Build the text request asking a model to expand the user's prompt."""
    options = json.dumps(selection.as_dict(), indent=2, ensure_ascii=False)
    return (
        "Based on the following user request and options, generate a detailed, "
        "descriptive, and inspiring prompt for an architectural rendering AI. "
        f"The prompt should be in {language}.\n\n"
        f'User Request: "{free_text}"\n'
        f"Options: {options}\n\n"
        "Generated Prompt:"
    )


@dataclass
class PromptSuggestionService:
    """Expand the free-text prompt into a detailed suggestion."""

    client: GenerationClient

    async def suggest(self, free_text: str, selection: Selection) -> str:
        """Return a suggested prompt or raise a user-facing error."""
        try:
            suggestion = await self.client.describe_prompt(free_text, selection)
        except PromptGenerationError as exc:
            logger.exception("Automatic prompt generation failed")
            raise PromptGenerationError(SUGGESTION_FAILED_MESSAGE) from exc
        return suggestion.strip()
