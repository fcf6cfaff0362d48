"""Dependency container wiring for the application."""

from dataclasses import dataclass

from render_studio.adapters.gemini_generation_client import GeminiGenerationClient
from render_studio.adapters.in_memory_session_repository import (
    InMemorySessionRepository,
)
from render_studio.adapters.openai_generation_client import OpenAIGenerationClient
from render_studio.config import Settings, require_api_key
from render_studio.services.prompt_suggestions import PromptSuggestionService
from render_studio.services.rendering import GenerationClient, RenderService
from render_studio.services.sessions import SessionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    generation_client: GenerationClient
    render_service: RenderService
    suggestion_service: PromptSuggestionService
    session_service: SessionService


def build_generation_client(settings: Settings) -> GenerationClient:
    """Create the generation client for the configured provider."""
    api_key = require_api_key(settings)
    if settings.generation_provider == "openai":
        return OpenAIGenerationClient.create(
            api_key,
            text_model=settings.openai_text_model,
            image_model=settings.openai_image_model,
            language=settings.auto_prompt_language,
            timeout_seconds=settings.request_timeout_seconds,
        )
    return GeminiGenerationClient.create(
        api_key,
        text_model=settings.gemini_text_model,
        image_model=settings.gemini_image_model,
        language=settings.auto_prompt_language,
        timeout_seconds=settings.request_timeout_seconds,
    )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    generation_client = build_generation_client(resolved_settings)
    render_service = RenderService(client=generation_client)
    suggestion_service = PromptSuggestionService(client=generation_client)
    session_service = SessionService(
        repository=InMemorySessionRepository(),
        render_service=render_service,
        suggestion_service=suggestion_service,
    )
    return AppContainer(
        settings=resolved_settings,
        generation_client=generation_client,
        render_service=render_service,
        suggestion_service=suggestion_service,
        session_service=session_service,
    )
