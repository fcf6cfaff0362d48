"""Shared test fixtures."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

import pytest

from render_studio.adapters.in_memory_session_repository import (
    InMemorySessionRepository,
)
from render_studio.config import Settings
from render_studio.containers import AppContainer
from render_studio.domain.images import ImagePayload
from render_studio.domain.rendering import ResultRecord
from render_studio.domain.selection import Selection
from render_studio.errors import GenerationError, PromptGenerationError
from render_studio.services.prompt_suggestions import PromptSuggestionService
from render_studio.services.rendering import GenerationClient, RenderService
from render_studio.services.sessions import SessionService

PNG_HEADER = b"\x89PNG\r\n\x1a\n"


def make_image(tag: str, mime_type: str = "image/png") -> ImagePayload:
    return ImagePayload(data=PNG_HEADER + tag.encode(), mime_type=mime_type)


def make_record(
    record_id: str,
    selection: Selection | None = None,
    prompt_text: str = "stored prompt",
) -> ResultRecord:
    return ResultRecord(
        id=record_id,
        sketch_image=make_image(f"sketch-{record_id}"),
        final_image=make_image(f"final-{record_id}"),
        prompt_text=prompt_text,
        selection=selection or Selection(),
    )


@dataclass
class FakeGenerationClient(GenerationClient):
    """Fake generation client that records calls."""

    suggestion: str = "A detailed architectural prompt"
    sketch: ImagePayload = field(default_factory=lambda: make_image("sketch"))
    final: ImagePayload = field(default_factory=lambda: make_image("final"))
    fail_on: set[str] = field(default_factory=set)
    calls: list[str] = field(default_factory=list)
    synthesize_calls: list[tuple[list[ImagePayload], str]] = field(
        default_factory=list
    )
    sketch_inputs: list[ImagePayload] = field(default_factory=list)

    async def describe_prompt(self, free_text: str, selection: Selection) -> str:
        self.calls.append("describe_prompt")
        if "describe_prompt" in self.fail_on:
            raise PromptGenerationError("model unavailable")
        return self.suggestion

    async def derive_sketch(self, image: ImagePayload) -> ImagePayload:
        self.calls.append("derive_sketch")
        self.sketch_inputs.append(image)
        if "derive_sketch" in self.fail_on:
            raise GenerationError("No image data returned")
        return self.sketch

    async def synthesize(
        self, references: Sequence[ImagePayload], instruction: str
    ) -> ImagePayload:
        self.calls.append("synthesize")
        self.synthesize_calls.append((list(references), instruction))
        if "synthesize" in self.fail_on:
            raise GenerationError("No image data returned")
        return self.final


@dataclass
class StepClock:
    """Clock that advances one second per call."""

    current: datetime = datetime(2026, 1, 1, tzinfo=UTC)

    def __call__(self) -> datetime:
        value = self.current
        self.current = value + timedelta(seconds=1)
        return value


@pytest.fixture
def settings() -> Settings:
    return Settings(
        generation_provider="gemini",
        gemini_api_key="gemini-key",
        openai_api_key="openai-key",
    )


@pytest.fixture
def generation_client() -> FakeGenerationClient:
    return FakeGenerationClient()


@pytest.fixture
def render_service(generation_client: FakeGenerationClient) -> RenderService:
    return RenderService(client=generation_client, clock=StepClock())


@pytest.fixture
def session_service(
    generation_client: FakeGenerationClient, render_service: RenderService
) -> SessionService:
    return SessionService(
        repository=InMemorySessionRepository(),
        render_service=render_service,
        suggestion_service=PromptSuggestionService(client=generation_client),
    )


@pytest.fixture
def source_image() -> ImagePayload:
    return make_image("source", mime_type="image/jpeg")


@pytest.fixture
def container(
    settings: Settings,
    generation_client: FakeGenerationClient,
    render_service: RenderService,
    session_service: SessionService,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        generation_client=generation_client,
        render_service=render_service,
        suggestion_service=session_service.suggestion_service,
        session_service=session_service,
    )
