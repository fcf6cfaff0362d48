"""Error kinds raised by the render studio core."""


class RenderStudioError(Exception):
    """Base class for render studio errors."""


class ValidationError(RenderStudioError):
    """Request is missing required input, such as the source image."""


class NotFoundError(RenderStudioError):
    """A looked-up record does not exist."""


class SessionNotFoundError(NotFoundError):
    """A studio session id is unknown."""


class PromptGenerationError(RenderStudioError):
    """Automatic prompt suggestion failed."""


class GenerationError(RenderStudioError):
    """Sketch derivation or image synthesis failed."""


class RenderError(RenderStudioError):
    """A render request failed as a whole."""


class RenderInProgressError(RenderStudioError):
    """A render is already running for the session."""
