"""Domain models for images crossing the generation boundary."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ImagePayload:
    """Opaque encoded image bytes with their media type."""

    data: bytes
    mime_type: str
    name: str = "image.png"

    def __repr__(self) -> str:
        return (
            f"ImagePayload(name={self.name!r}, mime_type={self.mime_type!r}, "
            f"size={len(self.data)})"
        )


def detect_mime_type(image_bytes: bytes, default: str = "image/png") -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    return default
