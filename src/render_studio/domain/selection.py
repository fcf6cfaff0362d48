"""Domain models for option selections."""

from dataclasses import dataclass, fields, replace
from enum import StrEnum


class Axis(StrEnum):
    """Independent option axes offered to the user."""

    STYLE = "style"
    BUILDING_TYPE = "building_type"
    CONTEXT = "context"
    LIGHTING = "lighting"
    WEATHER_OR_TIME = "weather_or_time"
    VIEW = "view"


ENVIRONMENT_AXES: tuple[Axis, ...] = (
    Axis.CONTEXT,
    Axis.LIGHTING,
    Axis.WEATHER_OR_TIME,
    Axis.VIEW,
)


@dataclass(frozen=True)
class Selection:
    """Currently chosen instruction fragment per axis; empty means unspecified."""

    style: str = ""
    building_type: str = ""
    context: str = ""
    lighting: str = ""
    weather_or_time: str = ""
    view: str = ""

    def get(self, axis: Axis) -> str:
        """Return the fragment selected for an axis."""
        return getattr(self, axis.value)

    def with_value(self, axis: Axis, fragment: str) -> "Selection":
        """Return a copy with one axis replaced."""
        return replace(self, **{axis.value: fragment})

    def fragments(self) -> list[str]:
        """Return the non-empty fragments in axis order."""
        return [value for value in self.as_dict().values() if value]

    def environment_fragments(self) -> list[str]:
        """Return the non-empty fragments of the environment-only axes."""
        return [self.get(axis) for axis in ENVIRONMENT_AXES if self.get(axis)]

    def has_environment(self) -> bool:
        """Return whether any environment axis is set."""
        return bool(self.environment_fragments())

    def as_dict(self) -> dict[str, str]:
        """Return the selection keyed by axis name."""
        return {field.name: getattr(self, field.name) for field in fields(self)}


def derive_prompt(selection: Selection) -> str:
    """Join the selection's non-empty fragments into the free-text prompt."""
    return ", ".join(selection.fragments())
