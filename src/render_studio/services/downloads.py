"""Download naming for exported renders."""

import time

from render_studio.catalogs import reverse_lookup
from render_studio.domain.rendering import ResultRecord
from render_studio.domain.selection import Axis


def build_download_filename(
    record: ResultRecord, timestamp_ms: int | None = None
) -> str:
    """Return the export filename for a record's final image."""
    stamp = timestamp_ms if timestamp_ms is not None else int(time.time() * 1000)
    selection = record.selection
    style = reverse_lookup(Axis.STYLE, selection.style)
    lighting = reverse_lookup(Axis.LIGHTING, selection.lighting)
    weather = reverse_lookup(Axis.WEATHER_OR_TIME, selection.weather_or_time)
    view = reverse_lookup(Axis.VIEW, selection.view)
    return f"{style}_{lighting}_{weather}_{view}_Render_{stamp}.png"
