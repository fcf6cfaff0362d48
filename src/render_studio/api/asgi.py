"""ASGI entrypoint for the render studio API."""

from render_studio.api.app import create_app
from render_studio.containers import build_container

app = create_app(build_container())
