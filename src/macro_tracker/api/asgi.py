"""ASGI entrypoint for the macro tracker API."""

from macro_tracker.api.app import create_app
from macro_tracker.containers import build_container

app = create_app(build_container())
