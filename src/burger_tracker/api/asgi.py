"""ASGI entrypoint for the burger tracker API."""

from burger_tracker.api.app import create_app
from burger_tracker.containers import build_container

app = create_app(build_container())
