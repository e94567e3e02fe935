"""ASGI entrypoint for the DRI engine API."""

from dri_engine.api.app import create_app
from dri_engine.containers import build_container

app = create_app(build_container())
