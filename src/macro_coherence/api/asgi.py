"""ASGI entrypoint for the macro coherence API."""

from macro_coherence.api.app import create_app
from macro_coherence.containers import build_container

app = create_app(build_container())
