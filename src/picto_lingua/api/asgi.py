"""ASGI entrypoint for the Picto Lingua API."""

from picto_lingua.api.app import create_app
from picto_lingua.containers import build_container

app = create_app(build_container())
