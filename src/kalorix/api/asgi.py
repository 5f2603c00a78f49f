"""ASGI entrypoint for the Kalorix API."""

from kalorix.api.app import create_app
from kalorix.containers import build_container

app = create_app(build_container())
