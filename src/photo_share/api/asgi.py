"""ASGI entrypoint for the photo API."""

from photo_share.api.app import create_app
from photo_share.containers import build_container

app = create_app(build_container())
