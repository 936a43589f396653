"""ASGI entrypoint for the artist gallery API."""

from artist_gallery.api.app import create_app
from artist_gallery.containers import build_container

app = create_app(build_container())
