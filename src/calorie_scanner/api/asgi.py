"""ASGI entrypoint for the calorie scanner API."""

from calorie_scanner.api.app import create_app
from calorie_scanner.containers import build_container

app = create_app(build_container())
