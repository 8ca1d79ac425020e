"""ASGI entrypoint for the daily diet API."""

from daily_diet.api.app import create_app
from daily_diet.containers import build_container

app = create_app(build_container())
