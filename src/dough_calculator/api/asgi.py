"""ASGI entrypoint for the dough calculator API."""

from dough_calculator.api.app import create_app
from dough_calculator.containers import build_container

app = create_app(build_container())
