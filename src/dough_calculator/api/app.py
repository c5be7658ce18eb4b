"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic.alias_generators import to_camel

from dough_calculator.api.dough_models import DoughRequest, DoughResponse
from dough_calculator.app_logging import configure_logging
from dough_calculator.config import parse_allowed_origins
from dough_calculator.containers import AppContainer
from dough_calculator.services.dough import INPUT_BOUNDS


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(logging.DEBUG if container.settings.debug else logging.INFO)
    logger = logging.getLogger(__name__)
    allowed_origins = parse_allowed_origins(container.settings.cors_allowed_origins)

    app = FastAPI()
    app.state.container = container

    if allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=allowed_origins,
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
        )
        logger.info("CORS enabled for origins: %s", ", ".join(allowed_origins))

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/api/dough/defaults")
    async def dough_defaults() -> dict[str, dict[str, int | float | None]]:
        """Return default values and ranges for the form inputs."""
        return {
            to_camel(name): {
                "default": bounds.default,
                "min": bounds.minimum,
                "max": bounds.maximum,
            }
            for name, bounds in INPUT_BOUNDS.items()
        }

    @app.post("/api/dough", response_model=DoughResponse)
    async def compute_dough(payload: DoughRequest, request: Request) -> DoughResponse:
        """Compute flour, water, salt and poolish quantities."""
        state_container: AppContainer = request.app.state.container
        result = state_container.dough_calculator.compute(payload.to_inputs())
        return DoughResponse.from_result(result)

    return app
