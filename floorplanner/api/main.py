"""FastAPI application factory."""

from __future__ import annotations
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from floorplanner.config import Settings
from floorplanner.api.routes import router

logger = logging.getLogger("floorplanner")


def configure_logging(level: str) -> None:
    """Attach one stream handler to the package logger."""
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        ))
        logger.addHandler(handler)


def create_app() -> FastAPI:
    Settings.validate()
    configure_logging(Settings.LOG_LEVEL)

    app = FastAPI(
        title="Floorplan Geometry Engine",
        description="Wall graph, mitered corners and unified wall meshes for sketched floorplans",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=Settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router, prefix="/api")

    logger.info("Floorplan API ready")
    return app


app = create_app()
