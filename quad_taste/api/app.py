"""FastAPI application factory for the quad-taste API."""
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from quad_taste import __version__
from quad_taste.core.config import Config, load_config
from quad_taste.core.logging_config import setup_logging
from quad_taste.api.services.taste_service import TasteService

CONFIG_ENV_VAR = "QUAD_TASTE_CONFIG"


def _config_from_env() -> Config:
    load_dotenv()
    config_path = os.environ.get(CONFIG_ENV_VAR)
    if config_path:
        return load_config(Path(config_path))
    return Config()


def create_app(
    config: Optional[Config] = None,
    service: Optional[TasteService] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    The quad catalog is loaded once here and shared by every request.
    """
    if service is None:
        config = config or _config_from_env()
        setup_logging(
            log_level=config.system.log_level,
            log_file=config.system.log_file,
            enable_colors=config.system.enable_colors,
        )
        service = TasteService(config)

    app = FastAPI(
        title="Quad Taste API",
        description="Forced-choice design taste profiling",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.taste_service = service

    from quad_taste.api.routers.taste import router as taste_router

    app.include_router(taste_router)

    @app.get("/")
    async def root():
        return {
            "name": "Quad Taste API",
            "version": __version__,
            "quads": len(service.library),
            "docs": "/docs",
        }

    return app
