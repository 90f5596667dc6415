"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from isoline import __version__
from isoline.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.isoline_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="isoline",
        description="Marching-squares isolines and isobands over rectangular sample grids",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Importing the engine registers the shape table
    import isoline.engine.shapes  # noqa: F401

    from isoline.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
