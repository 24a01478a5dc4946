"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from fukuda.config import settings
from fukuda.engine.errors import ImageDecodeError, InvalidParameter

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.fukuda_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Fukuda",
        description="Fukuda-style image tiling — intensity-modulated strips",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(InvalidParameter)
    async def _invalid_parameter(request: Request, exc: InvalidParameter) -> JSONResponse:
        logger.info("Rejected parameters on %s: %s", request.url.path, exc)
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.exception_handler(ImageDecodeError)
    async def _image_decode(request: Request, exc: ImageDecodeError) -> JSONResponse:
        logger.warning("Image decode failed on %s: %s", request.url.path, exc)
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    from fukuda.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
