from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.gzip import GZipMiddleware
from starlette.middleware.trustedhost import TrustedHostMiddleware
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from .api.v1.router import api_router
from .config import settings
from .utils.logging import setup_logging


def create_app() -> FastAPI:
    setup_logging()

    app = FastAPI(
        title="Notes Organizer API",
        debug=settings.debug,
        version="0.1.0",
        root_path=settings.root_path or "",
    )

    # Read-only API: no credentials, only safe methods
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_origin_regex=settings.cors_origin_regex,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Accept", "Accept-Language", "Content-Language", "Content-Type"],
        max_age=600,
    )

    app.add_middleware(ProxyHeadersMiddleware, trusted_hosts=["*"])
    app.add_middleware(TrustedHostMiddleware, allowed_hosts=settings.trusted_hosts)
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    app.include_router(api_router, prefix=settings.api_prefix)
    return app


app = create_app()
