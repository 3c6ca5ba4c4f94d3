"""
Dining Wrap — FastAPI app factory.
"""
from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import dining_wrap
from dining_wrap.api.router_meta import router as meta_router
from dining_wrap.api.router_recap import router as recap_router
from dining_wrap.logging_setup import configure_logging


def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="Dining Wrap API",
        description="Campus card dining recap — stats, personality, achievements and more",
        version=dining_wrap.__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(meta_router)
    app.include_router(recap_router)

    return app


app = create_app()
