from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Callable

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from morphokey import __version__
from morphokey.api.router import api_router
from morphokey.core.config import Settings, load_settings
from morphokey.core.logging import configure_logging
from morphokey.nlp.adapter import TokenizerAdapter

logger = logging.getLogger(__name__)


def _default_tokenizer_factory(settings: Settings) -> TokenizerAdapter:
    # Import lazily so a missing MeCab install degrades health instead of crashing import.
    from morphokey.nlp.japanese import load_japanese_tokenizer

    return load_japanese_tokenizer(settings)


def create_app(
    settings: Settings | None = None,
    tokenizer_factory: Callable[[Settings], TokenizerAdapter] = _default_tokenizer_factory,
) -> FastAPI:
    app_settings = settings or load_settings()
    configure_logging(app_settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        tokenizer: TokenizerAdapter | None = None
        if app_settings.tokenizer_enabled:
            try:
                tokenizer = tokenizer_factory(app_settings)
                app.state.tokenizer_ready = True
                app.state.tokenizer_error = None
            except Exception as exc:
                app.state.tokenizer_ready = False
                app.state.tokenizer_error = str(exc)
                logger.exception(
                    "backend_tokenizer_startup_failed",
                    extra={"mecab_args": app_settings.mecab_args},
                )
        else:
            app.state.tokenizer_ready = False
            app.state.tokenizer_error = "Tokenizer disabled by configuration."
        app.state.tokenizer = tokenizer

        logger.info(
            "backend_startup",
            extra={
                "status": "ok" if app.state.tokenizer_ready else "degraded",
                "environment": app_settings.environment,
                "host": app_settings.host,
                "port": app_settings.port,
                "tokenizer_error": app.state.tokenizer_error,
                "tokenizer": tokenizer.metadata() if tokenizer else None,
                "analysis_timeout_seconds": app_settings.analysis_timeout_seconds,
            },
        )
        yield

    app = FastAPI(title="Morpho Key Backend", version=__version__, lifespan=lifespan)
    app.state.settings = app_settings
    app.state.tokenizer_ready = False
    app.state.tokenizer_error = None
    app.state.tokenizer = None
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(app_settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(api_router, prefix="/api")
    return app


app = create_app()
