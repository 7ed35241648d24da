"""
FastAPI application exposing board-ID extraction as a JSON API.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict

import structlog
from fastapi import FastAPI, Query, Request
from fastapi.responses import JSONResponse, Response
from prometheus_client import CONTENT_TYPE_LATEST

from boardscout import __version__
from boardscout.config.config import Config, load_config
from boardscout.errors import InputValidationError, TransportExhaustedError
from boardscout.extractor import BoardIdExtractor
from boardscout.observability.metrics import export_prometheus
from boardscout.service import find_board_id
from boardscout.transport import RelayTransport

logger = structlog.get_logger(__name__)


def create_app(config: Config | None = None) -> FastAPI:
    config = config or load_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        app.state.config = config
        app.state.extractor = BoardIdExtractor(config.extraction)
        async with RelayTransport(config.transport) as transport:
            app.state.transport = transport
            logger.info("BoardScout API started", relays=config.transport.backends)
            yield
        logger.info("BoardScout API stopped")

    app = FastAPI(title="BoardScout", version=__version__, lifespan=lifespan)

    @app.get("/health")
    async def health() -> Dict[str, Any]:
        return {"status": "ok", "version": __version__}

    @app.get("/metrics")
    async def metrics() -> Response:
        return Response(content=export_prometheus(), media_type=CONTENT_TYPE_LATEST)

    @app.get("/api/board-id")
    async def board_id(request: Request, url: str = Query(..., description="Public board URL")) -> JSONResponse:
        state = request.app.state
        try:
            outcome = await find_board_id(
                url, config=state.config, transport=state.transport, extractor=state.extractor
            )
        except InputValidationError as e:
            return JSONResponse(status_code=400, content={"success": False, "error": str(e)})
        except TransportExhaustedError as e:
            return JSONResponse(status_code=502, content={"success": False, "error": str(e)})

        return JSONResponse(status_code=200 if outcome.success else 404, content=outcome.to_message())

    return app


app = create_app()
