"""FastAPI application for the Explore BFF."""

import logging

from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tymout_bff.config import BffConfig, create_from_config
from tymout_bff.pipeline import ExploreAggregator

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health() -> dict[str, bool]:
    return {"ok": True}


@router.get("/explore")
async def explore(request: Request) -> JSONResponse:
    """Aggregate events, categories and spotlight for the Explore page.

    Always answers 200; upstream failures show up as empty lists and a
    composition failure adds ``error``/``message`` to the body.
    """
    aggregator: ExploreAggregator = request.app.state.aggregator
    raw_query = {key: request.query_params.getlist(key) for key in request.query_params.keys()}
    response = await aggregator.handle(raw_query, dict(request.headers))
    return JSONResponse(status_code=200, content=response.to_dict())


def create_app(
    config: BffConfig | None = None,
    aggregator: ExploreAggregator | None = None,
) -> FastAPI:
    """Build the application.

    Args:
        config: Root configuration (defaults are used when omitted).
        aggregator: Pre-built aggregator; built from ``config`` when omitted.

    Returns:
        Configured FastAPI app.
    """
    config = config or BffConfig()
    app = FastAPI(title="Tymout BFF")
    app.state.aggregator = aggregator or create_from_config(config)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.include_router(router)

    logger.debug(f"App created with CORS origins {config.server.cors_origins}")
    return app
