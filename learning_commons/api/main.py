"""
FastAPI application for the Learning Commons engine.

Provides REST API for:
- Knowledge graph search and learning progressions
- Skill mapping for intervention planning
- Content evaluation of AI-generated instructional text

The knowledge graph is loaded once in the lifespan handler. If loading fails
the service still starts: evaluation endpoints keep working and graph
endpoints answer 503.
"""

from __future__ import annotations

import sys
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from config import Settings, get_settings
from learning_commons import __version__
from learning_commons.graph.loader import load_knowledge_graph
from learning_commons.graph.store import GraphLoadError, GraphNotLoadedError, get_default_store

settings = get_settings()


def configure_logging(settings: Settings) -> None:
    """Route loguru output to stderr (and optionally a file) at the configured level."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=settings.log_level,
        format="<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | {message}",
    )
    if settings.log_file:
        logger.add(settings.log_file, level=settings.log_level, rotation="10 MB")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    # Startup
    configure_logging(settings)
    logger.info("Starting Learning Commons service...")
    try:
        load_knowledge_graph()
    except GraphLoadError as e:
        logger.error(f"Knowledge graph unavailable, graph endpoints disabled: {e}")
    logger.info(f"Service started on {settings.api_host}:{settings.api_port}")

    yield

    # Shutdown
    logger.info("Shutting down Learning Commons service...")


app = FastAPI(
    title="Learning Commons",
    description="""
    Knowledge graph and content evaluation engine for intervention planning.

    ## Features

    - **Knowledge Graph**: Granular learning components linked by prerequisites
    - **Progressions**: Ordered pathways before and after a skill
    - **Skill Mapping**: Map curriculum skills and standards onto components
    - **Evaluators**: SCASS text complexity, literacy and motivation scoring
    """,
    version=__version__,
    lifespan=lifespan,
)

# CORS middleware for local development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Restrict in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(GraphNotLoadedError)
async def graph_not_loaded_handler(request: Request, exc: GraphNotLoadedError) -> JSONResponse:
    logger.warning(f"Graph query on unloaded store: {request.url.path}")
    return JSONResponse(status_code=503, content={"detail": str(exc)})


# ========================================
# Health & Status Endpoints
# ========================================


@app.get("/", tags=["Health"])
def root() -> dict[str, str]:
    """Root endpoint returning service info."""
    return {
        "service": "learning-commons",
        "version": __version__,
        "status": "ok",
    }


@app.get("/health", tags=["Health"])
def health_check() -> dict[str, Any]:
    """Report whether the knowledge graph snapshot is usable."""
    store = get_default_store()
    return {
        "status": "healthy" if store.loaded else "degraded",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "components": {
            "knowledge_graph": "loaded" if store.loaded else "not_loaded",
            "evaluators": "ok",
        },
        "graph": {
            "components": len(store.components),
            "relationships": len(store.relationships),
        },
        "config": settings.get_graph_config(),
    }


# ========================================
# Import and mount routers
# ========================================

from learning_commons.api.routers import learning_commons_router

app.include_router(
    learning_commons_router.router,
    prefix="/api/learning-commons",
    tags=["Learning Commons"],
)
