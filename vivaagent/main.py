"""
FastAPI application entry point.

Loads and validates settings at startup, wires the search client and the
tool adapter, and mounts the planning endpoint.
"""

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vivaagent.graph.planning_api import router as planning_router
from vivaagent.search.client import ConferenceSearchClient
from vivaagent.shared.config.settings import load_settings, validate_required_configuration
from vivaagent.shared.logging.config import setup_logging
from vivaagent.tools.adapter import AgentToolAdapter


# ============================================================================
# Logging configuration (single source of truth for the service)
# ============================================================================
LOG_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)-35s | %(message)s"
)

logging.basicConfig(
    level=logging.INFO,
    format=LOG_FORMAT,
    datefmt="%Y-%m-%d %H:%M:%S",
    handlers=[logging.StreamHandler(sys.stdout)],
    force=True,  # Override any prior basicConfig calls
)

# Quiet noisy third-party loggers
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("openai").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Validate configuration and build shared, immutable collaborators."""
    logger.info("Starting Vivatech Strategic Planner API v1.0")

    settings = load_settings()
    validate_required_configuration(settings)
    logger.info("All required configuration validated")

    setup_logging()

    search_client = ConferenceSearchClient.from_settings(settings)
    app.state.settings = settings
    app.state.tool_adapter = AgentToolAdapter(search_client, settings.reference_date)

    yield


# Create FastAPI app
app = FastAPI(
    title="Vivatech Strategic Planner",
    description="AI-powered strategic planner for conference attendees",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(planning_router)


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Vivatech Strategic Planner",
        "version": "1.0.0",
        "endpoints": {
            "generate_plan": "/generate-plan",
            "health": "/health",
        },
    }


@app.get("/health")
async def health():
    """Global health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
