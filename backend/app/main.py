"""FastAPI Application Entry Point.

Configures the app, lifespan, CORS, and includes all route modules.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from scaffolder import config
from scaffolder.logging_config import configure_logging

from .database import close_db, init_db

logger = logging.getLogger("scaffolder.app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage logging and database lifecycle."""
    configure_logging()
    await init_db()

    # Warn about optional integrations
    if not config.FIGMA_TOKEN:
        logger.warning(
            "FIGMA_TOKEN not set; /api/figma/import will analyze the built-in sample "
            "design. Set FIGMA_TOKEN in .env or environment to import real Figma files."
        )

    yield
    await close_db()


app = FastAPI(title="Figma to Angular Material Scaffolder API", version="1.0.0", lifespan=lifespan)

# CORS origins from CORS_ORIGINS (comma-separated)
CORS_ORIGINS = [o.strip() for o in config.CORS_ORIGINS.split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
from .routes.figma import router as figma_router  # noqa: E402

app.include_router(figma_router)


@app.get("/health")
async def health_check():
    """Health check endpoint for container orchestration."""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host=config.API_HOST, port=config.API_PORT)
