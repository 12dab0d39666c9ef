"""Approval API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ApprovalError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from approval.api.error_handlers import register_error_handlers
from approval.api.routes import (
    companies, health, meeting_participants, meetings, participants, topics, voting,
)
from approval.config import get_settings
from approval.infrastructure import database
from approval.infrastructure.database import init_db
from approval.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Approval API started")
    yield
    if database.db_manager:
        await database.db_manager.dispose()
    logger.info("Approval API shutting down")


app = FastAPI(title="Approval API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes - explicit registration; literal segments (company, search) before path params
app.include_router(health.router)
app.include_router(companies.router)
app.include_router(participants.router)
app.include_router(meetings.router)
app.include_router(meeting_participants.router)
app.include_router(topics.router)
app.include_router(voting.router)

register_error_handlers(app)
