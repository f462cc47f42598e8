#!/usr/bin/env python3
"""
Volunteer Match API - FastAPI Application

Matches volunteers to opportunities published by organizations and lets
anyone browse active opportunities with skill and distance filters.

Usage:
    python main.py serve

Then open:
    - http://localhost:8080/ - Endpoint index (default port, configurable in config.yaml)
    - http://localhost:8080/docs - API Documentation (Swagger UI)
    - http://localhost:8080/redoc - Alternative API Documentation
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError

from .config import get_config
from .dependencies import get_db_manager
from .exceptions import (
    ServiceException,
    service_exception_handler,
    http_exception_handler,
    validation_exception_handler,
    general_exception_handler
)
from .routers import (
    opportunities_router,
    organizations_router,
    volunteers_router
)

# Load configuration
config = get_config()

# Configure logging
logging.basicConfig(
    level=config.logging.level.upper(),
    format=config.logging.format
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if config.database.create_tables:
        get_db_manager().create_tables()
    yield


# Create FastAPI app
app = FastAPI(
    title="Volunteer Match API",
    description="Volunteer-to-opportunity matching and discovery",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# Register exception handlers
app.add_exception_handler(ServiceException, service_exception_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

# Include routers
app.include_router(opportunities_router)
app.include_router(organizations_router)
app.include_router(volunteers_router)


@app.get("/")
def read_root():
    """
    List the available endpoints.
    """
    return {
        "message": "Volunteer Match API - v1.0",
        "endpoints": {
            "volunteers": [
                "POST /api/volunteers",
                "GET /api/volunteers/{user_id}",
                "GET /api/volunteers/{user_id}/applications"
            ],
            "organizations": [
                "POST /api/organizations",
                "GET /api/organizations/{id}",
                "PUT /api/organizations/{id}"
            ],
            "opportunities": [
                "GET /api/opportunities",
                "GET /api/opportunities/match",
                "POST /api/opportunities",
                "GET /api/opportunities/{id}",
                "POST /api/opportunities/{id}/apply"
            ]
        },
        "documentation": "/docs"
    }


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "volunteer-match"}


def main():
    """Run the web server."""
    import uvicorn

    logger.info(f"Starting Volunteer Match API on {config.web.host}:{config.web.port}")
    logger.info(f"API Docs: http://{config.web.host}:{config.web.port}/docs")

    uvicorn.run(
        "web.backend.app:app",
        host=config.web.host,
        port=config.web.port,
        reload=False,
        log_level=config.logging.level.lower()
    )


if __name__ == "__main__":
    main()
