"""
Sales Ledger API - Main Application.

FastAPI application exposing the SalesBook to a front-end.
Run with: uvicorn api.main:app --reload
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api import __version__

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

# Create FastAPI application
app = FastAPI(
    title="Sales Ledger API",
    description="Record sales and view daily and weekly statistics",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Configure CORS - Allow all origins for development
# TODO: Restrict origins once the mobile front-end has a fixed host
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health", tags=["Health"])
def health_check():
    """
    Health check endpoint.

    Returns the API status and version.
    """
    return {
        "status": "healthy",
        "version": __version__,
        "service": "sales-ledger-api"
    }


# Import and include routers
from api.routers import sales, summary

app.include_router(sales.router, prefix="/api/v1", tags=["Sales"])
app.include_router(summary.router, prefix="/api/v1", tags=["Summary"])
