"""
Wedding Planner - FastAPI Backend
Main application entry point
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from app.core.config import settings
from app.core.db import engine, Base
from app.api import routes_budget, routes_public, routes_seating, routes_weddings

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    # Create database tables
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created")
    yield
    logger.info("Application shutdown")

# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    description="Wedding planning backend: guests, seating and budget",
    version="1.0.0",
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(routes_public.router, tags=["public"])
app.include_router(routes_weddings.router, prefix="/weddings", tags=["weddings"])
app.include_router(routes_seating.router, prefix="/weddings/{wedding_id}/seating", tags=["seating"])
app.include_router(routes_budget.router, prefix="/weddings/{wedding_id}/budget", tags=["budget"])

@app.get("/")
async def root():
    """Root endpoint with basic info"""
    return {"service": settings.APP_NAME, "status": "running"}

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host="127.0.0.1",
        port=8000,
        reload=True
    )
