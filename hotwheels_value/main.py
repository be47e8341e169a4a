"""
FastAPI main application for the Hot Wheels market value service.
"""

# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from . import __version__
from .config import get_settings
from .error_handling import register_exception_handlers
from .routers import listings_router

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    logger.info("Starting Hot Wheels market value API...")
    if get_settings().use_mock_data:
        logger.warning("EBAY_API_KEY is not set; searches will be answered with mock data")
    else:
        logger.info("eBay Finding API configured")

    yield

    logger.info("Shutting down Hot Wheels market value API...")


app = FastAPI(
    title="Hot Wheels Market Value API",
    description="Market value of Hot Wheels cars from eBay completed sales",
    version=__version__,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.get("/api/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok"}


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "Hot Wheels Market Value API",
        "docs": "/docs",
        "health": "/api/health",
        "listings": "/api/listings"
    }


app.include_router(listings_router, prefix="/api", tags=["listings"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "hotwheels_value.main:app",
        host="0.0.0.0",
        port=8000,
        log_level=settings.log_level.lower()
    )
