"""
Route package initialization.
"""
from .listings import router as listings_router

__all__ = ["listings_router"]
