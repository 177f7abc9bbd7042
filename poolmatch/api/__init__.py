"""
API Package - FastAPI Routers

Exports the aggregated router for main app registration.
"""

from poolmatch.api.router import api_router
from poolmatch.api.pooling import router as pooling_router

# API Version
API_VERSION = "1.0.0"

__all__ = [
    "api_router",
    "pooling_router",
    "API_VERSION",
]
