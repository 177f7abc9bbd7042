"""
Central API Router

Aggregates all endpoint routers for the pooling service.
"""

import logging
from fastapi import APIRouter

from poolmatch.api.pooling import router as pooling_router

logger = logging.getLogger(__name__)

# Main API router
api_router = APIRouter()

# Routers define their own prefixes; (router, tags)
ROUTER_CONFIGS = [
    (pooling_router, ["Shipment Pooling"]),
]

for router, tags in ROUTER_CONFIGS:
    api_router.include_router(router, tags=tags)

logger.debug(f"API router initialized with {len(api_router.routes)} routes")
