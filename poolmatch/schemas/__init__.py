"""
Pydantic Schemas Package

Typed request/response models for the pooling service endpoints.

Schema Conventions:
- Responses: {message: str, data: dict, proofs: Proofs}
- Errors: {"detail": ErrorResponse} via core.errors.to_http_exception()
- Requests accept camelCase or snake_case keys

Export Groups:
- Base: Proofs, ErrorResponse
- Pooling: request models, pool/match items, response envelopes
"""

# Base schemas
from poolmatch.schemas.base import (
    Proofs,
    ErrorResponse
)

# Pooling schemas
from poolmatch.schemas.pooling import (
    CoordinateIn,
    ShipmentIn,
    CarrierIn,
    MatchOptionsIn,
    ClusterRequest,
    MatchRequest,
    CoordinateOut,
    PoolItem,
    MatchItem,
    ClusterData,
    MatchData,
    ClusterResponse,
    MatchResponse
)

__all__ = [
    # Base
    "Proofs",
    "ErrorResponse",

    # Pooling requests
    "CoordinateIn",
    "ShipmentIn",
    "CarrierIn",
    "MatchOptionsIn",
    "ClusterRequest",
    "MatchRequest",

    # Pooling responses
    "CoordinateOut",
    "PoolItem",
    "MatchItem",
    "ClusterData",
    "MatchData",
    "ClusterResponse",
    "MatchResponse",
]
