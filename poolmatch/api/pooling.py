"""
Pooling API Endpoints

Stateless wrappers around the pooling and matching algorithms.

Endpoints:
- POST /pooling/cluster - Group shipments into pools (optional ?limit)
- POST /pooling/cluster/preview - Same, capped at POOL_PREVIEW_LIMIT pools
- POST /pooling/match - Pool shipments and rank carriers per pool

Nothing is persisted; the caller stores or displays the result.

Records whose coordinates cannot be parsed are left out of the run and
listed under proofs.sources[0]["skipped"]; the rest are still pooled.
"""

import logging
import time
from typing import Any, Dict, List, Optional, Sequence, Tuple

from fastapi import APIRouter, Query, Request

from poolmatch.algorithms.matcher import match
from poolmatch.algorithms.options import MatchOptions
from poolmatch.algorithms.pool_builder import cluster_shipments
from poolmatch.core.config import settings
from poolmatch.core.errors import AppError, InternalError, ValidationError, to_http_exception
from poolmatch.core.logging import bind_trace_id
from poolmatch.schemas.base import ErrorResponse
from poolmatch.schemas.pooling import (
    ClusterRequest,
    ClusterResponse,
    MatchItem,
    MatchOptionsIn,
    MatchRequest,
    MatchResponse,
    PoolItem,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/pooling", tags=["pooling"])

CLUSTER_ALGORITHM = "greedy_average_pair_pooling"
MATCH_ALGORITHM = "greedy_average_pair_pooling+weighted_carrier_fitness"

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Oversized request"},
    500: {"model": ErrorResponse, "description": "Pooling or matching failed"},
}


# ============================================================================
# Utilities
# ============================================================================

def get_trace_id(request: Request) -> str:
    """Bind the request trace ID (x-request-id header or generated)."""
    return bind_trace_id(request.headers.get("x-request-id"))


def resolve_request_options(options: Optional[MatchOptionsIn]) -> MatchOptions:
    return options.to_options() if options is not None else MatchOptions()


def check_request_size(shipment_count: int, carrier_count: int = 0) -> None:
    """Reject requests larger than the configured limits."""
    if shipment_count > settings.MAX_SHIPMENTS_PER_REQUEST:
        raise ValidationError(
            f"Too many shipments: {shipment_count} (max {settings.MAX_SHIPMENTS_PER_REQUEST})",
            details={"shipments": shipment_count}
        )
    if carrier_count > settings.MAX_CARRIERS_PER_REQUEST:
        raise ValidationError(
            f"Too many carriers: {carrier_count} (max {settings.MAX_CARRIERS_PER_REQUEST})",
            details={"carriers": carrier_count}
        )


def to_engine_records(items: Sequence[Any]) -> Tuple[List[Any], List[Dict[str, Any]]]:
    """
    Convert request models to engine records, keeping request order.

    Items with an unparsable coordinate are skipped and reported as
    {"id", "field"} entries instead of failing the whole batch.
    """
    records = []
    skipped = []
    for item in items:
        try:
            records.append(item.to_engine())
        except ValidationError as e:
            logger.warning(f"Skipping record: {e.message}")
            skipped.append({"id": e.details.get("id"), "field": e.details.get("field")})
    return records, skipped


def standard_response(
    message: str,
    data: Dict[str, Any],
    trace_id: str,
    algorithm: str,
    started: float,
    sources: List[Any]
) -> Dict[str, Any]:
    """Build standard response format."""
    return {
        "message": message,
        "data": data,
        "proofs": {
            "trace_id": trace_id,
            "algorithm": algorithm,
            "status": "success",
            "sources": sources,
            "latency_ms": round((time.perf_counter() - started) * 1000, 2),
        }
    }


# ============================================================================
# Endpoints
# ============================================================================

@router.post("/cluster", response_model=ClusterResponse, responses=ERROR_RESPONSES)
def cluster(
    body: ClusterRequest,
    request: Request,
    limit: Optional[int] = Query(None, description="Return only the first N pools", ge=1)
):
    """
    Group shipments into pools.

    Pools come back in the order their seed shipments appear in the request.
    `limit` trims the response for previews; `total_pools` still reports
    every pool built.
    """
    trace_id = get_trace_id(request)
    started = time.perf_counter()

    try:
        check_request_size(len(body.shipments))
        shipments, skipped = to_engine_records(body.shipments)
        options = resolve_request_options(body.options)

        pools = cluster_shipments(shipments, options)

    except AppError as e:
        logger.warning(f"Rejected cluster request: {e.message}")
        raise to_http_exception(e)
    except Exception as e:
        logger.exception(f"[{trace_id[:8]}] Failed to cluster shipments: {e}")
        raise to_http_exception(InternalError("Failed to cluster shipments"))

    shown = pools[:limit] if limit is not None else pools

    message = f"Built {len(pools)} pools from {len(shipments)} shipments"
    if skipped:
        message += f"; skipped {len(skipped)} with unparsable coordinates"

    return standard_response(
        message=message,
        data={
            "pools": [PoolItem.from_engine(p).model_dump() for p in shown],
            "total_pools": len(pools),
        },
        trace_id=trace_id,
        algorithm=CLUSTER_ALGORITHM,
        started=started,
        sources=[{"shipments": len(shipments), "skipped": skipped}],
    )


@router.post("/cluster/preview", response_model=ClusterResponse, responses=ERROR_RESPONSES)
def cluster_preview(body: ClusterRequest, request: Request):
    """Cluster and return only the first POOL_PREVIEW_LIMIT pools."""
    return cluster(body, request, limit=settings.POOL_PREVIEW_LIMIT)


@router.post("/match", response_model=MatchResponse, responses=ERROR_RESPONSES)
def match_carriers(body: MatchRequest, request: Request):
    """
    Pool shipments and rank carriers against every pool.

    Each pool keeps its top-K carriers; the merged match list is sorted by
    score, with ties kept in request order.
    """
    trace_id = get_trace_id(request)
    started = time.perf_counter()

    try:
        check_request_size(len(body.shipments), len(body.carriers))
        shipments, skipped_shipments = to_engine_records(body.shipments)
        carriers, skipped_carriers = to_engine_records(body.carriers)
        options = resolve_request_options(body.options)

        result = match(shipments, carriers, options)

    except AppError as e:
        logger.warning(f"Rejected match request: {e.message}")
        raise to_http_exception(e)
    except Exception as e:
        logger.exception(f"[{trace_id[:8]}] Failed to match carriers: {e}")
        raise to_http_exception(InternalError("Failed to match carriers"))

    if not carriers:
        message = f"Built {len(result.pools)} pools; no carriers to rank"
    else:
        message = f"Ranked {len(carriers)} carriers across {len(result.pools)} pools"

    skipped = skipped_shipments + skipped_carriers
    if skipped:
        message += f"; skipped {len(skipped)} with unparsable coordinates"

    return standard_response(
        message=message,
        data={
            "pools": [PoolItem.from_engine(p).model_dump() for p in result.pools],
            "matches": [MatchItem.from_engine(m).model_dump() for m in result.matches],
        },
        trace_id=trace_id,
        algorithm=MATCH_ALGORITHM,
        started=started,
        sources=[{"shipments": len(shipments), "carriers": len(carriers), "skipped": skipped}],
    )
