"""
Base Schemas

Response envelope shared by all pooling endpoints:
{message: str, data: dict, proofs: Proofs}
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, ConfigDict


class Proofs(BaseModel):
    """
    Tracing information included in every response.

    - trace_id: Request trace ID (x-request-id header or generated)
    - algorithm: Algorithm identifier (e.g., "greedy_pooling+weighted_carrier_fitness")
    - status: Execution status (success/failed)
    - sources: Inputs the result was computed from
    - latency_ms: Computation time
    """
    trace_id: Optional[str] = Field(None, description="Request trace ID")
    algorithm: Optional[str] = Field(None, description="Algorithm identifier")
    status: Optional[str] = Field(None, description="Execution status")
    sources: Optional[List[Any]] = Field(None, description="Data sources (list of dicts or strings)")
    latency_ms: Optional[float] = Field(None, description="Computation time in milliseconds")

    model_config = ConfigDict(extra="allow")


class ErrorResponse(BaseModel):
    """
    Error body produced by core.errors.to_http_exception().

    FastAPI wraps it as {"detail": ErrorResponse}.
    """
    code: str = Field(..., description="Error code, e.g. validation_error")
    message: str = Field(..., description="Human-readable error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Error context")
    trace_id: Optional[str] = Field(None, description="Request trace ID")

    model_config = ConfigDict(extra="allow")
