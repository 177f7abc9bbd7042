"""
Pooling Schemas

Pydantic models for the pooling and matching endpoints.

Request models accept the shapes the surrounding application stores:
- coordinates as {"lat", "lng"} objects or free-text "lat,lng" strings
- timestamps as ISO strings or epoch milliseconds
- camelCase or snake_case keys

to_engine() / to_options() convert requests into the immutable engine records;
from_engine() builds response items from engine results.
"""

from datetime import datetime
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from poolmatch.algorithms.options import MatchOptions
from poolmatch.algorithms.types import Carrier, Coordinate, Match, Pool, Shipment, TimeWindow
from poolmatch.core.errors import ValidationError
from poolmatch.schemas.base import Proofs
from poolmatch.tools.coordinates import coerce_coordinate
from poolmatch.tools.time_tool import parse_timestamp

# NaN and Infinity are valid JSON to the body parser but meaningless as
# coordinates or quantities
_REQUEST_CONFIG = ConfigDict(
    alias_generator=to_camel, populate_by_name=True, extra="ignore", allow_inf_nan=False
)


def _parse_optional_timestamp(value: Any) -> Optional[datetime]:
    if value is None or value == "":
        return None
    parsed = parse_timestamp(value)
    if parsed is None:
        raise ValueError(f"Unparsable timestamp: {value!r}")
    return parsed


def _to_coordinate(value: Any, field_name: str, record_id: str) -> Coordinate:
    if isinstance(value, CoordinateIn):
        return Coordinate(lat=value.lat, lng=value.lng)

    coordinate = coerce_coordinate(value)
    if coordinate is None:
        raise ValidationError(
            f"Invalid {field_name} coordinate for {record_id}",
            details={"id": record_id, "field": field_name, "value": value}
        )
    return coordinate


# ==================== Request Models ====================

class CoordinateIn(BaseModel):
    """Latitude/longitude in degrees (ranges are not enforced)."""
    lat: float = Field(..., description="Latitude in degrees")
    lng: float = Field(..., description="Longitude in degrees")

    model_config = ConfigDict(allow_inf_nan=False)


class ShipmentIn(BaseModel):
    """Pending shipment to pool."""
    id: str = Field(..., description="Unique shipment identifier", min_length=1)
    pickup: Union[CoordinateIn, str] = Field(..., description="Pickup point or 'lat,lng' text")
    drop: Union[CoordinateIn, str] = Field(..., description="Drop point or 'lat,lng' text")
    volume: Optional[float] = Field(None, description="Volume in cubic meters", ge=0)
    weight: Optional[float] = Field(None, description="Weight in kilograms", ge=0)
    priority: Optional[float] = Field(None, description="Priority (0-1, 1 = highest)", ge=0, le=1)
    ready_at: Optional[datetime] = Field(None, description="Earliest pickup time")
    due_by: Optional[datetime] = Field(None, description="Latest delivery time")

    model_config = _REQUEST_CONFIG

    @field_validator("ready_at", "due_by", mode="before")
    @classmethod
    def _parse_time(cls, value: Any) -> Optional[datetime]:
        return _parse_optional_timestamp(value)

    def to_engine(self) -> Shipment:
        return Shipment(
            id=self.id,
            pickup=_to_coordinate(self.pickup, "pickup", self.id),
            drop=_to_coordinate(self.drop, "drop", self.id),
            volume=self.volume,
            weight=self.weight,
            priority=self.priority,
            window=TimeWindow(ready_at=self.ready_at, due_by=self.due_by),
        )


class CarrierIn(BaseModel):
    """Carrier available for pickups."""
    id: str = Field(..., description="Carrier identifier", min_length=1)
    location: Union[CoordinateIn, str] = Field(..., description="Current location or 'lat,lng' text")
    capacity_volume: Optional[float] = Field(None, description="Volume capacity (m3)", ge=0)
    capacity_weight: Optional[float] = Field(None, description="Weight capacity (kg)", ge=0)
    service_radius_km: Optional[float] = Field(None, description="Pickup radius in km", ge=0)
    available_until: Optional[datetime] = Field(None, description="No new pickups after this time")

    model_config = _REQUEST_CONFIG

    @field_validator("available_until", mode="before")
    @classmethod
    def _parse_time(cls, value: Any) -> Optional[datetime]:
        return _parse_optional_timestamp(value)

    def to_engine(self) -> Carrier:
        return Carrier(
            id=self.id,
            location=_to_coordinate(self.location, "location", self.id),
            capacity_volume=self.capacity_volume,
            capacity_weight=self.capacity_weight,
            service_radius_km=self.service_radius_km,
            available_until=self.available_until,
        )


class MatchOptionsIn(BaseModel):
    """
    Tunable thresholds and weights. Every field is optional and falls back
    to its own default; unknown keys are ignored.
    """
    max_pool_size: Optional[int] = Field(None, ge=1)
    pickup_join_distance_km: Optional[float] = Field(None, gt=0)
    min_pair_score: Optional[float] = Field(None, ge=0, le=1)

    w_pickup_proximity: Optional[float] = Field(None, ge=0)
    w_route_similarity: Optional[float] = Field(None, ge=0)
    w_time_overlap: Optional[float] = Field(None, ge=0)
    w_drop_proximity: Optional[float] = Field(None, ge=0)

    w_carrier_to_pickup_dist: Optional[float] = Field(None, ge=0)
    w_capacity_fit: Optional[float] = Field(None, ge=0)
    w_service_radius: Optional[float] = Field(None, ge=0)
    w_time_feasibility: Optional[float] = Field(None, ge=0)

    max_carrier_to_pickup_km: Optional[float] = Field(None, gt=0)

    top_k: Optional[int] = Field(None, ge=0)

    model_config = _REQUEST_CONFIG

    def to_options(self) -> MatchOptions:
        return MatchOptions.from_mapping(self.model_dump(exclude_none=True))


class ClusterRequest(BaseModel):
    shipments: List[ShipmentIn] = Field(..., description="Shipments to pool, in priority order")
    options: Optional[MatchOptionsIn] = Field(None, description="Option overrides")

    model_config = ConfigDict(extra="ignore")


class MatchRequest(BaseModel):
    shipments: List[ShipmentIn] = Field(..., description="Shipments to pool, in priority order")
    carriers: List[CarrierIn] = Field(..., description="Candidate carriers, in tie-break order")
    options: Optional[MatchOptionsIn] = Field(None, description="Option overrides")

    model_config = ConfigDict(extra="ignore")


# ==================== Response Models ====================

class CoordinateOut(BaseModel):
    lat: float
    lng: float


class PoolItem(BaseModel):
    """Pool built by the greedy clustering."""
    id: str = Field(..., description="Member shipment ids joined with '+'")
    shipment_ids: List[str] = Field(..., description="Members in selection order")
    size: int = Field(..., ge=1)
    total_volume: float = Field(..., ge=0)
    total_weight: float = Field(..., ge=0)
    pickup_centroid: CoordinateOut
    drop_centroid: CoordinateOut
    bearing_deg: float = Field(..., description="Circular-mean pickup->drop bearing", ge=0, lt=360)

    @classmethod
    def from_engine(cls, pool: Pool) -> "PoolItem":
        return cls(
            id=pool.id,
            shipment_ids=[s.id for s in pool.shipments],
            size=pool.size,
            total_volume=pool.total_volume,
            total_weight=pool.total_weight,
            pickup_centroid=CoordinateOut(lat=pool.pickup_centroid.lat, lng=pool.pickup_centroid.lng),
            drop_centroid=CoordinateOut(lat=pool.drop_centroid.lat, lng=pool.drop_centroid.lng),
            bearing_deg=round(pool.bearing_deg, 4) % 360.0,
        )


class MatchItem(BaseModel):
    """Carrier ranked against a pool."""
    pool_id: str
    carrier_id: str
    score: float = Field(..., ge=0, le=1)
    reasons: List[str]

    @classmethod
    def from_engine(cls, match: Match) -> "MatchItem":
        return cls(
            pool_id=match.pool_id,
            carrier_id=match.carrier_id,
            score=round(match.score, 4),
            reasons=list(match.reasons),
        )


class ClusterData(BaseModel):
    pools: List[PoolItem]
    total_pools: int = Field(..., ge=0, description="Pools built before any preview limit")


class MatchData(BaseModel):
    pools: List[PoolItem]
    matches: List[MatchItem]


class ClusterResponse(BaseModel):
    message: str
    data: ClusterData
    proofs: Proofs


class MatchResponse(BaseModel):
    message: str
    data: MatchData
    proofs: Proofs
