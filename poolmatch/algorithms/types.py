"""
Engine Value Records

Immutable records consumed and produced by the pooling and matching algorithms.
The engine never mutates these; callers build them once per matching run.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple


@dataclass(frozen=True)
class Coordinate:
    """Latitude/longitude in degrees."""
    lat: float
    lng: float


@dataclass(frozen=True)
class TimeWindow:
    """
    Optional pickup/delivery bounds.

    A missing bound means "unconstrained" for overlap purposes.
    Naive datetimes are read as UTC.
    """
    ready_at: Optional[datetime] = None
    due_by: Optional[datetime] = None


@dataclass(frozen=True)
class Shipment:
    id: str
    pickup: Coordinate
    drop: Coordinate
    volume: Optional[float] = None      # cubic meters
    weight: Optional[float] = None      # kilograms
    priority: Optional[float] = None    # 0..1 (1 = highest)
    window: TimeWindow = field(default_factory=TimeWindow)


@dataclass(frozen=True)
class Carrier:
    id: str
    location: Coordinate
    capacity_volume: Optional[float] = None
    capacity_weight: Optional[float] = None
    service_radius_km: Optional[float] = None
    available_until: Optional[datetime] = None  # no new pickups after this instant


@dataclass(frozen=True)
class Pool:
    """
    Group of shipments served by one vehicle.

    Members keep selection order; the id is their ids joined with "+".
    """
    id: str
    shipments: Tuple[Shipment, ...]
    total_volume: float
    total_weight: float
    pickup_centroid: Coordinate
    drop_centroid: Coordinate
    bearing_deg: float

    @property
    def size(self) -> int:
        return len(self.shipments)


@dataclass(frozen=True)
class CarrierFitness:
    """Carrier-vs-pool score with its component breakdown."""
    score: float
    reasons: Tuple[str, ...]
    distance_km: float
    distance_score: float
    capacity_score: float
    service_score: float
    time_score: float


@dataclass(frozen=True)
class Match:
    pool_id: str
    carrier_id: str
    score: float
    reasons: Tuple[str, ...]


@dataclass(frozen=True)
class MatchResult:
    pools: Tuple[Pool, ...]
    matches: Tuple[Match, ...]
