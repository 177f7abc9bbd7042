"""
Carrier Fitness Scoring

Deterministic algorithm to score how well a carrier suits a built pool.
Produces a score (0-1), the component breakdown and human-readable reasons.

Components:
- distance: carrier location to pool pickup centroid, linear decay
- capacity fit: binding constraint of volume and weight overage
- service radius: full inside the radius, 0 at twice the radius
- time feasibility: earliest pickup vs availability cutoff, 2h grace

Unconstrained dimensions score 1 and are left out of the reasons.
"""

import logging
from typing import List, Optional

from poolmatch.algorithms.geometry import clamp01, distance_km
from poolmatch.algorithms.options import OptionsLike, resolve_options
from poolmatch.algorithms.pair_scoring import MIN_THRESHOLD_KM
from poolmatch.algorithms.types import Carrier, CarrierFitness, Pool
from poolmatch.tools.time_tool import to_epoch_ms

logger = logging.getLogger(__name__)

# ============================================================================
# Scoring Configuration
# ============================================================================

# Late pickups decay to 0 over this window past the carrier's cutoff
TIME_GRACE_MS = 2 * 60 * 60 * 1000

# Missing ready-at counts as this long before the cutoff
MISSING_READY_OFFSET_MS = 1


# ============================================================================
# Component Scores
# ============================================================================

def capacity_fit(total: float, capacity: Optional[float]) -> float:
    """
    Fit of a pool total against one capacity dimension.

    Absent capacity is unlimited (1.0). An overage equal to the capacity
    itself, or more, scores 0.
    """
    if capacity is None:
        return 1.0
    overage = max(0.0, total - capacity)
    return clamp01(1 - overage / max(1.0, capacity))


def service_radius_fit(distance: float, radius_km: Optional[float]) -> float:
    """1 within the radius, linear decay to 0 at twice the radius."""
    if radius_km is None or distance <= radius_km:
        return 1.0
    return clamp01(1 - (distance - radius_km) / max(1.0, radius_km))


def time_feasibility(carrier: Carrier, pool: Pool) -> float:
    """Earliest pool pickup against the carrier's availability cutoff."""
    if carrier.available_until is None:
        return 1.0

    cutoff = to_epoch_ms(carrier.available_until)
    ready_times = [
        to_epoch_ms(s.window.ready_at) if s.window.ready_at is not None else cutoff - MISSING_READY_OFFSET_MS
        for s in pool.shipments
    ]
    earliest = min(ready_times) if ready_times else cutoff - MISSING_READY_OFFSET_MS

    if earliest <= cutoff:
        return 1.0
    return clamp01(1 - (earliest - cutoff) / TIME_GRACE_MS)


# ============================================================================
# Scoring Function
# ============================================================================

def score_carrier_for_pool(carrier: Carrier, pool: Pool, options: OptionsLike = None) -> CarrierFitness:
    """
    Score a carrier against a pool.

    Args:
        carrier: Candidate carrier
        pool: Closed pool from the pool builder
        options: MatchOptions, mapping or None

    Returns:
        CarrierFitness with score in [0, 1], components and reasons.
    """
    opts = resolve_options(options)
    max_km = max(opts.max_carrier_to_pickup_km, MIN_THRESHOLD_KM)

    d = distance_km(carrier.location, pool.pickup_centroid)
    distance_score = clamp01(1 - d / max_km)

    capacity_score = min(
        capacity_fit(pool.total_volume, carrier.capacity_volume),
        capacity_fit(pool.total_weight, carrier.capacity_weight),
    )
    service_score = service_radius_fit(d, carrier.service_radius_km)
    time_score = time_feasibility(carrier, pool)

    score = clamp01(
        opts.w_carrier_to_pickup_dist * distance_score +
        opts.w_capacity_fit * capacity_score +
        opts.w_service_radius * service_score +
        opts.w_time_feasibility * time_score
    )

    return CarrierFitness(
        score=score,
        reasons=tuple(_generate_reasons(carrier, d, capacity_score, time_score)),
        distance_km=d,
        distance_score=distance_score,
        capacity_score=capacity_score,
        service_score=service_score,
        time_score=time_score,
    )


def _generate_reasons(carrier: Carrier, distance: float, capacity_score: float, time_score: float) -> List[str]:
    reasons = [f"distance {distance:.1f} km"]

    if carrier.capacity_volume is not None or carrier.capacity_weight is not None:
        reasons.append(f"capacity {capacity_score * 100:.0f}%")

    if carrier.service_radius_km is not None:
        reasons.append(f"service radius {carrier.service_radius_km:g} km")

    if carrier.available_until is not None:
        reasons.append(f"time {time_score * 100:.0f}%")

    return reasons
