"""
Shipment Pair Scoring

Deterministic compatibility score (0-1) for two shipments sharing a vehicle.

Components:
- pickup proximity: linear decay to 0 at the join distance
- route similarity: 1 for identical pickup->drop direction, 0 for opposite
- time overlap: shared fraction of the two time windows
- drop proximity: linear decay to 0 at twice the join distance

The result is a relative signal for clustering, not a probability.
"""

import logging
from typing import Dict

from poolmatch.algorithms.geometry import angle_diff_deg, bearing_deg, clamp01, distance_km
from poolmatch.algorithms.options import OptionsLike, resolve_options
from poolmatch.algorithms.types import Shipment, TimeWindow
from poolmatch.tools.time_tool import to_epoch_ms

logger = logging.getLogger(__name__)

# Floor for distance thresholds so a zero/negative setting cannot divide by zero
MIN_THRESHOLD_KM = 1e-9

# Shortest window length used when normalizing overlaps
MIN_WINDOW_MS = 1.0


def time_overlap_score(a: TimeWindow, b: TimeWindow) -> float:
    """
    Overlap of two time windows as a fraction of the longer one.

    Any missing bound makes the pair fully flexible (1.0). Disjoint or
    merely touching windows score 0.
    """
    if a.ready_at is None or a.due_by is None or b.ready_at is None or b.due_by is None:
        return 1.0

    a_start, a_end = to_epoch_ms(a.ready_at), to_epoch_ms(a.due_by)
    b_start, b_end = to_epoch_ms(b.ready_at), to_epoch_ms(b.due_by)

    start = max(a_start, b_start)
    end = min(a_end, b_end)
    if end <= start:
        return 0.0

    total = max(a_end - a_start, b_end - b_start, MIN_WINDOW_MS)
    return clamp01((end - start) / total)


def explain_shipment_pair(a: Shipment, b: Shipment, options: OptionsLike = None) -> Dict[str, float]:
    """
    Score two shipments and return every component.

    Returns:
        Dict with pickup_km, drop_km, pickup, route, time, drop and score.
    """
    opts = resolve_options(options)
    join_km = max(opts.pickup_join_distance_km, MIN_THRESHOLD_KM)

    pickup_km = distance_km(a.pickup, b.pickup)
    pickup_score = clamp01(1 - pickup_km / join_km)

    diff = angle_diff_deg(bearing_deg(a.pickup, a.drop), bearing_deg(b.pickup, b.drop))
    route_score = clamp01(1 - diff / 180.0)

    drop_km = distance_km(a.drop, b.drop)
    drop_score = clamp01(1 - drop_km / (2 * join_km))

    time_score = time_overlap_score(a.window, b.window)

    total = (
        opts.w_pickup_proximity * pickup_score +
        opts.w_route_similarity * route_score +
        opts.w_time_overlap * time_score +
        opts.w_drop_proximity * drop_score
    )

    return {
        "pickup_km": pickup_km,
        "drop_km": drop_km,
        "pickup": pickup_score,
        "route": route_score,
        "time": time_score,
        "drop": drop_score,
        "score": clamp01(total),
    }


def score_shipment_pair(a: Shipment, b: Shipment, options: OptionsLike = None) -> float:
    """Pairwise compatibility of two shipments, in [0, 1]."""
    return explain_shipment_pair(a, b, options)["score"]
