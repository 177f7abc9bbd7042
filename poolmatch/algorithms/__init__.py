"""
Algorithms Package

Deterministic shipment pooling and carrier matching:
- geometry: Haversine distance, bearings, circular mean
- pair_scoring: Shipment-to-shipment compatibility (0-1)
- pool_builder: Greedy clustering of shipments into pools
- carrier_fitness: Carrier-to-pool fitness (0-1) with reasons
- matcher: End-to-end pooling plus top-K carrier ranking

All algorithms use deterministic calculations (no randomness, no I/O).
"""

from poolmatch.algorithms.carrier_fitness import score_carrier_for_pool
from poolmatch.algorithms.geometry import angle_diff_deg, bearing_deg, distance_km
from poolmatch.algorithms.matcher import match, rank_carriers
from poolmatch.algorithms.options import MatchOptions, resolve_options
from poolmatch.algorithms.pair_scoring import explain_shipment_pair, score_shipment_pair
from poolmatch.algorithms.pool_builder import cluster_shipments
from poolmatch.algorithms.types import (
    Carrier,
    CarrierFitness,
    Coordinate,
    Match,
    MatchResult,
    Pool,
    Shipment,
    TimeWindow,
)

__all__ = [
    "distance_km",
    "bearing_deg",
    "angle_diff_deg",
    "score_shipment_pair",
    "explain_shipment_pair",
    "cluster_shipments",
    "score_carrier_for_pool",
    "rank_carriers",
    "match",
    "MatchOptions",
    "resolve_options",
    "Coordinate",
    "TimeWindow",
    "Shipment",
    "Carrier",
    "Pool",
    "CarrierFitness",
    "Match",
    "MatchResult",
]
