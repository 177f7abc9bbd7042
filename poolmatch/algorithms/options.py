"""
Match Options

Tunable thresholds and weights for pooling and carrier matching.

Every field has its own default, so a caller can override any subset.
Options are resolved once at the start of each call and never mutated.
"""

import logging
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Union

logger = logging.getLogger(__name__)

# ============================================================================
# Defaults
# ============================================================================

# Pooling
DEFAULT_MAX_POOL_SIZE = 3
DEFAULT_PICKUP_JOIN_DISTANCE_KM = 6.0
DEFAULT_MIN_PAIR_SCORE = 0.45

# Shipment pair weights
DEFAULT_W_PICKUP_PROXIMITY = 0.4
DEFAULT_W_ROUTE_SIMILARITY = 0.35
DEFAULT_W_TIME_OVERLAP = 0.15
DEFAULT_W_DROP_PROXIMITY = 0.1

# Carrier vs pool weights
DEFAULT_W_CARRIER_TO_PICKUP_DIST = 0.45
DEFAULT_W_CAPACITY_FIT = 0.3
DEFAULT_W_SERVICE_RADIUS = 0.1
DEFAULT_W_TIME_FEASIBILITY = 0.15

# Hard limits
DEFAULT_MAX_CARRIER_TO_PICKUP_KM = 18.0

# Result control
DEFAULT_TOP_K = 3


@dataclass(frozen=True)
class MatchOptions:
    """Configuration record for one clustering/matching run."""

    max_pool_size: int = DEFAULT_MAX_POOL_SIZE
    pickup_join_distance_km: float = DEFAULT_PICKUP_JOIN_DISTANCE_KM
    min_pair_score: float = DEFAULT_MIN_PAIR_SCORE

    w_pickup_proximity: float = DEFAULT_W_PICKUP_PROXIMITY
    w_route_similarity: float = DEFAULT_W_ROUTE_SIMILARITY
    w_time_overlap: float = DEFAULT_W_TIME_OVERLAP
    w_drop_proximity: float = DEFAULT_W_DROP_PROXIMITY

    w_carrier_to_pickup_dist: float = DEFAULT_W_CARRIER_TO_PICKUP_DIST
    w_capacity_fit: float = DEFAULT_W_CAPACITY_FIT
    w_service_radius: float = DEFAULT_W_SERVICE_RADIUS
    w_time_feasibility: float = DEFAULT_W_TIME_FEASIBILITY

    max_carrier_to_pickup_km: float = DEFAULT_MAX_CARRIER_TO_PICKUP_KM

    top_k: int = DEFAULT_TOP_K

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "MatchOptions":
        """
        Build options from a flat mapping.

        Keys may be snake_case (``max_pool_size``) or camelCase
        (``maxPoolSize``). Unknown keys and ``None`` values are ignored,
        so absent fields fall back to their defaults independently.
        """
        known = {f.name for f in fields(cls)}
        camel = {_to_camel(name): name for name in known}

        overrides = {}
        for key, value in values.items():
            name = key if key in known else camel.get(key)
            if name is None:
                logger.debug(f"Ignoring unknown match option: {key}")
                continue
            if value is None:
                continue
            overrides[name] = value

        return replace(cls(), **overrides)


OptionsLike = Union[None, MatchOptions, Mapping[str, Any]]


def resolve_options(options: OptionsLike = None) -> MatchOptions:
    """Resolve ``None``, a mapping, or a ``MatchOptions`` into a ``MatchOptions``."""
    if options is None:
        return MatchOptions()
    if isinstance(options, MatchOptions):
        return options
    return MatchOptions.from_mapping(options)


def _to_camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)
