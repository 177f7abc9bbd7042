"""
Pool Builder

Greedy clustering of shipments into pools that one vehicle can serve.

Each unconsumed shipment (in input order) seeds a pool. The pool then grows
with whichever remaining shipment has the best average compatibility against
all current members, until it is full or the best average falls below
min_pair_score. Ties go to the shipment that appears first in the input.

This is a heuristic: it is order-dependent and not globally optimal. Cost is
O(n^2 * max_pool_size) pair scores, fine for tens to low hundreds of
shipments per run.
"""

import logging
from typing import Dict, List, Optional, Sequence

from poolmatch.algorithms.geometry import bearing_deg, centroid, circular_mean_deg
from poolmatch.algorithms.options import OptionsLike, resolve_options
from poolmatch.algorithms.pair_scoring import score_shipment_pair
from poolmatch.algorithms.types import Pool, Shipment

logger = logging.getLogger(__name__)

POOL_ID_SEPARATOR = "+"


def build_pool(members: Sequence[Shipment]) -> Pool:
    """
    Close a pool: sums, centroids and circular-mean bearing.

    Missing volume/weight count as 0.
    """
    shipments = tuple(members)

    return Pool(
        id=POOL_ID_SEPARATOR.join(s.id for s in shipments),
        shipments=shipments,
        total_volume=sum(s.volume or 0.0 for s in shipments),
        total_weight=sum(s.weight or 0.0 for s in shipments),
        pickup_centroid=centroid([s.pickup for s in shipments]),
        drop_centroid=centroid([s.drop for s in shipments]),
        bearing_deg=circular_mean_deg(bearing_deg(s.pickup, s.drop) for s in shipments),
    )


def cluster_shipments(shipments: Sequence[Shipment], options: OptionsLike = None) -> List[Pool]:
    """
    Group shipments into pools.

    Args:
        shipments: Candidate shipments; their order drives seeding and tie-breaks.
        options: MatchOptions, mapping or None. Uses max_pool_size,
            min_pair_score and the pair-scoring fields.

    Returns:
        Pools in the order their seed shipments were encountered.
    """
    opts = resolve_options(options)
    max_size = max(1, int(opts.max_pool_size))

    # Insertion-ordered; first occurrence of a duplicate id wins
    remaining: Dict[str, Shipment] = {}
    for shipment in shipments:
        if shipment.id in remaining:
            logger.warning(f"Duplicate shipment id {shipment.id!r} skipped")
            continue
        remaining[shipment.id] = shipment

    seeds = list(remaining.values())
    pools: List[Pool] = []

    for seed in seeds:
        if seed.id not in remaining:
            continue
        del remaining[seed.id]

        members = [seed]
        while len(members) < max_size and remaining:
            best = _best_candidate(members, remaining.values(), opts)
            if best is None:
                break

            candidate, avg = best
            if avg < opts.min_pair_score:
                break

            members.append(candidate)
            del remaining[candidate.id]

        pools.append(build_pool(members))

    logger.debug(f"Clustered {len(seeds)} shipments into {len(pools)} pools (max_size={max_size})")
    return pools


def _best_candidate(members, candidates, opts) -> Optional[tuple]:
    best_shipment: Optional[Shipment] = None
    best_avg = 0.0

    for candidate in candidates:
        total = sum(score_shipment_pair(member, candidate, opts) for member in members)
        avg = total / len(members)
        # Strict comparison keeps the earliest candidate on ties
        if best_shipment is None or avg > best_avg:
            best_shipment = candidate
            best_avg = avg

    if best_shipment is None:
        return None
    return best_shipment, best_avg
