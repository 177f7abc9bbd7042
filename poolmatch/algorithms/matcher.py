"""
Match Orchestrator

End-to-end run: cluster shipments into pools, score every carrier against
every pool, keep the top-K carriers per pool and merge into one list sorted
by score. Pure computation; persistence and display belong to the caller.
"""

import logging
from typing import List, Sequence

from poolmatch.algorithms.carrier_fitness import score_carrier_for_pool
from poolmatch.algorithms.options import OptionsLike, resolve_options
from poolmatch.algorithms.pool_builder import cluster_shipments
from poolmatch.algorithms.types import Carrier, Match, MatchResult, Pool, Shipment

logger = logging.getLogger(__name__)


def rank_carriers(pool: Pool, carriers: Sequence[Carrier], options: OptionsLike = None) -> List[Match]:
    """
    Score all carriers for one pool, best first.

    sorted() is stable, so equal scores keep input carrier order.
    """
    opts = resolve_options(options)

    scored = []
    for carrier in carriers:
        fitness = score_carrier_for_pool(carrier, pool, opts)
        scored.append(Match(
            pool_id=pool.id,
            carrier_id=carrier.id,
            score=fitness.score,
            reasons=fitness.reasons,
        ))

    return sorted(scored, key=lambda m: m.score, reverse=True)


def match(
    shipments: Sequence[Shipment],
    carriers: Sequence[Carrier],
    options: OptionsLike = None
) -> MatchResult:
    """
    Pool shipments and rank carriers per pool.

    Args:
        shipments: Pending shipments, in caller order
        carriers: Available carriers, in caller order (breaks score ties)
        options: MatchOptions, mapping or None

    Returns:
        MatchResult with pools in seed order and matches sorted by score.
    """
    opts = resolve_options(options)
    top_k = max(0, int(opts.top_k))

    pools = cluster_shipments(shipments, opts)

    matches: List[Match] = []
    for pool in pools:
        matches.extend(rank_carriers(pool, carriers, opts)[:top_k])

    matches = sorted(matches, key=lambda m: m.score, reverse=True)

    logger.info(
        f"Matched {len(shipments)} shipments into {len(pools)} pools "
        f"against {len(carriers)} carriers ({len(matches)} matches, top_k={top_k})"
    )
    return MatchResult(pools=tuple(pools), matches=tuple(matches))
