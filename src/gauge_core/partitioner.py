"""Split combat participants into friendly and hostile factions."""

import logging
from typing import Iterable

from src.gauge_core.models import Combatant, Factions, TokenDisposition

logger = logging.getLogger(__name__)


def is_hostile(combatant: Combatant) -> bool:
    """Whether *combatant* fights for the hostile side.

    Only an explicit HOSTILE token disposition counts; combatants without a
    linked token are treated as friendly.
    """
    return combatant.disposition == TokenDisposition.HOSTILE


def partition_factions(combatants: Iterable[Combatant]) -> Factions:
    """Split *combatants* into two disjoint, order-preserving lists.

    Combatants without an actor are kept in their bucket; they simply
    contribute nothing once aggregated.
    """
    friendly = []
    hostile = []
    for combatant in combatants:
        if is_hostile(combatant):
            hostile.append(combatant)
        else:
            friendly.append(combatant)

    logger.debug(
        "Partitioned combatants: %d friendly, %d hostile",
        len(friendly), len(hostile),
    )
    return Factions(friendly=friendly, hostile=hostile)
