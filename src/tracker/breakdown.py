"""Per-combatant contribution breakdown.

Lays the counters that feed the gauge out as a table, one row per
combatant, so a GM can see who carries each side's power.
"""

import logging
from typing import Iterable, Optional

import pandas as pd

from src.gauge_core.aggregator import (
    ForceMetricsAggregator,
    ResourceTotals,
    percentage,
)
from src.gauge_core.models import Combatant
from src.gauge_core.partitioner import is_hostile

logger = logging.getLogger(__name__)

COUNTER_COLUMNS = [
    "current_hp", "total_hp",
    "current_spell_slots", "total_spell_slots",
    "current_resources", "total_resources",
]

FRAME_COLUMNS = ["faction", "name", "class", "resource"] + COUNTER_COLUMNS

SUMMARY_COLUMNS = ["combatants", "total", "hp", "spell_slots", "resources"]


def contribution_frame(
    combatants: Iterable[Combatant],
    aggregator: Optional[ForceMetricsAggregator] = None,
) -> pd.DataFrame:
    """One row per combatant with the six counters it contributes.

    Combatants without an actor keep their row with zero counters.
    """
    aggregator = aggregator or ForceMetricsAggregator()
    rows = []
    for combatant in combatants:
        actor = combatant.actor
        totals = aggregator.actor_totals(actor) if actor else ResourceTotals()
        resource = aggregator.resolve_class_resource(actor) if actor else None
        rows.append({
            "faction": "hostile" if is_hostile(combatant) else "friendly",
            "name": combatant.name,
            "class": ", ".join(actor.class_names) if actor else "",
            "resource": resource.value if resource else "",
            "current_hp": totals.current_hp,
            "total_hp": totals.total_hp,
            "current_spell_slots": totals.current_spell_slots,
            "total_spell_slots": totals.total_spell_slots,
            "current_resources": totals.current_resources,
            "total_resources": totals.total_resources,
        })

    frame = pd.DataFrame(rows, columns=FRAME_COLUMNS)
    frame[COUNTER_COLUMNS] = frame[COUNTER_COLUMNS].astype(int)
    logger.debug("Built contribution frame with %d rows", len(frame))
    return frame


def faction_summary(
    frame: pd.DataFrame,
    aggregator: Optional[ForceMetricsAggregator] = None,
) -> pd.DataFrame:
    """Sum a contribution frame per faction and score each side.

    Returns:
        DataFrame indexed by faction (``friendly``, ``hostile``) with the
        combatant count and the same percentages the gauge shows.
    """
    aggregator = aggregator or ForceMetricsAggregator()
    sums = frame.groupby("faction")[COUNTER_COLUMNS].sum()
    counts = frame.groupby("faction").size()

    rows = {}
    for faction in ("friendly", "hostile"):
        if faction not in sums.index:
            rows[faction] = {col: 0 for col in SUMMARY_COLUMNS}
            continue
        totals = ResourceTotals(**{col: int(sums.at[faction, col]) for col in COUNTER_COLUMNS})
        rows[faction] = {
            "combatants": int(counts[faction]),
            "total": aggregator.composite_power(totals),
            "hp": percentage(totals.current_hp, totals.total_hp),
            "spell_slots": percentage(totals.current_spell_slots, totals.total_spell_slots),
            "resources": percentage(totals.current_resources, totals.total_resources),
        }

    return pd.DataFrame.from_dict(rows, orient="index", columns=SUMMARY_COLUMNS)
