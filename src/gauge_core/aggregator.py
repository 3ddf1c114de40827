"""Force metrics aggregation.

Walks the character sheets of one faction and reduces them to a composite
power score plus health, spell-slot and class-resource percentages. Every
missing piece of data (no actor, no spellcasting block, unknown class, zero
maximum) degrades to a zero contribution; nothing here raises.
"""

import logging
import math
from dataclasses import dataclass
from typing import Dict, Iterable, Optional

from src.gauge_core.config import CLASS_RESOURCES, POWER_WEIGHTS, SPELL_LEVELS
from src.gauge_core.models import (
    Actor,
    ClassResource,
    Combat,
    CombatData,
    Combatant,
    ForceMetrics,
)
from src.gauge_core.partitioner import partition_factions

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding up."""
    return int(math.floor(value + 0.5))


def fraction(current: int, maximum: int) -> float:
    """``current / maximum`` clamped to [0, 1], or 0.0 when the maximum is zero.

    Over-healed sheets and negative counters would otherwise push the
    percentages and the composite score outside 0-100.
    """
    if not maximum:
        return 0.0
    return max(0.0, min(1.0, current / maximum))


def percentage(current: int, maximum: int) -> int:
    """``round(current / maximum * 100)`` in 0-100, or 0 when the maximum is zero."""
    return round_half_up(fraction(current, maximum) * 100)


@dataclass
class ResourceTotals:
    """Running current/maximum counters for one faction (or one actor)."""

    current_hp: int = 0
    total_hp: int = 0
    current_spell_slots: int = 0
    total_spell_slots: int = 0
    current_resources: int = 0
    total_resources: int = 0

    def add(self, other: "ResourceTotals") -> None:
        self.current_hp += other.current_hp
        self.total_hp += other.total_hp
        self.current_spell_slots += other.current_spell_slots
        self.total_spell_slots += other.total_spell_slots
        self.current_resources += other.current_resources
        self.total_resources += other.total_resources


class ForceMetricsAggregator:
    """Compute :class:`ForceMetrics` for a faction.

    The aggregator is stateless: weights and the class resource table are
    fixed at construction and every call works on its own snapshot.
    """

    def __init__(
        self,
        weights: Optional[Dict[str, float]] = None,
        class_resources: Optional[Dict[str, ClassResource]] = None,
    ):
        self.weights = dict(weights or POWER_WEIGHTS)
        missing = {"hp", "spell_slots", "resources"} - self.weights.keys()
        if missing:
            raise ValueError(f"Missing power weights: {sorted(missing)}")
        table = class_resources if class_resources is not None else CLASS_RESOURCES
        self.class_resources = {name.lower(): res for name, res in table.items()}

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def calculate_combat_data(self, combat: Optional[Combat]) -> CombatData:
        """Metrics for both sides of *combat*.

        Without a combat, or before it has started, both sides get the zero
        result and no combatant is looked at.
        """
        if combat is None or not combat.started:
            return CombatData.empty()

        factions = partition_factions(combat.combatants)
        return CombatData(
            friendly=self.calculate_force_metrics(factions.friendly),
            hostile=self.calculate_force_metrics(factions.hostile),
        )

    def calculate_force_metrics(self, combatants: Iterable[Combatant]) -> ForceMetrics:
        """Reduce one faction's combatants to a :class:`ForceMetrics`."""
        combatants = list(combatants)
        if not combatants:
            return ForceMetrics.empty()

        totals = ResourceTotals()
        for combatant in combatants:
            if combatant.actor is None:
                continue
            totals.add(self.actor_totals(combatant.actor))

        metrics = self.metrics_from_totals(totals)
        logger.debug(
            "Force metrics for %d combatants: total=%d hp=%d spells=%d resources=%d",
            len(combatants), metrics.total, metrics.hp,
            metrics.spell_slots, metrics.resources,
        )
        return metrics

    def actor_totals(self, actor: Actor) -> ResourceTotals:
        """Counters contributed by a single actor."""
        totals = ResourceTotals(
            current_hp=actor.hp.value,
            total_hp=actor.hp.max,
        )

        if actor.spell_slots is not None:
            for level in SPELL_LEVELS:
                slots = actor.spell_slots.get(level)
                if slots is None:
                    continue
                totals.current_spell_slots += slots.value
                totals.total_spell_slots += slots.max

        resource = self.resolve_class_resource(actor)
        if resource is not None:
            pool = actor.resources.pool_for(resource)
            if pool is not None:
                totals.current_resources += pool.value
                totals.total_resources += pool.max

        return totals

    def resolve_class_resource(self, actor: Actor) -> Optional[ClassResource]:
        """First class on the sheet that grants a tracked resource."""
        for class_name in actor.class_names:
            resource = self.class_resources.get(class_name.strip().lower())
            if resource is not None:
                return resource
        return None

    def metrics_from_totals(self, totals: ResourceTotals) -> ForceMetrics:
        return ForceMetrics(
            total=self.composite_power(totals),
            hp=percentage(totals.current_hp, totals.total_hp),
            spell_slots=percentage(totals.current_spell_slots, totals.total_spell_slots),
            resources=percentage(totals.current_resources, totals.total_resources),
        )

    def composite_power(self, totals: ResourceTotals) -> int:
        """Weighted blend of the unrounded fractions, as a 0-100 score.

        Each term is zero-guarded and clamped on its own, so a faction
        without any spell slots still scores on health and resources.
        """
        blended = (
            fraction(totals.current_hp, totals.total_hp) * self.weights["hp"]
            + fraction(totals.current_spell_slots, totals.total_spell_slots)
            * self.weights["spell_slots"]
            + fraction(totals.current_resources, totals.total_resources)
            * self.weights["resources"]
        )
        return round_half_up(blended * 100)


_default_aggregator = ForceMetricsAggregator()


def calculate_force_metrics(combatants: Iterable[Combatant]) -> ForceMetrics:
    """Force metrics for one faction using the default weights and table."""
    return _default_aggregator.calculate_force_metrics(combatants)


def calculate_combat_data(combat: Optional[Combat]) -> CombatData:
    """Force metrics for both factions of *combat* using the defaults."""
    return _default_aggregator.calculate_combat_data(combat)
