from src.gauge_core.aggregator import (
    ForceMetricsAggregator,
    calculate_combat_data,
    calculate_force_metrics,
)
from src.gauge_core.models import (
    Actor,
    ActorResources,
    ClassResource,
    Combat,
    CombatData,
    Combatant,
    Factions,
    ForceMetrics,
    Pool,
    TokenDisposition,
)
from src.gauge_core.partitioner import partition_factions

__all__ = [
    "Actor",
    "ActorResources",
    "ClassResource",
    "Combat",
    "CombatData",
    "Combatant",
    "Factions",
    "ForceMetrics",
    "ForceMetricsAggregator",
    "Pool",
    "TokenDisposition",
    "calculate_combat_data",
    "calculate_force_metrics",
    "partition_factions",
]
