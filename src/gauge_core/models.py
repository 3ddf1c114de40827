"""Read-only combat tracker models and the derived force metrics."""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Dict, List, Optional, Tuple


class TokenDisposition(IntEnum):
    """Token disposition values as exported by the tabletop host."""

    SECRET = -2
    HOSTILE = -1
    NEUTRAL = 0
    FRIENDLY = 1


class ClassResource(Enum):
    """Limited-use pools a class can grant."""

    RAGE = "rage"
    KI = "ki"
    SECOND_WIND = "second_wind"
    CHANNEL_DIVINITY = "channel_divinity"
    WILD_SHAPE = "wild_shape"
    LAY_ON_HANDS = "lay_on_hands"


@dataclass(frozen=True)
class Pool:
    """A current/maximum counter (hit points, slots, resource uses)."""

    value: int = 0
    max: int = 0


@dataclass(frozen=True)
class ActorResources:
    """Class resource pools on a character sheet. Missing pools are None."""

    rage: Optional[Pool] = None
    ki: Optional[Pool] = None
    second_wind: Optional[Pool] = None
    channel_divinity: Optional[Pool] = None
    wild_shape: Optional[Pool] = None
    lay_on_hands: Optional[Pool] = None

    def pool_for(self, resource: ClassResource) -> Optional[Pool]:
        """Return the pool backing *resource*, or None if the sheet lacks it."""
        pools = {
            ClassResource.RAGE: self.rage,
            ClassResource.KI: self.ki,
            ClassResource.SECOND_WIND: self.second_wind,
            ClassResource.CHANNEL_DIVINITY: self.channel_divinity,
            ClassResource.WILD_SHAPE: self.wild_shape,
            ClassResource.LAY_ON_HANDS: self.lay_on_hands,
        }
        return pools[resource]


@dataclass(frozen=True)
class Actor:
    """A character or creature sheet.

    ``spell_slots`` is None for actors without a spellcasting block;
    otherwise it maps spell level (1-9) to that level's slots.
    ``class_names`` lists the sheet's class items in sheet order.
    """

    actor_id: str
    name: str
    hp: Pool = field(default_factory=Pool)
    spell_slots: Optional[Dict[int, Pool]] = None
    class_names: Tuple[str, ...] = ()
    resources: ActorResources = field(default_factory=ActorResources)


@dataclass(frozen=True)
class Combatant:
    """A combat tracker entry. ``disposition`` is None when no token is linked."""

    combatant_id: str
    name: str
    actor: Optional[Actor] = None
    disposition: Optional[TokenDisposition] = None


@dataclass(frozen=True)
class Combat:
    """The encounter currently tracked by the host."""

    combat_id: str
    combatants: List[Combatant] = field(default_factory=list)
    started: bool = False
    round: int = 0


@dataclass(frozen=True)
class ForceMetrics:
    """Power of one faction as percentages (0-100) of its maximum."""

    total: int = 0
    hp: int = 0
    spell_slots: int = 0
    resources: int = 0

    @classmethod
    def empty(cls) -> "ForceMetrics":
        return cls(total=0, hp=0, spell_slots=0, resources=0)

    def to_dict(self) -> Dict[str, int]:
        """Template-facing representation."""
        return {
            "total": self.total,
            "hp": self.hp,
            "spellSlots": self.spell_slots,
            "resources": self.resources,
        }


@dataclass(frozen=True)
class Factions:
    """Combatants split by side, each list in original tracker order."""

    friendly: List[Combatant] = field(default_factory=list)
    hostile: List[Combatant] = field(default_factory=list)


@dataclass(frozen=True)
class CombatData:
    """Force metrics for both sides of an encounter."""

    friendly: ForceMetrics = field(default_factory=ForceMetrics.empty)
    hostile: ForceMetrics = field(default_factory=ForceMetrics.empty)

    @classmethod
    def empty(cls) -> "CombatData":
        return cls(friendly=ForceMetrics.empty(), hostile=ForceMetrics.empty())
