"""JSON ingestion for combat tracker snapshots exported by the host.

A snapshot holds the current user, the gauge settings and the active combat
(``null`` when no encounter is running). Actor sheets follow the host's
layout:

- ``system.attributes.hp`` with ``value`` / ``max``
- ``system.spells.spell1`` .. ``spell9`` (whole block absent for
  non-casters)
- ``system.resources.<key>`` for class resources
- ``items`` with ``{"type": "class", "name": ...}`` entries
"""

import json
import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from src.gauge_app.settings import GaugeSettings, GaugeUser
from src.gauge_core.config import SPELL_LEVELS
from src.gauge_core.models import (
    Actor,
    ActorResources,
    ClassResource,
    Combat,
    Combatant,
    Pool,
    TokenDisposition,
)
from src.tracker.config import CLASS_ITEM_TYPE, RESOURCE_KEYS, SPELL_LEVEL_KEY

logger = logging.getLogger(__name__)


class IngestionError(Exception):
    """Raised when a snapshot file cannot be read."""


@dataclass(frozen=True)
class TrackerSnapshot:
    """Everything the gauge needs from one host export."""

    user: GaugeUser
    settings: GaugeSettings = field(default_factory=GaugeSettings)
    combat: Optional[Combat] = None


def _safe_int(value, where: str) -> int:
    """Convert *value* to int, returning 0 (with a warning) when it isn't a
    finite number. ``json`` accepts ``Infinity`` and ``NaN`` literals."""
    if value is None:
        return 0
    if isinstance(value, bool):
        logger.warning("Non-numeric value %r at %s, using 0", value, where)
        return 0
    try:
        number = float(value)
    except (ValueError, TypeError):
        logger.warning("Non-numeric value %r at %s, using 0", value, where)
        return 0
    if not math.isfinite(number):
        logger.warning("Non-finite value %r at %s, using 0", value, where)
        return 0
    return int(number)


def _as_dict(value) -> Dict:
    return value if isinstance(value, dict) else {}


class SnapshotIngester:
    """Reads tracker snapshots into the read-only gauge models."""

    def __init__(self, snapshot_path: Path):
        self.snapshot_path = Path(snapshot_path)

    def read_snapshot(self) -> TrackerSnapshot:
        """Load and parse the snapshot file.

        Raises:
            FileNotFoundError: If the snapshot doesn't exist.
            IngestionError: If the file isn't a JSON object.
            ValueError: If the stored settings are invalid.
        """
        if not self.snapshot_path.exists():
            raise FileNotFoundError(f"Snapshot not found: {self.snapshot_path}")

        try:
            with open(self.snapshot_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise IngestionError(f"Corrupt snapshot {self.snapshot_path}: {e}") from e

        if not isinstance(data, dict):
            raise IngestionError(
                f"Snapshot {self.snapshot_path} must contain a JSON object, "
                f"got {type(data).__name__}"
            )

        snapshot = self.parse_snapshot(data)
        logger.info(
            "Loaded snapshot %s (%s)",
            self.snapshot_path.name,
            f"{len(snapshot.combat.combatants)} combatants"
            if snapshot.combat else "no active combat",
        )
        return snapshot

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse_snapshot(self, data: Dict) -> TrackerSnapshot:
        user_data = _as_dict(data.get("user"))
        user = GaugeUser(
            name=str(user_data.get("name", "Unknown")),
            is_gm=bool(user_data.get("isGM", False)),
        )
        settings = GaugeSettings.from_host(_as_dict(data.get("settings")))

        combat_data = data.get("combat")
        combat = self.parse_combat(combat_data) if isinstance(combat_data, dict) else None
        return TrackerSnapshot(user=user, settings=settings, combat=combat)

    def parse_combat(self, data: Dict) -> Combat:
        combatants = []
        for index, entry in enumerate(data.get("combatants") or []):
            if not isinstance(entry, dict):
                logger.warning("Skipping malformed combatant entry #%d: %r", index, entry)
                continue
            combatants.append(self.parse_combatant(entry, index))

        return Combat(
            combat_id=str(data.get("id", "")),
            combatants=combatants,
            started=bool(data.get("started", False)),
            round=_safe_int(data.get("round"), "combat.round"),
        )

    def parse_combatant(self, data: Dict, index: int) -> Combatant:
        combatant_id = str(data.get("id", index))
        actor_data = data.get("actor")
        actor = self.parse_actor(actor_data) if isinstance(actor_data, dict) else None
        return Combatant(
            combatant_id=combatant_id,
            name=str(data.get("name") or (actor.name if actor else combatant_id)),
            actor=actor,
            disposition=self._parse_disposition(data.get("token"), combatant_id),
        )

    @staticmethod
    def _parse_disposition(token, combatant_id: str) -> Optional[TokenDisposition]:
        if not isinstance(token, dict) or token.get("disposition") is None:
            return None
        raw = token["disposition"]
        try:
            return TokenDisposition(_safe_int(raw, f"combatant {combatant_id} disposition"))
        except ValueError:
            logger.warning(
                "Unknown disposition %r for combatant %s, treating as unset",
                raw, combatant_id,
            )
            return None

    def parse_actor(self, data: Dict) -> Actor:
        actor_id = str(data.get("id", ""))
        system = _as_dict(data.get("system"))
        hp = self._parse_pool(
            _as_dict(_as_dict(system.get("attributes")).get("hp")),
            f"actor {actor_id} hp",
        )

        spell_slots = None
        spells = system.get("spells")
        if isinstance(spells, dict):
            spell_slots = {}
            for level in SPELL_LEVELS:
                level_data = spells.get(SPELL_LEVEL_KEY.format(level=level))
                if isinstance(level_data, dict):
                    spell_slots[level] = self._parse_pool(
                        level_data, f"actor {actor_id} spell{level}"
                    )

        class_names = tuple(
            str(item["name"])
            for item in data.get("items") or []
            if isinstance(item, dict)
            and item.get("type") == CLASS_ITEM_TYPE
            and item.get("name")
        )

        return Actor(
            actor_id=actor_id,
            name=str(data.get("name", actor_id)),
            hp=hp,
            spell_slots=spell_slots,
            class_names=class_names,
            resources=self._parse_resources(_as_dict(system.get("resources")), actor_id),
        )

    def _parse_resources(self, data: Dict, actor_id: str) -> ActorResources:
        pools: Dict[ClassResource, Optional[Pool]] = {}
        for resource, key in RESOURCE_KEYS.items():
            entry = data.get(key)
            pools[resource] = (
                self._parse_pool(entry, f"actor {actor_id} resource {key}")
                if isinstance(entry, dict) else None
            )
        return ActorResources(
            rage=pools[ClassResource.RAGE],
            ki=pools[ClassResource.KI],
            second_wind=pools[ClassResource.SECOND_WIND],
            channel_divinity=pools[ClassResource.CHANNEL_DIVINITY],
            wild_shape=pools[ClassResource.WILD_SHAPE],
            lay_on_hands=pools[ClassResource.LAY_ON_HANDS],
        )

    @staticmethod
    def _parse_pool(data: Dict, where: str) -> Pool:
        return Pool(
            value=_safe_int(data.get("value"), f"{where}.value"),
            max=_safe_int(data.get("max"), f"{where}.max"),
        )
