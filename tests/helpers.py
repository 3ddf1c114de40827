"""Model builders and host payloads shared by the test modules."""

from src.gauge_core.models import (
    Actor,
    ActorResources,
    Combat,
    Combatant,
    Pool,
    TokenDisposition,
)


# ------------------------------------------------------------------
# Model builders
# ------------------------------------------------------------------

def make_actor(
    name="Hero",
    hp=(10, 10),
    spell_slots=None,
    class_names=(),
    **resources,
):
    """Build an actor. ``spell_slots`` maps level -> (value, max)."""
    slots = None
    if spell_slots is not None:
        slots = {level: Pool(*pair) for level, pair in spell_slots.items()}
    return Actor(
        actor_id=name.lower().replace(" ", "_"),
        name=name,
        hp=Pool(*hp),
        spell_slots=slots,
        class_names=tuple(class_names),
        resources=ActorResources(**{k: Pool(*v) for k, v in resources.items()}),
    )


def make_combatant(actor=None, disposition=TokenDisposition.FRIENDLY, name=None):
    combatant_name = name or (actor.name if actor else "Empty")
    return Combatant(
        combatant_id=f"c_{combatant_name.lower().replace(' ', '_')}",
        name=combatant_name,
        actor=actor,
        disposition=disposition,
    )


def make_combat(combatants, started=True):
    return Combat(combat_id="combat1", combatants=list(combatants), started=started, round=1)


def skirmish_combat():
    """Two heroes against two goblins, one of them wounded."""
    return make_combat([
        make_combatant(make_actor(
            "Brother Anselm", hp=(20, 20),
            spell_slots={1: (3, 3)}, class_names=["Monk"], ki=(2, 4),
        )),
        make_combatant(make_actor("Ragna", hp=(10, 20), class_names=["Barbarian"], rage=(3, 3))),
        make_combatant(make_actor("Goblin", hp=(7, 7)), TokenDisposition.HOSTILE),
        make_combatant(make_actor("Goblin Boss", hp=(0, 7)), TokenDisposition.HOSTILE),
    ])


# ------------------------------------------------------------------
# Snapshot payloads as exported by the host
# ------------------------------------------------------------------

def snapshot_payload(combat="default", is_gm=True, settings=None):
    """A host export with one monk ally and one hostile goblin."""
    if combat == "default":
        combat = {
            "id": "combat1",
            "started": True,
            "round": 2,
            "combatants": [
                {
                    "id": "c1",
                    "name": "Brother Anselm",
                    "token": {"disposition": 1},
                    "actor": {
                        "id": "a1",
                        "name": "Brother Anselm",
                        "system": {
                            "attributes": {"hp": {"value": 20, "max": 20}},
                            "spells": {"spell1": {"value": 3, "max": 3}},
                            "resources": {"ki": {"value": 2, "max": 4}},
                        },
                        "items": [
                            {"type": "weapon", "name": "Quarterstaff"},
                            {"type": "class", "name": "Monk"},
                        ],
                    },
                },
                {
                    "id": "c2",
                    "name": "Goblin",
                    "token": {"disposition": -1},
                    "actor": {
                        "id": "a2",
                        "name": "Goblin",
                        "system": {"attributes": {"hp": {"value": 3, "max": 7}}},
                        "items": [],
                    },
                },
            ],
        }
    return {
        "user": {"name": "Dana", "isGM": is_gm},
        "settings": settings if settings is not None else {"displayMode": "right"},
        "combat": combat,
    }
