from pathlib import Path

from src.gauge_core.models import ClassResource

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Exported tracker snapshots
SNAPSHOT_DIR = PROJECT_ROOT / "data" / "snapshots"

# Keys under ``actor.system.resources`` for each class resource
RESOURCE_KEYS = {
    ClassResource.RAGE: "rage",
    ClassResource.KI: "ki",
    ClassResource.SECOND_WIND: "secondwind",
    ClassResource.CHANNEL_DIVINITY: "channeldivinity",
    ClassResource.WILD_SHAPE: "wildshape",
    ClassResource.LAY_ON_HANDS: "layonhands",
}

# Key pattern for spell levels under ``actor.system.spells``
SPELL_LEVEL_KEY = "spell{level}"

# Item type that marks a class on the character sheet
CLASS_ITEM_TYPE = "class"
