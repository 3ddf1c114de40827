from src.gauge_core.models import ClassResource

# Composite power weights (must sum to 1.0)
POWER_WEIGHTS = {
    "hp": 0.5,
    "spell_slots": 0.3,
    "resources": 0.2,
}

# Spell levels counted toward spell-slot capacity
SPELL_LEVELS = range(1, 10)

# Class name (lower-case) -> limited-use pool granted by that class
CLASS_RESOURCES = {
    "barbarian": ClassResource.RAGE,
    "monk": ClassResource.KI,
    "fighter": ClassResource.SECOND_WIND,
    "cleric": ClassResource.CHANNEL_DIVINITY,
    "druid": ClassResource.WILD_SHAPE,
    "paladin": ClassResource.LAY_ON_HANDS,
}
