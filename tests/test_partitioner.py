"""Tests for src.gauge_core.partitioner."""

from src.gauge_core.models import TokenDisposition
from src.gauge_core.partitioner import is_hostile, partition_factions
from tests.helpers import make_actor, make_combatant


def _mixed_combatants():
    return [
        make_combatant(make_actor("Ally A"), TokenDisposition.FRIENDLY),
        make_combatant(make_actor("Orc 1"), TokenDisposition.HOSTILE),
        make_combatant(make_actor("Bystander"), TokenDisposition.NEUTRAL),
        make_combatant(None, TokenDisposition.HOSTILE, name="Orc Spirit"),
        make_combatant(make_actor("Ally B"), None),
        make_combatant(make_actor("Spy"), TokenDisposition.SECRET),
        make_combatant(make_actor("Orc 2"), TokenDisposition.HOSTILE),
    ]


class TestIsHostile:
    def test_hostile_disposition(self):
        assert is_hostile(make_combatant(disposition=TokenDisposition.HOSTILE))

    def test_other_dispositions_are_not_hostile(self):
        for disposition in (
            TokenDisposition.FRIENDLY,
            TokenDisposition.NEUTRAL,
            TokenDisposition.SECRET,
            None,
        ):
            assert not is_hostile(make_combatant(disposition=disposition))


class TestPartitionFactions:
    def test_splits_by_disposition(self):
        factions = partition_factions(_mixed_combatants())
        assert [c.name for c in factions.hostile] == ["Orc 1", "Orc Spirit", "Orc 2"]
        assert [c.name for c in factions.friendly] == ["Ally A", "Bystander", "Ally B", "Spy"]

    def test_is_a_partition_preserving_order(self):
        combatants = _mixed_combatants()
        factions = partition_factions(combatants)

        friendly_ids = {id(c) for c in factions.friendly}
        hostile_ids = {id(c) for c in factions.hostile}
        assert not friendly_ids & hostile_ids
        assert friendly_ids | hostile_ids == {id(c) for c in combatants}

        # Merging back by original position reconstructs the input
        position = {id(c): i for i, c in enumerate(combatants)}
        merged = sorted(factions.friendly + factions.hostile, key=lambda c: position[id(c)])
        assert merged == combatants
        for side in (factions.friendly, factions.hostile):
            indexes = [position[id(c)] for c in side]
            assert indexes == sorted(indexes)

    def test_keeps_combatants_without_actor(self):
        factions = partition_factions([make_combatant(None, TokenDisposition.HOSTILE)])
        assert len(factions.hostile) == 1
        assert factions.hostile[0].actor is None

    def test_empty_input(self):
        factions = partition_factions([])
        assert factions.friendly == []
        assert factions.hostile == []

    def test_accepts_any_iterable(self):
        factions = partition_factions(iter(_mixed_combatants()))
        assert len(factions.friendly) + len(factions.hostile) == 7
