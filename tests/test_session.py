"""Tests for src.gauge_app.session."""

from src.gauge_app.hooks import DELETE_COMBAT, UPDATE_ACTOR, UPDATE_COMBAT, HookRegistry
from src.gauge_app.session import GaugeSession
from src.gauge_app.settings import GaugeSettings, GaugeUser
from tests.helpers import make_combat, skirmish_combat


class _Host:
    """Minimal stand-in for the host's mutable game state."""

    def __init__(self, combat=None):
        self.combat = combat

    def current_combat(self):
        return self.combat


def _make_session(host, is_gm=True, settings=None):
    return GaugeSession(
        host.current_combat,
        GaugeUser("Dana" if is_gm else "Sam", is_gm=is_gm),
        settings or GaugeSettings(),
    )


class TestUpdateCombat:
    def test_first_update_opens_gauge(self):
        session = _make_session(_Host(skirmish_combat()))
        session.on_update_combat()

        assert session.gauge is not None
        assert session.gauge.is_open
        assert session.gauge.render_count == 1
        assert "Allies" in session.output

    def test_later_updates_rerender_same_gauge(self):
        session = _make_session(_Host(skirmish_combat()))
        session.on_update_combat()
        gauge = session.gauge
        session.on_update_combat()

        assert session.gauge is gauge
        assert gauge.render_count == 2

    def test_ignored_without_combat(self):
        session = _make_session(_Host(None))
        session.on_update_combat()
        assert session.gauge is None
        assert session.output is None

    def test_ignored_before_combat_starts(self):
        session = _make_session(_Host(make_combat([], started=False)))
        session.on_update_combat()
        assert session.gauge is None

    def test_gm_only_hides_from_players(self):
        host = _Host(skirmish_combat())
        session = _make_session(host, is_gm=False, settings=GaugeSettings(gm_only=True))
        session.on_update_combat()
        assert session.gauge is None

    def test_gm_only_still_shows_to_gm(self):
        host = _Host(skirmish_combat())
        session = _make_session(host, is_gm=True, settings=GaugeSettings(gm_only=True))
        session.on_update_combat()
        assert session.gauge is not None

    def test_display_mode_reaches_window(self):
        session = _make_session(
            _Host(skirmish_combat()), settings=GaugeSettings(display_mode="floating"),
        )
        session.on_update_combat()
        assert session.gauge.options["pop_out"] is True


class TestDeleteAndActorUpdates:
    def test_delete_closes_and_clears(self):
        session = _make_session(_Host(skirmish_combat()))
        session.on_update_combat()
        gauge = session.gauge

        session.on_delete_combat()

        assert session.gauge is None
        assert not gauge.is_open

    def test_delete_without_gauge_is_noop(self):
        session = _make_session(_Host(None))
        session.on_delete_combat()
        assert session.gauge is None

    def test_actor_update_rerenders_open_gauge(self):
        host = _Host(skirmish_combat())
        session = _make_session(host)
        session.on_update_combat()

        host.combat = make_combat(host.combat.combatants[:2])
        session.on_update_actor()

        assert session.gauge.render_count == 2
        assert "Enemies" in session.output
        assert session.gauge.get_data()["hostile"]["total"] == 0

    def test_actor_update_without_gauge_is_noop(self):
        session = _make_session(_Host(skirmish_combat()))
        session.on_update_actor()
        assert session.gauge is None


class TestHookWiring:
    def test_register_and_dispatch(self):
        hooks = HookRegistry()
        host = _Host(skirmish_combat())
        session = _make_session(host)
        session.register(hooks)

        hooks.call(UPDATE_COMBAT, host.combat, {"round": 2}, {}, "user1")
        assert session.gauge is not None

        hooks.call(UPDATE_ACTOR, None, {"system": {}})
        assert session.gauge.render_count == 2

        hooks.call(DELETE_COMBAT, host.combat, {}, "user1")
        assert session.gauge is None

    def test_unregister(self):
        hooks = HookRegistry()
        session = _make_session(_Host(skirmish_combat()))
        session.register(hooks)
        session.unregister(hooks)

        hooks.call(UPDATE_COMBAT)
        assert session.gauge is None
        assert hooks.subscriber_count(UPDATE_COMBAT) == 0

    def test_sessions_are_independent(self):
        hooks = HookRegistry()
        host = _Host(skirmish_combat())
        gm = _make_session(host, is_gm=True, settings=GaugeSettings(gm_only=True))
        player = _make_session(host, is_gm=False, settings=GaugeSettings(gm_only=True))
        gm.register(hooks)
        player.register(hooks)

        hooks.call(UPDATE_COMBAT)

        assert gm.gauge is not None
        assert player.gauge is None
