"""Gauge session - owns the open gauge and reacts to host events."""

import logging
from typing import Optional

from src.gauge_app.gauge_view import CombatGaugeView, CombatProvider, Renderer, render_text
from src.gauge_app.hooks import DELETE_COMBAT, UPDATE_ACTOR, UPDATE_COMBAT, HookRegistry
from src.gauge_app.settings import GaugeSettings, GaugeUser
from src.gauge_core.aggregator import ForceMetricsAggregator

logger = logging.getLogger(__name__)


class GaugeSession:
    """Per-client gauge lifecycle.

    Holds at most one :class:`CombatGaugeView`. The view is created on the
    first update of a started combat, re-rendered on later updates, and
    closed when the combat is deleted. Each session is independent, so
    several can run side by side (one per client, or one per test).
    """

    def __init__(
        self,
        combat_provider: CombatProvider,
        user: GaugeUser,
        settings: Optional[GaugeSettings] = None,
        aggregator: Optional[ForceMetricsAggregator] = None,
        renderer: Renderer = render_text,
    ):
        self.combat_provider = combat_provider
        self.user = user
        self.settings = settings or GaugeSettings()
        self.aggregator = aggregator or ForceMetricsAggregator()
        self.renderer = renderer
        self.gauge: Optional[CombatGaugeView] = None

    def register(self, hooks: HookRegistry) -> None:
        """Subscribe this session to the host events it reacts to."""
        hooks.on(UPDATE_COMBAT, self.on_update_combat)
        hooks.on(DELETE_COMBAT, self.on_delete_combat)
        hooks.on(UPDATE_ACTOR, self.on_update_actor)

    def unregister(self, hooks: HookRegistry) -> None:
        hooks.off(UPDATE_COMBAT, self.on_update_combat)
        hooks.off(DELETE_COMBAT, self.on_delete_combat)
        hooks.off(UPDATE_ACTOR, self.on_update_actor)

    # ------------------------------------------------------------------
    # Hook handlers
    # ------------------------------------------------------------------

    def on_update_combat(self, *args, **kwargs) -> None:
        """Open the gauge on the first update of a started combat, else redraw."""
        if not self.settings.is_visible_to(self.user):
            return

        combat = self.combat_provider()
        if combat is None or not combat.started:
            return

        if self.gauge is None:
            self.gauge = CombatGaugeView(
                self.combat_provider,
                self.user,
                self.settings,
                aggregator=self.aggregator,
                renderer=self.renderer,
            )
            self.gauge.render(force=True)
            logger.info(
                "Opened combat gauge for %s (combat %s, %s mode)",
                self.user.name, combat.combat_id, self.settings.display_mode,
            )
        else:
            self.gauge.render()

    def on_delete_combat(self, *args, **kwargs) -> None:
        if self.gauge is None:
            return
        self.gauge.close()
        self.gauge = None
        logger.info("Closed combat gauge for %s", self.user.name)

    def on_update_actor(self, *args, **kwargs) -> None:
        """Redraw an open gauge after a character sheet changed."""
        if self.gauge is None:
            return
        self.gauge.render()

    @property
    def output(self) -> Optional[str]:
        """Most recent rendering of the open gauge, if any."""
        if self.gauge is None:
            return None
        return self.gauge.last_output
