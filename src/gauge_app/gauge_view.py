"""The gauge window: options, template context and text rendering."""

import logging
from typing import Callable, Dict, List, Optional

from src.gauge_app.config import (
    BAR_WIDTH,
    MODULE_ID,
    TEMPLATE_PATH,
    WINDOW_HEIGHT,
    WINDOW_TITLE,
    WINDOW_WIDTH,
)
from src.gauge_app.settings import GaugeSettings, GaugeUser
from src.gauge_core.aggregator import ForceMetricsAggregator, round_half_up
from src.gauge_core.models import Combat

logger = logging.getLogger(__name__)

CombatProvider = Callable[[], Optional[Combat]]
Renderer = Callable[[Dict, Dict], str]


def window_options(settings: GaugeSettings) -> Dict:
    """Window description for the current display mode.

    Only the floating mode pops out into its own window; the side modes are
    docked and styled through the ``combat-gauge-<mode>`` class.
    """
    return {
        "id": MODULE_ID,
        "template": TEMPLATE_PATH,
        "title": WINDOW_TITLE,
        "width": WINDOW_WIDTH,
        "height": WINDOW_HEIGHT,
        "pop_out": settings.display_mode == "floating",
        "classes": [f"{MODULE_ID}-{settings.display_mode}"],
    }


def _bar(percent: int, width: int = BAR_WIDTH) -> str:
    filled = round_half_up(width * max(0, min(percent, 100)) / 100)
    return "[" + "#" * filled + "-" * (width - filled) + "]"


def render_text(context: Dict, options: Dict) -> str:
    """Plain-text rendering of the gauge template context.

    Hostile sub-scores are only shown to a GM; everybody sees both totals.
    """
    lines: List[str] = [options.get("title", WINDOW_TITLE)]
    sides = (
        ("Allies", context["friendly"], True),
        ("Enemies", context["hostile"], context["isGM"]),
    )
    for label, metrics, detailed in sides:
        lines.append(f"{label:<8} {_bar(metrics['total'])} {metrics['total']:>3}%")
        if detailed:
            lines.append(
                f"  HP {metrics['hp']}%  "
                f"Spells {metrics['spellSlots']}%  "
                f"Resources {metrics['resources']}%"
            )
    return "\n".join(lines)


class CombatGaugeView:
    """One open gauge.

    Reads the current combat through *combat_provider* on every render so
    the displayed numbers always reflect the latest host state.
    """

    def __init__(
        self,
        combat_provider: CombatProvider,
        user: GaugeUser,
        settings: GaugeSettings,
        aggregator: Optional[ForceMetricsAggregator] = None,
        renderer: Renderer = render_text,
    ):
        self.combat_provider = combat_provider
        self.user = user
        self.settings = settings
        self.aggregator = aggregator or ForceMetricsAggregator()
        self.renderer = renderer
        self.options = window_options(settings)
        self.is_open = False
        self.render_count = 0
        self.last_output: Optional[str] = None

    def get_data(self) -> Dict:
        """Template context for the current combat."""
        combat_data = self.aggregator.calculate_combat_data(self.combat_provider())
        return {
            "isGM": self.user.is_gm,
            "friendly": combat_data.friendly.to_dict(),
            "hostile": combat_data.hostile.to_dict(),
        }

    def render(self, force: bool = False) -> Optional[str]:
        """Redraw the gauge.

        A closed gauge is only drawn when *force* is set, matching the
        host's render semantics.
        """
        if not self.is_open and not force:
            return None

        self.last_output = self.renderer(self.get_data(), self.options)
        self.is_open = True
        self.render_count += 1
        logger.debug("Rendered gauge (render #%d)", self.render_count)
        return self.last_output

    def close(self) -> None:
        self.is_open = False
