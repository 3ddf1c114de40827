from src.gauge_app.gauge_view import CombatGaugeView, render_text, window_options
from src.gauge_app.hooks import HookRegistry
from src.gauge_app.session import GaugeSession
from src.gauge_app.settings import GaugeSettings, GaugeUser

__all__ = [
    "CombatGaugeView",
    "GaugeSession",
    "GaugeSettings",
    "GaugeUser",
    "HookRegistry",
    "render_text",
    "window_options",
]
