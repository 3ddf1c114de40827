"""Client settings and user information consumed by the gauge."""

from dataclasses import dataclass
from typing import Dict, Optional

from src.gauge_app.config import (
    DEFAULT_DISPLAY_MODE,
    DEFAULT_GM_ONLY,
    DISPLAY_MODES,
    SETTING_DEFINITIONS,
)


@dataclass(frozen=True)
class GaugeUser:
    """The user the gauge is shown to."""

    name: str
    is_gm: bool = False


@dataclass(frozen=True)
class GaugeSettings:
    """Validated gauge settings.

    ``display_mode`` only affects the window layout; ``gm_only`` decides
    whether the gauge opens at all for non-GM users.
    """

    display_mode: str = DEFAULT_DISPLAY_MODE
    gm_only: bool = DEFAULT_GM_ONLY

    def __post_init__(self):
        if self.display_mode not in DISPLAY_MODES:
            raise ValueError(
                f"Invalid display_mode: {self.display_mode!r}. "
                f"Must be one of: {', '.join(DISPLAY_MODES)}"
            )
        if not isinstance(self.gm_only, bool):
            raise ValueError(f"Invalid gm_only: {self.gm_only!r}. Must be a bool.")

    @classmethod
    def from_host(cls, values: Optional[Dict]) -> "GaugeSettings":
        """Build settings from the host's stored values, keyed as registered.

        Missing keys fall back to their registered defaults.
        """
        values = values or {}
        unknown = set(values) - SETTING_DEFINITIONS.keys()
        if unknown:
            raise ValueError(f"Unknown settings: {sorted(unknown)}")
        return cls(
            display_mode=values.get(
                "displayMode", SETTING_DEFINITIONS["displayMode"]["default"]
            ),
            gm_only=values.get("gmOnly", SETTING_DEFINITIONS["gmOnly"]["default"]),
        )

    def is_visible_to(self, user: GaugeUser) -> bool:
        """Whether the gauge may be shown to *user*."""
        return user.is_gm or not self.gm_only
