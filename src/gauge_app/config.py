MODULE_ID = "combat-gauge"

# Display modes offered in the client settings menu
DISPLAY_MODES = {
    "right": "Right Side",
    "left": "Left Side",
    "floating": "Floating Window",
}

# Default client settings
DEFAULT_DISPLAY_MODE = "right"
DEFAULT_GM_ONLY = False

# Settings as registered with the host (key -> registration data)
SETTING_DEFINITIONS = {
    "displayMode": {
        "name": "Display Mode",
        "hint": "Choose how the gauge is displayed",
        "scope": "client",
        "config": True,
        "type": str,
        "choices": DISPLAY_MODES,
        "default": DEFAULT_DISPLAY_MODE,
    },
    "gmOnly": {
        "name": "GM Only",
        "hint": "Only show the gauge to the game master",
        "scope": "world",
        "config": True,
        "type": bool,
        "default": DEFAULT_GM_ONLY,
    },
}

# Gauge window defaults
WINDOW_TITLE = "Combat Gauge"
WINDOW_WIDTH = 300
WINDOW_HEIGHT = "auto"
TEMPLATE_PATH = f"modules/{MODULE_ID}/templates/gauge.html"

# Text rendering
BAR_WIDTH = 20
