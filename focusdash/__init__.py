"""FocusDash: focus-session timer for the productivity dashboard."""

__version__ = "0.1.0"
