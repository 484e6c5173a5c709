"""
Reusable UI components for the Streamlit application.

- `base`: CSS injection and small layout helpers.
- `cards`: the weather card and the error panel rendered by the display view.

Import from here (`from ui.components import weather_card`) rather than from
the submodules.
"""

from .base import (
    inject_base_css,
    page_header,
)

from .cards import (
    weather_card,
    error_panel,
)
