from __future__ import annotations

from dataclasses import dataclass

from worldmap import config


@dataclass
class MapStyle:
    """Colors of the map. Any string QColor understands ("#rrggbb", "red", ...)."""
    background_color: str = config.DEFAULT_BACKGROUND_COLOR
    fill_color: str = config.DEFAULT_FILL_COLOR
    stroke_color: str = config.DEFAULT_STROKE_COLOR
    hover_color: str = config.DEFAULT_HOVER_COLOR
    pressed_color: str = config.DEFAULT_PRESSED_COLOR
    stroke_width: float = config.DEFAULT_STROKE_WIDTH
