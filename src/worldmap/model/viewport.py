"""
Aspect-ratio preserving layout of the map inside a resizable container.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from worldmap import config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContentBox:
    """Position and size of the map content relative to its container."""
    x: float
    y: float
    width: float
    height: float
    scale: float  # content width / design width


@dataclass(frozen=True)
class SizeHints:
    """Advisory container sizes for the host layout (not clamps on the content)."""
    minimum: tuple[float, float] = (config.MINIMUM_WIDTH, config.MINIMUM_HEIGHT)
    preferred: tuple[float, float] = (config.PREFERRED_WIDTH, config.PREFERRED_HEIGHT)
    maximum: tuple[float, float] = (config.MAXIMUM_WIDTH, config.MAXIMUM_HEIGHT)


class ViewportScaler:
    """
    Computes the largest centered box with the design aspect ratio that fits
    into the container.

    The last valid box is kept in ``content_box``; degenerate container sizes
    leave it untouched.
    """

    def __init__(
        self,
        design_width: float = config.PREFERRED_WIDTH,
        design_height: float = config.PREFERRED_HEIGHT,
        size_hints: Optional[SizeHints] = None,
    ) -> None:
        if design_width <= 0 or design_height <= 0:
            raise ValueError(f"Design size must be positive, got {design_width}x{design_height}.")
        self.design_width = float(design_width)
        self.design_height = float(design_height)
        self.size_hints = size_hints or SizeHints()
        self.content_box: Optional[ContentBox] = None

    @property
    def aspect_ratio(self) -> float:
        """Height / width of the design."""
        return self.design_height / self.design_width

    def fit(self, container_width: float, container_height: float) -> Optional[ContentBox]:
        """
        Fit the content into a container of the given size.

        Returns:
            The new ContentBox, or None if the computed size is degenerate
            (the previous box is kept).
        """
        container_width = float(container_width)
        container_height = float(container_height)
        ratio = self.aspect_ratio

        if ratio * container_width > container_height:
            width = container_height / ratio
            height = container_height
        else:
            width = container_width
            height = ratio * container_width

        if not (width > 0 and height > 0):
            logger.debug(f"Skipping layout for degenerate container {container_width}x{container_height}")
            return None

        box = ContentBox(
            x=(container_width - width) * 0.5,
            y=(container_height - height) * 0.5,
            width=width,
            height=height,
            scale=width / self.design_width,
        )
        self.content_box = box
        return box
