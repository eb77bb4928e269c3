"""
Configuration & Path Management
===============================
Central registry for resource paths and global constants of the map widget.

Why is this file needed?
------------------------
1. Abstraction: shape and population assets are located in one place instead
   of being resolved ad hoc by every module.
2. Deployment: resources are found through PyInstaller's ``sys._MEIPASS`` when
   the demo is frozen into an executable.
3. Defaults: the design geometry and the default colors of the map live here,
   so the model and the Qt layer agree on them.

Exports:
    RESOURCES_PATH (str): Absolute path to the bundled resources directory.
    DEFAULT_CATALOG_PATH (str): Low-resolution country outlines (JSON).
    DEFAULT_POPULATION_PATH (str): Population per ISO3 code in 2016 (JSON).
"""
import sys
import os
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to a bundled resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, "worldmap", "resources", relative_path)

    # config.py is in src/worldmap/, resources sit next to it
    package_dir: Path = Path(__file__).parent
    return os.path.join(str(package_dir), "resources", relative_path)


# Resources
RESOURCES_PATH: str = get_resource_path("")
DEFAULT_CATALOG_PATH: str = get_resource_path("world_lowres.json")
DEFAULT_POPULATION_PATH: str = get_resource_path("population_2016.json")

# Design geometry of the map artwork (design units)
PREFERRED_WIDTH: float = 1009.0
PREFERRED_HEIGHT: float = 665.0
MINIMUM_WIDTH: float = 100.0
MINIMUM_HEIGHT: float = 66.0
MAXIMUM_WIDTH: float = 2018.0
MAXIMUM_HEIGHT: float = 1330.0

# Default appearance
DEFAULT_BACKGROUND_COLOR: str = "#3f3f4f"
DEFAULT_FILL_COLOR: str = "#d9d9dc"
DEFAULT_STROKE_COLOR: str = "#000000"
DEFAULT_HOVER_COLOR: str = "#456acf"
DEFAULT_PRESSED_COLOR: str = "#ef6050"
DEFAULT_STROKE_WIDTH: float = 0.5

if not os.path.isdir(RESOURCES_PATH):
    logger.warning(f"Resources path not found at {RESOURCES_PATH}")
