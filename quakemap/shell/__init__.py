"""Imperative Shell - I/O and side effects.

This module contains all code that interacts with external systems:
- USGS feed client (HTTP)
- Map tile rendering (HTTP + images)
- Pillow drawing surface (images)
- Configuration loading (environment/files)

Keep this layer thin and simple. All decision logic should be in core.
"""

from quakemap.shell.usgs_client import USGSClient
from quakemap.shell.static_map_client import StaticMapClient, to_png_bytes
from quakemap.shell.pil_surface import PillowSurface
from quakemap.shell.config_loader import load_config, load_config_from_dict

__all__ = [
    "USGSClient",
    "StaticMapClient",
    "to_png_bytes",
    "PillowSurface",
    "load_config",
    "load_config_from_dict",
]
