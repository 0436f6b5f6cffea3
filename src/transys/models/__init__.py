"""Small example systems.

- traffic_light: a plain three-state transition system
- soda_machine: a program graph, checked after compilation
"""

from __future__ import annotations

from .soda_machine import Location, soda_machine, total_is, total_items
from .traffic_light import Color, traffic_light

__all__ = [
    "Color",
    "traffic_light",
    "Location",
    "soda_machine",
    "total_is",
    "total_items",
]
