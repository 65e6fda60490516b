"""Wind-driven rain physics: fluid properties, droplets, rain phases, catch ratios, patch conditions, time steps, sun position and sources."""

__version__ = "0.1.0"