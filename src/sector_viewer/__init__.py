"""Sector Viewer - navigable terminal viewer for star sector exports."""

__version__ = "0.1.0"
