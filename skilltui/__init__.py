"""Themes, widgets and skill/settings panes for a terminal interface that manages agent skills."""

__version__ = "0.1.0"