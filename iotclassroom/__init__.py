"""Classroom IoT toolkit: Hue and Wemo control, button, encoder and timer helpers, colours."""

__version__ = "0.1.0"