"""Scripted 2-D scene animations with a scrubbable timeline."""

__version__ = "0.1.0"
