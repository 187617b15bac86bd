"""Aster Click: simulation core of a single-target asteroid clicker.

The package holds everything that runs without a display (clock, hazard,
particles, stats, settings, input buffering and the orchestrator). The pygame
window and drawing code live in the root ``main.py`` and ``ui.py``.
"""

__version__ = "1.2.0"
