"""Glyphtender AI debugging service

A small HTTP API for running AI seats against posted game states and reading
back their decision reports.

Usage:
    python -m glyph_ai.gui.run

Then open http://localhost:8000/docs in your browser.
"""

__version__ = "0.1.0"
