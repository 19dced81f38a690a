"""
Help guide for the metrics form.

Modules
-------
content : Static guidance data (quick start, per-field help, tips, checklist).
render  : render_guide() / render_field() / render_bands() — plain text.
"""

from mfg_scorer.guide.render import render_bands, render_field, render_guide

__all__ = ["render_bands", "render_field", "render_guide"]
