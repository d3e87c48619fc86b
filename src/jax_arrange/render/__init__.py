"""Rendering collaborators.

The applicators only talk to a `Renderer`; this module ships an in-memory
recorder and an OpenSCAD source writer.
"""

from .base import Renderer
from .recorder import CHILD, RecordingRenderer, RenderEvent
from .scad import ScadRenderer, format_matrix

__all__ = ["Renderer", "CHILD", "RecordingRenderer", "RenderEvent", "ScadRenderer", "format_matrix"]
