"""
Render module - nomnoml DSL output.
"""

from .nomnoml import NomnomlTemplate, escape_nomnoml
from .diagram import render_diagram, render_file

__all__ = [
    "NomnomlTemplate",
    "escape_nomnoml",
    "render_diagram",
    "render_file",
]
