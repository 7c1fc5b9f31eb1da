"""
typegraph - association graphs for class diagrams.

Turns the declared types of a codebase into a deduplicated set of
member associations, ready to be rendered as a diagram.
"""

__version__ = "0.1.0"
