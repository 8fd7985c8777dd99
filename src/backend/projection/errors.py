"""
Exceptions raised by the projection engine.
"""


class ProjectionError(Exception):
    """Base class for projection failures."""


class InvalidInput(ProjectionError, ValueError):
    """Inputs violate a domain constraint; nothing was computed."""
