"""
FIRE / Semi-FI / Coast FI projection engine.
"""

from .engine import check_inputs, project
from .errors import InvalidInput, ProjectionError
from .targets import annuity_present_value, compute_targets, real_rate_of

__all__ = [
    "InvalidInput",
    "ProjectionError",
    "annuity_present_value",
    "check_inputs",
    "compute_targets",
    "project",
    "real_rate_of",
]
