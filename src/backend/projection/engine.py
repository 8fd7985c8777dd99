"""
Projection engine: inputs -> targets, trajectories and achievement ages.
"""

import logging
import math
from typing import Sequence

import numpy as np

from config import LIFE_EXPECTANCY, MAX_AGE, MAX_RATE_PERCENT, MIN_AGE, MIN_RATE_PERCENT
from models import (
    ProjectionInput,
    ProjectionResult,
    Targets,
    Trajectory,
    TrajectoryPoint,
)
from .detector import achievement_age, first_crossing
from .errors import InvalidInput
from .simulator import simulate
from .targets import compute_targets

logger = logging.getLogger(__name__)


def check_inputs(inputs: ProjectionInput) -> None:
    """
    Raise InvalidInput for anything outside the model's domain.

    ProjectionInput validates its own fields, but instances built through
    `model_construct` skip that, and the age ordering spans two fields.
    """
    for name in ("income", "savings_rate", "expenses", "current_savings",
                 "return_rate", "inflation_rate"):
        value = getattr(inputs, name)
        if not math.isfinite(value):
            raise InvalidInput(f"{name} must be a finite number, got {value}")

    for name in ("income", "expenses", "current_savings"):
        if getattr(inputs, name) < 0:
            raise InvalidInput(f"{name} must be >= 0, got {getattr(inputs, name)}")

    if not 0 <= inputs.savings_rate <= 100:
        raise InvalidInput(f"savings_rate must be within 0-100, got {inputs.savings_rate}")
    for name in ("return_rate", "inflation_rate"):
        value = getattr(inputs, name)
        if not MIN_RATE_PERCENT <= value <= MAX_RATE_PERCENT:
            raise InvalidInput(
                f"{name} must be within {MIN_RATE_PERCENT}-{MAX_RATE_PERCENT}%, got {value}"
            )

    for name in ("age", "retirement_age"):
        value = getattr(inputs, name)
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidInput(f"{name} must be a whole number of years, got {value!r}")
        if not MIN_AGE <= value <= MAX_AGE:
            raise InvalidInput(f"{name} must be within {MIN_AGE}-{MAX_AGE}, got {value}")
    if inputs.retirement_age < inputs.age:
        raise InvalidInput(
            f"retirement_age ({inputs.retirement_age}) must be >= age ({inputs.age})"
        )
    if inputs.retirement_age >= LIFE_EXPECTANCY:
        raise InvalidInput(
            f"retirement_age must be below {LIFE_EXPECTANCY}, got {inputs.retirement_age}"
        )


def _trajectory(name: str, years: Sequence[int], balances: Sequence[float],
                target: float) -> Trajectory:
    return Trajectory(
        name=name,
        target=target,
        points=tuple(TrajectoryPoint(year=y, balance=b) for y, b in zip(years, balances)),
        achieved_at_year=first_crossing(balances, target),
    )


def project(inputs: ProjectionInput) -> ProjectionResult:
    """
    Run one projection.

    Pure: no state survives between calls, so equal inputs give equal results.

    Raises:
        InvalidInput: if the inputs are out of domain.
    """
    check_inputs(inputs)

    targets: Targets = compute_targets(inputs)
    run = simulate(inputs, targets)

    balances = np.asarray(run.fire + run.semi_fi + run.coast_fi, dtype=float)
    if not np.isfinite(balances).all():
        raise InvalidInput("balances grow beyond representable values; lower income or savings")

    fire = _trajectory("FIRE", run.years, run.fire, targets.fire_target)
    semi_fi = _trajectory("SemiFI", run.years, run.semi_fi, targets.semi_fi_target)
    coast_fi = _trajectory("CoastFI", run.years, run.coast_fi, targets.coast_target)
    fire_base_offset = first_crossing(run.fire, targets.fire_target_base)

    result = ProjectionResult(
        inputs=inputs,
        targets=targets,
        real_rate=targets.real_rate,
        fire=fire,
        semi_fi=semi_fi,
        coast_fi=coast_fi,
        fire_age=achievement_age(inputs.age, fire.achieved_at_year),
        fire_base_age=achievement_age(inputs.age, fire_base_offset),
        semi_fi_age=achievement_age(inputs.age, semi_fi.achieved_at_year),
        coast_fi_age=achievement_age(inputs.age, coast_fi.achieved_at_year),
    )

    logger.info(
        "Projected %d years: fire_age=%s semi_fi_age=%s coast_fi_age=%s",
        len(run), result.fire_age, result.semi_fi_age, result.coast_fi_age,
    )
    return result
