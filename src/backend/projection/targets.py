"""
Target calculator: FIRE, Semi-FI, cash cushion and Coast FI thresholds.
"""

import logging
import math

from config import (
    CASH_CUSHION_YEARS,
    LIFE_EXPECTANCY,
    SEMI_FI_FRACTION,
    YIELD_SHIELD_RATE,
)
from models import ProjectionInput, Targets
from .errors import InvalidInput

logger = logging.getLogger(__name__)


def real_rate_of(return_rate: float, inflation_rate: float) -> float:
    """Fisher relation on percentage inputs: (1 + nominal) / (1 + inflation) - 1."""
    nominal = return_rate / 100.0
    inflation = inflation_rate / 100.0
    return (1.0 + nominal) / (1.0 + inflation) - 1.0


def annuity_present_value(payment: float, rate: float, periods: int) -> float:
    """
    Present value of `periods` annual payments discounted at `rate`.

    At rate == 0 the closed form is 0/0; its limit is payment * periods.
    """
    if rate == 0:
        return payment * periods
    return payment * (1.0 - (1.0 + rate) ** -periods) / rate


def compute_targets(inputs: ProjectionInput) -> Targets:
    """Derive every threshold for one input set."""
    horizon = LIFE_EXPECTANCY - inputs.retirement_age
    if horizon <= 0:
        raise InvalidInput(
            f"retirement_age must be below {LIFE_EXPECTANCY}, got {inputs.retirement_age}"
        )

    real_rate = real_rate_of(inputs.return_rate, inputs.inflation_rate)

    fire_target_base = annuity_present_value(inputs.expenses, real_rate, horizon)
    semi_fi_target = SEMI_FI_FRACTION * fire_target_base
    cash_cushion_target = (inputs.expenses - semi_fi_target * YIELD_SHIELD_RATE) * CASH_CUSHION_YEARS
    if cash_cushion_target < 0:
        logger.warning(
            "Cash cushion is negative (%.2f); yield shield exceeds expenses", cash_cushion_target
        )
    fire_target = fire_target_base + cash_cushion_target

    # Grows back to fire_target_base by retirement with no further saving
    accumulation_years = inputs.retirement_age - inputs.age
    coast_target = fire_target_base / (1.0 + real_rate) ** accumulation_years

    thresholds = (fire_target_base, semi_fi_target, cash_cushion_target, fire_target, coast_target)
    if not all(math.isfinite(v) for v in thresholds):
        raise InvalidInput("expenses are too large to size targets for")

    logger.debug(
        "real_rate=%.6f horizon=%d base=%.2f semi=%.2f cushion=%.2f fire=%.2f coast=%.2f",
        real_rate, horizon, fire_target_base, semi_fi_target,
        cash_cushion_target, fire_target, coast_target,
    )

    return Targets(
        real_rate=real_rate,
        horizon=horizon,
        fire_target_base=fire_target_base,
        semi_fi_target=semi_fi_target,
        cash_cushion_target=cash_cushion_target,
        fire_target=fire_target,
        coast_target=coast_target,
    )
