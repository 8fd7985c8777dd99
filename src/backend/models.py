"""
Pydantic models for the FI planner.
All data models and field-level validation.
"""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, conint
from pydantic.alias_generators import to_camel

from config import MAX_AGE, MAX_RATE_PERCENT, MIN_AGE, MIN_RATE_PERCENT


class _Frozen(BaseModel):
    """Immutable model; camelCase on the wire, snake_case in Python."""
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        allow_inf_nan=False,
    )


# ============================
# Input Model
# ============================
class ProjectionInput(_Frozen):
    """One set of planner inputs. Rates are percentages (8 means 8%)."""
    income: float = Field(ge=0)  # annual, post-tax
    savings_rate: float = Field(ge=0, le=100)
    expenses: float = Field(ge=0)  # annual, today's money
    current_savings: float = Field(ge=0)
    age: conint(ge=MIN_AGE, le=MAX_AGE)
    return_rate: float = Field(ge=MIN_RATE_PERCENT, le=MAX_RATE_PERCENT)  # nominal
    retirement_age: conint(ge=MIN_AGE, le=MAX_AGE)
    inflation_rate: float = Field(ge=MIN_RATE_PERCENT, le=MAX_RATE_PERCENT)


# ============================
# Target Models
# ============================
class Targets(_Frozen):
    """Monetary thresholds derived from one input set"""
    real_rate: float
    horizon: int  # years of retirement to fund
    fire_target_base: float
    semi_fi_target: float
    cash_cushion_target: float  # may be negative, see DESIGN.md
    fire_target: float
    coast_target: float


# ============================
# Trajectory Models
# ============================
class TrajectoryPoint(_Frozen):
    year: int  # calendar age
    balance: float  # start-of-year value


class Trajectory(_Frozen):
    """Balance series for one contribution policy"""
    name: str
    target: float
    points: Tuple[TrajectoryPoint, ...]
    achieved_at_year: Optional[int] = None  # elapsed years, None if never reached

    @property
    def balances(self) -> Tuple[float, ...]:
        return tuple(p.balance for p in self.points)

    @property
    def years(self) -> Tuple[int, ...]:
        return tuple(p.year for p in self.points)


# ============================
# Response Models
# ============================
class ProjectionResult(_Frozen):
    """Everything one engine call produces. Ages are None when not reached."""
    inputs: ProjectionInput
    targets: Targets
    real_rate: float
    fire: Trajectory
    semi_fi: Trajectory
    coast_fi: Trajectory
    fire_age: Optional[int] = None
    fire_base_age: Optional[int] = None  # age the base target (no cushion) was reached
    semi_fi_age: Optional[int] = None
    coast_fi_age: Optional[int] = None

    @property
    def trajectories(self) -> Tuple[Trajectory, Trajectory, Trajectory]:
        return (self.fire, self.semi_fi, self.coast_fi)
