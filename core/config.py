"""
Hazard configuration.
Numeric tolerances live in HazardConfig; DistributionSpec is the validated
description a caller hands to distributions.factory.make_distribution().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from .errors import InvalidParametersError

NONPARAMETRIC = "nonparametric"


@dataclass(frozen=True)
class HazardConfig:
    # |sum - 1| below this counts as "already a probability distribution"
    normalization_atol: float = 1e-12

    # parametric families are truncated where the survival function drops below this
    tail_mass: float = 1e-4

    # fallback truncation day for parametric families; None -> derived from tail_mass
    default_max_day: Optional[int] = None

    # largest table a parametric family may tabulate
    max_support_days: int = 100_000

    def __post_init__(self):
        if not self.normalization_atol >= 0:
            raise InvalidParametersError(
                f"normalization_atol must be >= 0, got {self.normalization_atol!r}"
            )
        if not 0 < self.tail_mass < 1:
            raise InvalidParametersError(f"tail_mass must be in (0, 1), got {self.tail_mass!r}")
        if self.default_max_day is not None and self.default_max_day < 1:
            raise InvalidParametersError(
                f"default_max_day must be None or >= 1, got {self.default_max_day!r}"
            )
        if self.max_support_days < 1:
            raise InvalidParametersError(
                f"max_support_days must be >= 1, got {self.max_support_days!r}"
            )


DEFAULT_CONFIG = HazardConfig()


class DistributionSpec(BaseModel):
    """Name plus either raw waiting-time weights or family parameters."""

    name: str = NONPARAMETRIC
    waiting_time: Optional[List[float]] = None
    params: Dict[str, float] = Field(default_factory=dict)
    max_day: Optional[int] = Field(None, gt=0)

    @field_validator("name")
    @classmethod
    def _normalise_name(cls, value: str) -> str:
        return value.strip().lower()

    @model_validator(mode="after")
    def _check_payload(self) -> "DistributionSpec":
        if self.name == NONPARAMETRIC:
            if not self.waiting_time:
                raise ValueError("nonparametric spec requires a non-empty waiting_time")
        elif not self.params:
            raise ValueError(f"'{self.name}' spec requires params")
        return self
