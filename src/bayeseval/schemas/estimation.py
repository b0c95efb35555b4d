from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class MonteCarloSettings(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True, frozen=True)

    num_samples: int = Field(default=1000, ge=1)
    default_variance: float = Field(default=0.0, ge=0.0, allow_inf_nan=False)
    seed: Optional[int] = None
