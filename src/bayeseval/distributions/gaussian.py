from __future__ import annotations

import math
from dataclasses import dataclass
from random import Random
from typing import Iterable, List

from bayeseval.stats.univariate import compute_mean_and_variance

LOG_TWO_PI = math.log(2.0 * math.pi)


@dataclass(frozen=True)
class UnivariateGaussian:
    mean: float = 0.0
    variance: float = 1.0

    def __post_init__(self) -> None:
        if not math.isfinite(self.mean):
            raise ValueError("mean must be finite")
        if not (math.isfinite(self.variance) and self.variance >= 0.0):
            raise ValueError("variance must be finite and >= 0")

    @property
    def standard_deviation(self) -> float:
        return math.sqrt(self.variance)

    def log_evaluate(self, observation: float) -> float:
        delta = observation - self.mean
        if self.variance == 0.0:
            # point mass
            return math.inf if delta == 0.0 else -math.inf
        return -0.5 * (delta * delta / self.variance + LOG_TWO_PI + math.log(self.variance))

    def evaluate(self, observation: float) -> float:
        return math.exp(self.log_evaluate(observation))

    def sample(self, random: Random) -> float:
        if self.variance == 0.0:
            return self.mean
        return random.gauss(self.mean, self.standard_deviation)

    def sample_many(self, random: Random, num_samples: int) -> List[float]:
        if num_samples < 0:
            raise ValueError("num_samples must be >= 0")
        return [self.sample(random) for _ in range(num_samples)]

    def to_dict(self) -> dict[str, float]:
        return {"mean": self.mean, "variance": self.variance}

    @classmethod
    def from_dict(cls, payload: dict) -> "UnivariateGaussian":
        if "mean" not in payload or "variance" not in payload:
            raise ValueError("missing_fields")
        return cls(mean=float(payload["mean"]), variance=float(payload["variance"]))


def learn_gaussian(values: Iterable[float], default_variance: float = 0.0) -> UnivariateGaussian:
    """
    Maximum-likelihood Gaussian fit: sample mean, unbiased sample variance
    plus ``default_variance``. Every value must be finite.
    """
    if not math.isfinite(default_variance) or default_variance < 0.0:
        raise ValueError("default_variance must be finite and >= 0")
    values = list(values)
    if not all(math.isfinite(value) for value in values):
        raise ValueError("values must be finite")
    mean, variance = compute_mean_and_variance(values)
    return UnivariateGaussian(mean=mean, variance=variance + default_variance)
