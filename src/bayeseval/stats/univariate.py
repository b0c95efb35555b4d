from __future__ import annotations

import math
from typing import Iterable, Tuple


class EmptySampleSetError(ValueError):
    pass


def compute_mean_and_variance(values: Iterable[float]) -> Tuple[float, float]:
    """
    Single-pass (Welford) mean and unbiased sample variance.
    A single value has variance 0.0; no values raises EmptySampleSetError,
    and non-finite inputs or overflow raise ValueError.
    """
    count = 0
    mean = 0.0
    sum_squared_deltas = 0.0
    for value in values:
        count += 1
        delta = value - mean
        mean += delta / count
        sum_squared_deltas += delta * (value - mean)
    if count == 0:
        raise EmptySampleSetError("empty_sample_set")
    variance = sum_squared_deltas / (count - 1) if count > 1 else 0.0
    if not (math.isfinite(mean) and math.isfinite(variance)):
        raise ValueError("moments_not_finite")
    return mean, variance
