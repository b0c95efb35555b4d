"""Capability protocols consumed by the Bayesian evaluation utilities.

Concrete distributions do not inherit from these; any object with the right
methods qualifies.
"""

from __future__ import annotations

from random import Random
from typing import List, Protocol, TypeVar

ObservationT = TypeVar("ObservationT")
ParameterT = TypeVar("ParameterT")
T_co = TypeVar("T_co", covariant=True)
T_contra = TypeVar("T_contra", contravariant=True)


class ComputableDistribution(Protocol[T_contra]):
    def log_evaluate(self, observation: T_contra) -> float:
        """Log of the pdf (or pmf) at ``observation``."""
        ...


class SamplingDistribution(Protocol[T_co]):
    def sample(self, random: Random) -> T_co:
        ...

    def sample_many(self, random: Random, num_samples: int) -> List[T_co]:
        ...


class ParameterBinding(Protocol[ParameterT, ObservationT]):
    """Links a prior over a parameter to a conditional that depends on it."""

    @property
    def parameter_prior(self) -> SamplingDistribution[ParameterT]:
        ...

    def conditioned_on(self, value: ParameterT) -> "ConditionalDistribution[ObservationT]":
        """Conditional distribution bound to ``value``; must not mutate shared state."""
        ...


class ConditionalDistribution(
    ComputableDistribution[ObservationT],
    SamplingDistribution[ObservationT],
    Protocol[ObservationT],
):
    pass


__all__ = [
    "ComputableDistribution",
    "ConditionalDistribution",
    "ParameterBinding",
    "SamplingDistribution",
]
