from __future__ import annotations

import copy
import dataclasses
from random import Random
from typing import Any, Generic, TypeVar

from bayeseval.distributions.protocols import (
    ConditionalDistribution,
    ParameterBinding,
    SamplingDistribution,
)

ObservationT = TypeVar("ObservationT")
ParameterT = TypeVar("ParameterT")


def _rebind(conditional: Any, name: str, value: Any) -> Any:
    if dataclasses.is_dataclass(conditional) and not isinstance(conditional, type):
        return dataclasses.replace(conditional, **{name: value})
    bound = copy.copy(conditional)
    setattr(bound, name, value)
    return bound


class DefaultBayesianParameter(Generic[ParameterT, ObservationT]):
    """Binds the ``parameter_name`` field of a conditional distribution to a prior.

    ``conditioned_on`` returns a fresh copy and never touches the template, so
    one instance can be shared by concurrent callers. ``set_value`` keeps the
    stateful bind-then-read protocol for callers that want it; it replaces the
    held conditional and is not safe to share across threads.
    """

    def __init__(
        self,
        conditional: ConditionalDistribution[ObservationT],
        parameter_name: str,
        parameter_prior: SamplingDistribution[ParameterT],
    ):
        if not parameter_name:
            raise ValueError("parameter_name must be non-empty")
        if not hasattr(conditional, parameter_name):
            raise AttributeError(f"unknown_parameter:{parameter_name}")
        self._conditional = conditional
        self.parameter_name = parameter_name
        self._parameter_prior = parameter_prior

    @property
    def parameter_prior(self) -> SamplingDistribution[ParameterT]:
        return self._parameter_prior

    @property
    def conditional_distribution(self) -> ConditionalDistribution[ObservationT]:
        return self._conditional

    @property
    def value(self) -> ParameterT:
        return getattr(self._conditional, self.parameter_name)

    def set_value(self, value: ParameterT) -> None:
        self._conditional = _rebind(self._conditional, self.parameter_name, value)

    def conditioned_on(self, value: ParameterT) -> ConditionalDistribution[ObservationT]:
        return _rebind(self._conditional, self.parameter_name, value)


def draw_conditioned(
    parameter: ParameterBinding[ParameterT, ObservationT],
    value: ParameterT,
    random: Random,
) -> ObservationT:
    return parameter.conditioned_on(value).sample(random)


__all__ = ["DefaultBayesianParameter", "draw_conditioned"]
