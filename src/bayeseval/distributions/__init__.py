"""Distribution capabilities and the closed-form Gaussian."""

from bayeseval.distributions.binding import DefaultBayesianParameter, draw_conditioned
from bayeseval.distributions.gaussian import UnivariateGaussian, learn_gaussian
from bayeseval.distributions.protocols import (
    ComputableDistribution,
    ConditionalDistribution,
    ParameterBinding,
    SamplingDistribution,
)

__all__ = [
    "ComputableDistribution",
    "ConditionalDistribution",
    "DefaultBayesianParameter",
    "ParameterBinding",
    "SamplingDistribution",
    "UnivariateGaussian",
    "draw_conditioned",
    "learn_gaussian",
]
