"""Generally useful utilities for Bayesian model evaluation.

Deviance and expected deviance follow Gelman, Carlin, Stern and Rubin,
"Bayesian Data Analysis", 2nd ed. (2004), pp. 180-181, eqs. 6.6 and 6.9.
"""

from __future__ import annotations

import logging
from random import Random
from typing import Collection, Iterable, List, TypeVar

from bayeseval.distributions.binding import DefaultBayesianParameter, draw_conditioned
from bayeseval.distributions.gaussian import UnivariateGaussian, learn_gaussian
from bayeseval.distributions.protocols import (
    ComputableDistribution,
    ConditionalDistribution,
    ParameterBinding,
    SamplingDistribution,
)
from bayeseval.schemas.estimation import MonteCarloSettings
from bayeseval.stats.univariate import compute_mean_and_variance

logger = logging.getLogger(__name__)

ObservationT = TypeVar("ObservationT")
ParameterT = TypeVar("ParameterT")


def log_likelihood(
    distribution: ComputableDistribution[ObservationT],
    observations: Iterable[ObservationT],
) -> float:
    """Log likelihood of i.i.d. observations; 0.0 when there are none."""
    log_sum = 0.0
    for observation in observations:
        log_sum += distribution.log_evaluate(observation)
    return log_sum


def sample_with_prior(
    conditional: ConditionalDistribution[ObservationT],
    parameter_name: str,
    prior: SamplingDistribution[ParameterT],
    random: Random,
    num_samples: int,
) -> List[ObservationT]:
    parameter = DefaultBayesianParameter(conditional, parameter_name, prior)
    return sample(parameter, random, num_samples)


def sample(
    parameter: ParameterBinding[ParameterT, ObservationT],
    random: Random,
    num_samples: int,
) -> List[ObservationT]:
    """
    Draws ``num_samples`` parameters from the prior in one batch, then one
    observation from the conditional bound to each parameter, in draw order.
    """
    if num_samples < 0:
        raise ValueError("num_samples must be >= 0")
    parameters = parameter.parameter_prior.sample_many(random, num_samples)
    samples: List[ObservationT] = []
    for value in parameters:
        samples.append(draw_conditioned(parameter, value, random))
    logger.debug("sampled %d observations from parameterized model", len(samples))
    return samples


def deviance(
    conditional: ComputableDistribution[ObservationT],
    observations: Iterable[ObservationT],
) -> float:
    """
    -2 log p(observations | parameter). Proportional to the mean squared
    error when the model is normal with constant variance.
    """
    return -2.0 * log_likelihood(conditional, observations)


def expected_deviance(
    predictive: ParameterBinding[ParameterT, ObservationT],
    observations: Iterable[ObservationT],
    random: Random,
    num_samples: int,
    default_variance: float = 0.0,
) -> UnivariateGaussian:
    """
    Monte Carlo estimate of the expected deviance over parameters drawn from
    the prior (usually a posterior) of ``predictive``.

    The result is the maximum-likelihood Gaussian over the per-draw deviances;
    its variance is the unbiased sample variance of those draws, 0.0 for a
    single draw. In the limit of infinite data the model with the lowest
    expected deviance has the highest posterior probability.
    """
    if num_samples < 1:
        raise ValueError("num_samples must be >= 1")
    observations = list(observations)
    parameters = predictive.parameter_prior.sample_many(random, num_samples)
    deviances: List[float] = []
    for value in parameters:
        deviances.append(deviance(predictive.conditioned_on(value), observations))
    result = learn_gaussian(deviances, default_variance=default_variance)
    logger.debug(
        "expected deviance over %d draws: mean=%r variance=%r",
        len(deviances),
        result.mean,
        result.variance,
    )
    return result


def expected_deviance_from_settings(
    predictive: ParameterBinding[ParameterT, ObservationT],
    observations: Iterable[ObservationT],
    settings: MonteCarloSettings,
) -> UnivariateGaussian:
    return expected_deviance(
        predictive,
        observations,
        Random(settings.seed),
        settings.num_samples,
        default_variance=settings.default_variance,
    )


def monte_carlo_mean(samples: Collection[float]) -> UnivariateGaussian:
    """
    Distribution of the sample mean: the mean of ``samples`` with variance
    equal to the sample variance divided by the number of samples.
    """
    mean, variance = compute_mean_and_variance(samples)
    return UnivariateGaussian(mean=mean, variance=variance / len(samples))


__all__ = [
    "deviance",
    "expected_deviance",
    "expected_deviance_from_settings",
    "log_likelihood",
    "monte_carlo_mean",
    "sample",
    "sample_with_prior",
]
