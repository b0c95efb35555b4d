"""Bayesian model evaluation utilities."""

from bayeseval.bayesian.util import (
    deviance,
    expected_deviance,
    expected_deviance_from_settings,
    log_likelihood,
    monte_carlo_mean,
    sample,
    sample_with_prior,
)

__all__ = [
    "deviance",
    "expected_deviance",
    "expected_deviance_from_settings",
    "log_likelihood",
    "monte_carlo_mean",
    "sample",
    "sample_with_prior",
]
