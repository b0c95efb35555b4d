import math
from random import Random

import pytest

from bayeseval.distributions.gaussian import UnivariateGaussian, learn_gaussian


def test_standard_normal_log_density() -> None:
    g = UnivariateGaussian()
    assert g.log_evaluate(0.0) == pytest.approx(-0.5 * math.log(2.0 * math.pi))
    assert g.evaluate(1.0) == pytest.approx(math.exp(-0.5) / math.sqrt(2.0 * math.pi))


def test_log_density_scales_with_variance() -> None:
    g = UnivariateGaussian(mean=2.0, variance=4.0)
    expected = -0.5 * (1.0 / 4.0 + math.log(2.0 * math.pi * 4.0))
    assert g.log_evaluate(3.0) == pytest.approx(expected)
    assert g.standard_deviation == pytest.approx(2.0)


def test_point_mass() -> None:
    g = UnivariateGaussian(mean=1.0, variance=0.0)
    assert g.sample(Random(0)) == 1.0
    assert g.log_evaluate(1.0) == math.inf
    assert g.log_evaluate(1.5) == -math.inf


@pytest.mark.parametrize(
    ("mean", "variance"),
    [
        (float("nan"), 1.0),
        (math.inf, 1.0),
        (-math.inf, 1.0),
        (0.0, -1.0),
        (0.0, float("nan")),
        (0.0, math.inf),
    ],
)
def test_invalid_parameters_raise(mean: float, variance: float) -> None:
    with pytest.raises(ValueError):
        UnivariateGaussian(mean=mean, variance=variance)


def test_sample_many_is_deterministic_for_seed() -> None:
    g = UnivariateGaussian(mean=5.0, variance=2.0)
    first = g.sample_many(Random(42), 10)
    second = g.sample_many(Random(42), 10)
    assert len(first) == 10
    assert first == second


def test_sample_many_rejects_negative_count() -> None:
    with pytest.raises(ValueError):
        UnivariateGaussian().sample_many(Random(0), -1)


def test_serialization_roundtrip() -> None:
    g = UnivariateGaussian(mean=-1.5, variance=0.25)
    assert UnivariateGaussian.from_dict(g.to_dict()) == g
    with pytest.raises(ValueError):
        UnivariateGaussian.from_dict({"mean": 1.0})


def test_learn_gaussian_adds_default_variance() -> None:
    fitted = learn_gaussian([1.0, 2.0, 3.0, 4.0, 5.0], default_variance=0.5)
    assert fitted.mean == pytest.approx(3.0)
    assert fitted.variance == pytest.approx(3.0)


def test_learn_gaussian_rejects_bad_inputs() -> None:
    with pytest.raises(ValueError):
        learn_gaussian([1.0, 2.0], default_variance=-1.0)
    with pytest.raises(ValueError):
        learn_gaussian([1.0, math.inf])
    with pytest.raises(ValueError):
        learn_gaussian([math.inf])
