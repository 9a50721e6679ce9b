import numpy as np
import pytest

from errors import InvalidArgumentError
from models.lotka_volterra import LotkaVolterra, lotka_volterra


def test_reference_coefficients():
    assert (lotka_volterra.a, lotka_volterra.b, lotka_volterra.d, lotka_volterra.g) == (0.1, 0.02, 0.01, 0.1)
    assert lotka_volterra.n_states == 2


def test_dynamics_matches_equations():
    a, b, d, g = 0.3, 0.05, 0.02, 0.4
    f = LotkaVolterra(a=a, b=b, d=d, g=g)
    x = np.array([12.0, 3.5])

    expected = np.array([
        a * x[0] - b * x[0] * x[1],
        d * x[0] * x[1] - g * x[1],
    ])
    np.testing.assert_allclose(f(0.0, x), expected, rtol=1e-15)


def test_independent_of_time_and_pure():
    x = np.array([40.0, 9.0])
    first = lotka_volterra(0.0, x)
    second = lotka_volterra(123.4, x)

    np.testing.assert_array_equal(first, second)
    np.testing.assert_array_equal(x, [40.0, 9.0])


def test_fixed_points():
    origin = np.zeros(2)
    center = lotka_volterra.equilibrium()

    np.testing.assert_allclose(center, [10.0, 5.0])
    np.testing.assert_allclose(lotka_volterra(0.0, origin), [0.0, 0.0], atol=1e-15)
    np.testing.assert_allclose(lotka_volterra(0.0, center), [0.0, 0.0], atol=1e-12)


def test_total_over_negative_inputs():
    dy = lotka_volterra(0.0, np.array([-5.0, -2.0]))
    assert np.all(np.isfinite(dy))


@pytest.mark.parametrize("y", [[1.0], [1.0, 2.0, 3.0]])
def test_rejects_wrong_length(y):
    with pytest.raises(InvalidArgumentError):
        lotka_volterra(0.0, np.array(y))


def test_with_overrides():
    f = lotka_volterra.with_overrides(a=0.2, g=0.05)

    assert (f.a, f.b, f.d, f.g) == (0.2, 0.02, 0.01, 0.05)
    # 原实例不变
    assert lotka_volterra.a == 0.1

    with pytest.raises(InvalidArgumentError):
        lotka_volterra.with_overrides(alpha=1.0)


@pytest.mark.parametrize("value", ["fast", None, [0.1]])
def test_with_overrides_rejects_non_numeric(value):
    with pytest.raises(InvalidArgumentError):
        lotka_volterra.with_overrides(a=value)
