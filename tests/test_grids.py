import numpy as np
import pytest

from rheosim.errors import InvalidDomainError
from rheosim.grids import lin_space, log_space


def test_log_space_endpoints_and_ratio():
    xs = log_space(1.0, 1000.0, 4)
    assert len(xs) == 4
    assert xs[0] == pytest.approx(1.0)
    assert xs[-1] == pytest.approx(1000.0)
    ratios = xs[1:] / xs[:-1]
    assert np.allclose(ratios, 10.0)


def test_log_space_is_increasing():
    xs = log_space(0.001, 1000.0, 100)
    assert np.all(np.diff(xs) > 0)


def test_lin_space_constant_step():
    xs = lin_space(0.0, 180.0, 100)
    assert xs[0] == 0.0
    assert xs[-1] == pytest.approx(180.0)
    assert np.allclose(np.diff(xs), 180.0 / 99)


def test_grid_domain_errors():
    with pytest.raises(InvalidDomainError):
        log_space(0.0, 10.0, 10)
    with pytest.raises(InvalidDomainError):
        log_space(1.0, -10.0, 10)
    with pytest.raises(InvalidDomainError):
        log_space(1.0, 10.0, 1)
    with pytest.raises(InvalidDomainError):
        lin_space(0.0, 1.0, 1)
    # also a plain ValueError for callers that do not know the package
    with pytest.raises(ValueError):
        lin_space(0.0, 1.0, 0)
