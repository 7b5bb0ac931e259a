"""Tests verifying the functionality of the global lagtransform config."""
import pytest

import numpy as np

from lagtransform.conf import config, Config

PRECISIONS = {
    32: np.float32,
    64: np.float64,
}


@pytest.fixture
def restore_precision():
    yield
    config.precision = 64


@pytest.mark.parametrize('precision', [32, 64])
def test_set_precision(precision, restore_precision):
    config.precision = precision
    assert config.precision == PRECISIONS[precision]


def test_rejects_bad_precision():
    with pytest.raises(ValueError):
        config.precision = 1


def test_defaults():
    c = Config()
    assert c.points == 10000
    assert c.epsilon == 1e-3
    assert c.max_t == 100
    assert c.t_points == 1000
    assert c.t_step == 0.1


@pytest.mark.parametrize('attr, value', [
    ('points', 0),
    ('points', -5),
    ('points', 2.5),
    ('epsilon', -1e-3),
    ('max_t', -1),
    ('t_points', -1),
    ('t_step', 0),
])
def test_rejects_bad_defaults(attr, value):
    c = Config()
    with pytest.raises(ValueError):
        setattr(c, attr, value)
