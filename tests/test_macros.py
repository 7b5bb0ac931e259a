"""Tests for the experiment macro and the command line."""
import json

import pytest

from lagtransform import macros
from lagtransform.__main__ import main
from lagtransform.io import read_tabulation_csv


@pytest.fixture(scope='module')
def experiment():
    return macros.run_experiment(n=3, max_t=1, t_step=0.25, points=100, t=1)


def test_experiment_tabulation(experiment):
    assert list(experiment.tabulation.keys()) == [0, 0.25, 0.5, 0.75]
    assert experiment.tabulation[0.5] == pytest.approx(experiment.engine.evaluate(0.5, 3))


def test_experiment_optimal_bound(experiment):
    assert experiment.optimal == experiment.engine.find_optimal_t(3)


def test_experiment_transforms_default_functions(experiment):
    assert set(experiment.transforms) == {'square', 'normal'}
    for result in experiment.transforms.values():
        assert list(result.coefficients.keys()) == [0, 1, 2]
        assert list(result.function.keys()) == list(experiment.tabulation.keys())
        assert list(result.reconstruction.keys()) == list(experiment.tabulation.keys())


def test_experiment_inverse_matches_reconstruction(experiment):
    result = experiment.transforms['square']
    engine = experiment.engine
    assert result.inverse == pytest.approx(engine.inverse_transform(result.coefficients, 1))
    assert result.reconstruction[0.5] == pytest.approx(engine.inverse_transform(result.coefficients, 0.5))
    assert result.function[0.5] == pytest.approx(0.25)


def test_experiment_custom_functions():
    exp = macros.run_experiment(n=2, max_t=0.5, points=50, functions={'one': lambda x: 1.})
    assert set(exp.transforms) == {'one'}
    assert all(v == 1 for v in exp.transforms['one'].function.values())


def test_main_prints_and_exports(tmp_path, capsys):
    out = tmp_path / 'results'
    assert main(['-n', '2', '--max-t', '1', '--points', '100', '-o', str(out)]) == 0

    printed = capsys.readouterr().out
    assert 'Optimal t:' in printed
    assert 'Transform of square' in printed

    headers, tab = read_tabulation_csv(out / 'laguerre.csv')
    assert headers == ('t', 'l')
    assert len(tab) == 10
    headers, tab = read_tabulation_csv(out / 'square_transform.csv')
    assert headers == ('n', 'l')
    assert list(tab.keys()) == [0, 1]
    assert read_tabulation_csv(out / 'normal_inverse.csv')[0] == ('t', 'h')
    assert read_tabulation_csv(out / 'normal_function.csv')[0] == ('t', 'f')
    with open(out / 'square.json') as fid:
        assert json.load(fid)['maxN'] == 2
