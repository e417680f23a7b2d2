"""
Shared fixtures: small synthetic face-like data sets with well
separated classes.
"""
import numpy as np
import pytest

import esrc
from esrc import SampleSet


def make_clusters(rng, means, per_class, spread=0.1, labels=None):
    """
    Draw per_class samples around each mean (columns of the result).
    """
    means = np.asarray(means, dtype='d')
    if labels is None:
        labels = np.arange(1, len(means) + 1)
    X, y = [], []
    for mean, label in zip(means, labels):
        X.append(mean[:, None] + spread * rng.randn(len(mean), per_class))
        y.extend([label] * per_class)
    return np.hstack(X), np.array(y)


@pytest.fixture
def rng():
    return np.random.RandomState(42)


@pytest.fixture
def two_class_means():
    # 5 dimensions, means more than 10 units apart and in different
    # directions
    return np.array([
        [10.0, 0.0, 0.0, 1.0, 0.0],
        [0.0, 10.0, 0.0, 0.0, 1.0],
        ])


@pytest.fixture
def three_class_means():
    return np.array([
        [10.0, 0.0, 0.0, 1.0, 0.0, 2.0],
        [0.0, 10.0, 0.0, 0.0, 1.0, 0.0],
        [0.0, 0.0, 10.0, 2.0, 0.0, 1.0],
        ])


@pytest.fixture
def two_class_sets(rng, two_class_means):
    X, y = make_clusters(rng, two_class_means, 3, spread=0.3)
    Xt, yt = make_clusters(rng, two_class_means, 1, spread=0.3)
    return SampleSet(X, y, 'TrainSet'), SampleSet(Xt, yt, 'TestSet')


@pytest.fixture
def three_class_sets(rng, three_class_means):
    X, y = make_clusters(rng, three_class_means, 4, spread=0.5)
    Xt, yt = make_clusters(rng, three_class_means, 3, spread=0.5)
    return SampleSet(X, y, 'TrainSet'), SampleSet(Xt, yt, 'TestSet')


@pytest.fixture
def random_problem(rng):
    "A small wide lasso problem with unit-norm atoms"
    D = rng.randn(10, 20)
    D /= np.sqrt(np.sum(D**2, axis=0))
    y = rng.randn(10)
    return y, D


@pytest.fixture
def restore_config():
    yield
    esrc.initialize()
