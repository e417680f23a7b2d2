import numpy as np
import pytest

from esrc import ConfigError
from esrc.dict.variation import intra_class_variation


def test_same_shape_and_alignment(two_class_sets):
    train, _ = two_class_sets
    classes = train.classes()
    D_I = intra_class_variation(train.X, train.y, classes)
    assert D_I.shape == train.X.shape
    for cls in classes:
        cols = train.columns_of(cls)
        centroid = train.X[:, cols].mean(axis=1)
        for j in cols:
            np.testing.assert_allclose(D_I[:, j], train.X[:, j] - centroid)


def test_class_variations_have_zero_mean(three_class_sets):
    train, _ = three_class_sets
    classes = train.classes()
    D_I = intra_class_variation(train.X, train.y, classes)
    for cls in classes:
        cols = train.columns_of(cls)
        np.testing.assert_allclose(D_I[:, cols].mean(axis=1), 0, atol=1e-12)


def test_interleaved_labels_keep_column_order(rng):
    X = rng.randn(4, 6)
    y = np.array([2, 1, 2, 1, 1, 2])
    D_I = intra_class_variation(X, y, np.unique(y))
    c2 = X[:, [0, 2, 5]].mean(axis=1)
    np.testing.assert_allclose(D_I[:, 2], X[:, 2] - c2)


def test_single_member_class_gives_zero_column(rng):
    X = rng.randn(3, 4)
    y = np.array([1, 2, 2, 3])
    D_I = intra_class_variation(X, y, np.unique(y))
    np.testing.assert_array_equal(D_I[:, 0], 0)
    np.testing.assert_array_equal(D_I[:, 3], 0)
    assert np.any(D_I[:, 1] != 0)


def test_complex_input_keeps_real_part():
    X = np.array([[1.0 + 2j, 3.0 - 1j]])
    D_I = intra_class_variation(X, [1, 1], [1])
    assert D_I.dtype == np.float64
    np.testing.assert_allclose(D_I, [[-1.0, 1.0]])


def test_empty_class_rejected(rng):
    X = rng.randn(3, 4)
    with pytest.raises(ConfigError):
        intra_class_variation(X, [1, 1, 2, 2], [1, 2, 3])


def test_verbose(capsys, two_class_sets):
    train, _ = two_class_sets
    intra_class_variation(train.X, train.y, train.classes(), verbose=True)
    out = capsys.readouterr().out.splitlines()
    assert out == ['# Generating IntraVariDictionary for class 1',
                   '# Generating IntraVariDictionary for class 2']
