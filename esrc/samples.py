import numpy as np

from .errors import ConfigError


class SampleSet(object):
    """
    A matrix of samples (one per column) and the label of each column.

    This is the container for both the training set and the testing
    set. The label vector may be given as a row vector, it is
    flattened.
    """

    def __init__(self, X, y, name='samples'):
        X = np.asarray(X)
        if X.ndim != 2:
            raise ConfigError('%s.X must be a 2D matrix' % name)
        if not np.issubdtype(X.dtype, np.number):
            raise ConfigError('%s.X must be numeric' % name)
        if not np.all(np.isfinite(X)):
            raise ConfigError('%s.X contains non-finite values' % name)
        y = np.asarray(y).ravel()
        if len(y) != X.shape[1]:
            raise ConfigError(
                '%s has %d columns but %d labels' % (name, X.shape[1], len(y))
                )
        if not np.iscomplexobj(X):
            X = X.astype('d')
        self.X = X
        self.y = y
        self.name = name

    @property
    def dim(self):
        return self.X.shape[0]

    def __len__(self):
        return self.X.shape[1]

    def classes(self):
        "The sorted class labels of this set"
        return np.unique(self.y)

    def columns_of(self, cls):
        return np.flatnonzero(self.y == cls)

    def __repr__(self):
        d, n = self.X.shape
        return '%s: %d samples of dimension %d, %d classes' % (
            self.name, n, d, len(self.classes())
            )
