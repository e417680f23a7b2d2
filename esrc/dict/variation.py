import numpy as np

from ..errors import ConfigError


def intra_class_variation(X, y, classes, verbose=False):
    """
    Build the intra-class variation dictionary D_I of a training set.

    Column j of D_I is the deviation of training sample j from the
    centroid of its class, so D_I has exactly the shape (and column
    order) of X. A class with a single sample contributes a zero column.

    Parameters
    ----------

    X : ndarray (d, n)
      training samples, one per column

    y : ndarray (n,)
      training labels

    classes : sequence
      the enumerated (sorted) class labels, each with at least one
      member in y
    """
    X = np.asarray(X)
    y = np.asarray(y).ravel()
    D_I = np.zeros(X.shape, 'd')
    for k, cls in enumerate(classes):
        cols = np.flatnonzero(y == cls)
        if not len(cols):
            raise ConfigError('class %r has no training samples' % (cls,))
        centroid = X[:, cols].mean(axis=1)
        D_I[:, cols] = np.real(X[:, cols] - centroid[:, None])
        if verbose:
            print('# Generating IntraVariDictionary for class %d' % (k+1))
    return D_I
