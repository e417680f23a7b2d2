import numpy as np

from ..errors import ConfigError


def supportable_rank(X):
    "Largest number of principal directions the samples in X can support"
    d, n = X.shape
    return min(d, n - 1)


class EigenFaces(object):
    """
    Find the first m 'eigenfaces' of a training set (the principal
    directions of the centered samples). Any matrix of samples can
    then be projected onto these directions as new m-dimensional
    features.
    """

    def __init__(self, X, m):
        X = np.real(np.asarray(X)).astype('d')
        d, n = X.shape
        max_m = supportable_rank(X)
        if m < 1 or m > max_m:
            raise ConfigError(
                'cannot find %d eigenfaces from %d samples of dimension %d '
                '(at most %d)' % (m, n, d, max_m)
                )
        self.mean_face = X.mean(axis=1)
        [U, s, _] = np.linalg.svd(X - self.mean_face[:, None],
                                  full_matrices=0)
        basis = U[:, :m]
        # fix the sign ambiguity: largest entry of each eigenface positive
        peaks = basis[np.argmax(np.abs(basis), axis=0), np.arange(m)]
        basis = basis * np.where(peaks < 0, -1.0, 1.0)
        self.basis = basis
        self.eigenvalues = s[:m]**2 / (n - 1)

    @property
    def m(self):
        return self.basis.shape[1]

    def project(self, M):
        "Coefficients of the columns of M on the eigenfaces (uncentered)"
        return np.dot(self.basis.T, M)

    def __repr__(self):
        d, m = self.basis.shape
        return '%d eigenfaces of dimension %d' % (m, d)
