import numpy as np

from .errors import ConfigError

norm_modes = ('std', 'zscore', 'class_std')


def _safe_scale(X, scales):
    # zero columns (e.g. the variation of a single-sample class) stay zero
    scales = np.where(scales > 0, scales, 1.0)
    return X / scales


def data_normalization(X, y=None, mode='std'):
    """
    Normalize the columns of X.

    Parameters
    ----------

    X : ndarray (d, n)
      one sample per column

    y : ndarray (n,), optional
      column labels, only used by the 'class_std' mode

    mode : str
      'std' scales each column to unit l2 norm,
      'zscore' centers each column and scales it to unit variance,
      'class_std' divides each column by the mean l2 norm of the
      columns of its class

    Returns
    -------

    Xn : ndarray (d, n)
      a new normalized matrix (X is not modified)
    """
    X = np.asarray(X, dtype='d')
    if mode == 'std':
        return _safe_scale(X, np.sqrt(np.sum(X**2, axis=0)))
    if mode == 'zscore':
        Xc = X - X.mean(axis=0)
        return _safe_scale(Xc, Xc.std(axis=0))
    if mode == 'class_std':
        if y is None:
            raise ConfigError("normalization mode 'class_std' needs labels")
        y = np.asarray(y).ravel()
        if len(y) != X.shape[1]:
            raise ConfigError('labels do not match the columns of X')
        norms = np.sqrt(np.sum(X**2, axis=0))
        scales = np.empty_like(norms)
        for cls in np.unique(y):
            cols = y == cls
            scales[cols] = norms[cols].mean()
        return _safe_scale(X, scales)
    raise ConfigError(
        'normalization mode %r not recognized (use one of %s)' %
        (mode, ', '.join(norm_modes))
        )
