import numbers

import numpy as np

from .errors import ConfigError


class ESRCOptions(object):
    """
    Per-run options of the ESRC classifier.

    Parameters
    ----------

    verbose : bool
      print one diagnostic line per test sample (default False)

    eigenface : bool
      project all matrices onto the training set eigenfaces (default True)

    eigenface_dim : int or None
      number of eigenfaces. None means "train_num", reduced to the
      largest dimension the training set supports
    """

    _keys = ('verbose', 'eigenface', 'eigenface_dim')

    def __init__(self, verbose=False, eigenface=True, eigenface_dim=None):
        for name, flag in (('verbose', verbose), ('eigenface', eigenface)):
            if not isinstance(flag, (bool, np.bool_)):
                raise ConfigError('option %s must be a bool' % name)
        if eigenface_dim is not None:
            if isinstance(eigenface_dim, bool) or \
                   not isinstance(eigenface_dim, numbers.Integral):
                raise ConfigError('option eigenface_dim must be an int')
            if eigenface_dim < 1:
                raise ConfigError('option eigenface_dim must be positive')
            eigenface_dim = int(eigenface_dim)
        self.verbose = bool(verbose)
        self.eigenface = bool(eigenface)
        self.eigenface_dim = eigenface_dim

    @classmethod
    def from_value(klass, options):
        "Accept an ESRCOptions, a dict of recognized keys, or None"
        if options is None:
            return klass()
        if isinstance(options, klass):
            return options
        if not isinstance(options, dict):
            raise ConfigError(
                'options must be a dict or ESRCOptions, not %s' %
                type(options).__name__
                )
        unknown = set(options).difference(klass._keys)
        if unknown:
            raise ConfigError(
                'unrecognized options: %s' % ', '.join(sorted(unknown))
                )
        return klass(**options)

    def resolve_eigenface_dim(self, train_num, max_rank):
        """
        Return the eigenface dimension to use for a training set of
        train_num samples supporting at most max_rank directions.
        """
        if max_rank < 1:
            raise ConfigError(
                'eigenface projection needs at least two training samples'
                )
        if self.eigenface_dim is None:
            return min(train_num, max_rank)
        if self.eigenface_dim > max_rank:
            raise ConfigError(
                'eigenface_dim=%d exceeds the supportable rank %d' %
                (self.eigenface_dim, max_rank)
                )
        return self.eigenface_dim

    def __repr__(self):
        return 'ESRCOptions(verbose=%r, eigenface=%r, eigenface_dim=%r)' % (
            self.verbose, self.eigenface, self.eigenface_dim
            )
