"""
Extended sparse representation classification (ESRC)

References:
      W. Deng, J. Hu, and J. Guo,
      "Extended SRC: Undersampled face recognition via intraclass
      variant dictionary," IEEE Transactions on Pattern Analysis and
      Machine Intelligence, vol.34, no.9, pp.1864-1870, 2012.
"""
import numbers

import numpy as np
from joblib import Parallel, delayed

from ..errors import ConfigError
from ..options import ESRCOptions
from ..samples import SampleSet
from ..normalize import data_normalization
from ..dict.variation import intra_class_variation
from ..dict.eigenfaces import EigenFaces, supportable_rank
from ..dict.classdict import CombinedDictionary
from ..opt.lasso import get_solver

def _as_sample_set(s, name):
    if isinstance(s, SampleSet):
        return s
    if isinstance(s, dict):
        return SampleSet(s['X'], s['y'], name=name)
    return SampleSet(s.X, s.y, name=name)

def _check_count(value, expected, name):
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ConfigError('%s must be an int' % name)
    if value != expected:
        raise ConfigError('%s=%d but found %d' % (name, value, expected))

def build_frame(train, test, class_num, options):
    """
    Build the combined dictionary [X D_I] from the training set, and
    the matching (projected and normalized) test samples.

    Returns (frame, test_X)
    """
    from esrc import norm_mode
    classes = train.classes()
    _check_count(class_num, len(classes), 'class_num')

    D_I = intra_class_variation(train.X, train.y, classes,
                                verbose=options.verbose)
    X_trn = np.real(train.X)
    X_tst = np.real(test.X)
    if options.eigenface:
        m = options.resolve_eigenface_dim(len(train), supportable_rank(X_trn))
        eig = EigenFaces(X_trn, m)
        X_trn = eig.project(X_trn)
        X_tst = eig.project(X_tst)
        D_I = eig.project(D_I)

    X_trn = data_normalization(X_trn, train.y, norm_mode)
    X_tst = data_normalization(X_tst, test.y, norm_mode)
    D_I = data_normalization(D_I, train.y, norm_mode)
    return CombinedDictionary(X_trn, D_I, train.y, classes), X_tst

def classify_sample(frame, y, lam, solver):
    """
    Sparse code one test sample on the combined frame and return
    (label, residuals)
    """
    alpha_beta = solver(y, frame.frame, lam)
    return frame.classify(alpha_beta, y)

def esrc_predict(
        train, test, train_num, test_num, class_num, lam,
        options=None, solver=None
        ):
    """
    Classify every test sample with ESRC.

    Parameters
    ----------

    train, test : SampleSet (or any object/dict with X and y)
      samples are columns of X (d x n and d x m)

    train_num, test_num, class_num : int
      number of training samples, testing samples and classes. These
      must agree with the sets.

    lam : float
      lasso regularization weight (>= 0)

    options : ESRCOptions, dict or None
      recognized keys are verbose, eigenface and eigenface_dim

    solver : str, callable or None
      lasso solver (see esrc.opt.lasso.get_solver)

    Returns
    -------

    identity : ndarray (m,)
      the predicted label of each test sample

    Notes
    -----

    The test samples are classified in parallel with
    esrc.n_jobs threads. A SolverError on any sample aborts the run.
    """
    from esrc import n_jobs
    options = ESRCOptions.from_value(options)
    train = _as_sample_set(train, 'TrainSet')
    test = _as_sample_set(test, 'TestSet')
    _check_count(train_num, len(train), 'train_num')
    _check_count(test_num, len(test), 'test_num')
    if not (len(train) and len(test)):
        raise ConfigError('both the training and testing sets must be '
                          'non-empty')
    if train.dim != test.dim:
        raise ConfigError(
            'training samples have dimension %d, testing samples %d' %
            (train.dim, test.dim)
            )
    if isinstance(lam, bool) or not isinstance(lam, numbers.Real) or \
           not np.isfinite(lam) or lam < 0:
        raise ConfigError(
            'lambda must be finite and non-negative, got %r' % (lam,)
            )
    solver = get_solver(solver)

    frame, X_tst = build_frame(train, test, class_num, options)

    results = Parallel(n_jobs=n_jobs, backend='threading')(
        delayed(classify_sample)(frame, X_tst[:, i], lam, solver)
        for i in range(test_num)
        )
    identity = np.array([label for label, _ in results])

    if options.verbose:
        for i, label in enumerate(identity):
            correct = label == test.y[i]
            print('# ESRC: test:%03d, predict class: %s --> '
                  'ground truth :%s (%d)' % (i+1, label, test.y[i], correct))
    return identity

def esrc(
        train, test, train_num, test_num, class_num, lam,
        options=None, solver=None
        ):
    """
    Classify the test set with ESRC and return the accuracy in [0, 1].

    See esrc_predict for the parameters.
    """
    identity = esrc_predict(
        train, test, train_num, test_num, class_num, lam,
        options=options, solver=solver
        )
    test_y = _as_sample_set(test, 'TestSet').y
    correct_num = np.sum(identity == test_y)
    return float(correct_num) / test_num
