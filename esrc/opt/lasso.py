"""
Sparse coding solvers for the lasso problem

  min_a 0.5*||y - Da||^2 + lam*||a||_1

Every solver is called as solver(y, D, lam) and returns a dense
coefficient vector of length D.shape[1]. Solvers keep no state between
calls, so one instance may be shared by concurrent callers.
"""
import numpy as np
from sklearn.linear_model import Lasso, LassoLars

from ..errors import ConfigError, SolverError
from ..dict import block_factorizing as bf
from . import salsa

def lasso_objective(y, D, a, lam):
    r = y - np.dot(D, a)
    return 0.5*np.dot(r, r) + lam*np.abs(a).sum()

class LassoSolver(object):
    name = None

    def __call__(self, y, D, lam):
        return self.solve(y, D, lam)

    def solve(self, y, D, lam):
        y = np.asarray(y, dtype='d').ravel()
        D = np.asarray(D, dtype='d')
        if D.ndim != 2 or D.shape[0] != len(y):
            raise SolverError(
                'dictionary of shape %s does not match a target of length %d'
                % (D.shape, len(y))
                )
        if not (np.all(np.isfinite(y)) and np.all(np.isfinite(D))):
            raise SolverError('non-finite values in the lasso inputs')
        if isinstance(lam, bool) or not np.isfinite(lam) or lam < 0:
            raise ConfigError(
                'lambda must be finite and non-negative, got %r' % (lam,)
                )
        return self._solve(y, D, float(lam))

    def _solve(self, y, D, lam):
        raise NotImplementedError

    def __repr__(self):
        return '%s()' % self.__class__.__name__

class LarsLasso(LassoSolver):
    """
    Least angle regression (scikit-learn LassoLars). The lasso path is
    followed exactly down to lam, so there is no iterative tolerance:
    the solution is only rejected if the path was cut short by max_iter.
    The sklearn objective is scaled by the number of rows d, so it is
    run with alpha = lam / d.

    lam == 0 is the unregularized problem, solved by minimum-norm
    least squares.
    """
    name = 'lars'

    def __init__(self, max_iter=None):
        from esrc import lars_max_iter
        self.max_iter = lars_max_iter if max_iter is None else max_iter

    def _solve(self, y, D, lam):
        if lam == 0:
            return np.linalg.lstsq(D, y, rcond=None)[0]
        model = LassoLars(
            alpha=lam / D.shape[0], fit_intercept=False,
            max_iter=self.max_iter
            )
        model.fit(D, y)
        if model.n_iter_ >= self.max_iter:
            raise SolverError(
                'LARS path stopped after %d steps before reaching '
                'lambda=%1.3e' % (self.max_iter, lam)
                )
        return np.array(model.coef_, dtype='d')

    def __repr__(self):
        return 'LarsLasso(max_iter=%r)' % (self.max_iter,)

class CoordinateDescentLasso(LassoSolver):
    """
    Coordinate descent (scikit-learn). The sklearn objective is scaled
    by the number of rows d, so it is run with alpha = lam / d.

    Running out of iterations is only an error if the duality gap,
    relative to the objective of the zero code, is still above gap_rtol.
    Small lam makes the last digits of the gap slow to close, while the
    code itself is long settled.

    lam == 0 is the unregularized problem, solved by minimum-norm
    least squares.
    """
    name = 'cd'

    def __init__(self, tol=None, max_iter=None, gap_rtol=None):
        from esrc import lasso_tol, lasso_max_iter, lasso_gap_rtol
        self.tol = lasso_tol if tol is None else tol
        self.max_iter = lasso_max_iter if max_iter is None else max_iter
        self.gap_rtol = lasso_gap_rtol if gap_rtol is None else gap_rtol

    def _solve(self, y, D, lam):
        if lam == 0:
            return np.linalg.lstsq(D, y, rcond=None)[0]
        d = D.shape[0]
        model = Lasso(
            alpha=lam / d, fit_intercept=False,
            tol=self.tol, max_iter=self.max_iter
            )
        model.fit(D, y)
        if model.n_iter_ >= self.max_iter:
            # dual_gap_ is on the 1/d scale of the sklearn objective
            j0 = max(0.5 * np.dot(y, y) / d, np.finfo('d').tiny)
            rel_gap = model.dual_gap_ / j0
            if not rel_gap <= self.gap_rtol:
                raise SolverError(
                    'coordinate descent did not converge in %d iterations '
                    '(relative duality gap %1.3e)' % (self.max_iter, rel_gap)
                    )
        return np.array(model.coef_, dtype='d')

    def __repr__(self):
        return 'CoordinateDescentLasso(tol=%r, max_iter=%r, gap_rtol=%r)' % (
            self.tol, self.max_iter, self.gap_rtol
            )

class SalsaLasso(LassoSolver):
    """
    SALSA (an ADMM variant) with an l1 proximity map. The returned
    coefficients are the shrunk split variable, so inactive atoms are
    exact zeros.
    """
    name = 'salsa'

    def __init__(self, mu=None, n_iter=None, rtol=None):
        from esrc import salsa_mu, salsa_n_iter, salsa_rtol
        self.mu = float(salsa_mu if mu is None else mu)
        self.n_iter = salsa_n_iter if n_iter is None else n_iter
        self.rtol = salsa_rtol if rtol is None else rtol

    def _solve(self, y, D, lam):
        B, Bt = bf.block_operators(D)
        BtB_solve = bf.diag_loaded_solve(D, mu=self.mu)
        phi = salsa.l1_penalty(lam)
        phi_map = salsa.l1_proximity_map(lam, self.mu)
        a, _ = salsa.qreg_salsa(
            B, Bt, BtB_solve, y, phi, phi_map, self.mu,
            n_iter=self.n_iter, rtol=self.rtol
            )
        return a

    def __repr__(self):
        return 'SalsaLasso(mu=%r, n_iter=%r, rtol=%r)' % (
            self.mu, self.n_iter, self.rtol
            )

solvers = dict(
    (klass.name, klass)
    for klass in (LarsLasso, CoordinateDescentLasso, SalsaLasso)
    )

def get_solver(solver=None):
    """
    Resolve a lasso solver: None picks the configured default
    (esrc.lasso_solver), a string is looked up by name, and any
    callable solver(y, D, lam) is used as given.
    """
    if solver is None:
        from esrc import lasso_solver
        solver = lasso_solver
    if isinstance(solver, str):
        try:
            return solvers[solver]()
        except KeyError:
            raise ConfigError(
                'lasso solver %r not recognized (use one of %s)' %
                (solver, ', '.join(sorted(solvers)))
                )
    if not callable(solver):
        raise ConfigError('lasso solver must be a name or a callable')
    return solver
