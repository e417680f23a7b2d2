import numpy as np

from ..errors import SolverError

def basic_CG(A, b, x0=None, rtol=1e-5, maxiter=200):
    """Solve Ax=b with Conjugate Gradient method, terminate iterations
    if the ratio ||Ax-b||/||b|| < rtol (or if iterations exceed maxiter)

    A must be symmetric positive definite, given as a dense ndarray or
    as anything supporting matvec (e.g. a scipy LinearOperator).

    Returns the solution and the number of iterations taken.
    """
    prod = (lambda v: np.dot(A, v)) if isinstance(A, np.ndarray) \
           else A.matvec
    if x0 is None:
        x = np.zeros_like(b)
        r = b.copy()
    else:
        x = x0.copy()
        r = b - prod(x0)
    nref = np.dot(b, b)
    if nref == 0:
        return np.zeros_like(b), 0
    p = r.copy()
    lrsq = np.dot(r, r)
    rtol_sq = rtol**2
    k = 0
    while k < maxiter and lrsq/nref >= rtol_sq:
        q = prod(p)
        pq = np.dot(p, q)
        if not np.isfinite(pq) or pq <= 0:
            raise SolverError('CG step on a non positive-definite system')
        alpha = lrsq/pq
        x += alpha * p
        r -= alpha * q
        lrsq_n = np.dot(r, r)
        p = r + (lrsq_n/lrsq) * p
        lrsq = lrsq_n
        k += 1
    return x, k
