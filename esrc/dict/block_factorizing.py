import numpy as np
from scipy.sparse.linalg import LinearOperator

from ..opt.cg import basic_CG

# The linear operators in this module deal with the augmented frame
# B = [A A_e], where A holds the training samples and A_e is a second
# dictionary of the same height (the intra-class variations). A_e may
# be None, in which case B = A.
#
# 1) Bw from R^{n+p} --> R^{m}
# 2) (Bt)y from R^{m} --> R^{n+p}
# 3) (mu*I + BtB)^-1 w from R^{n+p} --> R^{n+p}

def Bw(A, A_e=None):
    m, n = A.shape
    # works for matrix-matrix and matrix-vector
    def matvec(w):
        # w in R^{n+p} [x R^{q}] : ie, column(s) are R^{n+p}
        if A_e is None:
            return np.dot(A, w)
        return np.dot(A, w[:n]) + np.dot(A_e, w[n:])
    return matvec

def Bty(A, A_e=None):
    # works for matrix-matrix and matrix-vector
    def matvec(y):
        # y in R^{m} [x R^{q}] : ie, column(s) are R^{m}
        Aty = np.dot(A.T, y)
        if A_e is None:
            return Aty
        return np.concatenate([Aty, np.dot(A_e.T, y)], axis=0)
    return matvec

def block_operators(A, A_e=None):
    """
    Construct the LinearOperators B and Bt for B = [A A_e]
    """
    m, n = A.shape
    p = 0 if A_e is None else A_e.shape[1]
    if A_e is not None and A_e.shape[0] != m:
        raise ValueError('A and A_e must have the same number of rows')
    fwd = Bw(A, A_e)
    adj = Bty(A, A_e)
    B = LinearOperator(
        (m, n+p), matvec=fwd, rmatvec=adj, matmat=fwd, dtype='d'
        )
    Bt = LinearOperator(
        (n+p, m), matvec=adj, rmatvec=fwd, matmat=adj, dtype='d'
        )
    return B, Bt

def diag_loaded_solve(A, A_e=None, mu=1, **cg_kws):
    """
    Return a callable that solves (mu*I + BtB)x = w for x, B = [A A_e].

    If B is wide (m < n+p), the inverse is reduced with
    (mu*I + BtB)^-1 = (I - Bt*[(mu*I + BBt)^-1]*B) / mu
    so that only an m x m system is inverted, where
    BBt = AAt + (A_e)(A_e)t. If the size of the inverted system is
    beyond max_inverse_size, a few conjugate gradient iterations
    (warm started from the previous call) are used instead.

    Each returned solver carries its own warm start state.
    """
    from esrc import max_inverse_size as max_r, cg_rtol, cg_maxiter
    cg_kws.setdefault('rtol', cg_rtol)
    cg_kws.setdefault('maxiter', cg_maxiter)
    m, n = A.shape
    p = 0 if A_e is None else A_e.shape[1]
    mxm = m < n + p
    r = m if mxm else n + p
    do_cg = r > max_r

    if mxm:
        H = np.dot(A, A.T)
        if A_e is not None:
            H += np.dot(A_e, A_e.T)
    else:
        B = A if A_e is None else np.hstack([A, A_e])
        H = np.dot(B.T, B)
    H.flat[::(r+1)] += mu
    if do_cg:
        C = LinearOperator((r, r), matvec=lambda x: np.dot(H, x), dtype='d')
        C_solve = lambda x, x0: basic_CG(C, x, x0=x0, **cg_kws)[0]
    else:
        C = np.linalg.inv(H)
        C_solve = lambda x, x0: np.dot(C, x)

    B_w = Bw(A, A_e)
    Bt_y = Bty(A, A_e)

    class mxm_solver(object):
        def __init__(self):
            self.c0 = None
        def __call__(self, w):
            c = C_solve(B_w(w), self.c0)
            self.c0 = c
            return (w - Bt_y(c)) / mu

    class nxn_solver(object):
        def __init__(self):
            self.c0 = None
        def __call__(self, w):
            self.c0 = C_solve(w, self.c0)
            return self.c0

    return mxm_solver() if mxm else nxn_solver()
