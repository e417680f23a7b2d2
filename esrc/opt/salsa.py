import numpy as np

from ..errors import SolverError
from .shrinkers import shrink_thresh

def l1_proximity_map(tau, mu):
    tau, mu = float(tau), float(mu)
    return lambda x: shrink_thresh(x, tau/mu)

def l1_penalty(tau):
    tau = float(tau)
    return lambda x: tau*np.abs(x).sum()

# Solves quadratic + regularizer form:
# min_x 0.5*||Bx - y||^2 + tau*||x||_1
# which is the Lagrangian of
# min_x ||x||_1 subject to ||Bx - y||^2 < eps
def qreg_salsa(
        B, Bt, BtB_solve, y, phi, phi_map, mu, n_iter=20000, rtol=1e-6
        ):
    # phi_map minimizes the functional tau*||v||_1 + mu/2*||d' - v||^2
    # ie, it is Shrink_{tau/mu}(d')
    # --> tau is an implicit argument within phi and phi_map
    # --> mu is an implicit argument within BtB_solve and phi_map
    #
    # Stops once the split is closed (u == v to rtol) and either the
    # dual residual or the relative change of the objective
    # 0.5*||Bv - y||^2 + phi(v) is below rtol. The dual residual
    # can stall well above rtol while the objective is settled.
    #
    # Returns (v, k): the split variable v is the shrunk copy of the
    # solution, with exact zeros for inactive atoms

    m, n = B.shape
    Bty = Bt.matvec(y)
    v = np.zeros(n)
    d = np.zeros(n)
    ref = max(1.0, np.linalg.norm(Bty))
    tiny = np.finfo('d').tiny
    J = 0.5*np.dot(y, y)
    primal_ok = False
    for k in range(1, n_iter+1):
        u = BtB_solve(Bty + mu*(v + d))
        v_prev = v
        v = phi_map(u - d)
        d = d - u + v
        primal = np.linalg.norm(u - v)
        dual = mu * np.linalg.norm(v - v_prev)
        if not np.isfinite(primal):
            raise SolverError('SALSA iterates diverged')
        r = B.matvec(v) - y
        J_prev = J
        J = 0.5*np.dot(r, r) + phi(v)
        primal_ok = primal < rtol*max(1.0, np.linalg.norm(u))
        if k > 2 and primal_ok and \
               (dual < rtol*ref or abs(J - J_prev) <= rtol*max(J, tiny)):
            return v, k
    if primal_ok:
        # the split is closed, only the slow tail of the dual is left
        return v, n_iter
    raise SolverError(
        'SALSA did not converge in %d iterations '
        '(primal %1.2e, dual %1.2e)' % (n_iter, primal, dual)
        )
