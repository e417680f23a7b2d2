"""
Solvers for the l1-regularized least squares (lasso) sparse coding step.
"""
