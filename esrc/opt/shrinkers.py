import numpy as np

def shrink_thresh(x, alpha):
    """Shrinkage-thresholding operator, as defined in [Daub2004], and
    elsewhere.

    This function returns the vector of minimizers of the separable
    objective

    J(v) = l*|v| + (u/2)*||v - x||^2

    with alpha = l/u. Entries with |x| <= alpha are exactly zero.
    """
    x = np.asarray(x)
    mag = np.abs(x) - alpha
    return np.where(mag > 0, np.sign(x) * mag, 0.0)
