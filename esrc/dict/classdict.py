import numpy as np

from . import block_factorizing as bf


class CombinedDictionary(object):
    """
    This dictionary is the frame B = [X D_I] of the training samples X
    (n columns) and their intra-class variations D_I (n columns), with
    a correspondence between the training columns and the classes.

    Column n+j of the frame is the variation of training column j; the
    pairs (j, n+j) are kept in column_pairs. Only the training half of
    the frame is associated with classes: when computing the residual of
    a class, the training columns of the other classes are removed,
    while every variation column stays active.
    """

    def __init__(self, X, D_I, labels, classes):
        X = np.asarray(X, dtype='d')
        D_I = np.asarray(D_I, dtype='d')
        labels = np.asarray(labels).ravel()
        if X.shape != D_I.shape:
            raise ValueError(
                'training samples %s and variations %s differ in shape' %
                (X.shape, D_I.shape)
                )
        m, n = X.shape
        if len(labels) != n:
            raise ValueError('expected %d labels, got %d' % (n, len(labels)))
        self.n_train = n
        self.classes = np.asarray(classes)
        self.labels = labels
        self.frame = np.hstack([X, D_I])
        self.frame.flags.writeable = False
        self._B = bf.Bw(self.X, self.D_I)

        self.column_pairs = [(j, n+j) for j in range(n)]
        self.class_to_columns = dict()
        self.column_to_class = dict()
        for cls in self.classes:
            cols = [j for j, _ in self.column_pairs if labels[j] == cls]
            self.class_to_columns[cls] = cols
            self.column_to_class.update((c, cls) for c in cols)
        # per class: the coefficients to zero out (training half only)
        self._masks = []
        for cls in self.classes:
            mask = np.zeros(2*n, dtype=bool)
            mask[:n] = labels != cls
            self._masks.append(mask)

    @property
    def n_classes(self):
        return len(self.classes)

    @property
    def X(self):
        return self.frame[:, :self.n_train]

    @property
    def D_I(self):
        return self.frame[:, self.n_train:]

    def __repr__(self):
        m, p = self.frame.shape
        return 'A %d x %d combined frame of %d classes' % (
            m, p, self.n_classes
            )

    def variation_of(self, col):
        "The variation column paired with training column col"
        return self.column_pairs[col][1]

    def class_coefficients(self, alpha, k):
        """
        Copy of alpha with the training coefficients of every class
        other than self.classes[k] set to zero. The variation
        coefficients are left untouched.
        """
        sc = np.array(alpha, dtype='d')
        sc[self._masks[k]] = 0
        return sc

    def compute_residuals(self, alpha, y):
        """
        Return the residual of each class (in the order of self.classes)

        r_i = ||y - B*alpha_i|| / sum(alpha_i**2)

        where alpha_i is alpha restricted to class i. A class whose
        restricted code is all zero gets an infinite residual.
        """
        alpha = np.asarray(alpha, dtype='d').ravel()
        if len(alpha) != self.frame.shape[1]:
            raise ValueError(
                'code of length %d for a frame of %d columns' %
                (len(alpha), self.frame.shape[1])
                )
        resids = np.empty(self.n_classes)
        for k in range(self.n_classes):
            sc = self.class_coefficients(alpha, k)
            energy = np.dot(sc, sc)
            if energy == 0:
                resids[k] = np.inf
                continue
            resids[k] = np.linalg.norm(y - self._B(sc)) / energy
        return resids

    def classify(self, alpha, y):
        """
        Return the class of minimum residual and all residuals. Ties
        (including all residuals infinite) go to the first class.
        """
        resids = self.compute_residuals(alpha, y)
        return self.classes[int(np.argmin(resids))], resids
