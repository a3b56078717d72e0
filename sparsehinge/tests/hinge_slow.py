# encoding: utf-8
# Author: Kyohei Atarashi
# License: MIT

import numpy as np
import scipy.sparse as sp


class HingeSlow(object):
    """Hinge loss: L(p, y) = max(1 - yp, 0)"""

    def loss(self, p, y):
        return np.maximum(1 - p * y, 0)

    def dloss(self, p, y):
        return -y * (1 - p * y > 0)


def hinge_sums_slow(X, labels, weights, coef, fit_intercept):
    if sp.issparse(X):
        X = X.toarray()
    n_features = X.shape[1]
    intercept = coef[-1] if fit_intercept else 0.0
    p = np.dot(X, coef[:n_features]) + intercept
    y = 2 * labels - 1
    loss = HingeSlow()
    loss_sum = np.sum(weights * loss.loss(p, y))
    grad_scales = weights * loss.dloss(p, y)
    grad = np.dot(X.T, grad_scales)
    if fit_intercept:
        grad = np.append(grad, np.sum(grad_scales))
    return loss_sum, np.sum(weights), grad
