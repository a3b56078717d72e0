# encoding: utf-8
# Author: Kyohei Atarashi
# License: MIT

import numpy as np
from numba import njit

from .base import DifferentiableLossAggregator
from .coefficients import CoefficientView
from .exceptions import DimensionMismatch, InvalidArgument
from .linalg import gemv
from .loss import Hinge


@njit
def _add_instance(indices, data, n_nz, coef, fit_intercept, gradient_sum,
                  label, weight, loss):
    margin = 0.0
    for jj in range(n_nz):
        margin += coef[indices[jj]] * data[jj]
    if fit_intercept:
        margin += coef[coef.shape[0] - 1]
    # labels in {0, 1} are scaled to {-1, +1}
    y = 2.0 * label - 1.0
    z = loss.loss(margin, y)
    if z > 0:
        grad_scale = weight * loss.dloss(margin, y)
        for jj in range(n_nz):
            j = indices[jj]
            gradient_sum[j] += data[jj] * grad_scale
        if fit_intercept:
            gradient_sum[gradient_sum.shape[0] - 1] += grad_scale
    return weight * z


@njit
def _margins_to_grad_scales(vec, labels, weights, loss):
    loss_sum = 0.0
    weight_sum = 0.0
    for i in range(vec.shape[0]):
        weight = weights[i]
        if weight > 0:
            weight_sum += weight
            y = 2.0 * labels[i] - 1.0
            z = loss.loss(vec[i], y)
            if z > 0:
                loss_sum += weight * z
                vec[i] = weight * loss.dloss(vec[i], y)
            else:
                vec[i] = 0.0
        else:
            vec[i] = 0.0
    return loss_sum, weight_sum


class HingeAggregator(DifferentiableLossAggregator):
    """Loss and gradient of the hinge loss for binary classification.

    Labels are in {0, 1} and the loss of one instance is
    ``weight * max(0, 1 - (2y - 1) * f(x))`` with ``f(x) = <w, x> + b``.
    Instances can be added one by one (sparse dot products) or as blocks
    (matrix-vector products); both give the same sums.

    Parameters
    ----------
    n_features : int
        Number of features of every instance.

    fit_intercept : bool
        Whether the last coefficient is an intercept. The gradient then has
        ``n_features + 1`` entries, the last one for the intercept.

    coefficients : ndarray or DenseVector, shape = [n_features + fit_intercept]
        Coefficients at which loss and gradient are evaluated. Shared,
        never modified.
    """

    def __init__(self, n_features, fit_intercept, coefficients):
        if isinstance(n_features, bool) or not isinstance(
            n_features, (int, np.integer)
        ):
            raise InvalidArgument(
                f"n_features must be an integer but got {type(n_features).__name__}."
            )
        if n_features <= 0:
            raise InvalidArgument(f"n_features must be > 0 but got {n_features}.")
        self.n_features = int(n_features)
        self.fit_intercept = bool(fit_intercept)
        self.coefficients_ = CoefficientView(
            coefficients, self.n_features, self.fit_intercept
        )
        self._loss = Hinge()
        super().__init__(self.coefficients_.dim)

    def add_instance(self, instance):
        """Add a training instance and update loss and gradient.

        Parameters
        ----------
        instance : Instance
            The instance to be added.

        Returns
        -------
        self : HingeAggregator
            Returns self.
        """
        if instance.n_features != self.n_features:
            raise DimensionMismatch(
                f"Dimensions mismatch when adding new instance. Expecting "
                f"{self.n_features} but got {instance.n_features}."
            )
        if instance.weight < 0.0:
            raise InvalidArgument(
                f"instance weight, {instance.weight} has to be >= 0.0"
            )
        if instance.weight == 0.0:
            return self

        indices, data = instance.features.nonzero()
        loss = _add_instance(
            indices,
            data,
            len(indices),
            self.coefficients_.values,
            self.fit_intercept,
            self.gradient_sum_array,
            instance.label,
            instance.weight,
            self._loss,
        )
        self.loss_sum += loss
        self.weight_sum += instance.weight
        return self

    def add_block(self, block):
        """Add a block of training instances and update loss and gradient.

        Parameters
        ----------
        block : InstanceBlock
            The block to be added.

        Returns
        -------
        self : HingeAggregator
            Returns self.
        """
        if block.n_features != self.n_features:
            raise DimensionMismatch(
                f"Dimensions mismatch when adding new instance. Expecting "
                f"{self.n_features} but got {block.n_features}."
            )
        if np.any(block.weights < 0.0):
            raise InvalidArgument(
                f"instance weights {block.weights.tolist()} has to be >= 0.0"
            )
        if np.all(block.weights == 0.0):
            return self

        coef = self.coefficients_
        if self.fit_intercept and coef.intercept != 0.0:
            margins = np.full(block.size, coef.intercept, dtype=np.float64)
            beta = 1.0
        else:
            margins = np.zeros(block.size, dtype=np.float64)
            beta = 0.0
        gemv(1.0, block.matrix, coef.linear, beta, margins)

        loss_sum, weight_sum = _margins_to_grad_scales(
            margins, block.labels, block.weights, self._loss
        )
        grad_scales = margins
        self.loss_sum += loss_sum
        self.weight_sum += weight_sum

        # every prediction satisfies the margin, no gradient signal
        if np.all(grad_scales == 0.0):
            return self

        if self.fit_intercept:
            # gradient_sum_array has n_features + 1 entries and cannot be
            # the destination of the transposed product
            linear_grad = np.zeros(self.n_features, dtype=np.float64)
            gemv(1.0, block.matrix.T, grad_scales, 0.0, linear_grad)
            nz = np.flatnonzero(linear_grad)
            self.gradient_sum_array[nz] += linear_grad[nz]
            self.gradient_sum_array[self.n_features] += grad_scales.sum()
        else:
            gemv(1.0, block.matrix.T, grad_scales, 1.0, self.gradient_sum_array)
        return self
