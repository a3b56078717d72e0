# encoding: utf-8
# Author: Kyohei Atarashi
# License: MIT

import numpy as np
import scipy.sparse as sp

from .exceptions import DimensionMismatch, InvalidArgument
from .vectors import DenseVector, SparseVector


class CoefficientView(object):
    """Read-only view of a flat coefficient buffer.

    The buffer holds the linear weights followed by the intercept when
    ``fit_intercept`` is True. Both views are computed once here and shared
    by every ``add`` call of the owning aggregator; the buffer itself is
    never written.

    Parameters
    ----------
    coefficients : ndarray or DenseVector, shape = [dim]
        Dense coefficient buffer, ``dim = n_features + fit_intercept``.

    n_features : int
        Number of linear weights.

    fit_intercept : bool
        Whether the last entry of the buffer is an intercept.
    """

    def __init__(self, coefficients, n_features, fit_intercept):
        if sp.issparse(coefficients) or isinstance(coefficients, SparseVector):
            raise InvalidArgument(
                f"coefficients only supports dense vector but got type "
                f"{type(coefficients).__name__}."
            )
        if isinstance(coefficients, DenseVector):
            coefficients = coefficients.values
        values = np.ascontiguousarray(coefficients, dtype=np.float64)
        if values.ndim != 1:
            raise InvalidArgument(
                f"coefficients must be 1-D but got shape {values.shape}."
            )
        dim = n_features + 1 if fit_intercept else n_features
        if values.shape[0] != dim:
            raise DimensionMismatch(
                f"Dimensions mismatch for coefficients. Expecting {dim} but "
                f"got {values.shape[0]}."
            )
        self.n_features = n_features
        self.fit_intercept = fit_intercept
        self.dim = dim
        self.values = values
        self.linear = values[:n_features]
        self.intercept = float(values[-1]) if fit_intercept else 0.0
