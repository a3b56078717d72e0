# encoding: utf-8
# Author: Kyohei Atarashi
# License: MIT

from sklearn.utils.extmath import safe_sparse_dot

from .exceptions import DimensionMismatch


def gemv(alpha, A, x, beta, y):
    """In-place matrix-vector product y := alpha * A x + beta * y.

    Parameters
    ----------
    alpha : float
        Scale of the product.

    A : {ndarray, sparse matrix}, shape = [n_rows, n_cols]
        Pass ``A.T`` for the transposed product.

    x : ndarray, shape = [n_cols]

    beta : float
        Scale of the existing content of y. With ``beta == 0`` y is
        overwritten without being read.

    y : ndarray, shape = [n_rows]
        Destination, written in place.

    Returns
    -------
    y : ndarray
        The destination array.
    """
    n_rows, n_cols = A.shape
    if x.shape[0] != n_cols or y.shape[0] != n_rows:
        raise DimensionMismatch(
            f"gemv shapes do not align: A is {A.shape}, x has {x.shape[0]} "
            f"entries and y has {y.shape[0]}."
        )
    Ax = safe_sparse_dot(A, x)
    if alpha != 1.0:
        Ax *= alpha
    if beta == 0.0:
        y[:] = Ax
    else:
        if beta != 1.0:
            y *= beta
        y += Ax
    return y
