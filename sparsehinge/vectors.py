# encoding: utf-8
# Author: Kyohei Atarashi
# License: MIT

import numpy as np
import scipy.sparse as sp

from .exceptions import InvalidArgument


def check_finite(values, name="values"):
    if not np.all(np.isfinite(values)):
        raise InvalidArgument(f"{name} must be finite but contain NaN or inf.")


class DenseVector(object):
    """Dense feature vector backed by a 1-D float64 array."""

    def __init__(self, values):
        values = np.asarray(values, dtype=np.float64)
        if values.ndim != 1:
            raise InvalidArgument(
                f"DenseVector expects a 1-D array but got shape {values.shape}."
            )
        check_finite(values)
        self.values = values
        self.size = values.shape[0]

    def nonzero(self):
        indices = np.flatnonzero(self.values).astype(np.int32)
        return indices, self.values[indices]

    def iter_nonzero(self):
        """Iterate over the (index, value) pairs of the non-zero entries.

        Every call returns a fresh generator, in increasing index order.
        ``nonzero`` returns the same pairs as two arrays.
        """
        for j in range(self.size):
            value = self.values[j]
            if value != 0.0:
                yield j, float(value)

    def toarray(self):
        return np.array(self.values)

    def __repr__(self):
        return f"DenseVector({self.values.tolist()})"


class SparseVector(object):
    """Sparse feature vector stored as sorted (indices, values) pairs.

    Parameters
    ----------
    size : int
        Logical length of the vector.

    indices : array-like of int, shape = [n_nz]
        Strictly increasing positions of the stored entries.

    values : array-like of float, shape = [n_nz]
        Stored entries. Explicit zeros are allowed and skipped on iteration.
    """

    def __init__(self, size, indices, values):
        indices = np.asarray(indices, dtype=np.int32)
        values = np.asarray(values, dtype=np.float64)
        if indices.ndim != 1 or values.ndim != 1:
            raise InvalidArgument("indices and values must be 1-D arrays.")
        if len(indices) != len(values):
            raise InvalidArgument(
                f"indices and values must have the same length but got "
                f"{len(indices)} and {len(values)}."
            )
        if len(indices) > 0:
            if indices[0] < 0 or indices[-1] >= size:
                raise InvalidArgument(
                    f"indices must lie in [0, {size}) but got "
                    f"[{indices[0]}, {indices[-1]}]."
                )
            if np.any(np.diff(indices) <= 0):
                raise InvalidArgument("indices must be strictly increasing.")
        check_finite(values)
        self.size = int(size)
        self.indices = indices
        self.values = values

    def nonzero(self):
        mask = self.values != 0.0
        return self.indices[mask], self.values[mask]

    def iter_nonzero(self):
        for j, value in zip(self.indices, self.values):
            if value != 0.0:
                yield int(j), float(value)

    def toarray(self):
        dense = np.zeros(self.size, dtype=np.float64)
        dense[self.indices] = self.values
        return dense

    def __repr__(self):
        return (
            f"SparseVector({self.size}, {self.indices.tolist()}, "
            f"{self.values.tolist()})"
        )


def get_vector(x):
    if isinstance(x, (DenseVector, SparseVector)):
        return x
    if sp.issparse(x):
        if x.ndim != 2 or x.shape[0] != 1:
            raise InvalidArgument(
                f"A sparse feature vector must have exactly one row but got "
                f"shape {x.shape}."
            )
        x = sp.csr_matrix(x, copy=True)
        x.sum_duplicates()
        return SparseVector(x.shape[1], x.indices, x.data)
    return DenseVector(x)
