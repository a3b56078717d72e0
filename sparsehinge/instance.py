# encoding: utf-8
# Author: Kyohei Atarashi
# License: MIT

from itertools import islice

import numpy as np
import scipy.sparse as sp
from sklearn.utils.validation import check_array

from .exceptions import DimensionMismatch, InvalidArgument
from .vectors import SparseVector, check_finite, get_vector


class Instance(object):
    """A single weighted training example.

    Parameters
    ----------
    label : float
        Binary label in {0, 1}.

    weight : float
        Non-negative example weight. The sign is checked by the aggregator.

    features : DenseVector, SparseVector, array-like or sparse row
        Feature values, converted with :func:`get_vector`.
    """

    __slots__ = ("label", "weight", "features")

    def __init__(self, label, weight, features):
        self.label = float(label)
        self.weight = float(weight)
        self.features = get_vector(features)

    @property
    def n_features(self):
        return self.features.size

    def __repr__(self):
        return (
            f"Instance(label={self.label}, weight={self.weight}, "
            f"features={self.features!r})"
        )


class InstanceBlock(object):
    """A batch of instances packed as one matrix for vectorized processing.

    Parameters
    ----------
    matrix : {array-like, sparse matrix}, shape = [n_samples, n_features]
        Feature matrix. Sparse input is stored as CSR.

    labels : array-like, shape = [n_samples]
        Binary labels in {0, 1}.

    weights : array-like, shape = [n_samples], optional
        Non-negative row weights. Defaults to ones.
    """

    def __init__(self, matrix, labels, weights=None):
        self.matrix = check_array(
            matrix,
            accept_sparse="csr",
            dtype=np.float64,
            ensure_all_finite=False,
            ensure_min_samples=0,
        )
        check_finite(
            self.matrix.data if sp.issparse(self.matrix) else self.matrix, "matrix"
        )
        n_samples = self.matrix.shape[0]
        self.labels = np.asarray(labels, dtype=np.float64).ravel()
        if weights is None:
            self.weights = np.ones(n_samples, dtype=np.float64)
        else:
            self.weights = np.asarray(weights, dtype=np.float64).ravel()
        if len(self.labels) != n_samples or len(self.weights) != n_samples:
            raise InvalidArgument(
                f"Block has {n_samples} rows but got {len(self.labels)} labels "
                f"and {len(self.weights)} weights."
            )

    @property
    def size(self):
        return self.matrix.shape[0]

    @property
    def n_features(self):
        return self.matrix.shape[1]

    def get_label(self, i):
        return self.labels[i]

    def get_weight(self, i):
        return self.weights[i]

    @classmethod
    def from_instances(cls, instances):
        instances = list(instances)
        if len(instances) == 0:
            raise InvalidArgument("Cannot build a block from zero instances.")
        n_features = instances[0].n_features
        for instance in instances:
            if instance.n_features != n_features:
                raise DimensionMismatch(
                    f"All instances in a block must have {n_features} features "
                    f"but got {instance.n_features}."
                )
        labels = [instance.label for instance in instances]
        weights = [instance.weight for instance in instances]
        if all(isinstance(instance.features, SparseVector) for instance in instances):
            indptr = [0]
            indices = []
            data = []
            for instance in instances:
                for j, value in instance.features.iter_nonzero():
                    indices.append(j)
                    data.append(value)
                indptr.append(len(indices))
            matrix = sp.csr_matrix(
                (
                    np.asarray(data, dtype=np.float64),
                    np.asarray(indices, dtype=np.int32),
                    np.asarray(indptr, dtype=np.int32),
                ),
                shape=(len(instances), n_features),
            )
        else:
            matrix = np.vstack([instance.features.toarray() for instance in instances])
        return cls(matrix, labels, weights)

    def __repr__(self):
        kind = "sparse" if sp.issparse(self.matrix) else "dense"
        return f"InstanceBlock(size={self.size}, n_features={self.n_features}, {kind})"


def blockify(instances, block_size):
    """Group an iterable of instances into blocks of at most block_size rows."""
    if block_size < 1:
        raise InvalidArgument(f"block_size must be >= 1 but got {block_size}.")
    iterator = iter(instances)
    while True:
        chunk = list(islice(iterator, block_size))
        if not chunk:
            return
        yield InstanceBlock.from_instances(chunk)
