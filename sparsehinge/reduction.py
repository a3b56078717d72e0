# encoding: utf-8
# Author: Kyohei Atarashi
# License: MIT

import math
import warnings
from functools import reduce

from joblib import Parallel, delayed

from .exceptions import InvalidArgument
from .hinge import HingeAggregator


def _merge(left, right):
    return left.merge(right)


def tree_merge(aggregators, depth=2):
    """Merge aggregators with a multi-level tree reduction.

    Aggregators are merged group-wise, level by level, until few enough
    remain to be merged linearly. The fan-in of each level is
    ``max(ceil(n ** (1 / depth)), 2)``. The first aggregator of every group
    is mutated and reused as the group result.

    Parameters
    ----------
    aggregators : iterable of DifferentiableLossAggregator
        Non-empty collection of aggregators with the same dim.

    depth : int, default: 2
        Suggested depth of the tree.

    Returns
    -------
    root : DifferentiableLossAggregator
        Aggregator summarizing all inputs.
    """
    aggregators = list(aggregators)
    if len(aggregators) == 0:
        raise InvalidArgument("Cannot merge an empty collection of aggregators.")
    if depth < 1:
        raise InvalidArgument(f"depth must be >= 1 but got {depth}.")

    n_parts = len(aggregators)
    scale = max(int(math.ceil(n_parts ** (1.0 / depth))), 2)
    while n_parts > scale + int(math.ceil(n_parts / scale)):
        n_parts = n_parts // scale
        groups = [[] for _ in range(n_parts)]
        for i, aggregator in enumerate(aggregators):
            groups[i % n_parts].append(aggregator)
        aggregators = [reduce(_merge, group) for group in groups]
    return reduce(_merge, aggregators)


def aggregate_partition(partition, n_features, fit_intercept, coefficients):
    """Fold one partition of instances and/or blocks into a new aggregator."""
    aggregator = HingeAggregator(n_features, fit_intercept, coefficients)
    for item in partition:
        aggregator.add(item)
    return aggregator


def evaluate(partitions, coefficients, n_features, fit_intercept=True,
             n_jobs=None, depth=2, verbose=False):
    """Mean hinge loss and gradient over partitioned data.

    Parameters
    ----------
    partitions : iterable of iterables
        Each partition yields Instance and/or InstanceBlock objects.

    coefficients : ndarray, shape = [n_features + fit_intercept]
        Coefficients shared read-only by every partition.

    n_features : int
        Number of features.

    fit_intercept : bool, default: True
        Whether the last coefficient is an intercept.

    n_jobs : int or None, default: None
        Number of threads aggregating partitions. None means sequential.

    depth : int, default: 2
        Depth of the merge tree.

    verbose : bool, default: False
        Print per-partition and merged sums.

    Returns
    -------
    loss : float
        Weighted mean loss.

    gradient : ndarray, shape = [n_features + fit_intercept]
        Weighted mean gradient.

    weight_sum : float
        Total weight of all instances.
    """
    partitions = list(partitions)
    if n_jobs is None or n_jobs == 1:
        aggregators = [
            aggregate_partition(partition, n_features, fit_intercept, coefficients)
            for partition in partitions
        ]
    else:
        aggregators = Parallel(n_jobs=n_jobs, prefer="threads")(
            delayed(aggregate_partition)(
                partition, n_features, fit_intercept, coefficients
            )
            for partition in partitions
        )

    for k, aggregator in enumerate(aggregators):
        if verbose:
            print(
                f"Partition {k} weight sum {aggregator.weight_sum} "
                f"loss sum {aggregator.loss_sum}"
            )
        if aggregator.weight_sum == 0.0:
            warnings.warn(f"Partition {k} contributes no weight.")

    root = tree_merge(aggregators, depth=depth)
    loss = root.loss()
    if verbose:
        print(f"Merged {len(aggregators)} partitions: weight sum "
              f"{root.weight_sum} loss {loss}")
    return loss, root.gradient(), root.weight_sum
