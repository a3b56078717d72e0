# encoding: utf-8
# Author: Kyohei Atarashi
# License: MIT

from abc import ABCMeta, abstractmethod

import numpy as np

from .exceptions import DimensionMismatch, InvalidArgument
from .instance import Instance, InstanceBlock


class DifferentiableLossAggregator(metaclass=ABCMeta):
    """Mergeable accumulator of a weighted loss and its gradient.

    One aggregator is owned by one partition and folded over its instances
    or blocks with ``add``. Aggregators of disjoint partitions are combined
    with ``merge``; ``loss`` and ``gradient`` then give the weighted means
    over the union. Instances are not safe for concurrent ``add`` calls.

    Parameters
    ----------
    dim : int
        Length of the gradient.

    Attributes
    ----------
    loss_sum : float
        Sum of weighted losses.

    weight_sum : float
        Sum of weights of all added instances.

    gradient_sum_array : ndarray, shape = [dim]
        Sum of weighted loss gradients.
    """

    def __init__(self, dim):
        self.dim = dim
        self.loss_sum = 0.0
        self.weight_sum = 0.0
        self.gradient_sum_array = np.zeros(dim, dtype=np.float64)

    @abstractmethod
    def add_instance(self, instance):
        """Add one instance and return self."""

    @abstractmethod
    def add_block(self, block):
        """Add one block of instances and return self."""

    def add(self, item):
        """Add an Instance or an InstanceBlock.

        Returns
        -------
        self : DifferentiableLossAggregator
            Returns self.
        """
        if isinstance(item, InstanceBlock):
            return self.add_block(item)
        if isinstance(item, Instance):
            return self.add_instance(item)
        raise TypeError(
            f"Expected Instance or InstanceBlock but got {type(item).__name__}."
        )

    def merge(self, other):
        """Merge another aggregator into this one.

        Parameters
        ----------
        other : DifferentiableLossAggregator
            Aggregator of a disjoint set of instances. Left untouched.

        Returns
        -------
        self : DifferentiableLossAggregator
            Returns self, now summarizing both sets.
        """
        if self.dim != other.dim:
            raise DimensionMismatch(
                f"Dimensions mismatch when merging with another "
                f"{type(other).__name__}. Expecting {self.dim} but got {other.dim}."
            )
        if other.weight_sum != 0:
            self.weight_sum += other.weight_sum
            self.loss_sum += other.loss_sum
            self.gradient_sum_array += other.gradient_sum_array
        return self

    @property
    def weight(self):
        return self.weight_sum

    def _check_weight_sum(self):
        if not self.weight_sum > 0.0:
            raise InvalidArgument(
                f"The effective number of instances should be greater than 0.0, "
                f"but was {self.weight_sum}."
            )

    def loss(self):
        """Weighted mean loss."""
        self._check_weight_sum()
        return self.loss_sum / self.weight_sum

    def gradient(self):
        """Weighted mean gradient, shape = [dim]."""
        self._check_weight_sum()
        return self.gradient_sum_array / self.weight_sum

    def __repr__(self):
        return (
            f"{type(self).__name__}(dim={self.dim}, loss_sum={self.loss_sum}, "
            f"weight_sum={self.weight_sum})"
        )
