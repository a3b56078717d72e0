from .base import DifferentiableLossAggregator
from .coefficients import CoefficientView
from .exceptions import DimensionMismatch, InvalidArgument
from .hinge import HingeAggregator
from .instance import Instance, InstanceBlock, blockify
from .reduction import aggregate_partition, evaluate, tree_merge
from .vectors import DenseVector, SparseVector, get_vector

__all__ = [
    "CoefficientView",
    "DenseVector",
    "DifferentiableLossAggregator",
    "DimensionMismatch",
    "HingeAggregator",
    "Instance",
    "InstanceBlock",
    "InvalidArgument",
    "SparseVector",
    "aggregate_partition",
    "blockify",
    "evaluate",
    "get_vector",
    "tree_merge",
]
