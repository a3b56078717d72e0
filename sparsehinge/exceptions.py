# encoding: utf-8
# Author: Kyohei Atarashi
# License: MIT


class DimensionMismatch(ValueError):
    """Raised when a feature count or aggregator dimension does not match."""


class InvalidArgument(ValueError):
    """Raised for negative weights, non-dense coefficients and malformed
    vectors or blocks."""
