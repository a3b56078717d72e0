# encoding: utf-8
# Author: Kyohei Atarashi
# License: MIT

import numpy as np
import pytest
from numpy.testing import (
    assert_almost_equal,
    assert_array_almost_equal,
    assert_array_equal,
)

from sparsehinge import DimensionMismatch, HingeAggregator, Instance, InstanceBlock

n_samples = 30
n_features = 5

rng = np.random.RandomState(2)

X = rng.randn(n_samples, n_features)
labels = rng.randint(0, 2, n_samples).astype(np.double)
weights = rng.rand(n_samples)
coef = 0.5 * rng.randn(n_features + 1)

chunks = [slice(0, 8), slice(8, 19), slice(19, n_samples)]


def _build(chunk, blocks=False):
    agg = HingeAggregator(n_features, True, coef)
    if blocks:
        agg.add(InstanceBlock(X[chunk], labels[chunk], weights[chunk]))
    else:
        for i in range(n_samples)[chunk]:
            agg.add(Instance(labels[i], weights[i], X[i]))
    return agg


def _assert_same(agg1, agg2):
    assert_almost_equal(agg1.loss_sum, agg2.loss_sum, decimal=10)
    assert_almost_equal(agg1.weight_sum, agg2.weight_sum, decimal=10)
    assert_array_almost_equal(
        agg1.gradient_sum_array, agg2.gradient_sum_array, decimal=10
    )


@pytest.mark.parametrize("blocks", [True, False])
def test_merge_associative_commutative(blocks):
    a, b, c = chunks
    left = _build(a, blocks).merge(_build(b, blocks)).merge(_build(c, blocks))
    right = _build(a, blocks).merge(_build(b, blocks).merge(_build(c, blocks)))
    swapped = _build(a, blocks).merge(_build(c, blocks)).merge(_build(b, blocks))
    reverse = _build(c, blocks).merge(_build(b, blocks)).merge(_build(a, blocks))
    _assert_same(left, right)
    _assert_same(left, swapped)
    _assert_same(left, reverse)
    assert len(left.gradient_sum_array) == n_features + 1


def test_merge_same_as_single_pass():
    merged = _build(chunks[0])
    merged.merge(_build(chunks[1], blocks=True)).merge(_build(chunks[2]))
    whole = _build(slice(0, n_samples), blocks=True)
    _assert_same(merged, whole)
    assert_almost_equal(merged.loss(), whole.loss(), decimal=10)
    assert_array_almost_equal(merged.gradient(), whole.gradient(), decimal=10)


def test_merge_returns_self_and_keeps_other():
    agg = _build(chunks[0])
    other = _build(chunks[1])
    loss_sum, weight_sum = other.loss_sum, other.weight_sum
    grad = np.array(other.gradient_sum_array)
    assert agg.merge(other) is agg
    assert other.loss_sum == loss_sum
    assert other.weight_sum == weight_sum
    assert_array_equal(other.gradient_sum_array, grad)


def test_merge_empty():
    agg = _build(chunks[0])
    loss_sum, weight_sum = agg.loss_sum, agg.weight_sum
    grad = np.array(agg.gradient_sum_array)
    agg.merge(HingeAggregator(n_features, True, coef))
    assert agg.loss_sum == loss_sum
    assert agg.weight_sum == weight_sum
    assert_array_equal(agg.gradient_sum_array, grad)

    empty = HingeAggregator(n_features, True, coef).merge(_build(chunks[0]))
    _assert_same(empty, agg)


def test_merge_dimension_mismatch():
    agg = HingeAggregator(n_features, True, coef)
    other = HingeAggregator(n_features, False, coef[:n_features])
    other.add(Instance(1.0, 1.0, X[0]))
    with pytest.raises(DimensionMismatch):
        agg.merge(other)
    assert agg.weight_sum == 0.0
    assert len(agg.gradient_sum_array) == n_features + 1
