from fractions import Fraction

import numpy as np
import pytest
import torch

from prefix_tools import PrefixSum1D


@pytest.fixture
def ps():
    return PrefixSum1D([1, 2, 3, 4, 5])


def test_basic_queries(ps):
    assert ps.size() == 5
    assert ps.range_sum(0, 5) == 15
    assert ps.range_sum(0, 1) == 1
    assert ps.range_sum(1, 3) == 5
    assert ps.range_sum(2, 2) == 0
    assert ps.range_sum(4, 5) == 5


def test_rebuild_replaces_prefix(ps):
    ps.build([10, 20, 30])
    assert ps.size() == 3
    assert ps.range_sum(0, 3) == 60
    assert ps.range_sum(1, 3) == 50
    assert ps.prefix() == [0, 10, 30, 60]


def test_default_constructed_is_empty():
    ps = PrefixSum1D()
    assert ps.size() == 0
    assert len(ps) == 0
    assert ps.prefix() == []
    assert ps.range_sum(0, 0) == 0


def test_empty_input_yields_single_zero():
    ps = PrefixSum1D([])
    assert ps.size() == 0
    assert ps.prefix() == [0]
    assert ps.range_sum(0, 0) == 0


@pytest.mark.parametrize("values", [[3, -1, 4, 1, -5, 9, 2, 6], [7], [0, 0, 0]])
def test_matches_direct_summation(values):
    ps = PrefixSum1D(values)
    n = len(values)
    assert ps.range_sum(0, n) == sum(values)
    for l in range(n + 1):
        for r in range(l, n + 1):
            assert ps.range_sum(l, r) == sum(values[l:r])


def test_prefix_accessor_is_a_copy(ps):
    p = ps.prefix()
    assert p == [0, 1, 3, 6, 10, 15]
    p[1] = 100
    assert ps.range_sum(0, 1) == 1


def test_input_is_not_aliased():
    values = [1, 2, 3]
    ps = PrefixSum1D(values)
    values[0] = 50
    assert ps.range_sum(0, 3) == 6


def test_generic_element_types():
    ps = PrefixSum1D([Fraction(1, 2), Fraction(1, 3), Fraction(1, 6)], zero=Fraction(0))
    assert ps.range_sum(0, 3) == 1
    assert ps.range_sum(1, 2) == Fraction(1, 3)

    vecs = PrefixSum1D([np.array([1, 2]), np.array([3, 4]), np.array([5, 6])])
    assert np.array_equal(vecs.range_sum(1, 3), np.array([8, 10]))


def test_numpy_backend():
    ps = PrefixSum1D(np.array([1, 2, 3, 4, 5]))
    assert ps.backend == "numpy"
    assert isinstance(ps.prefix(), np.ndarray)
    assert np.array_equal(ps.prefix(), np.array([0, 1, 3, 6, 10, 15]))
    assert ps.range_sum(1, 3) == 5
    assert ps.range_sum(2, 2) == 0


def test_numpy_backend_2d_rows():
    ps = PrefixSum1D(np.arange(6).reshape(3, 2))
    assert ps.size() == 3
    assert np.array_equal(ps.range_sum(0, 3), np.array([6, 9]))
    assert np.array_equal(ps.range_sum(1, 1), np.array([0, 0]))


def test_torch_backend():
    ps = PrefixSum1D(torch.tensor([10, 20, 30]))
    assert ps.backend == "torch"
    assert ps.size() == 3
    assert ps.range_sum(0, 3).item() == 60
    assert ps.range_sum(1, 3).item() == 50
    assert torch.equal(ps.prefix(), torch.tensor([0, 10, 30, 60]))


def test_rebuild_switches_backend():
    ps = PrefixSum1D(np.array([1.0, 2.0]))
    ps.build([4, 5, 6])
    assert ps.backend == "python"
    assert ps.range_sum(0, 3) == 15


@pytest.mark.parametrize("l, r", [(-1, 2), (3, 2), (0, 6), (6, 6)])
def test_out_of_bounds_raises(ps, l, r):
    with pytest.raises(IndexError):
        ps.range_sum(l, r)


def test_numpy_integer_indices(ps):
    assert ps.range_sum(np.int64(1), np.int64(3)) == 5


def test_float_indices_rejected(ps):
    with pytest.raises(TypeError):
        ps.range_sum(1.0, 3)
