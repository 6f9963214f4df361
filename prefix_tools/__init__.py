from prefix_tools.diff_array import DiffArray1D
from prefix_tools.prefix_sum import PrefixSum1D

__all__ = ["DiffArray1D", "PrefixSum1D"]
