from prefix_tools import backend as B
from prefix_tools.bounds import check_range


class PrefixSum1D:
    def __init__(self, values=None, zero=0):
        """
        Prefix sums over a 1D sequence.

        The internal prefix array p satisfies p[0] = zero and
        p[i + 1] = p[i] + values[i], so the sum over [l, r) is p[r] - p[l].

        Args:
            values: optional input sequence (list, numpy array or torch tensor).
            zero: additive identity of the element type.
        """
        self.zero = zero
        self._backend = "python"
        self._prefix = []
        if values is not None:
            self.build(values)

    @property
    def backend(self) -> str:
        return self._backend

    def build(self, values) -> None:
        """Rebuild from `values` in O(n), replacing any previous prefix array."""
        backend = B.resolve_backend(values)
        self._prefix = B.cumulative(values, backend, self.zero)
        self._backend = backend

    def range_sum(self, l: int, r: int):
        """Sum of the original values in [l, r), in O(1)."""
        l, r = check_range(l, r, self.size())
        if len(self._prefix) == 0:
            return self.zero
        return self._prefix[r] - self._prefix[l]

    def size(self) -> int:
        return len(self._prefix) - 1 if len(self._prefix) else 0

    def __len__(self) -> int:
        return self.size()

    def prefix(self):
        """Copy of the internal prefix array (n + 1 values, empty if unbuilt)."""
        return B.copy(self._prefix, self._backend)

    def __repr__(self) -> str:
        return f"PrefixSum1D(size={self.size()}, backend={self._backend!r})"
