import operator

from prefix_tools import backend as B
from prefix_tools.bounds import check_range


class DiffArray1D:
    """
    Difference array for 1D range-add updates.

    Adding v on [l, r) records diff[l] += v and diff[r] -= v, where r may be
    n (the sentinel slot). build() prefixes the deltas into the final values.

    With the numpy or torch backend and no explicit dtype, the storage widens
    to fit each delta (an int array becomes float on a float delta). An
    explicit dtype is kept as given.
    """

    def __init__(self, n: int = 0, zero=0, backend: str = "python", dtype=None, device=None):
        self.zero = zero
        self._backend = B.check_backend(backend)
        self._dtype = dtype
        self._device = device
        self.reset(n)

    @classmethod
    def from_values(cls, values, zero=0, backend: str = "python", dtype=None, device=None):
        """Difference array whose build() reproduces `values`."""
        if dtype is None:
            dtype = B.infer_dtype(values, backend)
        values = list(values)
        n = len(values)
        d = cls(n, zero=zero, backend=backend, dtype=dtype, device=device)
        prev = zero
        for i, v in enumerate(values):
            d.range_add(i, n, v - prev)
            prev = v
        return d

    @property
    def backend(self) -> str:
        return self._backend

    def reset(self, n: int) -> None:
        """Resize to n and clear every pending update."""
        n = operator.index(n)
        if n < 0:
            raise ValueError(f"Size must be non-negative, got {n}")
        self._n = n
        self._diff = B.zeros(n + 1, self._backend, self.zero, self._dtype, self._device)

    def range_add(self, l: int, r: int, delta) -> None:
        l, r = check_range(l, r, self._n)
        if self._dtype is None:
            self._diff = B.promote(self._diff, delta, self._backend)
        self._diff[l] = self._diff[l] + delta
        self._diff[r] = self._diff[r] - delta  # r == n hits the sentinel

    def build(self):
        """Final values after all updates (length n). Does not modify the deltas."""
        return B.running(self._diff, self._n, self._backend, self.zero)

    def size(self) -> int:
        return self._n

    def __len__(self) -> int:
        return self._n

    def diff(self):
        """Copy of the raw deltas, sentinel included (n + 1 values)."""
        return B.copy(self._diff, self._backend)

    def __repr__(self) -> str:
        return f"DiffArray1D(size={self._n}, backend={self._backend!r})"
