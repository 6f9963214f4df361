from itertools import accumulate

import numpy as np
import torch

BACKENDS = ("python", "numpy", "torch")


def resolve_backend(values) -> str:
    if isinstance(values, torch.Tensor):
        return "torch"
    if isinstance(values, np.ndarray):
        return "numpy"
    return "python"


def check_backend(backend: str) -> str:
    if backend not in BACKENDS:
        raise ValueError(f"Unknown backend {backend!r}, expected one of {BACKENDS}")
    return backend


def cumulative(values, backend: str, zero=0):
    """Running totals of `values` with `zero` prepended (length n + 1)."""
    backend = check_backend(backend)
    if backend == "numpy":
        arr = np.asarray(values)
        csum = np.cumsum(arr, axis=0)
        head = np.full((1, *arr.shape[1:]), zero, dtype=csum.dtype)
        return np.concatenate([head, csum], axis=0)
    if backend == "torch":
        csum = torch.cumsum(values, dim=0)
        head = torch.full((1, *values.shape[1:]), zero, dtype=csum.dtype, device=csum.device)
        return torch.cat([head, csum], dim=0)
    return list(accumulate(values, initial=zero))


def running(diff, n: int, backend: str, zero=0):
    """Running totals of the first `n` deltas (length n, sentinel excluded)."""
    backend = check_backend(backend)
    if backend == "numpy":
        return np.cumsum(diff[:n], axis=0)
    if backend == "torch":
        return torch.cumsum(diff[:n], dim=0)
    # initial=zero keeps out[0] = zero + diff[0] for non-int element types
    return list(accumulate(diff[:n], initial=zero))[1:]


def zeros(n: int, backend: str, zero=0, dtype=None, device=None):
    backend = check_backend(backend)
    if backend == "numpy":
        return np.full(n, zero, dtype=dtype)
    if backend == "torch":
        return torch.full((n,), zero, dtype=dtype, device=device)
    return [zero] * n


def copy(seq, backend: str):
    backend = check_backend(backend)
    if backend == "numpy":
        return seq.copy()
    if backend == "torch":
        return seq.clone()
    return list(seq)


def from_list(values, backend: str, dtype=None, device=None):
    backend = check_backend(backend)
    if backend == "numpy":
        return np.asarray(values, dtype=dtype)
    if backend == "torch":
        return torch.as_tensor(values, dtype=dtype, device=device)
    return list(values)


def infer_dtype(values, backend: str):
    """dtype the array backends would store `values` with (None for python)."""
    backend = check_backend(backend)
    if backend == "numpy":
        return np.asarray(values).dtype
    if backend == "torch":
        return torch.as_tensor(values).dtype
    return None


def promote(seq, value, backend: str):
    """Widen `seq` so that adding `value` to it does not truncate."""
    backend = check_backend(backend)
    if backend == "numpy":
        dtype = np.result_type(seq, value)
        return seq if dtype == seq.dtype else seq.astype(dtype)
    if backend == "torch":
        if not isinstance(value, (torch.Tensor, bool, int, float, complex)):
            value = torch.as_tensor(value)
        dtype = torch.result_type(seq, value)
        return seq if dtype == seq.dtype else seq.to(dtype)
    return seq
