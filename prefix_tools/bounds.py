import operator


def check_range(l, r, size: int) -> tuple[int, int]:
    """Validate a half-open interval [l, r) against a sequence of `size` items."""
    l = operator.index(l)
    r = operator.index(r)
    if l < 0 or l > r or r > size:
        raise IndexError(f"Range [{l}, {r}) out of bounds for size {size}")
    return l, r
