from __future__ import generator_stop

# values, input errors


class InvalidRank(IndexError):
    """Raised when a 1-based rank `k` does not address an element of the selected range,
    ie. when `k < 1` or `k > size`. Similar to IndexError, but for order statistics.
    """

    def __init__(self, k: int, size: int) -> None:
        IndexError.__init__(self, f"rank {k} is outside of [1, {size}]")
        self.k = k
        self.size = size


class ShapeMismatch(ValueError):
    """Raised when a matrix operand is not square or when two operands
    which must have the same size don't.
    """


class NotPowerOfTwo(ValueError):
    """Raised when a size must be a power of two, but isn't.
    Recursive halving algorithms require this at every level.
    """

    def __init__(self, name: str, n: int) -> None:
        ValueError.__init__(self, f"{name} must be a power of two, not {n}")
        self.n = n


class EmptyIterable(ValueError):
    """Raised when Iterable is passed which doesn't yield any values,
    and thus not resulted can be computed.
    """

