from __future__ import generator_stop

import numpy as np

from .exceptions import NotPowerOfTwo, ShapeMismatch
from .math import is_power_of_two


def assert_square(name: str, value: np.ndarray) -> None:

    """Raises a ShapeMismatch if matrix `value` is not square.
    value: [A, A]
    """

    if not is_square(value):
        raise ShapeMismatch(f"{name} must be a square")


def is_square(A: np.ndarray) -> bool:

    if len(A.shape) != 2:
        return False

    if A.shape[0] != A.shape[1]:
        return False

    return True


def _strassen(A: np.ndarray, B: np.ndarray, leaf_size: int) -> np.ndarray:

    n = A.shape[0]

    if n <= leaf_size:
        return np.dot(A, B)

    h = n // 2

    # slices are views, they are only read from
    A11, A12, A21, A22 = A[:h, :h], A[:h, h:], A[h:, :h], A[h:, h:]
    B11, B12, B21, B22 = B[:h, :h], B[:h, h:], B[h:, :h], B[h:, h:]

    P1 = _strassen(A11, B12 - B22, leaf_size)
    P2 = _strassen(A11 + A12, B22, leaf_size)
    P3 = _strassen(A21 + A22, B11, leaf_size)
    P4 = _strassen(A22, B21 - B11, leaf_size)
    P5 = _strassen(A11 + A22, B11 + B22, leaf_size)
    P6 = _strassen(A12 - A22, B21 + B22, leaf_size)
    P7 = _strassen(A11 - A21, B11 + B12, leaf_size)

    C = np.empty((n, n), dtype=P1.dtype)
    C[:h, :h] = P5 + P4 - P2 + P6
    C[:h, h:] = P1 + P2
    C[h:, :h] = P3 + P4
    C[h:, h:] = P5 + P1 - P3 - P7

    return C


def strassen(A: np.ndarray, B: np.ndarray, leaf_size: int = 1) -> np.ndarray:

    """Matrix product of the square arrays `A` and `B` using Strassen's algorithm.
    Sizes must be equal and a power of two. Blocks of size `leaf_size` or smaller are multiplied
    using `np.dot`.

    Integer arithmetic is exact unless the dtype overflows. Use `dtype=object` arrays
    of Python ints for arbitrary precision.
    """

    assert_square("A", A)
    assert_square("B", B)

    if A.shape != B.shape:
        raise ShapeMismatch("A and B must have the same shape")

    n = A.shape[0]
    if not is_power_of_two(n):
        raise NotPowerOfTwo("n", n)

    if leaf_size < 1:
        raise ValueError("leaf_size must be at least 1")

    return _strassen(A, B, leaf_size)
