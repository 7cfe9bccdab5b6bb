from __future__ import generator_stop

import concurrent.futures
import logging
from typing import Callable, List, Optional, Sequence, Tuple

from .exceptions import NotPowerOfTwo, ShapeMismatch
from .math import is_power_of_two

Matrix = List[List[int]]

logger = logging.getLogger(__name__)


def zeros(n: int) -> Matrix:

    """Returns a new `n` x `n` matrix filled with zeros."""

    return [[0] * n for _ in range(n)]


def identity(n: int) -> Matrix:

    """Returns a new `n` x `n` identity matrix."""

    m = zeros(n)
    for i in range(n):
        m[i][i] = 1
    return m


def is_square_matrix(m: Sequence[Sequence[int]]) -> bool:

    n = len(m)
    return all(len(row) == n for row in m)


def assert_square_matrix(name: str, value: Sequence[Sequence[int]]) -> None:

    """Raises a ShapeMismatch if matrix `value` is not square.
    value: [A, A]
    """

    if not is_square_matrix(value):
        raise ShapeMismatch(f"{name} must be a square matrix")


def add(X: Matrix, Y: Matrix) -> Matrix:
    return [[x + y for x, y in zip(row_x, row_y)] for row_x, row_y in zip(X, Y)]


def subtract(X: Matrix, Y: Matrix) -> Matrix:
    return [[x - y for x, y in zip(row_x, row_y)] for row_x, row_y in zip(X, Y)]


def split(m: Matrix) -> Tuple[Matrix, Matrix, Matrix, Matrix]:

    """Returns copies of the four quadrants of the square matrix `m` in the order
    top-left, top-right, bottom-left, bottom-right.
    """

    h = len(m) // 2
    return (
        [row[:h] for row in m[:h]],
        [row[h:] for row in m[:h]],
        [row[:h] for row in m[h:]],
        [row[h:] for row in m[h:]],
    )


def join_into(C: Matrix, C11: Matrix, C12: Matrix, C21: Matrix, C22: Matrix) -> None:

    """Writes the four quadrants into the matrix `C` which must be twice their size."""

    h = len(C11)
    for i in range(h):
        C[i][:h] = C11[i]
        C[i][h:] = C12[i]
        C[i + h][:h] = C21[i]
        C[i + h][h:] = C22[i]


def naive_multiply(A: Sequence[Sequence[int]], B: Sequence[Sequence[int]]) -> Matrix:

    """Textbook O(n*m*p) matrix product. Works for any compatible shapes."""

    if A and len(A[0]) != len(B):
        raise ShapeMismatch("Matrix A's column count must match Matrix B's row count.")

    return [[sum(a * b for a, b in zip(row, col)) for col in zip(*B)] for row in A]


def _factors(A: Matrix, B: Matrix) -> List[Tuple[Matrix, Matrix]]:

    """Returns the seven pairs of factors whose products are needed to recombine `A x B`."""

    A11, A12, A21, A22 = split(A)
    B11, B12, B21, B22 = split(B)

    S1 = subtract(B12, B22)
    S2 = add(A11, A12)
    S3 = add(A21, A22)
    S4 = subtract(B21, B11)
    S5 = add(A11, A22)
    S6 = add(B11, B22)
    S7 = subtract(A12, A22)
    S8 = add(B21, B22)
    S9 = subtract(A11, A21)
    S10 = add(B11, B12)

    return [
        (A11, S1),  # P1
        (S2, B22),  # P2
        (S3, B11),  # P3
        (A22, S4),  # P4
        (S5, S6),  # P5
        (S7, S8),  # P6
        (S9, S10),  # P7
    ]


def _combine(products: List[Matrix], n: int) -> Matrix:

    P1, P2, P3, P4, P5, P6, P7 = products

    C11 = add(subtract(add(P5, P4), P2), P6)
    C12 = add(P1, P2)
    C21 = add(P3, P4)
    C22 = subtract(subtract(add(P5, P1), P3), P7)

    C = zeros(n)
    join_into(C, C11, C12, C21, C22)
    return C


def _strassen(A: Matrix, B: Matrix) -> Matrix:

    n = len(A)
    if n == 1:
        return [[A[0][0] * B[0][0]]]

    factors = _factors(A, B)
    products = [_strassen(X, Y) for X, Y in factors]
    del factors  # quadrants and sums are not needed for the recombination

    return _combine(products, n)


def _strassen_parallel(A: Matrix, B: Matrix, executorcls: Callable, workers: Optional[int]) -> Matrix:

    n = len(A)
    if n == 1:
        return _strassen(A, B)

    factors = _factors(A, B)

    logger.debug("Submitting 7 products of size %d to %s", n // 2, executorcls.__name__)
    with executorcls(workers) as executor:
        futures = [executor.submit(_strassen, X, Y) for X, Y in factors]
        del factors
        products = [future.result() for future in futures]

    return _combine(products, n)


def multiply(
    A: Matrix,
    B: Matrix,
    n: Optional[int] = None,
    parallel: bool = False,
    workers: Optional[int] = None,
    executorcls: Optional[Callable] = None,
) -> Matrix:

    """Multiplies the `n` x `n` matrices `A` and `B` using Strassen's algorithm,
    ie. with 7 instead of 8 recursive multiplications per level.
    `n` must be a power of two. No padding is done.

    If `parallel` is True, the 7 products of the first level are computed concurrently
    by an executor of class `executorcls` (defaults to `concurrent.futures.ThreadPoolExecutor`)
    with `workers` workers. A `ProcessPoolExecutor` will actually use multiple cores.

    The inputs are not modified. Returns a new matrix.
    """

    assert_square_matrix("A", A)
    assert_square_matrix("B", B)

    if n is None:
        n = len(A)

    if len(A) != n or len(B) != n:
        raise ShapeMismatch(f"A and B must be {n}x{n} matrices")

    if not is_power_of_two(n):
        raise NotPowerOfTwo("n", n)

    if parallel:
        if executorcls is None:
            executorcls = concurrent.futures.ThreadPoolExecutor
        return _strassen_parallel(A, B, executorcls, workers)
    else:
        return _strassen(A, B)
