from __future__ import generator_stop

from concurrent.futures import ThreadPoolExecutor
from copy import deepcopy
from random import randint

from dcalgos.exceptions import NotPowerOfTwo, ShapeMismatch
from dcalgos.matrix import (
    add,
    identity,
    is_square_matrix,
    join_into,
    multiply,
    naive_multiply,
    split,
    subtract,
    zeros,
)
from dcalgos.test import MyTestCase, parametrize, repeat

A2 = [[1, 2], [3, 4]]
B2 = [[5, 6], [7, 8]]
C2 = [[19, 22], [43, 50]]


def random_matrix(n, low=-20, high=20):
    return [[randint(low, high) for _ in range(n)] for _ in range(n)]


def embed(m, n):
    """Puts `m` into the top-left corner of an `n` x `n` matrix of zeros."""

    out = zeros(n)
    for i, row in enumerate(m):
        out[i][: len(row)] = row
    return out


class MatrixTest(MyTestCase):
    def test_zeros(self):
        self.assertEqual([[0, 0], [0, 0]], zeros(2))
        self.assertEqual([], zeros(0))

    def test_zeros_rows_are_independent(self):
        m = zeros(2)
        m[0][0] = 1
        self.assertEqual([[1, 0], [0, 0]], m)

    def test_identity(self):
        self.assertEqual([[1, 0, 0], [0, 1, 0], [0, 0, 1]], identity(3))

    @parametrize(
        ([], True),
        ([[1]], True),
        ([[1, 2], [3, 4]], True),
        ([[1, 2], [3]], False),
        ([[1, 2, 3], [4, 5, 6]], False),
    )
    def test_is_square_matrix(self, m, truth):
        result = is_square_matrix(m)
        self.assertEqual(truth, result)

    def test_add_subtract(self):
        self.assertEqual([[6, 8], [10, 12]], add(A2, B2))
        self.assertEqual([[-4, -4], [-4, -4]], subtract(A2, B2))

    def test_split(self):
        m = [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12], [13, 14, 15, 16]]
        truth = (
            [[1, 2], [5, 6]],
            [[3, 4], [7, 8]],
            [[9, 10], [13, 14]],
            [[11, 12], [15, 16]],
        )
        result = split(m)
        self.assertEqual(truth, result)

        # quadrants are copies
        result[0][0][0] = 100
        self.assertEqual(1, m[0][0])

    def test_join_into(self):
        C = zeros(4)
        join_into(C, [[1, 2], [5, 6]], [[3, 4], [7, 8]], [[9, 10], [13, 14]], [[11, 12], [15, 16]])
        truth = [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12], [13, 14, 15, 16]]
        self.assertEqual(truth, C)

    @parametrize(
        (A2, B2, C2),
        ([[1, 2, 3]], [[1], [2], [3]], [[14]]),
        ([[1], [2]], [[3, 4]], [[3, 4], [6, 8]]),
    )
    def test_naive_multiply(self, A, B, truth):
        result = naive_multiply(A, B)
        self.assertEqual(truth, result)

    def test_naive_multiply_shape(self):
        with self.assertRaises(ShapeMismatch):
            naive_multiply([[1, 2]], [[1, 2]])

    def test_multiply_scenario(self):
        result = multiply(A2, B2, 2)
        self.assertEqual(C2, result)

    def test_multiply_embedded(self):
        A = embed(A2, 4)
        B = embed(B2, 4)
        result = multiply(A, B, 4)
        self.assertEqual(naive_multiply(A, B), result)
        self.assertEqual(embed(C2, 4), result)

    def test_multiply_block_diagonal(self):
        A = [[1, 2, 0, 0], [3, 4, 0, 0], [0, 0, 1, 2], [0, 0, 3, 4]]
        B = [[5, 6, 0, 0], [7, 8, 0, 0], [0, 0, 5, 6], [0, 0, 7, 8]]
        truth = [[19, 22, 0, 0], [43, 50, 0, 0], [0, 0, 19, 22], [0, 0, 43, 50]]
        result = multiply(A, B)
        self.assertEqual(truth, result)

    @parametrize((1,), (2,), (4,), (8,), (16,), (32,))
    def test_multiply_random(self, n):
        A = random_matrix(n)
        B = random_matrix(n)
        result = multiply(A, B, n)
        self.assertEqual(naive_multiply(A, B), result)

    @repeat(3)
    def test_multiply_big_integers(self):
        A = random_matrix(4, -(10**20), 10**20)
        B = random_matrix(4, -(10**20), 10**20)
        result = multiply(A, B)
        self.assertEqual(naive_multiply(A, B), result)

    @parametrize((1,), (2,), (8,))
    def test_multiply_identity(self, n):
        A = random_matrix(n)
        self.assertEqual(A, multiply(A, identity(n), n))
        self.assertEqual(A, multiply(identity(n), A, n))

    @parametrize((1,), (4,))
    def test_multiply_zero(self, n):
        A = random_matrix(n)
        self.assertEqual(zeros(n), multiply(A, zeros(n), n))

    def test_multiply_inputs_unchanged(self):
        A = random_matrix(8)
        B = random_matrix(8)
        A_copy = deepcopy(A)
        B_copy = deepcopy(B)
        multiply(A, B)
        self.assertEqual(A_copy, A)
        self.assertEqual(B_copy, B)

    def test_multiply_result_is_new(self):
        A = identity(2)
        result = multiply(A, A)
        result[0][0] = 5
        self.assertEqual(identity(2), A)

    @parametrize((3,), (6,), (12,))
    def test_multiply_not_power_of_two(self, n):
        A = random_matrix(n)
        with self.assertRaises(NotPowerOfTwo) as cm:
            multiply(A, A, n)
        self.assertEqual(n, cm.exception.n)

    def test_multiply_empty(self):
        with self.assertRaises(NotPowerOfTwo):
            multiply([], [])

    @parametrize(
        ([[1, 2], [3]], A2, None),
        (A2, [[1, 2, 3], [4, 5, 6]], None),
        (A2, identity(4), None),
        (A2, B2, 4),
    )
    def test_multiply_shape(self, A, B, n):
        with self.assertRaises(ShapeMismatch):
            multiply(A, B, n)

    @parametrize((1,), (2,), (16,))
    def test_multiply_parallel(self, n):
        A = random_matrix(n)
        B = random_matrix(n)
        result = multiply(A, B, n, parallel=True, workers=7)
        self.assertEqual(multiply(A, B, n), result)
        self.assertEqual(naive_multiply(A, B), result)

    def test_multiply_parallel_executorcls(self):
        result = multiply(A2, B2, parallel=True, executorcls=ThreadPoolExecutor)
        self.assertEqual(C2, result)


if __name__ == "__main__":
    import unittest

    unittest.main()
