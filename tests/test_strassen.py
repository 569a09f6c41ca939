import random

import pytest

from matkernels.strassen import (
    add_matrix,
    format_matrix,
    naive_multiply,
    next_power_of_2,
    pad_matrix,
    strassen_general,
    strassen_multiply,
    subtract_matrix,
    unpad_matrix,
)

A = [[1, 2], [3, 4]]
B = [[5, 6], [7, 8]]
E_MUL = [[19, 22], [43, 50]]


def _random_matrix(rng, rows, cols):
    return [[rng.randrange(10) for _ in range(cols)] for _ in range(rows)]


def test_add():
    assert add_matrix(A, B) == [[6, 8], [10, 12]]


def test_subtract():
    assert subtract_matrix(A, B) == [[-4, -4], [-4, -4]]


def test_naive_multiply():
    assert naive_multiply(A, B) == E_MUL


def test_strassen_small():
    assert strassen_multiply(A, B) == E_MUL


def test_strassen_recursion_matches_naive():
    n = 128
    rng = random.Random(0)
    a = _random_matrix(rng, n, n)
    b = _random_matrix(rng, n, n)
    assert strassen_multiply(a, b) == naive_multiply(a, b)


def test_naive_rectangular_mismatch():
    with pytest.raises(ValueError, match="dimension mismatch"):
        naive_multiply([[1, 2, 3]], [[1], [2]])


def test_naive_rectangular_shape():
    result = naive_multiply([[1, 2, 3], [4, 5, 6]], [[1, 4], [2, 5], [3, 6]])
    assert result == [[14, 32], [32, 77]]


def test_strassen_rejects_non_power_of_two():
    m = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    with pytest.raises(ValueError, match="powers of 2"):
        strassen_multiply(m, m)


def test_strassen_rejects_inner_mismatch():
    with pytest.raises(ValueError, match="dimension mismatch"):
        strassen_multiply([[1, 2], [3, 4]], [[1, 2]])


@pytest.mark.parametrize("n,expected", [(1, 1), (2, 2), (3, 4), (5, 8), (64, 64), (65, 128)])
def test_next_power_of_2(n, expected):
    assert next_power_of_2(n) == expected


def test_pad_unpad_round_trip():
    m = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    padded = pad_matrix(m, 4)
    assert padded == [[1, 2, 3, 0], [4, 5, 6, 0], [7, 8, 9, 0], [0, 0, 0, 0]]
    assert unpad_matrix(padded, 3) == m


@pytest.mark.parametrize("n", [3, 5, 70])
def test_strassen_general_matches_naive(n):
    rng = random.Random(n)
    a = _random_matrix(rng, n, n)
    b = _random_matrix(rng, n, n)
    assert strassen_general(a, b) == naive_multiply(a, b)


def test_strassen_general_power_of_two():
    assert strassen_general(A, B) == E_MUL


def test_strassen_general_rejects_non_square():
    with pytest.raises(ValueError, match="square and match"):
        strassen_general([[1, 2, 3], [4, 5, 6]], [[1, 2], [3, 4]])


def test_format_matrix():
    assert format_matrix(E_MUL) == "19 22 \n43 50 \n"
    assert format_matrix([[0.5, 2.0]]) == "0.5 2 \n"