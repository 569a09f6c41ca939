"""Matrix arithmetic on nested lists and Strassen's multiplication."""

from __future__ import annotations

_NAIVE_CUTOFF = 64


def add_matrix(A, B):
    """Return the element-wise sum of two equally shaped matrices."""
    return [[a + b for a, b in zip(ra, rb)] for ra, rb in zip(A, B)]


def subtract_matrix(A, B):
    """Return the element-wise difference ``A - B``."""
    return [[a - b for a, b in zip(ra, rb)] for ra, rb in zip(A, B)]


def _check_inner(A, B):
    m = len(A[0])
    if m != len(B):
        raise ValueError(
            "Matrix multiplication dimension mismatch: first matrix columns "
            f"({m}) must match second matrix rows ({len(B)})"
        )


def naive_multiply(A, B):
    """Return ``A @ B`` computed with the triple loop (i-k-j order)."""
    _check_inner(A, B)
    p = len(B[0])
    result = []
    for a_row in A:
        c_row = [0] * p
        for aik, b_row in zip(a_row, B):
            c_row = [c + aik * bkj for c, bkj in zip(c_row, b_row)]
        result.append(c_row)
    return result


def _split(M, k):
    top, bottom = M[:k], M[k:]
    return (
        [row[:k] for row in top],
        [row[k:] for row in top],
        [row[:k] for row in bottom],
        [row[k:] for row in bottom],
    )


def strassen_multiply(A, B):
    """Multiply square power-of-two matrices with Strassen's recursion."""
    _check_inner(A, B)
    n, m, p = len(A), len(A[0]), len(B[0])
    if n != m or n != p or n != len(B) or (n & (n - 1)) != 0:
        raise ValueError(
            "Strassen's algorithm requires square matrices with dimensions "
            "that are powers of 2"
        )
    if n <= _NAIVE_CUTOFF:
        return naive_multiply(A, B)

    k = n // 2
    a11, a12, a21, a22 = _split(A, k)
    b11, b12, b21, b22 = _split(B, k)

    m1 = strassen_multiply(add_matrix(a11, a22), add_matrix(b11, b22))
    m2 = strassen_multiply(add_matrix(a21, a22), b11)
    m3 = strassen_multiply(a11, subtract_matrix(b12, b22))
    m4 = strassen_multiply(a22, subtract_matrix(b21, b11))
    m5 = strassen_multiply(add_matrix(a11, a12), b22)
    m6 = strassen_multiply(subtract_matrix(a21, a11), add_matrix(b11, b12))
    m7 = strassen_multiply(subtract_matrix(a12, a22), add_matrix(b21, b22))

    c11 = add_matrix(subtract_matrix(add_matrix(m1, m4), m5), m7)
    c12 = add_matrix(m3, m5)
    c21 = add_matrix(m2, m4)
    c22 = add_matrix(add_matrix(subtract_matrix(m1, m2), m3), m6)

    top = [left + right for left, right in zip(c11, c12)]
    bottom = [left + right for left, right in zip(c21, c22)]
    return top + bottom


def next_power_of_2(n):
    """Return the smallest power of two that is at least ``n`` (1 for n <= 1)."""
    power = 1
    while power < n:
        power *= 2
    return power


def pad_matrix(A, p):
    """Embed the square matrix ``A`` in the top-left of a ``p x p`` zero matrix."""
    n = len(A)
    padded = [list(row[:n]) + [0] * (p - n) for row in A]
    padded.extend([0] * p for _ in range(p - n))
    return padded


def unpad_matrix(P, n):
    """Return the top-left ``n x n`` block of ``P``."""
    return [list(row[:n]) for row in P[:n]]


def strassen_general(A, B):
    """Multiply square matrices of any size, padding to a power of two."""
    n = len(A)
    if len(A[0]) != n or len(B) != n or len(B[0]) != n:
        raise ValueError("Matrix dimensions must be square and match")
    p = next_power_of_2(n)
    if p == n:
        return strassen_multiply(A, B)
    product = strassen_multiply(pad_matrix(A, p), pad_matrix(B, p))
    return unpad_matrix(product, n)


def _format_value(x):
    if isinstance(x, float):
        return f"{x:g}"
    return str(x)


def format_matrix(matrix):
    """Render each row as space-terminated values followed by a newline."""
    return "".join(
        "".join(f"{_format_value(x)} " for x in row) + "\n" for row in matrix
    )