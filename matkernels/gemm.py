"""General matrix-multiply kernels on flat row-major lists, in two loop orders.

Both compute ``C <- a*A*B + b*C`` in place, where ``A`` is ``m x p``,
``B`` is ``p x n`` and ``C`` is ``m x n``.
"""


def _check_sizes(A, B, C, m, p, n):
    if len(A) < m * p or len(B) < p * n or len(C) < m * n:
        raise ValueError(
            f"operand sizes ({len(A)}, {len(B)}, {len(C)}) too small for "
            f"m={m}, p={p}, n={n}"
        )


def mm_kij(a, A, B, b, C, m, p, n):
    """Update ``C`` in place with the k-i-j loop ordering."""
    _check_sizes(A, B, C, m, p, n)
    size = m * n
    C[:size] = [b * c for c in C[:size]]
    for k in range(p):
        b_row = B[k * n:(k + 1) * n]
        for i in range(m):
            aik = A[i * p + k]
            start = i * n
            C[start:start + n] = [
                c + a * aik * bkj for c, bkj in zip(C[start:start + n], b_row)
            ]


def mm_jki(a, A, B, b, C, m, p, n):
    """Update ``C`` in place with the j-k-i loop ordering."""
    _check_sizes(A, B, C, m, p, n)
    size = m * n
    C[:size] = [b * c for c in C[:size]]
    for j in range(n):
        col = slice(j, size, n)
        for k in range(p):
            bkj = B[k * n + j]
            C[col] = [c + a * aik * bkj for c, aik in zip(C[col], A[k:m * p:p])]