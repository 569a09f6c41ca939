"""Row and column swaps on a flat in-memory matrix.

Rows are swapped as strided column-major rows (element ``(r, c)`` at
``c*n_rows + r``); columns are swapped as contiguous blocks starting at
``index*n_cols``.
"""


def _check_rows(matrix, n_rows, n_cols, i, j):
    if not (0 <= i < n_rows and 0 <= j < n_rows):
        raise IndexError("Row index out of range")
    if len(matrix) < n_rows * n_cols:
        raise IndexError("matrix smaller than n_rows * n_cols")


def _check_cols(matrix, n_rows, n_cols, i, j):
    if not (0 <= i < n_cols and 0 <= j < n_cols):
        raise IndexError("Column index out of range")
    if len(matrix) < max(i, j) * n_cols + n_rows:
        raise IndexError("column block extends past end of matrix")


def swap_rows(matrix, n_rows, n_cols, i, j):
    """Swap rows ``i`` and ``j`` in place using strided slices."""
    _check_rows(matrix, n_rows, n_cols, i, j)
    end = n_cols * n_rows
    row_i = slice(i, i + end, n_rows)
    row_j = slice(j, j + end, n_rows)
    matrix[row_i], matrix[row_j] = matrix[row_j], matrix[row_i]


def swap_cols(matrix, n_rows, n_cols, i, j):
    """Swap columns ``i`` and ``j`` in place using block slices."""
    _check_cols(matrix, n_rows, n_cols, i, j)
    col_i = slice(i * n_cols, i * n_cols + n_rows)
    col_j = slice(j * n_cols, j * n_cols + n_rows)
    matrix[col_i], matrix[col_j] = matrix[col_j], matrix[col_i]


def manual_swap_rows(matrix, n_rows, n_cols, i, j):
    """Swap rows ``i`` and ``j`` in place one element at a time."""
    _check_rows(matrix, n_rows, n_cols, i, j)
    for base in range(0, n_cols * n_rows, n_rows):
        temp = matrix[base + i]
        matrix[base + i] = matrix[base + j]
        matrix[base + j] = temp


def manual_swap_cols(matrix, n_rows, n_cols, i, j):
    """Swap columns ``i`` and ``j`` in place one element at a time."""
    _check_cols(matrix, n_rows, n_cols, i, j)
    off_i = i * n_cols
    off_j = j * n_cols
    for r in range(n_rows):
        temp = matrix[off_i + r]
        matrix[off_i + r] = matrix[off_j + r]
        matrix[off_j + r] = temp