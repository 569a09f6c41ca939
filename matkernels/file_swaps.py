"""Row and column swaps on a column-major matrix of doubles stored in a file.

Element ``(r, c)`` of an ``n_rows x n_cols`` matrix lives at byte offset
``(c*n_rows + r) * 8``. The file must be open for binary reading and writing.
"""

from array import array

_ITEM_SIZE = array("d").itemsize


def _read_exact(file, offset, count):
    file.seek(offset)
    raw = file.read(count)
    if len(raw) != count:
        raise EOFError(
            f"expected {count} bytes at offset {offset}, got {len(raw)}"
        )
    return raw


def swap_rows_in_file(file, n_rows, n_cols, i, j):
    """Swap rows ``i`` and ``j`` in place, one element per column."""
    if not (0 <= i < n_rows and 0 <= j < n_rows):
        raise IndexError("Row index out of range")
    for c in range(n_cols):
        off_i = (c * n_rows + i) * _ITEM_SIZE
        off_j = (c * n_rows + j) * _ITEM_SIZE
        value_i = _read_exact(file, off_i, _ITEM_SIZE)
        value_j = _read_exact(file, off_j, _ITEM_SIZE)
        file.seek(off_i)
        file.write(value_j)
        file.seek(off_j)
        file.write(value_i)
    file.flush()


def swap_cols_in_file(file, n_rows, n_cols, i, j):
    """Swap columns ``i`` and ``j`` in place as contiguous blocks."""
    if not (0 <= i < n_cols and 0 <= j < n_cols):
        raise IndexError("Columns index out of range")
    block = n_rows * _ITEM_SIZE
    off_i = i * block
    off_j = j * block
    col_i = _read_exact(file, off_i, block)
    col_j = _read_exact(file, off_j, block)
    file.seek(off_i)
    file.write(col_j)
    file.seek(off_j)
    file.write(col_i)
    file.flush()