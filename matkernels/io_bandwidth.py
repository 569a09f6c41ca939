"""Raw binary storage of square matrices of doubles."""

from array import array


def write_matrix_binary(filename, data, n):
    """Write the first ``n*n`` values of ``data`` to ``filename`` as doubles."""
    count = n * n
    if len(data) < count:
        raise ValueError(f"need {count} values for an {n}x{n} matrix, got {len(data)}")
    values = array("d", data[:count])
    try:
        with open(filename, "wb") as out:
            values.tofile(out)
    except OSError as exc:
        raise OSError(f"Error opening file for writing: {filename}") from exc


def read_matrix_binary(filename, n):
    """Read ``n*n`` doubles from ``filename`` and return them as a list."""
    values = array("d")
    try:
        with open(filename, "rb") as src:
            values.fromfile(src, n * n)
    except (OSError, EOFError) as exc:
        raise OSError(f"Error reading data from file: {filename}") from exc
    return values.tolist()