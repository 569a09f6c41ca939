# matkernels

Plain-Python matrix kernels and the small benchmarks built around them.
No third-party libraries are needed.

## What is inside

- `matkernels.gemm` – `mm_kij` and `mm_jki`, two loop orderings of
  `C <- a*A*B + b*C` on flat row-major lists, updating `C` in place.
  Operands too short for the given `m`, `p`, `n` raise `ValueError`.
- `matkernels.strassen` – on nested lists: `add_matrix`, `subtract_matrix`,
  `naive_multiply`, `strassen_multiply` (square, power-of-two sizes; sizes up
  to 64 fall back to the naive product), `strassen_general` (any square size,
  padded to the next power of two), and the helpers `next_power_of_2`,
  `pad_matrix`, `unpad_matrix` and `format_matrix`. Mismatched shapes raise
  `ValueError`.
- `matkernels.mem_swaps` – `swap_rows`, `swap_cols`, `manual_swap_rows` and
  `manual_swap_cols` on a flat list, in place. Out-of-range indices raise
  `IndexError`.
- `matkernels.file_swaps` – `swap_rows_in_file` and `swap_cols_in_file`,
  which swap rows or columns of a column-major matrix of doubles stored in a
  binary file opened for reading and writing (`"r+b"`).
- `matkernels.io_bandwidth` – `write_matrix_binary` and `read_matrix_binary`
  for an `n x n` matrix of doubles; failures are raised as `OSError`.
- `matkernels.precision` – `machine_epsilon_single`, `machine_epsilon_double`,
  `wide_product` (signed 64-bit wrap-around), `unsigned_countdown` (32-bit
  unsigned wrap-around) and `find_combinations` (non-negative counts whose
  weighted sum hits a target).
- `matkernels.processes` – `fork_and_report`, `cosine_points`,
  `write_cosine_data` and `run_plot_script`.
- `matkernels.rectangle.Rectangle` – a dataclass with `area()` and
  `perimeter()`.
- `matkernels.random_demo` – `random_below` and `random_in_range`.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Example

```python
from matkernels.gemm import mm_kij
from matkernels.strassen import strassen_general, strassen_multiply

print(strassen_multiply([[1, 2], [3, 4]], [[5, 6], [7, 8]]))
# [[19, 22], [43, 50]]

print(strassen_general([[1, 2, 3], [4, 5, 6], [7, 8, 9]],
                       [[1, 0, 0], [0, 1, 0], [0, 0, 1]]))
# [[1, 2, 3], [4, 5, 6], [7, 8, 9]]

C = [0.0] * 4
mm_kij(1.0, [1.0, 2.0, 3.0, 4.0], [5.0, 6.0, 7.0, 8.0], 0.0, C, 2, 2, 2)
print(C)   # [19.0, 22.0, 43.0, 50.0]
```

## Commands

Each benchmark prints CSV to standard output.

```
matkernels-gemm-bench O3          # GEMM loop orderings (O0 or O3 is a label); --max-n, --trials
matkernels-io-bench               # binary write/read bandwidth; --sizes, --trials, --path
matkernels-swap-bench             # row/column swaps inside a file; --sizes, --trials, --path
matkernels-mem-swap-bench         # row/column swaps in memory; --max-n, --trials
matkernels-strassen-bench         # Strassen multiplication timings; --max-n, --trials
```

Smaller demonstrations:

```
matkernels-precision 1 3 4 8      # floating-point and integer experiments (8 by default)
matkernels-processes fork         # fork a child; parent and child print their pids
matkernels-processes plot         # write data.txt, run plot_data.py, delete data.txt
matkernels-rectangle 4 5          # rectangle area and perimeter
matkernels-random --seed 1        # random integers two ways
```

## What it does not do

- There is no matrix class: matrices are plain nested lists
  (`matkernels.strassen`) or flat lists (`matkernels.gemm`,
  `matkernels.mem_swaps`).
- No plotting script is included. `matkernels-processes plot` runs whatever
  file `--script` names (default `plot_data.py` in the current directory)
  with the current Python interpreter.
- `fork_and_report` uses `os.fork` and so works only on POSIX systems.