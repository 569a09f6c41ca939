[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "matkernels"
version = "0.1.0"
description = "Plain-Python GEMM loop orderings, Strassen multiplication, in-memory and on-disk row/column swaps, and small benchmarks"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "matrix",
    "gemm",
    "strassen",
    "linear algebra",
    "benchmark",
    "machine epsilon",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
matkernels-gemm-bench = "matkernels.gemm_bench:main"
matkernels-io-bench = "matkernels.io_bench:main"
matkernels-swap-bench = "matkernels.swap_bench:main"
matkernels-mem-swap-bench = "matkernels.mem_swap_bench:main"
matkernels-strassen-bench = "matkernels.strassen_bench:main"
matkernels-precision = "matkernels.precision:main"
matkernels-processes = "matkernels.processes:main"
matkernels-rectangle = "matkernels.rectangle:main"
matkernels-random = "matkernels.random_demo:main"

[tool.hatch.build.targets.wheel]
packages = ["matkernels"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
