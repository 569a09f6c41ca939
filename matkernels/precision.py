"""Floating-point precision and integer-width experiments."""

import argparse
import operator
import struct
from itertools import product

_SEARCH_LIMIT = 100
_WIDE_BITS = 64
_UNSIGNED_BITS = 32
DEFAULT_TARGET = 107
DEFAULT_WEIGHTS = (6, 9, 15)


def _to_single(x):
    """Round ``x`` to the nearest single-precision value."""
    return struct.unpack("f", struct.pack("f", x))[0]


def _to_double(x):
    return float(x)


def _estimate_epsilon(round_to):
    one = round_to(1.0)
    for j in range(_SEARCH_LIMIT + 1):
        b = round_to(one + round_to(1.0 / round_to(2.0 ** j)))
        if round_to(one - b) == 0.0:
            return round_to(1.0 / round_to(2.0 ** (j - 1)))
    raise ArithmeticError("machine epsilon not found within search limit")


def machine_epsilon_single():
    """Estimate machine epsilon for 32-bit floats by halving until 1 + h == 1."""
    return _estimate_epsilon(_to_single)


def machine_epsilon_double():
    """Estimate machine epsilon for 64-bit floats by halving until 1 + h == 1."""
    return _estimate_epsilon(_to_double)


def _wrap_signed(value, bits):
    mask = (1 << bits) - 1
    value &= mask
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def wide_product(*args):
    """Multiply integers as a signed 64-bit type would, wrapping on overflow."""
    result = 1
    for factor in args:
        result = _wrap_signed(result * operator.index(factor), _WIDE_BITS)
    return result


def unsigned_countdown(decrements):
    """Return a 32-bit unsigned counter that starts at 0 after ``decrements`` decrements."""
    if decrements < 0:
        raise ValueError("decrements must be non-negative")
    return -decrements % (1 << _UNSIGNED_BITS)


def find_combinations(target, weights=DEFAULT_WEIGHTS):
    """Return every tuple of counts whose weighted sum equals ``target``.

    Tuples come in lexicographic order of the counts.
    """
    weights = tuple(weights)
    if any(w <= 0 for w in weights):
        raise ValueError("weights must be positive")
    ranges = [range(max(target // w + 2, 0)) for w in weights]
    return [
        counts
        for counts in product(*ranges)
        if sum(w * c for w, c in zip(weights, counts)) == target
    ]


def _question1():
    single = machine_epsilon_single()
    double = machine_epsilon_double()
    return [
        "###### Single (32 bits) Precision: #######",
        f"Estimated single-precision (32 bit) machine epsilon: {single:g}",
        "",
        "###### Double (64 bits) Precision: #######",
        f"Estimated double-precision (64 bit) machine epsilon: {double:g}",
    ]


def _question3():
    result = wide_product(200, 300, 400, 500)
    return [
        f"Question 3 (long type): {result}",
        f"Question 3 (long long type): {result}",
    ]


def _question4():
    counter = unsigned_countdown(3)
    return [f"Final Counter Value: {counter}"]


def _question8():
    combos = find_combinations(DEFAULT_TARGET, DEFAULT_WEIGHTS)
    lines = [", ".join(str(c) for c in combo) for combo in combos]
    if not combos:
        lines.append("Question 8: DNE")
    return lines


_QUESTIONS = {1: _question1, 3: _question3, 4: _question4, 8: _question8}


def main(argv=None):
    """Run the selected questions (question 8 by default)."""
    parser = argparse.ArgumentParser(
        prog="precision", description="Precision and integer-width experiments."
    )
    parser.add_argument(
        "questions", type=int, nargs="*", choices=sorted(_QUESTIONS), default=[8]
    )
    args = parser.parse_args(argv)
    for question in args.questions:
        for line in _QUESTIONS[question]():
            print(line)
    return 0