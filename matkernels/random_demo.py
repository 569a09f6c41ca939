"""Two ways of drawing a small random integer."""

import argparse
import random


def random_below(limit, rng=None):
    """Return a random integer in ``[0, limit)``."""
    if limit <= 0:
        raise ValueError("limit must be positive")
    rng = rng or random.Random()
    return rng.randrange(limit)


def random_in_range(low, high, rng=None):
    """Return a uniformly distributed integer in ``[low, high]``."""
    if low > high:
        raise ValueError("low must not exceed high")
    rng = rng or random.Random()
    return rng.randint(low, high)


def main(argv=None):
    """Print one number from each method."""
    parser = argparse.ArgumentParser(
        prog="random-demo", description="Draw random numbers two ways."
    )
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    print(
        "Method 1 (modulo): Random number between 0 and 10: "
        f"{random_below(10, rng)}"
    )
    print(
        "Method 2 (uniform distribution): Random number between 0 and 10: "
        f"{random_in_range(0, 10, rng)}"
    )
    return 0