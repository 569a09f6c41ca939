"""A simple rectangle with integer sides."""

import argparse
from dataclasses import dataclass


@dataclass
class Rectangle:
    """Rectangle with sides ``x`` and ``y``."""

    x: int = 0
    y: int = 0

    def area(self):
        """Return ``x * y``."""
        return self.x * self.y

    def perimeter(self):
        """Return ``2x + 2y``."""
        return 2 * self.x + 2 * self.y


def main(argv=None):
    """Build a rectangle and print its area and perimeter."""
    parser = argparse.ArgumentParser(
        prog="rectangle", description="Print a rectangle's area and perimeter."
    )
    parser.add_argument("x", type=int, nargs="?", default=4)
    parser.add_argument("y", type=int, nargs="?", default=5)
    args = parser.parse_args(argv)

    print("rectangle constructed")
    rect = Rectangle(args.x, args.y)
    print(rect.area())
    print(rect.perimeter())
    print("rectangle destructed")
    return 0