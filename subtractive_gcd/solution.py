"""

GCD by repeated subtraction:

The GCD of two numbers stays the same when the smaller number is subtracted
from the larger one. Repeating that until both numbers are equal leaves the GCD
in both registers.

"""

from .config import BIT_WIDTH
from .reducer import Reducer


class Solution:
    def gcd(self, a: int, b: int) -> int:
        """
        GCD logic
        """

        return Reducer(a, b, BIT_WIDTH).run()


# ------------------ Basic Tests ------------------
def run_tests():
    sol = Solution()

    test_cases = [
        (0, 0, 0),
        (0, 5, 5),
        (5, 0, 5),
        (1, 1, 1),
        (12, 18, 6),
        (18, 12, 6),
        (7, 13, 1),
        (17, 13, 1),
        (100, 75, 25),
        (100, 10, 10),
        (255, 85, 85),
    ]

    for a, b, expected in test_cases:
        result = sol.gcd(a, b)
        assert result == expected, (
            f"FAILED: gcd({a}, {b})\n"
            f"Expected: {expected}\n"
            f"Got: {result}"
        )

    print("✅ All tests passed")


if __name__ == "__main__":
    run_tests()
