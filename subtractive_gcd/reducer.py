"""

Subtractive Euclidean Algorithm:

Two unsigned registers A and B hold the operands. Each round compares them the
way a 6502 CMP does (Carry = A >= B, Zero = A == B, Negative = top bit of A - B)
and branches on those flags: on Zero the loop is done, on Carry the smaller
value is subtracted from A, otherwise from B. No division or modulo is used.

    Compare --Z--> Done
    Compare --C--> ReduceA --> Compare
    Compare -----> ReduceB --> Compare

(0, 0) finishes on the first compare with result 0. When only one register is
zero the compare finishes with the other one, since subtracting zero would
never make them equal.

"""

from .config import BIT_WIDTH
from .helpers import check_operand, register_max

COMPARE = "Compare"
REDUCE_A = "ReduceA"
REDUCE_B = "ReduceB"
DONE = "Done"


class Reducer:
    def __init__(self, a: int, b: int, bit_width: int = BIT_WIDTH, record: bool = False):
        self.bit_width = bit_width
        self.mask = register_max(bit_width)
        self.a = check_operand("a", a, bit_width)
        self.b = check_operand("b", b, bit_width)

        self.carry = False
        self.zero = False
        self.negative = False

        self.state = COMPARE
        self.iterations = 0
        self.record = record
        self.history: list[tuple[str, int, int]] = []
        self._snapshot()

    def _snapshot(self):
        if self.record:
            self.history.append((self.state, self.a, self.b))

    @property
    def done(self) -> bool:
        return self.state == DONE

    @property
    def result(self) -> int:
        if not self.done:
            raise RuntimeError(f"result is not ready, reducer is in state {self.state}")
        return self.a

    def compare(self) -> str:
        """
        Set the flags from A - B and pick the next state
        """
        diff = (self.a - self.b) & self.mask
        self.carry = self.a >= self.b
        self.zero = diff == 0
        self.negative = bool(diff >> (self.bit_width - 1))

        if self.zero:
            return DONE
        if self.a == 0 or self.b == 0:
            self.a = self.b = self.a | self.b
            return DONE
        if self.carry:
            return REDUCE_A
        return REDUCE_B

    def step(self) -> str:
        if self.state == COMPARE:
            self.state = self.compare()
        elif self.state == REDUCE_A:
            self.a -= self.b
            self.iterations += 1
            self.state = COMPARE
        elif self.state == REDUCE_B:
            self.b -= self.a
            self.iterations += 1
            self.state = COMPARE
        else:
            return self.state

        self._snapshot()
        return self.state

    def run(self) -> int:
        while not self.done:
            self.step()
        return self.result

    def __repr__(self):
        return (
            f"Reducer(a={self.a}, b={self.b}, state={self.state}, "
            f"C={int(self.carry)} Z={int(self.zero)} N={int(self.negative)})"
        )


def gcd(a: int, b: int, bit_width: int = BIT_WIDTH) -> int:
    return Reducer(a, b, bit_width).run()


# ------------------ Basic Tests ------------------
def run_tests():
    r = Reducer(12, 18, record=True)
    assert r.run() == 6, f"FAILED: gcd(12, 18)\nGot: {r.result}"

    expected_trace = [
        (COMPARE, 12, 18),
        (REDUCE_B, 12, 18),
        (COMPARE, 12, 6),
        (REDUCE_A, 12, 6),
        (COMPARE, 6, 6),
        (DONE, 6, 6),
    ]
    assert r.history == expected_trace, (
        "FAILED: trace of gcd(12, 18)\n"
        f"Expected: {expected_trace}\n"
        f"Got: {r.history}"
    )
    assert r.iterations == 2, f"FAILED: iterations\nExpected: 2\nGot: {r.iterations}"

    print("✅ All tests passed")


if __name__ == "__main__":
    run_tests()
