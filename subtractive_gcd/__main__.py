import sys

from .config import BIT_WIDTH, DEFAULT_A, DEFAULT_B, TRACE, env_flag, env_int
from .helpers import log
from .reducer import Reducer

# ---------------- MAIN ----------------
def main():
    bit_width = env_int("GCD_BIT_WIDTH", BIT_WIDTH)
    a = env_int("GCD_A", DEFAULT_A)
    b = env_int("GCD_B", DEFAULT_B)
    trace = env_flag("GCD_TRACE", TRACE)

    reducer = Reducer(a, b, bit_width, record=trace)
    result = reducer.run()

    if trace:
        log(f"Reducing ({a}, {b}) in {bit_width}-bit registers")
        for state, reg_a, reg_b in reducer.history:
            log(f"{state:<8} A={reg_a:<4} B={reg_b}")
        log(f"Done after {reducer.iterations} subtractions")

    print(f"gcd({a}, {b}) = {result}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
