from .reducer import COMPARE, DONE, REDUCE_A, REDUCE_B, Reducer, gcd
from .solution import Solution

__all__ = ["COMPARE", "DONE", "REDUCE_A", "REDUCE_B", "Reducer", "Solution", "gcd"]
