from datetime import datetime, timezone

# ---------------- HELPERS ----------------
def log(msg):
    print(f"[{datetime.now(timezone.utc).strftime('%Y-%m-%d %H:%M:%S')}] {msg}")

def register_max(bit_width):
    if isinstance(bit_width, bool) or not isinstance(bit_width, int) or bit_width < 1:
        raise ValueError(f"bit_width must be a positive integer, got {bit_width!r}")
    return (1 << bit_width) - 1

def check_operand(name, value, bit_width):
    """
    Validate one operand against an unsigned register of `bit_width` bits.
    Never truncates: anything that would not fit raises OverflowError.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")

    limit = register_max(bit_width)
    if value < 0 or value > limit:
        raise OverflowError(
            f"{name}={value} does not fit an unsigned {bit_width}-bit register (0..{limit})"
        )
    return value
