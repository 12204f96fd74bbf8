import os

# ---------------- CONFIG ----------------
# Registers are unsigned; the reference program runs on 8-bit cells.
# The executable can override this with GCD_BIT_WIDTH, the library never does.
BIT_WIDTH = 8

# Operands used when the executable runs without GCD_A / GCD_B.
DEFAULT_A = 12
DEFAULT_B = 18

TRACE = False

TRUTHY = ("1", "true", "yes", "on")
FALSY = ("0", "false", "no", "off")


def env_int(name, default):
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


def env_flag(name, default):
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    value = value.strip().lower()
    if value in TRUTHY:
        return True
    if value in FALSY:
        return False
    raise ValueError(f"{name} must be one of {TRUTHY + FALSY}, got {value!r}")
