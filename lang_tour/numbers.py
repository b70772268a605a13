import random

U32_MAX = 2 ** 32 - 1


def draw_random(low=1, high=101, rng=None):
    # upper bound is exclusive
    rng = rng or random
    return rng.randrange(low, high)


def parse_unsigned(text):
    if not text.isdecimal():
        return False, f"invalid digit in '{text}'"
    value = int(text)
    if value > U32_MAX:
        return False, f"'{text}' is too large for an unsigned 32-bit number"
    return True, value


def parse_or_default(text="123", default=0):
    ok, value = parse_unsigned(text)
    return value if ok else default


def convert_to_number(text="  123  "):
    text = text.strip()
    return parse_unsigned(text)
