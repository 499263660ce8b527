"""
256-bit word arithmetic.

Words are plain Python ints kept in ``[0, 2**256)``. Python ints never
overflow, so every operation that can leave the range is reduced with an
explicit mask.

Binary operations take ``(a, b)`` in pop order: ``a`` is the first popped
operand (top of stack), ``b`` the second.
"""

WORD_BITS = 256
WORD_BYTES = WORD_BITS // 8
UINT256_CEIL = 1 << WORD_BITS
UINT256_MAX = UINT256_CEIL - 1


def to_word(value: int) -> int:
    """Reduce any integer modulo 2**256."""
    return value & UINT256_MAX


def from_bytes(data: bytes) -> int:
    return int.from_bytes(data, "big")


def to_bytes(value: int, size: int = WORD_BYTES) -> bytes:
    """Big-endian encoding of the low ``size`` bytes of ``value``."""
    return (value & ((1 << (size * 8)) - 1)).to_bytes(size, "big")


# Arithmetic

def add(a: int, b: int) -> int:
    return (a + b) & UINT256_MAX


def mul(a: int, b: int) -> int:
    return (a * b) & UINT256_MAX


def sub(a: int, b: int) -> int:
    """First-popped minus second-popped, wrapping."""
    return (a - b) & UINT256_MAX


def div(a: int, b: int) -> int:
    """``b // a``; the divisor is the first-popped operand. x / 0 == 0."""
    if a == 0:
        return 0
    return b // a


def mod(a: int, b: int) -> int:
    """``b % a``; x % 0 == 0."""
    if a == 0:
        return 0
    return b % a


# Comparison (unsigned)

def lt(a: int, b: int) -> int:
    return 1 if a < b else 0


def gt(a: int, b: int) -> int:
    return 1 if a > b else 0


def eq(a: int, b: int) -> int:
    return 1 if a == b else 0


# Bitwise

def and_(a: int, b: int) -> int:
    return b & a


def or_(a: int, b: int) -> int:
    return b | a


def xor(a: int, b: int) -> int:
    return b ^ a


def not_(x: int) -> int:
    return UINT256_MAX - (x & UINT256_MAX)


def shl(a: int, b: int) -> int:
    """Shift ``a`` left by ``b`` bits; shifts of 256 or more give 0."""
    if b >= WORD_BITS:
        return 0
    return (a << b) & UINT256_MAX


def shr(a: int, b: int) -> int:
    """Logical right shift of ``a`` by ``b`` bits."""
    if b >= WORD_BITS:
        return 0
    return a >> b
