"""
Opcode definitions for the minievm instruction set.

Opcode byte values follow the EVM numbering. PUSH1..PUSH32 are a contiguous
range whose immediate length is derived from the opcode itself.
"""
from enum import IntEnum
from typing import Dict, Optional


class Opcode(IntEnum):
    """Recognised opcodes"""
    # Arithmetic
    ADD = 0x01
    MUL = 0x02
    SUB = 0x03
    DIV = 0x04
    MOD = 0x06

    # Comparison
    LT = 0x10
    GT = 0x11
    EQ = 0x14

    # Bitwise
    AND = 0x16
    OR = 0x17
    XOR = 0x18
    NOT = 0x19
    SHL = 0x1B
    SHR = 0x1C

    # Stack / memory
    POP = 0x50
    MSTORE = 0x52
    MSTORE8 = 0x53

    # Push
    PUSH0 = 0x5F
    PUSH1 = 0x60
    PUSH32 = 0x7F


PUSH1 = int(Opcode.PUSH1)
PUSH32 = int(Opcode.PUSH32)


def is_push(opcode: int) -> bool:
    """True for PUSH1..PUSH32 (not PUSH0, which has no immediate)"""
    return PUSH1 <= opcode <= PUSH32


def immediate_size(opcode: int) -> int:
    """Number of immediate bytes that follow ``opcode`` in the code buffer."""
    if is_push(opcode):
        return opcode - PUSH1 + 1
    return 0


def opcode_name(opcode: int) -> Optional[str]:
    """Mnemonic for ``opcode``, or None if the byte is not recognised."""
    if is_push(opcode):
        return f"PUSH{immediate_size(opcode)}"
    try:
        return Opcode(opcode).name
    except ValueError:
        return None


# Every recognised byte -> mnemonic, PUSH2..PUSH31 included
OPCODE_NAMES: Dict[int, str] = {
    op: opcode_name(op) for op in range(256) if opcode_name(op) is not None
}
