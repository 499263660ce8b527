"""
Disassembly and program loading helpers.

Decoding here follows the engine exactly: PUSH immediates that run past the
end of the code are zero-padded, and unrecognised bytes decode as single-byte
``UNKNOWN`` instructions.
"""
import re
from dataclasses import dataclass
from typing import List, Optional

from .opcodes import OPCODE_NAMES, immediate_size

_HEX_NOISE = re.compile(r"\s+|_")


@dataclass(frozen=True)
class Instruction:
    """One decoded instruction"""
    pc: int
    opcode: int
    name: str
    immediate: Optional[int] = None
    truncated: bool = False

    @property
    def size(self) -> int:
        return 1 + immediate_size(self.opcode)

    def __str__(self):
        if self.immediate is None:
            return self.name
        return f"{self.name} 0x{self.immediate:x}"


def load_code(text: str) -> bytes:
    """
    Parse a hex program such as ``"0x6002 6003 01"``.

    Whitespace and underscores are ignored; a leading ``0x`` is optional.

    Raises:
        ValueError: if the text is not an even-length hex string
    """
    cleaned = _HEX_NOISE.sub("", text)
    if cleaned[:2].lower() == "0x":
        cleaned = cleaned[2:]
    if len(cleaned) % 2:
        raise ValueError(f"Hex program has odd length ({len(cleaned)} digits)")
    try:
        return bytes.fromhex(cleaned)
    except ValueError as e:
        raise ValueError(f"Invalid hex program: {e}") from None


def disassemble(code: bytes) -> List[Instruction]:
    """Decode ``code`` into a list of instructions in program order."""
    code = bytes(code)
    instructions: List[Instruction] = []
    pc = 0
    while pc < len(code):
        opcode = code[pc]
        name = OPCODE_NAMES.get(opcode, "UNKNOWN")
        size = immediate_size(opcode)
        if size:
            data = code[pc + 1:pc + 1 + size]
            instructions.append(Instruction(
                pc=pc,
                opcode=opcode,
                name=name,
                immediate=int.from_bytes(data.ljust(size, b"\x00"), "big"),
                truncated=len(data) < size,
            ))
        else:
            instructions.append(Instruction(pc=pc, opcode=opcode, name=name))
        pc += 1 + size
    return instructions


def format_listing(instructions: List[Instruction]) -> str:
    """Human-readable listing, one instruction per line."""
    lines = []
    for ins in instructions:
        line = f"{ins.pc:04x}  {ins.opcode:02x}  {ins}"
        if ins.truncated:
            line += "  ; truncated, zero-padded"
        lines.append(line)
    return "\n".join(lines)
