"""
minievm Virtual Machine - Execution Engine

This package provides:
- Stack-based VM over raw bytecode (fetch / decode / dispatch)
- 256-bit modular word arithmetic
- Auto-expanding linear memory
- Step metering (bounded execution)
- Disassembler and hex program loader
"""

from .vm import VM, ExecutionResult, execute
from .opcodes import Opcode, OPCODE_NAMES, immediate_size, opcode_name
from .stack import OperandStack, EVM_MAX_STACK_DEPTH
from .memory import LinearMemory, DEFAULT_MEMORY_LIMIT
from .metering import StepMeter
from .disasm import Instruction, disassemble, format_listing, load_code
from .word import UINT256_MAX, WORD_BITS, WORD_BYTES
from .errors import (
    VMError, StackUnderflow, StackOverflow, InvalidOpcode,
    MemoryLimitExceeded, StepLimitExceeded,
)

__all__ = [
    # Core
    'VM', 'ExecutionResult', 'execute',
    'Opcode', 'OPCODE_NAMES', 'immediate_size', 'opcode_name',
    'OperandStack', 'EVM_MAX_STACK_DEPTH',
    'LinearMemory', 'DEFAULT_MEMORY_LIMIT',
    'StepMeter',
    # Tooling
    'Instruction', 'disassemble', 'format_listing', 'load_code',
    # Words
    'UINT256_MAX', 'WORD_BITS', 'WORD_BYTES',
    # Errors
    'VMError', 'StackUnderflow', 'StackOverflow', 'InvalidOpcode',
    'MemoryLimitExceeded', 'StepLimitExceeded',
]
