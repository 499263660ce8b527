"""minievm - a minimal 256-bit stack machine interpreter"""

from .vm import (
    VM, ExecutionResult, execute, Opcode, disassemble, load_code,
    VMError, StackUnderflow, StackOverflow, InvalidOpcode,
    MemoryLimitExceeded, StepLimitExceeded,
)

__version__ = "0.1.0"
