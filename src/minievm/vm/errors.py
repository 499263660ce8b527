"""
Execution errors raised by the minievm engine.

Every failure is fatal for the VM instance that raised it: the run loop
stops immediately and the instance should be discarded.
"""

from typing import Optional


class VMError(Exception):
    """Base class for all engine errors"""
    pass


class StackUnderflow(VMError):
    """Raised when an operation needs more operands than the stack holds"""
    def __init__(self, required: int, available: int, operation: str = "unknown"):
        self.required = required
        self.available = available
        self.operation = operation
        super().__init__(
            f"Stack underflow: '{operation}' needs {required} item(s), stack has {available}"
        )


class StackOverflow(VMError):
    """Raised when a push would exceed the configured stack depth"""
    def __init__(self, max_depth: int):
        self.max_depth = max_depth
        super().__init__(f"Stack overflow (max {max_depth})")


class InvalidOpcode(VMError):
    """Raised for unrecognised opcodes when the VM runs in strict mode"""
    def __init__(self, opcode: int, pc: Optional[int] = None):
        self.opcode = opcode
        self.pc = pc
        where = f" at pc={pc}" if pc is not None else ""
        super().__init__(f"Invalid opcode 0x{opcode:02x}{where}")


class MemoryLimitExceeded(VMError):
    """Raised when a store would grow memory past the configured limit"""
    def __init__(self, offset: int, size: int, limit: int):
        self.offset = offset
        self.size = size
        self.limit = limit
        super().__init__(
            f"Memory limit exceeded: store at offset {offset} needs "
            f"{offset + size} bytes, limit is {limit}"
        )


class StepLimitExceeded(VMError):
    """Raised when execution runs past its step budget"""
    def __init__(self, steps: int, step_limit: int, pc: int):
        self.steps = steps
        self.step_limit = step_limit
        self.pc = pc
        super().__init__(
            f"Step limit exceeded: {steps}/{step_limit} at pc={pc}"
        )
