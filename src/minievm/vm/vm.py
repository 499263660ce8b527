"""
minievm execution engine.

Fetch-decode-execute loop over a raw code buffer:
 - PUSH0..PUSH32 push immediates read big-endian from the code
 - arithmetic, comparison and bitwise ops on 256-bit words
 - MSTORE / MSTORE8 write to auto-expanding linear memory
 - POP discards the top of stack

Execution halts when the program counter runs off the end of the code.
There is no halting opcode.
"""
import functools
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from . import word
from .errors import InvalidOpcode, StepLimitExceeded
from .memory import LinearMemory
from .metering import StepMeter
from .opcodes import OPCODE_NAMES, PUSH1, PUSH32, Opcode
from .stack import OperandStack

logger = logging.getLogger("minievm.vm")

CodeLike = Union[bytes, bytearray, memoryview, Iterable[int]]

# Opcode -> word function, called with operands in pop order
BINARY_OPS: Dict[int, Callable[[int, int], int]] = {
    Opcode.ADD: word.add,
    Opcode.MUL: word.mul,
    Opcode.SUB: word.sub,
    Opcode.DIV: word.div,
    Opcode.MOD: word.mod,
    Opcode.LT: word.lt,
    Opcode.GT: word.gt,
    Opcode.EQ: word.eq,
    Opcode.AND: word.and_,
    Opcode.OR: word.or_,
    Opcode.XOR: word.xor,
    Opcode.SHL: word.shl,
    Opcode.SHR: word.shr,
}


@dataclass(frozen=True)
class ExecutionResult:
    """Snapshot of a VM after it stopped"""
    stack: List[int] = field(default_factory=list)
    memory: bytes = b""
    steps: int = 0
    pc: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'stack': list(self.stack),
            'memory': self.memory.hex(),
            'steps': self.steps,
            'pc': self.pc,
        }


class VM:
    def __init__(self, code: CodeLike, *, strict: bool = False,
                 max_stack_depth: Optional[int] = None,
                 memory_limit: Optional[int] = None,
                 step_limit: Optional[int] = None):
        """
        Args:
            code: Program bytes; copied, never mutated
            strict: Raise InvalidOpcode on unrecognised bytes instead of skipping them
            max_stack_depth: Stack depth cap (None = unbounded, 1024 for EVM behaviour)
            memory_limit: Memory size cap in bytes (None = unbounded)
            step_limit: Maximum instructions to execute (None = unlimited)
        """
        self.code = bytes(code)
        self.pc = 0
        self.strict = strict
        self._stack = OperandStack(max_depth=max_stack_depth)
        self._memory = LinearMemory(limit=memory_limit)
        self.meter = StepMeter(step_limit=step_limit)
        self._handlers = self._build_dispatch_table()

    def _build_dispatch_table(self) -> Dict[int, Callable[[], None]]:
        table: Dict[int, Callable[[], None]] = {
            Opcode.PUSH0: self._push_zero,
            Opcode.POP: self._pop,
            Opcode.NOT: self._not,
            Opcode.MSTORE: self._mstore,
            Opcode.MSTORE8: self._mstore8,
        }
        for opcode, fn in BINARY_OPS.items():
            table[opcode] = functools.partial(self._binary, OPCODE_NAMES[opcode], fn)
        for opcode in range(PUSH1, PUSH32 + 1):
            table[opcode] = functools.partial(self._push, opcode - PUSH1 + 1)
        return table

    # -----------------------
    # Observable state
    # -----------------------
    @property
    def stack(self) -> List[int]:
        """Bottom-to-top copy of the operand stack"""
        return self._stack.snapshot()

    @property
    def memory(self) -> bytes:
        return self._memory.snapshot()

    @property
    def halted(self) -> bool:
        return self.pc >= len(self.code)

    def result(self) -> ExecutionResult:
        return ExecutionResult(
            stack=self.stack,
            memory=self.memory,
            steps=self.meter.steps,
            pc=self.pc,
        )

    # -----------------------
    # Fetch / dispatch
    # -----------------------
    def fetch_next(self) -> int:
        """Return the opcode at pc and advance past it"""
        opcode = self.code[self.pc]
        self.pc += 1
        return opcode

    def step(self) -> bool:
        """
        Execute a single instruction.

        Returns:
            False if the VM had already halted, True otherwise
        """
        if self.halted:
            return False

        start = self.pc
        opcode = self.code[start]
        name = OPCODE_NAMES.get(opcode)
        if not self.meter.consume(name or "UNKNOWN"):
            raise StepLimitExceeded(self.meter.steps + 1, self.meter.step_limit, start)

        self.fetch_next()
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("pc=%d op=0x%02x %s stack=%s", start, opcode, name, self._stack.snapshot())

        handler = self._handlers.get(opcode)
        if handler is not None:
            handler()
        elif self.strict:
            raise InvalidOpcode(opcode, start)
        else:
            logger.debug("skipping unrecognised opcode 0x%02x at pc=%d", opcode, start)
        return True

    def run(self) -> ExecutionResult:
        """Run until pc passes the end of the code; errors propagate."""
        while self.step():
            pass
        logger.debug("halted at pc=%d after %d steps", self.pc, self.meter.steps)
        return self.result()

    # -----------------------
    # Handlers
    # -----------------------
    def _push(self, size: int):
        data = self.code[self.pc:self.pc + size]
        # code is implicitly zero-extended past its end
        data = data.ljust(size, b"\x00")
        self._stack.push(word.from_bytes(data))
        self.pc += size

    def _push_zero(self):
        self._stack.push(0)

    def _pop(self):
        self._stack.pop("POP")

    def _binary(self, name: str, fn: Callable[[int, int], int]):
        a, b = self._stack.pop_n(2, name)
        self._stack.push(fn(a, b))

    def _not(self):
        self._stack.push(word.not_(self._stack.pop("NOT")))

    def _mstore(self):
        offset, value = self._stack.pop_n(2, "MSTORE")
        self._memory.store32(offset, value)

    def _mstore8(self):
        offset, value = self._stack.pop_n(2, "MSTORE8")
        self._memory.store8(offset, value)


def execute(code: CodeLike, **options) -> ExecutionResult:
    """Run ``code`` on a fresh VM and return its final state."""
    return VM(code, **options).run()
