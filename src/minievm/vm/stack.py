"""
Operand stack for the minievm engine.
"""
from typing import List, Optional, Tuple

from .errors import StackOverflow, StackUnderflow
from .word import UINT256_MAX

# Depth a production EVM enforces; opt-in here via ``max_depth``
EVM_MAX_STACK_DEPTH = 1024


class OperandStack:
    """
    LIFO stack of 256-bit words.

    Unbounded unless ``max_depth`` is given. Multi-operand pops check the
    depth up front, so a failing pop never removes anything.
    """

    __slots__ = ("_data", "max_depth")

    def __init__(self, max_depth: Optional[int] = None):
        self._data: List[int] = []
        self.max_depth = max_depth

    def push(self, value: int) -> None:
        if self.max_depth is not None and len(self._data) >= self.max_depth:
            raise StackOverflow(self.max_depth)
        self._data.append(value & UINT256_MAX)

    def pop(self, operation: str = "POP") -> int:
        if not self._data:
            raise StackUnderflow(1, 0, operation)
        return self._data.pop()

    def pop_n(self, n: int, operation: str = "unknown") -> Tuple[int, ...]:
        """Pop ``n`` words, returned in pop order (top of stack first)."""
        if len(self._data) < n:
            raise StackUnderflow(n, len(self._data), operation)
        items = self._data[-n:]
        del self._data[-n:]
        return tuple(reversed(items))

    def peek(self, depth: int = 0) -> int:
        if depth >= len(self._data):
            raise StackUnderflow(depth + 1, len(self._data), "PEEK")
        return self._data[-(depth + 1)]

    def snapshot(self) -> List[int]:
        """Bottom-to-top copy of the stack contents"""
        return list(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self):
        return f"OperandStack({self._data!r})"
