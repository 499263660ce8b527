"""
Step Metering for minievm

Counts executed instructions so a caller can bound execution. The engine
itself has no halting opcode or timeout; a step limit is the only way to
cap how long a run may take.
"""

from typing import Dict, Optional


class StepMeter:
    """Step counting for VM execution"""

    def __init__(self, step_limit: Optional[int] = None):
        """
        Initialize step metering

        Args:
            step_limit: Maximum instructions allowed (None = unlimited)
        """
        self.step_limit = step_limit
        self.steps = 0

        # Executed count per mnemonic, for profiling
        self.operation_counts: Dict[str, int] = {}

    def consume(self, operation: str) -> bool:
        """
        Record one executed instruction

        Args:
            operation: Mnemonic of the instruction (e.g. 'ADD', 'PUSH1')

        Returns:
            True if the step fits in the budget, False if the limit is exceeded
        """
        if self.step_limit is not None and self.steps >= self.step_limit:
            return False

        self.steps += 1
        self.operation_counts[operation] = self.operation_counts.get(operation, 0) + 1
        return True

    def remaining(self) -> Optional[int]:
        """Steps left in the budget (None when unlimited)"""
        if self.step_limit is None:
            return None
        return max(0, self.step_limit - self.steps)

    def reset(self):
        self.steps = 0
        self.operation_counts.clear()

    def get_stats(self) -> Dict:
        """Get step usage statistics"""
        return {
            'step_limit': self.step_limit,
            'steps': self.steps,
            'steps_remaining': self.remaining(),
            'operation_counts': dict(self.operation_counts),
        }
