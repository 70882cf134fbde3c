"""
stepper.py — Step-by-Step Replay Cursor
========================================
The Stepper is what a UI holds while the user pages through a trace.
It wraps a COMPLETED AlgorithmResult and moves an index over its steps:
forward, backward, or straight to any step.  It never re-runs the
algorithm and never touches the result, so any number of Steppers can
walk the same result, and an old one stays valid while a new run is
being computed.

    stepper = Stepper(result, on_step=render)
    stepper.next_step()         # → True, render(step 1) fired
    stepper.prev_step()         # → True, render(step 0) fired
    stepper.prev_step()         # → False, already at the start

Thread safety:
  A Stepper's own index is NOT thread-safe; give each viewer its own
  Stepper.  The result underneath is immutable and can be shared freely.
"""

from typing import Callable, Optional

from algorithms.step import Step
from engine.runner import AlgorithmResult


class Stepper:
    """
    Attributes:
        result      : The trace being replayed.
        current_idx : Index into result.steps that is currently displayed
                      (-1 only when the trace is empty).
        on_step     : Optional callback(Step) fired every time the cursor moves.
    """

    def __init__(
        self,
        result: AlgorithmResult,
        on_step: Optional[Callable[[Step], None]] = None,
        start_idx: int = 0,
    ):
        self.result:      AlgorithmResult                   = result
        self.on_step:     Optional[Callable[[Step], None]]  = on_step
        self.current_idx: int                               = -1
        if result.steps:
            self._goto(min(max(start_idx, 0), len(result.steps) - 1))

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        """Advance one step forward.  Returns False if already at end."""
        if not self.can_step_forward:
            return False
        self._goto(self.current_idx + 1)
        return True

    def prev_step(self) -> bool:
        """Rewind one step.  Returns False if already at start."""
        if not self.can_step_backward:
            return False
        self._goto(self.current_idx - 1)
        return True

    def goto_step(self, idx: int) -> bool:
        """Jump to an arbitrary step index.  Returns False if out of range."""
        if 0 <= idx < self.total_steps:
            self._goto(idx)
            return True
        return False

    def rewind(self) -> None:
        """Jump back to step 0."""
        if self.total_steps:
            self._goto(0)

    def jump_to_end(self) -> None:
        """Jump to the final step."""
        if self.total_steps:
            self._goto(self.total_steps - 1)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current_step(self) -> Optional[Step]:
        if 0 <= self.current_idx < self.total_steps:
            return self.result.steps[self.current_idx]
        return None

    @property
    def total_steps(self) -> int:
        return len(self.result.steps)

    @property
    def can_step_forward(self) -> bool:
        return self.current_idx < self.total_steps - 1

    @property
    def can_step_backward(self) -> bool:
        return self.current_idx > 0

    @property
    def is_finished(self) -> bool:
        return self.total_steps > 0 and self.current_idx == self.total_steps - 1

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _goto(self, idx: int) -> None:
        self.current_idx = idx
        if self.on_step is not None:
            self.on_step(self.result.steps[idx])
