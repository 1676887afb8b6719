"""
Deadline-based loop rate (monotonic clock).

Deadlines are start + k * period rather than "now + period", so sleep
jitter does not accumulate. If the loop falls more than one period behind,
the schedule is re-anchored to the current time instead of bursting to
catch up.
"""

import time


class LoopRate:
    def __init__(self, frequency: float, clock=time.monotonic, wait=time.sleep):
        if frequency <= 0:
            raise ValueError(f'LoopRate needs a positive frequency, got {frequency}')
        self.period = 1.0 / frequency
        self.clock = clock
        self.wait = wait
        self.deadline = self.clock() + self.period

    def remaining(self) -> float:
        return self.deadline - self.clock()

    def sleep(self):
        """Block until the next tick boundary."""
        remaining = self.remaining()
        if remaining > 0:
            self.wait(remaining)

        now = self.clock()
        if now - self.deadline > self.period:
            self.deadline = now + self.period
        else:
            self.deadline += self.period
