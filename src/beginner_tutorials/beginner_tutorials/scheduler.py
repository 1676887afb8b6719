"""
Talker Scheduler

States: INITIALIZING -> RUNNING -> STOPPED

Each tick:
1. Snapshot the shared message
2. Compose "<sequence> <text>"
3. Publish on chatter
4. Broadcast the world -> talk transform
5. Advance the sequence counter

The scheduler never holds the MessageState lock while publishing; it only
reads a snapshot. STOPPED is terminal.
"""

import enum
import logging
import threading
import time
from dataclasses import dataclass
from typing import Optional

from .frequency import DEFAULT_FREQUENCY, FrequencyPolicy, resolve_frequency
from .message_state import MessageState
from .rate import LoopRate
from .transform import TransformBroadcaster

logger = logging.getLogger(__name__)


class TalkerState(enum.Enum):
    INITIALIZING = 0
    RUNNING = 1
    STOPPED = 2


@dataclass(frozen=True)
class OutgoingMessage:
    sequence: int
    text: str

    @property
    def data(self) -> str:
        return f'{self.sequence} {self.text}'


class TalkerScheduler:
    """
    Drives the publish loop.

    `publish` receives an OutgoingMessage, `broadcaster` is a
    TransformBroadcaster, `clock` stamps the transforms (wall time,
    seconds). Use tick() from an external timer, or run() to own the loop.
    """

    def __init__(self, state: MessageState, publish, broadcaster: TransformBroadcaster,
                 requested_frequency=DEFAULT_FREQUENCY, log=None, clock=time.time):
        self.message_state = state
        self.publish = publish
        self.broadcaster = broadcaster
        self.requested_frequency = requested_frequency
        self.logger = log or logger
        self.clock = clock

        self.state = TalkerState.INITIALIZING
        self.policy: Optional[FrequencyPolicy] = None
        self.count = 0

    @property
    def frequency(self) -> int:
        return self.policy.effective

    def start(self) -> FrequencyPolicy:
        """Resolve the effective rate and enter RUNNING."""
        if self.state is not TalkerState.INITIALIZING:
            return self.policy

        self.policy = resolve_frequency(self.requested_frequency, self.logger)
        self.count = 0
        self.state = TalkerState.RUNNING
        return self.policy

    def stop(self):
        if self.state is not TalkerState.STOPPED:
            self.state = TalkerState.STOPPED
            self.logger.debug(f'Talker stopped after {self.count} messages')

    def tick(self) -> Optional[OutgoingMessage]:
        if self.state is not TalkerState.RUNNING:
            return None

        text = self.message_state.read()
        msg = OutgoingMessage(self.count, text)

        self.logger.info(msg.data)
        self.publish(msg)
        self.broadcaster.broadcast(self.clock())

        self.count += 1
        return msg

    def run(self, shutdown: threading.Event, rate: Optional[LoopRate] = None):
        """
        Tick at the effective rate until `shutdown` is set.

        The signal is checked at every tick boundary; the sleep in between
        wakes early when it is set, so stopping takes at most one period.
        """
        self.start()
        if self.state is not TalkerState.RUNNING:
            return
        if rate is None:
            rate = LoopRate(self.frequency, wait=shutdown.wait)

        while self.state is TalkerState.RUNNING:
            self.tick()
            if shutdown.is_set():
                break
            rate.sleep()
            if shutdown.is_set():
                break

        self.stop()
