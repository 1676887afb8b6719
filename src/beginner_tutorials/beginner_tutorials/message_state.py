"""
Shared talker message.

Read by the publish loop, overwritten by the modifyTalkerMessage service.
One lock per operation; callers must not hold it across publishing.
"""

import threading

DEFAULT_MESSAGE = 'Written By Aman Virmani'


class MessageState:
    def __init__(self, message: str = DEFAULT_MESSAGE):
        self._message = message
        self._lock = threading.Lock()

    def read(self) -> str:
        with self._lock:
            return self._message

    def write(self, text: str):
        with self._lock:
            self._message = text
