"""
Simple Pub/Sub + Service Bus (Stub for ROS 2)

This module provides a lightweight, synchronous publish/subscribe and
request/response mechanism to simulate ROS 2 middleware for logic
validation.

- Topics keep a bounded history (drop-oldest), like a KEEP_LAST queue.
- Services run the handler on the caller's thread; concurrent callers are
  NOT serialized by the bus.
"""

from collections import defaultdict, deque
import logging
import threading

DEFAULT_QUEUE_DEPTH = 10

logger = logging.getLogger(__name__)


class MessageBus:
    def __init__(self):
        self._subscribers = defaultdict(list)
        self._history = {}
        self._services = {}
        self._lock = threading.Lock()

    def advertise(self, topic, depth=DEFAULT_QUEUE_DEPTH):
        """Declare a topic with a bounded history of `depth` messages."""
        with self._lock:
            if topic not in self._history:
                self._history[topic] = deque(maxlen=depth)

    def subscribe(self, topic, callback):
        """Subscribe to a topic."""
        with self._lock:
            self._subscribers[topic].append(callback)

    def publish(self, topic, message):
        """Publish a message to a topic (Synchronous delivery)."""
        with self._lock:
            if topic not in self._history:
                self._history[topic] = deque(maxlen=DEFAULT_QUEUE_DEPTH)
            self._history[topic].append(message)
            # Copy list to avoid modification during iteration
            callbacks = list(self._subscribers[topic])

        for callback in callbacks:
            try:
                callback(message)
            except Exception:
                logger.exception(f'[BUS ERROR] Exception in callback for {topic}')

    def history(self, topic):
        """Messages still held for a topic, oldest first."""
        with self._lock:
            return list(self._history.get(topic, ()))

    def advertise_service(self, name, srv_type, handler):
        with self._lock:
            self._services[name] = (srv_type, handler)

    def call(self, name, request):
        """Call a service synchronously and return its response."""
        with self._lock:
            if name not in self._services:
                raise LookupError(f'Service not available: {name}')
            srv_type, handler = self._services[name]

        return handler(request, srv_type.Response())

# Global instance for simplicity in this harness
default_bus = MessageBus()
