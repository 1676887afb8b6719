"""
Talker (Logic Mirror)

Mirrors src/beginner_tutorials/beginner_tutorials/talker_node.py
but uses the local MessageBus instead of ROS 2.

Role:
- Publish 'chatter' (String "<count> <message>")
- Publish 'tf' (TransformStamped world -> talk)
- Serve 'modifyTalkerMessage'
"""

import logging
import threading

import messages
from bus import default_bus

from beginner_tutorials.config import CHATTER_QUEUE_DEPTH, CHATTER_TOPIC
from beginner_tutorials.frequency import DEFAULT_FREQUENCY
from beginner_tutorials.message_state import DEFAULT_MESSAGE, MessageState
from beginner_tutorials.modify_service import SERVICE_NAME, ModifyMessageHandler
from beginner_tutorials.scheduler import TalkerScheduler
from beginner_tutorials.transform import TransformBroadcaster

TF_TOPIC = 'tf'

logger = logging.getLogger('talker')


class Talker:
    def __init__(self, bus=None, frequency=DEFAULT_FREQUENCY, message=DEFAULT_MESSAGE):
        self.bus = bus or default_bus
        self.message_state = MessageState(message)

        self.bus.advertise(CHATTER_TOPIC, depth=CHATTER_QUEUE_DEPTH)
        self.bus.advertise(TF_TOPIC)
        self.bus.advertise_service(
            SERVICE_NAME,
            messages.ModifyTalkerString,
            ModifyMessageHandler(self.message_state, logger)
        )

        self.scheduler = TalkerScheduler(
            self.message_state,
            self.publish_chatter,
            TransformBroadcaster(self.send_transform),
            requested_frequency=frequency,
            log=logger
        )

        self.shutdown = threading.Event()
        self.thread = None

    def publish_chatter(self, outgoing):
        self.bus.publish(CHATTER_TOPIC, messages.String(data=outgoing.data))

    def send_transform(self, sample):
        t = messages.TransformStamped()
        t.header.stamp = messages.Time.from_float(sample.timestamp)
        t.header.frame_id = sample.parent_frame
        t.child_frame_id = sample.child_frame
        t.transform.translation = messages.Vector3(*sample.translation)
        t.transform.rotation = messages.Quaternion(*sample.rotation)
        self.bus.publish(TF_TOPIC, t)

    def start(self):
        """Run the publish loop on a background thread."""
        self.thread = threading.Thread(
            target=self.scheduler.run, args=(self.shutdown,), daemon=True
        )
        self.thread.start()

    def stop(self, timeout=None):
        self.shutdown.set()
        if self.thread is not None:
            self.thread.join(timeout)
        self.scheduler.stop()
