#!/usr/bin/env python3
"""
Talker Node

Publishes "<count> <message>" on /chatter at the configured rate, serves
modifyTalkerMessage to replace the message at runtime, and broadcasts the
fixed world -> talk transform on every tick.

The timer and the service run in different callback groups on a
MultiThreadedExecutor, so service calls may land while a tick is in
progress. They only meet in MessageState.
"""

import sys

import rclpy
from rclpy.node import Node
from rclpy.callback_groups import MutuallyExclusiveCallbackGroup, ReentrantCallbackGroup
from rclpy.executors import ExternalShutdownException, MultiThreadedExecutor
from rclpy.qos import QoSProfile, ReliabilityPolicy, HistoryPolicy
from rclpy.time import Time
from rclpy.utilities import remove_ros_args

from std_msgs.msg import String
from geometry_msgs.msg import TransformStamped
from tf2_ros import TransformBroadcaster as Tf2Broadcaster
from beginner_tutorials_interfaces.srv import ModifyTalkerString

from .config import CHATTER_QUEUE_DEPTH, CHATTER_TOPIC, load_config
from .frequency import DEFAULT_FREQUENCY
from .message_state import DEFAULT_MESSAGE, MessageState
from .modify_service import SERVICE_NAME, ModifyMessageHandler
from .scheduler import OutgoingMessage, TalkerScheduler
from .transform import TransformBroadcaster, TransformSample


class TalkerNode(Node):
    def __init__(self, argv=None):
        super().__init__('talker')

        # Declare parameters
        self.declare_parameter('talker_frequency', DEFAULT_FREQUENCY)
        self.declare_parameter('message', DEFAULT_MESSAGE)

        config = load_config(
            self.get_parameter('talker_frequency').get_parameter_value().integer_value,
            self.get_parameter('message').get_parameter_value().string_value,
            argv=argv
        )

        self.message_state = MessageState(config.message)

        chatter_qos = QoSProfile(
            reliability=ReliabilityPolicy.RELIABLE,
            history=HistoryPolicy.KEEP_LAST,
            depth=CHATTER_QUEUE_DEPTH
        )
        self.chatter_pub = self.create_publisher(String, CHATTER_TOPIC, chatter_qos)
        self.tf_broadcaster = Tf2Broadcaster(self)

        self.server = self.create_service(
            ModifyTalkerString,
            SERVICE_NAME,
            ModifyMessageHandler(self.message_state, self.get_logger()),
            callback_group=ReentrantCallbackGroup()
        )

        self.scheduler = TalkerScheduler(
            self.message_state,
            self.publish_chatter,
            TransformBroadcaster(self.send_transform),
            requested_frequency=config.frequency,
            log=self.get_logger(),
            clock=self.now_sec
        )
        policy = self.scheduler.start()

        self.timer = self.create_timer(
            policy.period_sec,
            self.scheduler.tick,
            callback_group=MutuallyExclusiveCallbackGroup()
        )

        self.get_logger().info(f'Talker ready at {policy.effective} Hz')

    def now_sec(self) -> float:
        return self.get_clock().now().nanoseconds / 1e9

    def publish_chatter(self, outgoing: OutgoingMessage):
        msg = String()
        msg.data = outgoing.data
        self.chatter_pub.publish(msg)

    def send_transform(self, sample: TransformSample):
        t = TransformStamped()
        t.header.stamp = Time(nanoseconds=int(sample.timestamp * 1e9)).to_msg()
        t.header.frame_id = sample.parent_frame
        t.child_frame_id = sample.child_frame

        t.transform.translation.x, t.transform.translation.y, t.transform.translation.z = sample.translation
        (t.transform.rotation.x, t.transform.rotation.y,
         t.transform.rotation.z, t.transform.rotation.w) = sample.rotation

        self.tf_broadcaster.sendTransform(t)

    def destroy_node(self):
        """Clean shutdown."""
        self.timer.cancel()
        self.scheduler.stop()
        super().destroy_node()


def main(args=None):
    rclpy.init(args=args)
    argv = remove_ros_args(args=sys.argv if args is None else args)
    node = TalkerNode(argv)

    executor = MultiThreadedExecutor()
    executor.add_node(node)

    try:
        executor.spin()
    except (KeyboardInterrupt, ExternalShutdownException):
        pass
    finally:
        node.destroy_node()
        rclpy.try_shutdown()


if __name__ == '__main__':
    main()
