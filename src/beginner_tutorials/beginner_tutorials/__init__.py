"""
beginner_tutorials - Talker Package

This package:
- Publishes "<count> <message>" on /chatter at a validated rate
- Serves modifyTalkerMessage to replace the message at runtime
- Broadcasts a fixed world -> talk transform on every tick

Everything except talker_node is free of rclpy, so the publish loop and the
service logic can be exercised on the logic simulator bus.
"""
