"""
modifyTalkerMessage service handler

Request:  input_str
Response: modified_str (always equal to input_str)

The payload is opaque text: no length or content checks. The handler
cannot fail. Concurrent callers are only ordered by MessageState's lock,
so the last write delivered by the transport wins.
"""

import logging

from .message_state import MessageState

SERVICE_NAME = 'modifyTalkerMessage'

logger = logging.getLogger(__name__)


class ModifyMessageHandler:
    """Service callback with the rclpy (request, response) signature."""

    def __init__(self, state: MessageState, log=None):
        self.state = state
        self.logger = log or logger

    def __call__(self, request, response):
        response.modified_str = request.input_str
        self.state.write(response.modified_str)
        self.logger.info(f'Default message by talker changed to: {response.modified_str}')
        return response
