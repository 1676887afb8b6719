"""
Talker startup configuration.

Precedence (lowest to highest):
1. ROS parameters (talker_frequency, message)
2. Environment (TALKER_FREQUENCY, TALKER_MESSAGE)
3. Positional argument: `talker <frequency>`

The frequency is only parsed here; validation and fallback belong to
resolve_frequency().
"""

import os
from dataclasses import dataclass

from .frequency import DEFAULT_FREQUENCY, parse_frequency_arg
from .message_state import DEFAULT_MESSAGE

CHATTER_TOPIC = 'chatter'
CHATTER_QUEUE_DEPTH = 1000


@dataclass
class TalkerConfig:
    frequency: int = DEFAULT_FREQUENCY
    message: str = DEFAULT_MESSAGE


def load_config(param_frequency=DEFAULT_FREQUENCY, param_message=DEFAULT_MESSAGE,
                environ=None, argv=None) -> TalkerConfig:
    environ = os.environ if environ is None else environ
    config = TalkerConfig(int(param_frequency), param_message)

    if 'TALKER_FREQUENCY' in environ:
        config.frequency = parse_frequency_arg(environ['TALKER_FREQUENCY'])
    config.message = environ.get('TALKER_MESSAGE', config.message)

    if argv and len(argv) > 1:
        config.frequency = parse_frequency_arg(argv[1])

    return config
