"""
Talker Frequency Policy

Turns a requested publish rate into the rate the talker actually runs at.

Rules (in order):
- requested > 0  -> used as-is
- requested < 0  -> fallback to DEFAULT_FREQUENCY (fatal + warning notice)
- requested == 0 -> fallback to DEFAULT_FREQUENCY (error + warning notice)

The fallback is a corrective substitution, not an error: nothing is raised.
"""

import enum
import logging
import re
from dataclasses import dataclass

# Hz
DEFAULT_FREQUENCY = 10

logger = logging.getLogger(__name__)

# C locale isspace(), then sign and ASCII digits only
_ATOI_PREFIX = re.compile(r'[ \t\n\v\f\r]*([+-]?[0-9]+)')


class FrequencyStatus(enum.Enum):
    NOMINAL = 'nominal'
    INVALID_NEGATIVE = 'invalid-negative'
    INVALID_ZERO = 'invalid-zero'


@dataclass(frozen=True)
class FrequencyPolicy:
    requested: int
    effective: int
    status: FrequencyStatus

    @property
    def period_sec(self) -> float:
        return 1.0 / self.effective


def parse_frequency_arg(text) -> int:
    """
    Parse a command line frequency the way C atoi() does.

    Leading whitespace and an optional sign are accepted, then as many
    ASCII digits as follow. Anything non-numeric (or None) yields 0.
    """
    if text is None:
        return 0

    match = _ATOI_PREFIX.match(str(text))
    if match is None:
        return 0
    return int(match.group(1))


def resolve_frequency(requested=DEFAULT_FREQUENCY, log=None) -> FrequencyPolicy:
    """Validate the requested rate and surface a notice for the result."""
    log = log or logger
    if requested is None:
        requested = DEFAULT_FREQUENCY

    if requested > 0:
        log.debug(f'Talker publishing at frequency: {requested}')
        return FrequencyPolicy(requested, requested, FrequencyStatus.NOMINAL)

    if requested < 0:
        log.fatal('Talker expects positive value of frequency')
        status = FrequencyStatus.INVALID_NEGATIVE
    else:
        log.error('Talker expects non-zero frequency')
        status = FrequencyStatus.INVALID_ZERO

    log.warning(f'Talker frequency set to default value of {DEFAULT_FREQUENCY}Hz')
    return FrequencyPolicy(requested, DEFAULT_FREQUENCY, status)
