# talker/core/rate.py
"""
Publishing rate resolution.

The talker never refuses to start over a bad frequency: anything that is not
a positive integer is logged and replaced by the default.
"""
import logging
import re
from dataclasses import dataclass
from typing import Optional

from .. import config as C

_log = logging.getLogger(__name__)

# Same prefix rule as C's atoi(): optional whitespace, sign, digits.
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class RateConfig:
    frequency_hz: int = C.DEFAULT_FREQUENCY_HZ

    @property
    def period(self) -> float:
        return 1.0 / self.frequency_hz


def parse_frequency(token: str) -> int:
    """Parse the leading integer of token; 0 if there is none."""
    m = _INT_PREFIX.match(token)
    return int(m.group(1)) if m else 0


def resolve_rate(token: Optional[str] = None, logger=None) -> RateConfig:
    """
    Turn the optional command-line token into a RateConfig.

    - absent      -> default
    - n > 0       -> n
    - n == 0      -> error + warning, default
    - n < 0       -> fatal + warning, default
    """
    log = logger or _log
    if token is None:
        freq = C.DEFAULT_FREQUENCY_HZ
    else:
        freq = parse_frequency(token)

    if freq > 0:
        log.debug(f"Talker publishing at frequency: {freq}")
        return RateConfig(freq)

    if freq < 0:
        log.fatal("Talker expects positive value of frequency")
    else:
        log.error("Talker expects non-zero frequency")
    log.warning(f"Talker frequency set to default value of {C.DEFAULT_FREQUENCY_HZ}Hz")
    return RateConfig(C.DEFAULT_FREQUENCY_HZ)
