# talker/core/__init__.py
from .state import SharedState
from .rate import RateConfig, parse_frequency, resolve_rate
