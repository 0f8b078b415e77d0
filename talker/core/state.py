# talker/core/state.py
"""
SharedState: the one piece of data both the emit loop and the
modify handler touch.
"""
from dataclasses import dataclass, field
from threading import Lock

from .. import config as C


@dataclass
class SharedState:
    """
    Holds the text embedded in every outgoing chatter message.
    Readers and writers go through read()/write(); never touch current_text
    directly from another thread.
    """
    current_text: str = C.DEFAULT_MESSAGE
    lock: Lock = field(default_factory=Lock, repr=False, compare=False)

    def read(self) -> str:
        """Return the most recently committed text."""
        with self.lock:
            return self.current_text

    def write(self, value: str):
        """Replace the text. Always succeeds."""
        with self.lock:
            self.current_text = value
