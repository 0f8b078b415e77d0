"""
The periodic emit loop.

Each tick reads the shared text, publishes one StatusRecord and then one
TransformSnapshot through the transport, and advances the counter. The
transport is anything with:

    publish(record: StatusRecord)
    broadcast_transform(snapshot: TransformSnapshot)

Transport failures are logged and skipped; they never stop the loop or
disturb the sequence numbers.
"""
import logging
import threading
import time
from typing import Callable, Optional

from .core import RateConfig, SharedState
from .models import StatusRecord, make_transform_snapshot

_log = logging.getLogger(__name__)


class Emitter:
    def __init__(
        self,
        state: SharedState,
        transport,
        rate: Optional[RateConfig] = None,
        logger=None,
        clock: Callable[[], float] = time.time,
    ):
        self.state = state
        self.transport = transport
        self.rate = rate or RateConfig()
        self.log = logger or _log
        self.clock = clock

        self._count = 0
        # counters for the status view; written by the loop, read by HTTP
        self._stats_lock = threading.Lock()
        self._emitted = 0
        self._failed = 0
        self._last_sequence: Optional[int] = None

    @property
    def count(self) -> int:
        """Sequence number the next tick will carry."""
        return self._count

    def stats(self):
        with self._stats_lock:
            return {
                "emitted": self._emitted,
                "failed": self._failed,
                "last_sequence": self._last_sequence,
            }

    def tick(self) -> bool:
        """Run one emission. Returns False if the transport rejected any part of it."""
        seq = self._count
        record = StatusRecord(sequence=seq, text=self.state.read())
        ok = True

        self.log.info(record.data)
        try:
            self.transport.publish(record)
        except Exception as e:
            ok = False
            self.log.error(f"[emit] publish #{seq} failed: {e}")

        try:
            self.transport.broadcast_transform(make_transform_snapshot(self.clock()))
        except Exception as e:
            ok = False
            self.log.error(f"[emit] transform #{seq} failed: {e}")

        with self._stats_lock:
            self._last_sequence = seq
            if ok:
                self._emitted += 1
            else:
                self._failed += 1
        self._count = seq + 1
        return ok

    def run(self, stop: threading.Event, ok: Callable[[], bool] = lambda: True):
        """
        Tick every rate.period seconds until `stop` is set or `ok()` turns False.
        Deadlines are measured from the start of each iteration; if we fall a
        whole period behind, the schedule restarts from now instead of bursting.
        """
        period = self.rate.period
        next_t = time.monotonic()
        self.log.info(f"[emit] loop started at {self.rate.frequency_hz} Hz")
        while not stop.is_set() and ok():
            self.tick()

            next_t += period
            now = time.monotonic()
            if now - next_t > period:
                next_t = now
            if stop.wait(max(0.0, next_t - now)):
                break
        self.log.info(f"[emit] loop stopped after {self._count} ticks")
