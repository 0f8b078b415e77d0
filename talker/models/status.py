"""
Pydantic models for the chatter stream and the status view.
"""
from __future__ import annotations

from typing import Optional
from pydantic import BaseModel


class StatusRecord(BaseModel):
    """One chatter message: tick counter + the shared text at emit time."""
    sequence: int
    text: str

    @property
    def data(self) -> str:
        """Wire form published on chatter."""
        return f"{self.sequence} {self.text}"


class TalkerStatus(BaseModel):
    """Live view of the talker for /api/v1/status."""
    text: str
    frequency_hz: int
    last_sequence: Optional[int] = None
    emitted: int = 0
    failed: int = 0
