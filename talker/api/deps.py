"""
Dependency injection for API routes.
"""
from ..core import SharedState

# Set once at startup; the emit loop and ROS service share the same objects.
_shared: SharedState = None
_emitter = None


def get_shared() -> SharedState:
    """Get the global shared state."""
    global _shared
    if _shared is None:
        _shared = SharedState()
    return _shared


def set_shared(shared: SharedState):
    """Set the global shared state (called during app startup)."""
    global _shared
    _shared = shared


def get_emitter():
    return _emitter


def set_emitter(emitter):
    global _emitter
    _emitter = emitter
