# app/state - Session state management
from .session import (
    get_config,
    get_scheduler,
    get_loop,
    get_registry,
    frames_due,
    clear_frame_clock,
)

__all__ = [
    'get_config',
    'get_scheduler',
    'get_loop',
    'get_registry',
    'frames_due',
    'clear_frame_clock',
]
