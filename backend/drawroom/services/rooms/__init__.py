"""In-memory rooms and the relay that fans drawing and guess events out to them.

One RoomRegistry and one EventRelay are built per app in `create_app`; the
relay talks to connections only through a GroupChannel.
"""

from .channel import GroupChannel, SocketIOChannel
from .registry import WORDS, RoomRegistry
from .relay import EventRelay

__all__ = [
    "EventRelay",
    "GroupChannel",
    "RoomRegistry",
    "SocketIOChannel",
    "WORDS",
]
