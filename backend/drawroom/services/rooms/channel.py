from typing import Any, Optional, Protocol


class GroupChannel(Protocol):
    """Room-scoped fan-out over some transport."""

    def subscribe(self, sid: str, room_id: str) -> None: ...

    def send(self, sid: str, event: str, *args: Any) -> None: ...

    def publish(self, room_id: str, event: str, *args: Any, excluding: Optional[str] = None) -> None: ...


class SocketIOChannel:
    """GroupChannel backed by Flask-SocketIO rooms.

    Works outside a request context, so it can be driven from background
    tasks as well as handlers. Disconnected sids are dropped from every room
    by the Socket.IO server itself.
    """

    def __init__(self, socketio, namespace: str = '/'):
        self.socketio = socketio
        self.namespace = namespace

    def subscribe(self, sid: str, room_id: str) -> None:
        self.socketio.server.enter_room(sid, room_id, namespace=self.namespace)

    def send(self, sid: str, event: str, *args: Any) -> None:
        self.socketio.emit(event, *args, to=sid, namespace=self.namespace)

    def publish(self, room_id: str, event: str, *args: Any, excluding: Optional[str] = None) -> None:
        self.socketio.emit(event, *args, to=room_id, skip_sid=excluding, namespace=self.namespace)
