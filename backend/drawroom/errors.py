class RelayError(Exception):
    """Base class for room relay errors."""


class RoomNotFound(RelayError, KeyError):
    def __init__(self, room_id: str):
        super().__init__(room_id)
        self.room_id = room_id

    def __str__(self):
        return f"room {self.room_id!r} does not exist"


class MalformedPayload(RelayError, ValueError):
    """An inbound event payload is missing fields or has the wrong shape."""

    def __init__(self, event: str, reason: str):
        super().__init__(event, reason)
        self.event = event
        self.reason = reason

    def __str__(self):
        return f"malformed {self.event} payload: {self.reason}"
