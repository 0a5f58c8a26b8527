import threading


class Room:
    """In-memory state of a single drawing room.

    Membership is not tracked here; a connection belongs to a room by being
    subscribed to it on the transport.
    """

    def __init__(self, room_id: str, current_word: str):
        self.room_id = room_id
        self.current_word = current_word
        # Re-entrant so the relay can hold it across a rotation
        self.lock = threading.RLock()

    def matches(self, text: str) -> bool:
        return text.lower() == self.current_word.lower()

    def __repr__(self):
        return f"<Room {self.room_id!r}>"
