import logging
import random
import threading
from typing import Dict, Optional, Sequence

from drawroom.errors import RoomNotFound
from drawroom.models import Room

logger = logging.getLogger(__name__)

WORDS = ('apple', 'cat', 'house', 'tree', 'car', 'book', 'phone')


class RoomRegistry:
    """Owns room state for the life of the process.

    Rooms are created lazily and never removed. Words are drawn uniformly
    from a fixed vocabulary; a rotation may land on the same word again.
    """

    def __init__(self, words: Sequence[str] = WORDS, rng: Optional[random.Random] = None):
        words = tuple(words)
        if len(set(words)) < 2 or not all(words):
            raise ValueError('vocabulary needs at least two distinct non-empty words')
        self.words = words
        self._rng = rng or random.Random()
        self._rooms: Dict[str, Room] = {}
        self._lock = threading.Lock()

    def __contains__(self, room_id: str) -> bool:
        return room_id in self._rooms

    def __len__(self) -> int:
        return len(self._rooms)

    def _sample(self) -> str:
        return self._rng.choice(self.words)

    def _get(self, room_id: str) -> Room:
        try:
            return self._rooms[room_id]
        except KeyError:
            raise RoomNotFound(room_id) from None

    def ensure_room(self, room_id: str) -> Room:
        room = self._rooms.get(room_id)
        if room is not None:
            return room
        with self._lock:
            room = self._rooms.get(room_id)
            if room is None:
                room = Room(room_id, self._sample())
                self._rooms[room_id] = room
                logger.info(f"[room-create] room={room_id} total={len(self._rooms)}")
        return room

    def current_word(self, room_id: str) -> str:
        return self._get(room_id).current_word

    def advance_word(self, room_id: str) -> str:
        room = self._get(room_id)
        with room.lock:
            previous = room.current_word
            room.current_word = self._sample()
            logger.debug(f"[word-rotate] room={room_id} repeated={room.current_word == previous}")
            return room.current_word
