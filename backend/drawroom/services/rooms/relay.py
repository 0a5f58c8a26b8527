import logging
from typing import Any, Optional

from drawroom.protocol import (
    EV_CLEAR,
    EV_CORRECT_GUESS,
    EV_GUESS,
    EV_STROKE,
    EV_WORD,
    Clear,
    Guess,
    JoinRoom,
    Stroke,
    decode,
)

from .channel import GroupChannel
from .registry import RoomRegistry


class EventRelay:
    """Routes room events between connections and applies the guess rule.

    Each method takes the sender's sid and the raw payload it sent. Payloads
    that fail to decode raise MalformedPayload before anything is published.
    """

    def __init__(self, registry: RoomRegistry, channel: GroupChannel, logger: Optional[logging.Logger] = None):
        self.registry = registry
        self.channel = channel
        self.logger = logger or logging.getLogger(__name__)

    def join(self, sid: str, data: Any) -> str:
        """Subscribe ``sid`` to the room and send it the room's word."""
        msg = decode(JoinRoom, data)
        room = self.registry.ensure_room(msg.room_id)
        # Subscribe, read and send under the lock: a rotation lands either
        # wholly before (joiner reads the new word) or wholly after.
        with room.lock:
            self.channel.subscribe(sid, msg.room_id)
            word = room.current_word
            self.channel.send(sid, EV_WORD, word)
        self.logger.info(f"[join] sid={sid} room={msg.room_id}")
        return word

    def stroke(self, sid: str, data: Any) -> None:
        msg = decode(Stroke, data)
        self.channel.publish(msg.room_id, EV_STROKE, data, excluding=sid)

    def clear(self, sid: str, data: Any) -> None:
        msg = decode(Clear, data)
        self.channel.publish(msg.room_id, EV_CLEAR)
        self.logger.info(f"[clear] sid={sid} room={msg.room_id}")

    def guess(self, sid: str, data: Any) -> bool:
        """Check a guess against the room's word.

        Returns True when this guess rotated the word. Comparison, rotation
        and both notifications happen under the room lock, so of several
        simultaneous correct guesses only the first one wins; the rest are
        compared against the new word.
        """
        msg = decode(Guess, data)
        room = self.registry.ensure_room(msg.room_id)
        with room.lock:
            if room.matches(msg.text):
                new_word = self.registry.advance_word(msg.room_id)
                self.channel.publish(msg.room_id, EV_CORRECT_GUESS, msg.text)
                self.channel.publish(msg.room_id, EV_WORD, new_word)
                self.logger.info(f"[guess-correct] sid={sid} room={msg.room_id}")
                return True
        self.channel.publish(msg.room_id, EV_GUESS, msg.text, excluding=sid)
        return False
