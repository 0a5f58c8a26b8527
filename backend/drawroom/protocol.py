"""Wire protocol: event names and inbound payload models.

Outbound events carry bare values (the word string, the guess text) or, for
`stroke`, the object the drawing client sent. Inbound payloads are decoded
into the models below at the transport boundary.
"""

from typing import Any, ClassVar, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError

from .errors import MalformedPayload

# client -> server
EV_JOIN_ROOM = 'joinRoom'
EV_PING = 'ping'

# bidirectional
EV_STROKE = 'stroke'
EV_CLEAR = 'clear'
EV_GUESS = 'guess'

# server -> client
EV_WORD = 'word'
EV_CORRECT_GUESS = 'correctGuess'
EV_ERROR = 'error'
EV_PONG = 'pong'


class _Inbound(BaseModel):
    model_config = ConfigDict(extra='ignore')

    event: ClassVar[str] = ''
    room_id: StrictStr = Field(alias='roomId', min_length=1)


class JoinRoom(_Inbound):
    event: ClassVar[str] = EV_JOIN_ROOM


class Stroke(_Inbound):
    # Coordinates are relayed untouched; only the room id is routed on.
    model_config = ConfigDict(extra='allow')

    event: ClassVar[str] = EV_STROKE


class Clear(_Inbound):
    event: ClassVar[str] = EV_CLEAR


class Guess(_Inbound):
    event: ClassVar[str] = EV_GUESS

    text: StrictStr


M = TypeVar('M', bound=_Inbound)


def _first_error(exc: ValidationError) -> str:
    err = exc.errors()[0]
    loc = '.'.join(str(part) for part in err.get('loc', ())) or 'payload'
    return f"{loc}: {err.get('msg')}"


def decode(model: Type[M], data: Any) -> M:
    """Validate a raw Socket.IO payload into ``model``.

    Raises MalformedPayload when the payload is not an object or any field
    is missing or of the wrong type.
    """
    if not isinstance(data, dict):
        raise MalformedPayload(model.event, f"expected an object, got {type(data).__name__}")
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise MalformedPayload(model.event, _first_error(exc)) from exc
