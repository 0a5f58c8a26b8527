from flask import current_app, request
from flask_socketio import emit

from drawroom import socketio
from drawroom.errors import MalformedPayload
from drawroom.protocol import EV_CLEAR, EV_ERROR, EV_GUESS, EV_JOIN_ROOM, EV_PING, EV_PONG, EV_STROKE
from drawroom.services.rooms import EventRelay


def _get_sid() -> str:
    return request.sid  # type: ignore


def _relay() -> EventRelay:
    return current_app.extensions['drawroom']


def _reject(exc: MalformedPayload, notify: bool) -> None:
    current_app.logger.warning(f"[rejected] sid={_get_sid()} {exc}")
    if notify:
        emit(EV_ERROR, {'message': str(exc)})


def handle_connect(auth=None):
    current_app.logger.info(f"[connect] sid={_get_sid()}")


def handle_disconnect(reason=None):
    # Socket.IO drops the sid from all of its rooms; nothing else to clean up
    current_app.logger.info(f"[disconnect] sid={_get_sid()}")


def handle_join_room(data=None):
    try:
        _relay().join(_get_sid(), data)
    except MalformedPayload as exc:
        _reject(exc, notify=True)


def handle_stroke(data=None):
    try:
        _relay().stroke(_get_sid(), data)
    except MalformedPayload as exc:
        _reject(exc, notify=False)


def handle_clear(data=None):
    try:
        _relay().clear(_get_sid(), data)
    except MalformedPayload as exc:
        _reject(exc, notify=False)


def handle_guess(data=None):
    try:
        _relay().guess(_get_sid(), data)
    except MalformedPayload as exc:
        _reject(exc, notify=True)


def handle_ping(data=None):
    emit(EV_PONG, data or {})


def register_socketio_handlers(namespace: str = '/') -> None:
    """Register Socket.IO event handlers on ``namespace``."""
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    socketio.on_event(EV_JOIN_ROOM, handle_join_room, namespace=namespace)
    socketio.on_event(EV_STROKE, handle_stroke, namespace=namespace)
    socketio.on_event(EV_CLEAR, handle_clear, namespace=namespace)
    socketio.on_event(EV_GUESS, handle_guess, namespace=namespace)
    socketio.on_event(EV_PING, handle_ping, namespace=namespace)
