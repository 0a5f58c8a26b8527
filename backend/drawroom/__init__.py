from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
import click
from drawroom.config import Config

# Handlers for one connection run in arrival order; connections are served
# concurrently by the async backend.
socketio = SocketIO(async_mode=None, async_handlers=False)


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    origin = flask_app.config.get('CLIENT_ORIGIN', '*')
    namespace = flask_app.config.get('SOCKETIO_NAMESPACE', '/')
    CORS(flask_app, origins=origin)
    socketio.init_app(flask_app, cors_allowed_origins=origin, async_handlers=False)

    from drawroom.main import main
    flask_app.register_blueprint(main)

    # One registry per app instance; rooms live as long as the process
    from drawroom.services.rooms import WORDS, EventRelay, RoomRegistry, SocketIOChannel
    registry = RoomRegistry(words=flask_app.config.get('VOCABULARY') or WORDS)
    relay = EventRelay(registry, SocketIOChannel(socketio, namespace), logger=flask_app.logger)
    flask_app.extensions['drawroom'] = relay

    from drawroom.socketio_events import register_socketio_handlers
    register_socketio_handlers(namespace=namespace)

    @click.command('vocabulary')
    def vocabulary_command():
        """Prints the words a room's secret word is drawn from."""
        for word in registry.words:
            click.echo(word)

    flask_app.cli.add_command(vocabulary_command)

    return flask_app


def server_options(flask_app) -> dict:
    """Keyword arguments for ``socketio.run`` taken from the app config."""
    debug = bool(flask_app.config.get('DEBUG'))
    return {
        'host': flask_app.config.get('HOST', '0.0.0.0'),
        'port': int(flask_app.config.get('PORT', 4000)),
        'debug': debug,
        'allow_unsafe_werkzeug': debug or bool(flask_app.config.get('ALLOW_UNSAFE_WERKZEUG')),
    }
