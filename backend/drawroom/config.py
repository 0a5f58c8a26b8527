import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', '4000'))
    # Single allowed cross-origin caller for HTTP and Socket.IO; '*' allows any
    CLIENT_ORIGIN = os.environ.get('CLIENT_ORIGIN', '*')
    SOCKETIO_NAMESPACE = os.environ.get('SOCKETIO_NAMESPACE', '/')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
    DEBUG = os.environ.get('FLASK_DEBUG', '0') == '1'
    # Werkzeug's dev server refuses to start outside debug unless this is set;
    # deploy behind eventlet/gevent or gunicorn instead.
    ALLOW_UNSAFE_WERKZEUG = os.environ.get('ALLOW_UNSAFE_WERKZEUG', '0') == '1'
