from drawroom import create_app, server_options
from drawroom.config import Config
from drawroom.services.rooms import WORDS


def test_health(client):
    res = client.get('/health')
    assert res.status_code == 200
    assert res.get_data(as_text=True) == 'ok'


def test_index(client):
    res = client.get('/')
    assert res.status_code == 200
    assert 'message' in res.get_json()


def test_cors_header_for_configured_origin(client):
    res = client.get('/health', headers={'Origin': 'http://localhost:5173'})
    assert res.headers.get('Access-Control-Allow-Origin') in ('*', 'http://localhost:5173')


def test_vocabulary_command(flask_app):
    result = flask_app.test_cli_runner().invoke(args=['vocabulary'])
    assert result.exit_code == 0
    assert result.output.split() == list(WORDS)


def test_vocabulary_override():
    class SmallVocabConfig:
        TESTING = True
        VOCABULARY = ('red', 'blue')

    app = create_app(SmallVocabConfig)
    result = app.test_cli_runner().invoke(args=['vocabulary'])
    assert result.output.split() == ['red', 'blue']
    assert app.extensions['drawroom'].registry.ensure_room('r').current_word in ('red', 'blue')


def test_server_options_refuse_dev_server_by_default():
    class ProductionConfig:
        HOST = '127.0.0.1'
        PORT = 5050
        DEBUG = False

    options = server_options(create_app(ProductionConfig))
    assert options == {'host': '127.0.0.1', 'port': 5050, 'debug': False, 'allow_unsafe_werkzeug': False}


def test_server_options_allow_dev_server_in_debug_or_when_opted_in():
    class DebugConfig:
        DEBUG = True

    class OptInConfig:
        ALLOW_UNSAFE_WERKZEUG = True

    assert server_options(create_app(DebugConfig))['allow_unsafe_werkzeug'] is True
    assert server_options(create_app(OptInConfig))['allow_unsafe_werkzeug'] is True


def test_default_config_lives_in_package():
    assert Config.__module__ == 'drawroom.config'
    assert Config.ALLOW_UNSAFE_WERKZEUG in (True, False)
