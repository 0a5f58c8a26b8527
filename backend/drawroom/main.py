from flask import Blueprint, jsonify

main = Blueprint('main', __name__)


@main.route('/')
def index():
    return jsonify({'message': 'Welcome to the draw-and-guess relay!'})


@main.route('/health')
def health():
    return 'ok', 200, {'Content-Type': 'text/plain; charset=utf-8'}
