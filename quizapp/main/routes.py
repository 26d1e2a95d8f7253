from flask import Blueprint, current_app, jsonify

from quizapp.store import get_store

main_bp = Blueprint('main', __name__)


@main_bp.route('/')
def index():
    """Front-end entry page from STATIC_FOLDER"""
    return current_app.send_static_file('index.html')


@main_bp.route('/health')
def health():
    return jsonify({'status': 'ok', 'questions': get_store().count_questions()})
