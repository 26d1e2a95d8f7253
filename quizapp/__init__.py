import os

from flask import Flask, jsonify, request
from flask_sqlalchemy import SQLAlchemy
from flask_compress import Compress
from werkzeug.exceptions import HTTPException
from dotenv import load_dotenv

from quizapp.config import config

# Khởi tạo extensions
db = SQLAlchemy()
compress = Compress()


def create_app(config_class=None):
    """Application factory. The store is initialised before the app is returned."""
    load_dotenv()
    if config_class is None:
        config_class = config[os.getenv('FLASK_CONFIG', 'default')]

    app = Flask(
        __name__,
        static_folder=config_class.STATIC_FOLDER,
        static_url_path='',
    )

    # ==================== CONFIG ====================
    app.config.from_object(config_class)

    # ==================== INIT EXTENSIONS ====================
    db.init_app(app)
    compress.init_app(app)

    # ==================== REGISTER BLUEPRINTS ====================
    from quizapp.main.routes import main_bp
    from quizapp.quiz import quiz_bp, quiz_admin_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(quiz_bp)
    app.register_blueprint(quiz_admin_bp)

    config_class.init_app(app)

    # ==================== ERROR HANDLERS ====================
    from quizapp.errors import QuizError

    @app.errorhandler(QuizError)
    def quiz_error(error):
        return jsonify({'error': error.message}), error.status_code

    @app.errorhandler(HTTPException)
    def http_error(error):
        return jsonify({'error': error.name}), error.code

    @app.errorhandler(Exception)
    def internal_error(error):
        db.session.rollback()
        app.logger.exception('Unhandled error on %s %s', request.method, request.path)
        return jsonify({'error': 'Internal Server Error'}), 500

    # ==================== AFTER / TEARDOWN ====================
    @app.after_request
    def after_request(response):
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'SAMEORIGIN'
        return response

    @app.teardown_appcontext
    def shutdown_session(exception=None):
        db.session.remove()

    # ==================== STORE ====================
    from quizapp.store import QuizStore

    store = QuizStore(db)
    app.extensions['quiz_store'] = store
    with app.app_context():
        store.initialize()

    return app
