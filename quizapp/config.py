import os
from dotenv import load_dotenv

# Load biến môi trường từ file .env
load_dotenv()

BASE_DIR = os.path.abspath(os.path.dirname(__file__))
ROOT_DIR = os.path.abspath(os.path.join(BASE_DIR, '..'))


class Config:
    """Base configuration for the quiz backend"""

    # ==================== CƠ BẢN ====================
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'
    PORT = int(os.environ.get('PORT', 3000))

    # ==================== DATABASE ====================
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
                              'sqlite:///' + os.path.join(ROOT_DIR, 'quiz.db')

    # Render-style URLs still use the old postgres:// scheme
    if SQLALCHEMY_DATABASE_URI.startswith('postgres://'):
        SQLALCHEMY_DATABASE_URI = SQLALCHEMY_DATABASE_URI.replace('postgres://', 'postgresql://', 1)

    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
    }

    # ==================== ADMIN ====================
    # Shared secret compared as-is against ?password=. Not hashed, no sessions.
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD') or 'admin'

    # ==================== TIMESTAMPS ====================
    # start_time is stored in UTC and rendered in this zone
    TIMEZONE = os.environ.get('TIMEZONE') or 'UTC'

    # ==================== STATIC FRONT-END ====================
    STATIC_FOLDER = os.environ.get('STATIC_FOLDER') or os.path.join(ROOT_DIR, 'public')

    # ==================== LOGGING ====================
    LOG_DIR = os.environ.get('LOG_DIR') or 'logs'
    LOG_FILE = 'quiz.log'

    # ==================== FLASK-COMPRESS ====================
    COMPRESS_MIMETYPES = ['application/json', 'text/csv', 'text/html']
    COMPRESS_LEVEL = 6
    COMPRESS_MIN_SIZE = 500

    @staticmethod
    def init_app(app):
        """File logging for non-debug runs"""
        import logging
        from logging.handlers import RotatingFileHandler

        if not app.debug and not app.testing:
            log_dir = app.config['LOG_DIR']
            if not os.path.exists(log_dir):
                os.mkdir(log_dir)
            file_handler = RotatingFileHandler(
                os.path.join(log_dir, app.config['LOG_FILE']),
                maxBytes=1024 * 1024,  # 1MB
                backupCount=3
            )
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
            ))
            file_handler.setLevel(logging.INFO)
            app.logger.addHandler(file_handler)
            app.logger.setLevel(logging.INFO)
            app.logger.info('Quiz backend startup')


class DevelopmentConfig(Config):
    DEBUG = True
    SQLALCHEMY_ECHO = True  # Log tất cả SQL queries


class ProductionConfig(Config):
    DEBUG = False
    SQLALCHEMY_ECHO = False


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_ENGINE_OPTIONS = {}
    ADMIN_PASSWORD = 'admin'
    TIMEZONE = 'UTC'


# Chọn config dựa trên environment
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': Config
}
