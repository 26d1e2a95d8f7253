"""
Pytest configuration and fixtures
"""
import sys
from pathlib import Path

import pytest

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from quizapp import create_app, db  # noqa: E402
from quizapp.config import TestingConfig  # noqa: E402

ADMIN_PASSWORD = TestingConfig.ADMIN_PASSWORD


@pytest.fixture
def app():
    """Fresh app on an in-memory database, already seeded"""
    app = create_app(TestingConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    return app.extensions['quiz_store']


@pytest.fixture
def start_candidate(client):
    """POST /api/start and return the new candidate id"""
    def _start(name='Ana', email='a@x.com'):
        response = client.post('/api/start', json={'name': name, 'email': email})
        assert response.status_code == 200
        return response.get_json()['candidateId']
    return _start
