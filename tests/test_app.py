"""
Tests for the application shell: health, error handling, config
"""
from sqlalchemy.exc import OperationalError

from quizapp import create_app
from quizapp.config import Config, TestingConfig, config


class TestHealth:

    def test_health(self, client):
        response = client.get('/health')
        assert response.status_code == 200
        assert response.get_json() == {'status': 'ok', 'questions': 3}


class TestErrorHandling:

    def test_unknown_route_is_json_404(self, client):
        response = client.get('/api/nope/nope')
        assert response.status_code == 404
        assert response.get_json() == {'error': 'Not Found'}

    def test_wrong_method_is_json_405(self, client):
        response = client.post('/api/questions/0')
        assert response.status_code == 405
        assert response.get_json() == {'error': 'Method Not Allowed'}

    def test_store_failure_is_generic_500(self, client, store, monkeypatch):
        def broken(*args, **kwargs):
            raise OperationalError('INSERT', {}, Exception('disk I/O error'))

        monkeypatch.setattr(store, 'create_candidate', broken)
        response = client.post('/api/start', json={'name': 'Ana', 'email': 'a@x.com'})
        assert response.status_code == 500
        assert response.get_json() == {'error': 'Internal Server Error'}

    def test_security_headers(self, client):
        response = client.get('/health')
        assert response.headers['X-Content-Type-Options'] == 'nosniff'


class TestConfig:

    def test_defaults(self):
        assert isinstance(Config.PORT, int)
        assert TestingConfig.ADMIN_PASSWORD == 'admin'
        assert config['testing'] is TestingConfig
        assert config['default'] is Config

    def test_store_registered_on_app(self, app):
        assert 'quiz_store' in app.extensions

    def test_separate_apps_do_not_share_data(self, client):
        client.post('/api/start', json={'name': 'Ana', 'email': 'a@x.com'})
        other = create_app(TestingConfig)
        with other.app_context():
            response = other.test_client().get('/api/admin/candidates?password=admin')
            assert response.get_json() == []
