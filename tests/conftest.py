import pytest

from catalog import create_app
from catalog.extensions import db


@pytest.fixture
def app_config(tmp_path):
    class TestConfig:
        TESTING = True
        SECRET_KEY = 'test-secret'
        SQLALCHEMY_DATABASE_URI = f"sqlite:///{tmp_path / 'test.db'}"
        UPLOAD_FOLDER = str(tmp_path / 'uploads')
        ADMIN_USERNAME = 'admin'
        ADMIN_PASSWORD = '123'

    return TestConfig


@pytest.fixture
def app(app_config):
    app = create_app(config_object=app_config)
    yield app
    with app.app_context():
        db.session.remove()
        db.engine.dispose()


@pytest.fixture
def client(app):
    return app.test_client()
