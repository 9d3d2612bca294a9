import os
import pytest

os.environ.setdefault('SECRET_KEY', 'test-secret-key')
os.environ.setdefault('FLASK_ENV', 'testing')


@pytest.fixture
def app():
    from langswitch import create_app
    application = create_app('testing')
    yield application


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def strict_app(app):
    app.config['LOCALE_VALIDATE'] = True
    return app


@pytest.fixture
def strict_client(strict_app):
    return strict_app.test_client()
