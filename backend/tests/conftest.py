"""
Pytest configuration and fixtures for TaskManager tests
"""
import os

import pytest

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'tests.test_settings')

from rest_framework.authtoken.models import Token
from rest_framework.test import APIClient

from .factories import LaboratoryFactory, UserFactory
from .utils import V1_MEDIA_TYPE, V2_MEDIA_TYPE, client_token_headers


@pytest.fixture
def api_client():
    """Provide API client for tests"""
    return APIClient()


@pytest.fixture
def user(db):
    return UserFactory()


@pytest.fixture
def other_user(db):
    return UserFactory()


@pytest.fixture
def v1_client(api_client, user):
    """API client authenticated with a plain token and v1 media type"""
    token, created = Token.objects.get_or_create(user=user)
    api_client.credentials(HTTP_ACCEPT=V1_MEDIA_TYPE, HTTP_AUTHORIZATION=token.key)
    return api_client


@pytest.fixture
def v2_client(api_client, user):
    """API client authenticated with client token headers and v2 media type"""
    api_client.credentials(**client_token_headers(user, HTTP_ACCEPT=V2_MEDIA_TYPE))
    return api_client


@pytest.fixture
def laboratory(user):
    return LaboratoryFactory(user=user)


def pytest_configure(config):
    """Configure custom pytest markers"""
    config.addinivalue_line(
        "markers", "api: marks tests as API tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
