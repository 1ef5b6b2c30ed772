"""
Test utilities and helper functions
"""
from typing import Any, Dict

from apps.accounts.models import ClientToken

from .factories import LaboratoryFactory

V1_MEDIA_TYPE = 'application/vnd.taskmanager.v1'
V2_MEDIA_TYPE = 'application/vnd.taskmanager.v2'

LABORATORIES_URL = '/api/laboratories/'


def laboratory_url(pk) -> str:
    return f'{LABORATORIES_URL}{pk}/'


def laboratory_params(**overrides) -> Dict[str, Any]:
    """Create laboratory request attributes with faker data"""
    laboratory = LaboratoryFactory.build()
    data = {
        'title': laboratory.title,
        'description': laboratory.description,
        'deadline': laboratory.deadline.isoformat(),
        'done': laboratory.done,
    }
    data.update(overrides)
    return data


def client_token_headers(user, **extra) -> Dict[str, str]:
    """Issue a client token and convert it to test client META headers"""
    auth_data = ClientToken.issue(user)
    headers = {
        'HTTP_ACCESS_TOKEN': auth_data['access-token'],
        'HTTP_UID': auth_data['uid'],
        'HTTP_CLIENT': auth_data['client'],
    }
    headers.update(extra)
    return headers
