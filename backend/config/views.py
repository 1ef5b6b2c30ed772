"""
Базовые view функции для проекта
"""
import logging

from django.conf import settings
from django.db import DatabaseError, connection
from django.http import JsonResponse
from django.utils import timezone

logger = logging.getLogger('apps.api')


def home_view(request):
    """Информация о сервисе"""
    return JsonResponse({
        'message': 'TaskManager API',
        'status': 'running',
        'api_versions': settings.API_ALLOWED_VERSIONS,
        'default_version': settings.API_DEFAULT_VERSION,
        'services': {
            'admin': '/admin/',
            'api_docs': '/api/docs/',
            'health': '/health/',
            'laboratories': '/api/laboratories/'
        }
    })


def health_check(request):
    """Проверка здоровья системы"""
    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
        database = 'connected'
    except DatabaseError as e:
        logger.error(f"Health check: database unavailable: {e}")
        database = 'unavailable'

    healthy = database == 'connected'
    return JsonResponse({
        'status': 'healthy' if healthy else 'unhealthy',
        'timestamp': timezone.now().isoformat(),
        'database': database,
    }, status=200 if healthy else 503)
