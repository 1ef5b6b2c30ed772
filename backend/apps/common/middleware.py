"""
Middleware для логирования запросов к API TaskManager
"""
import json
import logging
import time
import uuid
from typing import Any, Dict, Optional

from django.conf import settings
from django.db import connection, reset_queries
from django.http import HttpRequest, HttpResponse
from django.utils.deprecation import MiddlewareMixin

logger = logging.getLogger('apps.api')

SKIP_PATHS = ('/static/', '/media/', '/favicon.ico', '/admin/jsi18n/')

SENSITIVE_KEYS = ('password', 'token', 'secret', 'key', 'authorization', 'client')

# Заголовки аутентификации, значения которых не попадают в лог
AUTH_HEADERS = ('HTTP_AUTHORIZATION', 'HTTP_ACCESS_TOKEN', 'HTTP_CLIENT')

MAX_BODY_LENGTH = 1000


def mask_sensitive_data(data: Any) -> Any:
    """
    Маскирование чувствительных данных во вложенных словарях и списках
    """
    if isinstance(data, dict):
        for key, value in data.items():
            if any(field in str(key).lower() for field in SENSITIVE_KEYS):
                data[key] = '***MASKED***'
            else:
                mask_sensitive_data(value)
    elif isinstance(data, list):
        for item in data:
            mask_sensitive_data(item)
    return data


def should_log_path(path: str) -> bool:
    return not path.startswith(SKIP_PATHS)


class RequestLoggingMiddleware(MiddlewareMixin):
    """
    Логирование всех HTTP запросов: идентификатор запроса, пользователь,
    длительность и уровень сообщения по статусу ответа
    """

    def process_request(self, request: HttpRequest) -> Optional[HttpResponse]:
        request._start_time = time.monotonic()
        request._request_id = uuid.uuid4().hex[:8]

        if should_log_path(request.path_info):
            self._log_request(request)
        return None

    def process_response(self, request: HttpRequest, response: HttpResponse) -> HttpResponse:
        start_time = getattr(request, '_start_time', None)
        if start_time is not None and should_log_path(request.path_info):
            self._log_response(request, response, time.monotonic() - start_time)

        request_id = getattr(request, '_request_id', None)
        if request_id:
            response['X-Request-ID'] = request_id
        return response

    def process_exception(self, request: HttpRequest, exception: Exception) -> Optional[HttpResponse]:
        start_time = getattr(request, '_start_time', None)
        duration = time.monotonic() - start_time if start_time is not None else 0.0

        logger.error(
            f"Exception in {request.method} {request.path_info}: {exception}",
            extra={'exception_data': {
                'request_id': getattr(request, '_request_id', 'unknown'),
                'exception_type': type(exception).__name__,
                'duration_ms': round(duration * 1000, 2),
                'user': self._get_user_info(request),
            }},
            exc_info=True
        )
        return None

    def _get_client_ip(self, request: HttpRequest) -> str:
        x_forwarded_for = request.META.get('HTTP_X_FORWARDED_FOR')
        if x_forwarded_for:
            return x_forwarded_for.split(',')[0].strip()
        return request.META.get('REMOTE_ADDR') or 'unknown'

    def _get_user_info(self, request: HttpRequest) -> Dict[str, Any]:
        # Пользователь DRF определяется внутри view, здесь доступен только сессионный
        user = getattr(request, 'user', None)
        if user is not None and user.is_authenticated:
            return {'user_id': user.id, 'username': user.username}
        return {'user_id': None, 'username': 'anonymous'}

    def _get_request_body(self, request: HttpRequest) -> Optional[str]:
        """
        Тело запроса JSON с маскированием чувствительных полей
        """
        if request.content_type != 'application/json':
            return None

        body = request.body.decode('utf-8', errors='replace')
        try:
            body = json.dumps(mask_sensitive_data(json.loads(body)))
        except (json.JSONDecodeError, TypeError):
            pass

        if len(body) > MAX_BODY_LENGTH:
            return body[:MAX_BODY_LENGTH] + '... (truncated)'
        return body

    def _get_headers(self, request: HttpRequest) -> Dict[str, str]:
        return {
            header: '***MASKED***'
            for header in AUTH_HEADERS
            if header in request.META
        }

    def _log_request(self, request: HttpRequest) -> None:
        request_data = {
            'request_id': request._request_id,
            'method': request.method,
            'path': request.path_info,
            'query_params': dict(request.GET),
            'accept': request.META.get('HTTP_ACCEPT', ''),
            'client_ip': self._get_client_ip(request),
            'auth_headers': self._get_headers(request),
        }

        if request.method in ('POST', 'PUT', 'PATCH'):
            request_data['body'] = self._get_request_body(request)

        logger.info(
            f"Request {request.method} {request.path_info}",
            extra={'request_data': request_data}
        )

    def _log_response(self, request: HttpRequest, response: HttpResponse, duration: float) -> None:
        response_data = {
            'request_id': getattr(request, '_request_id', 'unknown'),
            'status_code': response.status_code,
            'duration_ms': round(duration * 1000, 2),
        }

        if response.status_code >= 500:
            log_level = logging.ERROR
        elif response.status_code >= 400 or duration > 5.0:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            f"Response {response.status_code} for {request.method} {request.path_info} in {duration:.2f}s",
            extra={'response_data': response_data}
        )


class DatabaseQueryLoggingMiddleware(MiddlewareMixin):
    """
    Логирование количества SQL запросов (только в DEBUG режиме)
    """

    QUERY_WARNING_THRESHOLD = 10

    def process_request(self, request: HttpRequest) -> Optional[HttpResponse]:
        reset_queries()
        return None

    def process_response(self, request: HttpRequest, response: HttpResponse) -> HttpResponse:
        if not settings.DEBUG or not should_log_path(request.path_info):
            return response

        queries_count = len(connection.queries)
        if not queries_count:
            return response

        total_time = sum(float(query['time']) for query in connection.queries)
        message = (
            f"DB queries: {queries_count} queries in {total_time:.2f}s "
            f"for {request.method} {request.path_info}"
        )
        if queries_count > self.QUERY_WARNING_THRESHOLD:
            logger.warning(message)
        else:
            logger.debug(message)
        return response
