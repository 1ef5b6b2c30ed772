"""
Обработка исключений DRF для API
"""
import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger('apps.api')


def api_exception_handler(exc, context):
    """
    Обертка над стандартным обработчиком DRF.

    404 возвращается с пустым телом: отсутствующая запись и запись
    другого пользователя неразличимы для клиента.
    """
    response = exception_handler(exc, context)
    if response is None:
        return None

    view = context.get('view')
    view_name = view.__class__.__name__ if view is not None else 'unknown'

    if response.status_code == status.HTTP_404_NOT_FOUND:
        logger.info(f"Not found in {view_name}")
        return Response(status=status.HTTP_404_NOT_FOUND)

    if response.status_code in (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN):
        logger.warning(f"Access denied in {view_name}: {exc}")

    return response