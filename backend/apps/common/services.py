"""
Общие элементы service layer
"""
from typing import Any, Dict, List

from django.utils import timezone


class ServiceResponse:
    """Стандартизированный формат ответа сервисов"""

    def __init__(self, success: bool = True, data: Any = None, error: str = None,
                 errors: Dict[str, List[str]] = None, warnings: List[str] = None):
        self.success = success
        self.data = data if data is not None else {}
        self.error = error
        self.errors = errors or {}
        self.warnings = warnings or []
        self.timestamp = timezone.now()

    def to_dict(self) -> Dict[str, Any]:
        """Конверсия в словарь для JSON ответов"""
        return {
            'success': self.success,
            'error': self.error,
            'errors': self.errors,
            'warnings': self.warnings,
            'timestamp': self.timestamp.isoformat()
        }

    @classmethod
    def success_response(cls, data: Any = None, warnings: List[str] = None):
        """Создание успешного ответа"""
        return cls(success=True, data=data, warnings=warnings)

    @classmethod
    def error_response(cls, error: str, errors: Dict[str, List[str]] = None, data: Any = None):
        """Создание ответа с ошибкой"""
        return cls(success=False, error=error, errors=errors, data=data)
