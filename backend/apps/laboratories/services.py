"""
Service layer для лабораторий.

Все операции выполняются в рамках записей текущего пользователя:
чужая и отсутствующая запись неразличимы (Laboratory.DoesNotExist).
"""
import logging
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any, Dict

from django.db import transaction

from apps.common.services import ServiceResponse

from .models import Laboratory
from .serializers import LaboratoryParamsSerializer

logger = logging.getLogger(__name__)


class _Unset:

    def __repr__(self):
        return 'UNSET'


UNSET = _Unset()


class ParameterMissing(Exception):
    """В запросе нет корневого ключа с параметрами"""

    def __init__(self, param: str):
        self.param = param
        super().__init__(f"Параметр '{param}' отсутствует или пуст")


@dataclass(frozen=True)
class LaboratoryParams:
    """
    Допустимые для записи поля. Остальные ключи запроса отбрасываются,
    непереданные поля остаются UNSET и не меняются при обновлении.
    """
    title: Any = UNSET
    description: Any = UNSET
    deadline: Any = UNSET
    done: Any = UNSET

    ROOT_KEY = 'laboratory'

    @classmethod
    def field_names(cls):
        return [f.name for f in fields(cls)]

    @classmethod
    def from_payload(cls, payload: Any) -> 'LaboratoryParams':
        if not isinstance(payload, Mapping):
            raise ParameterMissing(cls.ROOT_KEY)

        allowed = cls.field_names()
        dropped = sorted(str(key) for key in payload if key not in allowed)
        if dropped:
            logger.debug(f"Отброшены недопустимые параметры: {', '.join(dropped)}")

        return cls(**{name: payload[name] for name in allowed if name in payload})

    @classmethod
    def from_request_data(cls, data: Any) -> 'LaboratoryParams':
        """Параметры из тела {"laboratory": {...}}"""
        if not isinstance(data, Mapping) or not data.get(cls.ROOT_KEY):
            raise ParameterMissing(cls.ROOT_KEY)
        return cls.from_payload(data[cls.ROOT_KEY])

    def as_dict(self) -> Dict[str, Any]:
        return {
            name: getattr(self, name)
            for name in self.field_names()
            if getattr(self, name) is not UNSET
        }


class LaboratoryService:
    """Операции над лабораториями текущего пользователя"""

    @staticmethod
    def list_for(user):
        return Laboratory.objects.owned_by(user)

    @classmethod
    def get_for(cls, user, pk) -> Laboratory:
        """
        Поиск записи пользователя по id.

        Raises:
            Laboratory.DoesNotExist: запись отсутствует, принадлежит
                другому пользователю или id некорректен
        """
        try:
            return cls.list_for(user).get(pk=pk)
        except (TypeError, ValueError):
            raise Laboratory.DoesNotExist(f"Некорректный id: {pk!r}")

    @staticmethod
    def _ensure_owner(user, laboratory: Laboratory) -> None:
        """
        Проверка владельца для update_for и destroy.

        Во view запись уже получена через get_for, но методы сервиса
        принимают любой экземпляр Laboratory и проверяют владельца сами.
        """
        if laboratory.user_id != user.pk:
            raise Laboratory.DoesNotExist(f"Лаборатория {laboratory.pk} недоступна")

    @staticmethod
    @transaction.atomic
    def create_for(user, params: LaboratoryParams) -> ServiceResponse:
        """
        Создание лаборатории. Владелец всегда текущий пользователь.

        Returns:
            ServiceResponse с созданной записью в data или ошибками полей в errors
        """
        serializer = LaboratoryParamsSerializer(data=params.as_dict())
        if not serializer.is_valid():
            logger.info(f"Лаборатория не создана, ошибки: {dict(serializer.errors)}")
            return ServiceResponse.error_response('Ошибка валидации', errors=serializer.errors)

        laboratory = serializer.save(user=user)
        logger.info(f"Создана лаборатория {laboratory.pk} пользователем {user.username}")
        return ServiceResponse.success_response(laboratory)

    @classmethod
    @transaction.atomic
    def update_for(cls, user, laboratory: Laboratory, params: LaboratoryParams) -> ServiceResponse:
        """Частичное обновление: меняются только переданные поля"""
        cls._ensure_owner(user, laboratory)

        serializer = LaboratoryParamsSerializer(laboratory, data=params.as_dict(), partial=True)
        if not serializer.is_valid():
            logger.info(f"Лаборатория {laboratory.pk} не обновлена, ошибки: {dict(serializer.errors)}")
            return ServiceResponse.error_response('Ошибка валидации', errors=serializer.errors)

        laboratory = serializer.save()
        logger.info(f"Обновлена лаборатория {laboratory.pk} пользователем {user.username}")
        return ServiceResponse.success_response(laboratory)

    @classmethod
    def destroy(cls, user, laboratory: Laboratory) -> None:
        cls._ensure_owner(user, laboratory)

        pk = laboratory.pk
        laboratory.delete()
        logger.info(f"Удалена лаборатория {pk} пользователем {user.username}")
