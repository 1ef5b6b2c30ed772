"""
Токены клиентов для многокомпонентной аутентификации (access-token, uid, client)
"""
import hashlib
import secrets
from datetime import timedelta

from django.conf import settings
from django.contrib.auth.models import User
from django.db import models
from django.db.models import Q
from django.utils import timezone

from apps.common.models import TimeStampedModel


def token_digest(token: str) -> str:
    return hashlib.sha256(token.encode('utf-8')).hexdigest()


def uid_for(user) -> str:
    """Идентификатор пользователя в заголовке uid"""
    return user.email or user.username


class ClientTokenQuerySet(models.QuerySet):

    def for_uid(self, uid: str, client: str):
        return self.select_related('user').filter(
            Q(user__email__iexact=uid) | Q(user__username=uid),
            client=client,
        )


class ClientToken(TimeStampedModel):
    """Токен доступа, выданный пользователю для конкретного клиента"""

    user = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name='client_tokens',
        verbose_name='Пользователь'
    )
    client = models.CharField(
        max_length=64,
        verbose_name='Идентификатор клиента'
    )
    token_digest = models.CharField(
        max_length=64,
        verbose_name='Хэш токена'
    )
    expires_at = models.DateTimeField(
        verbose_name='Действителен до'
    )

    objects = ClientTokenQuerySet.as_manager()

    class Meta:
        verbose_name = 'Токен клиента'
        verbose_name_plural = 'Токены клиентов'
        constraints = [
            models.UniqueConstraint(fields=['user', 'client'], name='unique_client_token_per_user'),
        ]

    def __str__(self):
        return f"{uid_for(self.user)} ({self.client})"

    @classmethod
    def issue(cls, user, client: str = None) -> dict:
        """
        Выдача нового токена. Возвращает заголовки, которые клиент
        передает в последующих запросах.
        """
        client = client or secrets.token_urlsafe(16)
        token = secrets.token_urlsafe(24)
        expires_at = timezone.now() + timedelta(days=settings.AUTH_TOKEN_LIFESPAN_DAYS)

        cls.objects.update_or_create(
            user=user,
            client=client,
            defaults={'token_digest': token_digest(token), 'expires_at': expires_at},
        )
        return {
            'access-token': token,
            'token-type': 'Bearer',
            'client': client,
            'expiry': str(int(expires_at.timestamp())),
            'uid': uid_for(user),
        }

    @property
    def is_expired(self) -> bool:
        return self.expires_at <= timezone.now()

    def matches(self, token: str) -> bool:
        if self.is_expired:
            return False
        return secrets.compare_digest(self.token_digest, token_digest(token))
