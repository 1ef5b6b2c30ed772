from django.contrib.auth.models import User
from django.core.exceptions import ValidationError
from django.db import models

from apps.common.models import TimeStampedModel

TITLE_BLANK_MESSAGE = 'Название не может быть пустым'


class LaboratoryQuerySet(models.QuerySet):

    def owned_by(self, user):
        """Записи, принадлежащие пользователю"""
        return self.filter(user=user)

    def pending(self):
        return self.filter(done=False)

    def completed(self):
        return self.filter(done=True)


class Laboratory(TimeStampedModel):
    """Лаборатория (задача) пользователя"""

    title = models.CharField(
        max_length=255,
        verbose_name='Название'
    )
    description = models.TextField(
        blank=True,
        default='',
        verbose_name='Описание'
    )
    deadline = models.DateField(
        null=True,
        blank=True,
        verbose_name='Срок выполнения'
    )
    done = models.BooleanField(
        default=False,
        verbose_name='Выполнено'
    )
    user = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name='laboratories',
        verbose_name='Владелец'
    )

    objects = LaboratoryQuerySet.as_manager()

    class Meta:
        verbose_name = 'Лаборатория'
        verbose_name_plural = 'Лаборатории'
        ordering = ['id']
        indexes = [
            models.Index(fields=['user', 'done'], name='laboratory_user_done_idx'),
        ]

    def __str__(self):
        return self.title

    def clean(self):
        """Валидация модели"""
        super().clean()

        if not (self.title or '').strip():
            raise ValidationError({'title': TITLE_BLANK_MESSAGE})
